"""Typed failures and the success/failure result returned by the repository.

Callers consume these with ``match`` statements; every variant of ``Error``
has to be handled explicitly.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class HttpUnauthorizedError:
    """The API rejected the key (HTTP 401)."""

    def describe(self) -> str:
        return "Unauthorized: check NYT_API_KEY"


@dataclass(frozen=True)
class HttpInternalServerError:
    """Any other non-2xx HTTP status, client errors included."""

    body: str
    status_code: int | None = None

    def describe(self) -> str:
        return f"HTTP {self.status_code or 'error'}: {self.body}"


@dataclass(frozen=True)
class HttpUnknownError:
    """Transport or parse failure with no HTTP status attached."""

    message: str

    def describe(self) -> str:
        return f"Request failed: {self.message}"


Error = HttpUnauthorizedError | HttpInternalServerError | HttpUnknownError


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: Error


Result = Success[T] | Failure
