"""Data models for the NYT Most Popular API.

Wire names are kept as the API sends them: the envelope's article list is
``results``, an article's date is ``published_date`` and a media item's
renditions are ``media-metadata``.
"""

from dataclasses import dataclass


class ResponseParseError(ValueError):
    """Raised when a response body does not match the expected shape."""


def _require(data: dict, key: str, kind: str, expected: type):
    try:
        value = data[key]
    except KeyError:
        raise ResponseParseError(f"{kind} is missing required field '{key}'") from None
    except TypeError:
        raise ResponseParseError(f"{kind} must be a JSON object") from None
    # bool is an int subclass but never a valid id
    if not isinstance(value, expected) or isinstance(value, bool):
        raise ResponseParseError(
            f"{kind} field '{key}' must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _or_default(value, default):
    return default if value is None else value


@dataclass(frozen=True)
class MediaMetaData:
    """One rendition of a media asset (thumbnail, medium, large...)."""

    url: str = ""
    format: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "MediaMetaData":
        return cls(
            url=_or_default(data.get("url"), ""),
            format=_or_default(data.get("format"), ""),
        )

    def to_dict(self) -> dict:
        return {"url": self.url, "format": self.format}


@dataclass(frozen=True)
class Media:
    """A media attachment; renditions keep the order the API returns them in."""

    caption: str = ""
    meta_data: tuple[MediaMetaData, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Media":
        return cls(
            caption=_or_default(data.get("caption"), ""),
            meta_data=tuple(
                MediaMetaData.from_dict(m) for m in _or_default(data.get("media-metadata"), [])
            ),
        )

    def to_dict(self) -> dict:
        return {
            "caption": self.caption,
            "media-metadata": [m.to_dict() for m in self.meta_data],
        }

    def rendition(self, format: str) -> MediaMetaData | None:
        """Return the first rendition with the given format name, if any."""
        for meta in self.meta_data:
            if meta.format == format:
                return meta
        return None


@dataclass(frozen=True)
class Article:
    """One most-popular news item."""

    id: int
    title: str
    abstract: str
    url: str
    published_date: str | None = None
    media: tuple[Media, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Article":
        return cls(
            id=_require(data, "id", "article", int),
            title=_require(data, "title", "article", str),
            abstract=_require(data, "abstract", "article", str),
            url=_require(data, "url", "article", str),
            published_date=data.get("published_date"),
            media=tuple(Media.from_dict(m) for m in _or_default(data.get("media"), [])),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "abstract": self.abstract,
            "url": self.url,
            "published_date": self.published_date,
            "media": [m.to_dict() for m in self.media],
        }

    def _rendition_at(self, index: int) -> MediaMetaData | None:
        if not self.media:
            return None
        renditions = self.media[0].meta_data
        if len(renditions) <= index:
            return None
        return renditions[index]

    def thumbnail_url(self, default: str) -> str:
        """URL of the first rendition of the first media, used in list views."""
        meta = self._rendition_at(0)
        return meta.url if meta else default

    def large_image_url(self, default: str) -> str:
        """URL of the third rendition of the first media, used in the detail view.

        The API lists renditions smallest first; index 2 is the largest of the
        standard three.
        """
        meta = self._rendition_at(2)
        return meta.url if meta else default


@dataclass(frozen=True)
class MostPopularResponse:
    """Parsed envelope of a most-popular response."""

    status: str
    copyright: str
    articles: tuple[Article, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "MostPopularResponse":
        return cls(
            status=_require(data, "status", "response", str),
            copyright=_require(data, "copyright", "response", str),
            articles=tuple(
                Article.from_dict(a) for a in _or_default(data.get("results"), [])
            ),
        )

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "copyright": self.copyright,
            "results": [a.to_dict() for a in self.articles],
        }
