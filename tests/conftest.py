"""Shared fixtures: config and sample API payloads."""

import pytest

from nyt_reader.config import Config
from nyt_reader.models import Article, Media, MediaMetaData, MostPopularResponse

SAMPLE_BODY = {
    "status": "OK",
    "copyright": "c",
    "results": [
        {
            "id": 1,
            "title": "T",
            "abstract": "A",
            "url": "u",
            "published_date": "2023-01-01",
            "media": [],
        }
    ],
}


def make_response(count: int = 2) -> MostPopularResponse:
    articles = tuple(
        Article(
            id=i,
            title=f"Title {i}",
            abstract=f"Abstract {i}",
            url=f"https://nyt.example/{i}",
            published_date="2023-01-01",
            media=(
                Media(
                    "caption",
                    (
                        MediaMetaData(f"https://img/{i}/thumb.jpg", "Standard Thumbnail"),
                        MediaMetaData(f"https://img/{i}/210.jpg", "mediumThreeByTwo210"),
                        MediaMetaData(f"https://img/{i}/440.jpg", "mediumThreeByTwo440"),
                    ),
                ),
            ),
        )
        for i in range(1, count + 1)
    )
    return MostPopularResponse("OK", "c", articles)


@pytest.fixture
def config():
    return Config(NYT_API_KEY="test-key", NYT_BASE_URL="https://api.test/svc/")
