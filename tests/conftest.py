import json

import pytest


def _article(**overrides):
    record = {
        "title": "Title",
        "date": "2024-01-01",
        "author": "Ann",
        "category": "notes",
        "tags": [],
        "content": "Body",
        "excerpt": "Excerpt",
    }
    record.update(overrides)
    return record


@pytest.fixture
def make_article():
    return _article


@pytest.fixture
def write_articles(tmp_path):
    """Write an articles document and return its path as a string."""

    def _write(payload, name="blog-articles.json"):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return str(path)

    return _write
