import pytest

from blog_loader.models import Article, ArticleSourceError


def test_from_dict_defaults_missing_fields(make_article):
    record = make_article()
    del record["tags"]
    del record["excerpt"]

    article = Article.from_dict(record)

    assert article.tags == ()
    assert article.excerpt == ""
    assert article.title == "Title"


def test_from_dict_preserves_tag_order(make_article):
    article = Article.from_dict(make_article(tags=["b", "a", "b"]))
    assert article.tags == ("b", "a", "b")


def test_featured_and_weibo_flags(make_article):
    featured = Article.from_dict(make_article(category="featured"))
    weibo = Article.from_dict(make_article(tags=["Life", "Weibo"]))
    lower = Article.from_dict(make_article(tags=["weibo"]))

    assert featured.is_featured and not featured.is_weibo
    assert weibo.is_weibo and not weibo.is_featured
    assert not lower.is_weibo


def test_from_dict_rejects_non_list_tags(make_article):
    with pytest.raises(ArticleSourceError):
        Article.from_dict(make_article(tags="Weibo"))


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ArticleSourceError):
        Article.from_dict(["not", "a", "record"])


def test_from_dict_formats_scalars_like_json(make_article):
    article = Article.from_dict(
        make_article(title=True, date=2024, author=1.0, excerpt=2.5, tags=[False, 3])
    )

    assert article.title == "true"
    assert article.date == "2024"
    assert article.author == "1"
    assert article.excerpt == "2.5"
    assert article.tags == ("false", "3")
