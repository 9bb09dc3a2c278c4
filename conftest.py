"""
Спільні фікстури для тестів блогу
"""
import pytest
from django.contrib.auth import get_user_model
from django.test import Client

from blog.models import Article, Category
from core.models import Tag

ARTICLE_CONTENT = (
    "<p>IPTV streaming lets you watch live television over the internet. "
    "This guide explains how IPTV streaming works and which players to use.</p>"
    "<h2>Choosing a player</h2><p>Popular players include TiviMate and Kodi.</p>"
    "<h3>Setup</h3><p>Install the app, add your playlist and start watching. "
    "IPTV streaming is simple once configured.</p>"
)


@pytest.fixture
def author(db):
    return get_user_model().objects.create_user(
        username="writer", password="secret", first_name="Jane", last_name="Writer"
    )


@pytest.fixture
def staff_user(db):
    return get_user_model().objects.create_user(
        username="editor", password="secret", is_staff=True
    )


@pytest.fixture
def staff_client(staff_user):
    staff = Client()
    staff.force_login(staff_user)
    return staff


@pytest.fixture
def category(db):
    return Category.objects.create(name="Guides", slug="guides", description="How-to guides")


@pytest.fixture
def tag(db):
    return Tag.objects.create(name="Streaming", slug="streaming")


@pytest.fixture
def make_article(db, author, category):
    def factory(**kwargs):
        defaults = {
            "title": "IPTV Streaming Guide for Beginners",
            "slug": "iptv-streaming-guide",
            "excerpt": "Everything you need to start with IPTV streaming.",
            "content": ARTICLE_CONTENT,
            "category": category,
            "author": author,
            "status": Article.STATUS_PUBLISHED,
        }
        defaults.update(kwargs)
        return Article.objects.create(**defaults)

    return factory


@pytest.fixture
def article(make_article):
    return make_article()
