"""
Тести sitemap.xml і robots.txt
"""
from datetime import timedelta
from unittest import mock

import pytest
from django.db import DatabaseError

from blog.models import Article, Category
from core.models import Page
from core.sitemaps import ArticleSitemap, CategorySitemap, PageSitemap, StaticViewSitemap

pytestmark = pytest.mark.django_db


def test_static_sitemap_items_and_priorities():
    sitemap = StaticViewSitemap()
    assert sitemap.items() == ["core:home", "blog:article_list"]
    assert [sitemap.priority(item) for item in sitemap.items()] == [1.0, 0.9]
    assert sitemap.location("blog:article_list") == "/articles/"


def test_article_sitemap_recently_updated_first(make_article):
    edited = make_article(slug="edited-article")
    untouched = make_article(slug="untouched-article")
    make_article(slug="draft-article", status=Article.STATUS_DRAFT)
    Article.objects.filter(pk=edited.pk).update(updated_at=untouched.updated_at + timedelta(days=1))
    edited.refresh_from_db()

    sitemap = ArticleSitemap()
    assert [a.slug for a in sitemap.items()] == ["edited-article", "untouched-article"]
    assert sitemap.lastmod(edited) == edited.updated_at


def test_category_and_page_sitemaps_only_active(category):
    Category.objects.create(name="Old", slug="old", is_active=False)
    Page.objects.create(title="Privacy Policy", slug="privacy-policy")
    Page.objects.create(title="Draft Page", slug="draft-page", is_active=False)

    assert [c.slug for c in CategorySitemap().items()] == ["guides"]
    assert [p.slug for p in PageSitemap().items()] == ["privacy-policy"]


def test_sitemap_section_survives_database_error():
    with mock.patch.object(ArticleSitemap, "get_queryset", side_effect=DatabaseError("db down")):
        assert ArticleSitemap().items() == []


def test_sitemap_xml(client, settings, article, category):
    settings.SITE_URL = "https://iptv-blogg.site"
    Page.objects.create(title="Contact", slug="contact")

    response = client.get("/sitemap.xml")
    assert response.status_code == 200
    xml = response.content.decode()
    assert "<loc>https://iptv-blogg.site/</loc>" in xml
    assert "<loc>https://iptv-blogg.site/articles/</loc>" in xml
    assert f"<loc>https://iptv-blogg.site/article/{article.slug}/</loc>" in xml
    assert "<loc>https://iptv-blogg.site/category/guides/</loc>" in xml
    assert "<loc>https://iptv-blogg.site/pages/contact/</loc>" in xml
    assert "<priority>0.8</priority>" in xml
    assert "<changefreq>monthly</changefreq>" in xml


def test_robots_txt(client, settings):
    settings.SITE_URL = "https://iptv-blogg.site/"
    response = client.get("/robots.txt")
    assert response["Content-Type"].startswith("text/plain")
    body = response.content.decode()
    assert "User-agent: *" in body
    assert "Allow: /" in body
    assert "Disallow: /admin/" in body
    assert "Disallow: /api/" in body
    assert "Sitemap: https://iptv-blogg.site/sitemap.xml" in body
