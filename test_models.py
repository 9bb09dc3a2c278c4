"""
Тести моделей: публікація, кеш SEO оцінки, лічильники тегів
"""
import pytest

from blog.models import Article, Category, Comment
from core.models import Page, SiteSettings, Tag

pytestmark = pytest.mark.django_db


def test_published_at_stamped_on_first_publish(make_article):
    article = make_article(status=Article.STATUS_DRAFT)
    assert article.published_at is None

    article.status = Article.STATUS_PUBLISHED
    article.save()
    first_published = article.published_at
    assert first_published is not None

    article.title = "IPTV Streaming Guide for Beginners, Updated"
    article.save()
    assert article.published_at == first_published


def test_seo_score_cached_on_save(article):
    expected = article.run_seo_analysis().score
    article.refresh_from_db()
    assert article.seo_score == expected
    assert 0 < article.seo_score <= 100


def test_seo_score_recomputed_when_content_changes(article):
    before = article.seo_score
    article.content += (
        '<p><a href="/a">a</a> <a href="/b">b</a> <a href="/c">c</a> '
        '<a href="https://kodi.tv">kodi</a> <a href="https://tivimate.com">tivimate</a></p>'
    )
    article.save()
    article.refresh_from_db()
    assert article.seo_score > before


def test_seo_score_kept_with_update_fields(article):
    article.content = ""
    article.save(update_fields=["content"])
    article.refresh_from_db()
    assert article.seo_score == article.run_seo_analysis().score


def test_seo_analysis_prefers_seo_fields(make_article):
    article = make_article(seo_title="Custom SEO Title", seo_description="Custom description")
    analysis = article.run_seo_analysis()
    assert analysis.title.value == len("Custom SEO Title")
    assert analysis.description.value == len("Custom description")


def test_seo_description_falls_back_to_excerpt(make_article):
    article = make_article(excerpt="<b>Short</b> excerpt")
    assert article.get_seo_description() == "Short excerpt"
    assert article.get_seo_title() == article.title


def test_read_time_minimum_one_minute(article):
    assert article.get_read_time() == 1


def test_read_time_rounds_up(make_article):
    article = make_article(content="<p>" + "word " * 401 + "</p>")
    assert article.get_word_count() == 401
    assert article.get_read_time() == 3


def test_slug_generated_from_title(make_article):
    article = make_article(slug="", title="Kodi Addons Explained In Detail")
    assert article.slug == "kodi-addons-explained-in-detail"


def test_published_queryset_excludes_drafts(make_article):
    make_article(slug="draft-one", status=Article.STATUS_DRAFT)
    published = make_article(slug="live-one")
    assert list(Article.objects.published()) == [published]


def test_tag_usage_count_follows_article_tags(article, tag):
    article.tags.add(tag)
    tag.refresh_from_db()
    assert tag.usage_count == 1

    article.tags.remove(tag)
    tag.refresh_from_db()
    assert tag.usage_count == 0


def test_tag_usage_count_after_clear_and_delete(make_article, tag):
    first = make_article()
    second = make_article(slug="second-article")
    first.tags.add(tag)
    second.tags.add(tag)
    tag.refresh_from_db()
    assert tag.usage_count == 2

    first.tags.clear()
    tag.refresh_from_db()
    assert tag.usage_count == 1

    second.delete()
    tag.refresh_from_db()
    assert tag.usage_count == 0


def test_reverse_tag_assignment_updates_count(article, tag):
    tag.articles.add(article)
    tag.refresh_from_db()
    assert tag.usage_count == 1

    tag.articles.clear()
    tag.refresh_from_db()
    assert tag.usage_count == 0


def test_tags_feed_focus_keyword(make_article, tag):
    article = make_article(title="IPTV Explained", seo_title="")
    assert article.run_seo_analysis().keyword.keyword == "iptv explained"

    single = make_article(slug="single-word", title="Firestick")
    single.tags.add(tag)
    single.refresh_from_db()
    assert single.run_seo_analysis().keyword.keyword == "streaming"


def test_popular_tags_skip_unused(article, tag):
    Tag.objects.create(name="Unused", slug="unused")
    article.tags.add(tag)
    assert list(Tag.get_popular_tags()) == [Tag.objects.get(slug="streaming")]


def test_related_articles_same_category_only(make_article, category):
    article = make_article()
    sibling = make_article(slug="sibling-article")
    other_category = Category.objects.create(name="News", slug="news")
    make_article(slug="other-category", category=other_category)
    make_article(slug="draft-sibling", status=Article.STATUS_DRAFT)

    assert list(article.get_related_articles()) == [sibling]


def test_approved_comments_only_top_level(article):
    approved = Comment.objects.create(
        article=article, author_name="Ann", author_email="ann@example.com",
        content="Great article, thanks!", is_approved=True,
    )
    Comment.objects.create(
        article=article, author_name="Bob", author_email="bob@example.com",
        content="Pending comment text",
    )
    Comment.objects.create(
        article=article, parent=approved, author_name="Eve", author_email="eve@example.com",
        content="Reply to the first one", is_approved=True,
    )
    assert list(article.get_approved_comments()) == [approved]


def test_category_menu_label_and_slug():
    category = Category.objects.create(name="Set Top Boxes")
    assert category.slug == "set-top-boxes"
    assert category.get_menu_label() == "Set Top Boxes"
    category.menu_label = "Boxes"
    assert category.get_menu_label() == "Boxes"


def test_site_settings_singleton(settings):
    settings.SITE_URL = "https://iptv-blogg.site/"
    first = SiteSettings.load()
    second = SiteSettings.load()
    assert first.pk == second.pk == 1
    assert SiteSettings.objects.count() == 1

    other = SiteSettings(site_name="Other")
    other.save()
    assert SiteSettings.objects.count() == 1
    assert SiteSettings.load().site_name == "Other"


def test_site_settings_url_fallbacks(settings):
    settings.SITE_URL = "https://iptv-blogg.site/"
    site = SiteSettings(site_url="")
    assert site.get_site_url() == "https://iptv-blogg.site"
    assert site.get_logo_url() == "https://iptv-blogg.site/logo.png"
    assert site.get_og_image_url() == "https://iptv-blogg.site/og-image.jpg"

    site.og_image_url = "https://cdn.example.com/og.png"
    assert site.get_og_image_url() == "https://cdn.example.com/og.png"


def test_page_slug_and_url():
    page = Page.objects.create(title="Privacy Policy")
    assert page.slug == "privacy-policy"
    assert page.get_absolute_url() == "/pages/privacy-policy/"
