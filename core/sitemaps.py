from urllib.parse import urlsplit

from django.conf import settings
from django.contrib.sitemaps import Sitemap
from django.db import DatabaseError
from django.urls import reverse, NoReverseMatch
import logging

logger = logging.getLogger(__name__)


class SiteURLSitemap(Sitemap):
    """Абсолютні URL будуються від SITE_URL, а не від домену запиту"""

    def get_protocol(self, protocol=None):
        return urlsplit(settings.SITE_URL).scheme or super().get_protocol(protocol)

    def get_domain(self, site=None):
        return urlsplit(settings.SITE_URL).netloc or super().get_domain(site)


class StaticViewSitemap(SiteURLSitemap):
    """Sitemap для статичних сторінок сайту"""
    changefreq = 'daily'

    PRIORITIES = {
        'core:home': 1.0,
        'blog:article_list': 0.9,
    }

    def items(self):
        """Список статичних URL з перевіркою, щоб уникнути 500 у разі NoReverseMatch"""
        valid = []
        for name in self.PRIORITIES:
            try:
                reverse(name)
                valid.append(name)
            except NoReverseMatch:
                logger.warning("Sitemap: пропускаємо невалідне ім'я маршруту: %s", name)
        return valid

    def location(self, item):
        return reverse(item)

    def priority(self, item):
        return self.PRIORITIES[item]


class SafeQuerySitemap(SiteURLSitemap):
    """Секція, яка при помилці БД віддає порожній список замість 500"""

    def get_queryset(self):
        raise NotImplementedError

    def items(self):
        try:
            return list(self.get_queryset())
        except DatabaseError as e:
            logger.error(f"❌ Sitemap {self.__class__.__name__}: {e}")
            return []


class ArticleSitemap(SafeQuerySitemap):
    """Опубліковані статті"""
    priority = 0.8
    changefreq = 'weekly'

    def get_queryset(self):
        from blog.models import Article
        return Article.objects.published().order_by('-updated_at')

    def lastmod(self, obj):
        return obj.updated_at


class CategorySitemap(SafeQuerySitemap):
    """Активні категорії"""
    priority = 0.7
    changefreq = 'weekly'

    def get_queryset(self):
        from blog.models import Category
        return Category.objects.filter(is_active=True)

    def lastmod(self, obj):
        return obj.updated_at


class PageSitemap(SafeQuerySitemap):
    """Статичні сторінки з адмінки"""
    priority = 0.5
    changefreq = 'monthly'

    def get_queryset(self):
        from .models import Page
        return Page.objects.filter(is_active=True)

    def lastmod(self, obj):
        return obj.updated_at


sitemaps = {
    'static': StaticViewSitemap,
    'articles': ArticleSitemap,
    'categories': CategorySitemap,
    'pages': PageSitemap,
}
