"""
🔧 Context Processors для глобальних змінних
"""
import logging

from django.conf import settings
from django.db import DatabaseError

logger = logging.getLogger(__name__)


def seo_settings(request):
    """Додає SEO налаштування, налаштування сайту і меню в контекст шаблонів"""
    from blog.models import Category
    from .models import SiteSettings

    try:
        site_settings = SiteSettings.load()
        menu_categories = list(
            Category.objects.filter(is_active=True, show_in_menu=True).order_by('menu_order', 'name')
        )
    except DatabaseError as e:
        logger.error(f"❌ Context processor: {e}")
        site_settings = None
        menu_categories = []

    return {
        'GOOGLE_ANALYTICS_ID': settings.GOOGLE_ANALYTICS_ID,
        'GOOGLE_SITE_VERIFICATION': settings.GOOGLE_SITE_VERIFICATION,
        'SITE_URL': settings.SITE_URL,
        'SITE_NAME': site_settings.site_name if site_settings else settings.SITE_NAME,
        'site_settings': site_settings,
        'menu_categories': menu_categories,
    }
