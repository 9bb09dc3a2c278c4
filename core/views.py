from django.shortcuts import render, get_object_or_404
from django.conf import settings
from django.db import DatabaseError
from django.http import HttpResponse
import logging

from blog.models import Article
from .api import api_view, json_error, json_success
from .forms import SiteSettingsForm
from .models import Page, SiteSettings
from .validation import validate_json

logger = logging.getLogger(__name__)

FALLBACK_PAGES = [
    {'id': '1', 'title': 'Privacy Policy', 'slug': 'privacy-policy'},
    {'id': '2', 'title': 'Terms of Service', 'slug': 'terms-of-service'},
    {'id': '3', 'title': 'Contact', 'slug': 'contact'},
]


def home(request):
    """Головна сторінка"""
    try:
        latest_articles = list(
            Article.objects.published()
            .select_related('category', 'author')
            .order_by('-published_at')[:6]
        )
    except DatabaseError as e:
        # Головна не падає, якщо БД недоступна
        logger.error(f"❌ Home: failed to load articles: {e}")
        latest_articles = []

    context = {
        'latest_articles': latest_articles,
        'articles_available': bool(latest_articles),
    }
    return render(request, 'core/home.html', context)


def page_detail(request, slug):
    page = get_object_or_404(Page, slug=slug, is_active=True)
    return render(request, 'core/page_detail.html', {
        'page': page,
        'breadcrumbs': [{'name': page.title, 'url': request.path}],
    })


@api_view(['GET'])
def pages_api(request):
    """Публічні сторінки (для футера); при помилці БД повертає дефолтні"""
    footer_only = request.GET.get('footer') == 'true'
    logger.info(f"📄 Fetching public pages (footer={footer_only})")

    try:
        pages = Page.objects.filter(is_active=True)
        if footer_only:
            pages = pages.filter(show_in_footer=True)
        data = [
            {
                'id': page.pk,
                'title': page.title,
                'slug': page.slug,
                'updated_at': page.updated_at.isoformat(),
            }
            for page in pages.order_by('title')
        ]
    except DatabaseError as e:
        logger.error(f"❌ Error fetching public pages: {e}")
        data = FALLBACK_PAGES

    return json_success(pages=data)


def serialize_site_settings(site_settings):
    return {
        'site_name': site_settings.site_name,
        'site_description': site_settings.site_description,
        'site_url': site_settings.get_site_url(),
        'logo_url': site_settings.get_logo_url(),
        'favicon_url': site_settings.favicon_url,
        'og_image_url': site_settings.get_og_image_url(),
        'default_meta_title': site_settings.default_meta_title,
        'default_meta_description': site_settings.default_meta_description,
        'default_meta_keywords': site_settings.default_meta_keywords,
        'contact_email': site_settings.contact_email,
        'social_links': site_settings.social_links,
        'updated_at': site_settings.updated_at.isoformat(),
    }


@api_view(['GET', 'PUT'], staff_methods=['PUT'])
def settings_api(request):
    site_settings = SiteSettings.load()

    if request.method == 'PUT':
        # поля, яких немає в тілі, лишаються без змін
        form, error = validate_json(request, SiteSettingsForm, partial=True, instance=site_settings)
        if error:
            return json_error(error)
        site_settings = form.save()
        logger.info("⚙️ Site settings updated")

    return json_success(serialize_site_settings(site_settings))


def robots_txt(request):
    """Robots.txt для SEO"""
    site_url = getattr(settings, 'SITE_URL', '').rstrip('/')

    content = f"""User-agent: *
Allow: /

# Disallow admin and API
Disallow: /admin/
Disallow: /api/

# Sitemaps
Sitemap: {site_url}/sitemap.xml
"""

    return HttpResponse(content, content_type='text/plain')


def error_400(request, exception=None):
    return render(request, 'core/errors/400.html', status=400)

def error_403(request, exception=None):
    return render(request, 'core/errors/403.html', status=403)

def error_404(request, exception=None):
    return render(request, 'core/errors/404.html', status=404)

def error_500(request):
    return render(request, 'core/errors/500.html', status=500)
