# core/checks.py
"""
System checks для змінних оточення (manage.py check)
"""

from urllib.parse import urlsplit

from django.conf import settings
from django.core.checks import Error, Warning, register

IMAGEKIT_SETTINGS = ('IMAGEKIT_PUBLIC_KEY', 'IMAGEKIT_PRIVATE_KEY', 'IMAGEKIT_URL_ENDPOINT')


@register()
def check_site_url(app_configs, **kwargs):
    site_url = getattr(settings, 'SITE_URL', '')
    parts = urlsplit(site_url or '')
    if parts.scheme not in ('http', 'https') or not parts.netloc:
        return [
            Error(
                f"SITE_URL must be an absolute http(s) URL, got {site_url!r}",
                hint="Set SITE_URL in .env, e.g. https://iptv-blogg.site",
                id='core.E001',
            )
        ]
    return []


@register()
def check_imagekit(app_configs, **kwargs):
    configured = [name for name in IMAGEKIT_SETTINGS if getattr(settings, name, '')]
    if configured and len(configured) != len(IMAGEKIT_SETTINGS):
        missing = sorted(set(IMAGEKIT_SETTINGS) - set(configured))
        return [
            Warning(
                f"ImageKit is partially configured, missing: {', '.join(missing)}",
                hint="Uploads will fall back to the placeholder image until all three are set",
                id='core.W001',
            )
        ]
    return []
