"""
Тести system checks для SITE_URL і ImageKit
"""
import pytest

from core.checks import check_imagekit, check_site_url


@pytest.mark.parametrize("site_url", ["https://iptv-blogg.site", "http://localhost:8000"])
def test_site_url_valid(settings, site_url):
    settings.SITE_URL = site_url
    assert check_site_url(None) == []


@pytest.mark.parametrize("site_url", ["", "iptv-blogg.site", "ftp://iptv-blogg.site"])
def test_site_url_invalid(settings, site_url):
    settings.SITE_URL = site_url
    errors = check_site_url(None)
    assert [e.id for e in errors] == ["core.E001"]


def test_imagekit_not_configured_is_fine(settings):
    settings.IMAGEKIT_PUBLIC_KEY = ""
    settings.IMAGEKIT_PRIVATE_KEY = ""
    settings.IMAGEKIT_URL_ENDPOINT = ""
    assert check_imagekit(None) == []


def test_imagekit_partial_config_warns(settings):
    settings.IMAGEKIT_PUBLIC_KEY = "pub"
    settings.IMAGEKIT_PRIVATE_KEY = ""
    settings.IMAGEKIT_URL_ENDPOINT = "https://ik.imagekit.io/iptv"
    warnings = check_imagekit(None)
    assert [w.id for w in warnings] == ["core.W001"]
    assert "IMAGEKIT_PRIVATE_KEY" in warnings[0].msg


def test_imagekit_full_config(settings):
    settings.IMAGEKIT_PUBLIC_KEY = "pub"
    settings.IMAGEKIT_PRIVATE_KEY = "priv"
    settings.IMAGEKIT_URL_ENDPOINT = "https://ik.imagekit.io/iptv"
    assert check_imagekit(None) == []
