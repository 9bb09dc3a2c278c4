# iptvhub/urls.py
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.contrib.sitemaps.views import sitemap
from django.urls import path, include

from core.sitemaps import sitemaps
from core.views import pages_api, robots_txt, settings_api

urlpatterns = [
    path('admin/', admin.site.urls),
    path('ckeditor/', include('ckeditor_uploader.urls')),

    # 🗺️ Sitemap і robots.txt
    path('sitemap.xml', sitemap, {'sitemaps': sitemaps}, name='django.contrib.sitemaps.views.sitemap'),
    path('robots.txt', robots_txt, name='robots'),

    # 🔌 JSON API
    path('api/pages/', pages_api, name='pages_api'),
    path('api/settings/', settings_api, name='settings_api'),
    path('api/', include('media_library.urls')),
    path('api/', include('blog.api_urls')),

    # 🌐 Сторінки
    path('', include(('core.urls', 'core'), namespace='core')),
    path('', include('blog.urls')),
]

# Медіа у DEBUG
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

handler400 = 'core.views.error_400'
handler403 = 'core.views.error_403'
handler404 = 'core.views.error_404'
handler500 = 'core.views.error_500'
