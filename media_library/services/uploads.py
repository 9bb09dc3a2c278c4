# media_library/services/uploads.py
"""
Логіка завантаження зображень: ImageKit, локальне сховище та фолбек
"""

import logging
import os
import time
from typing import Dict, Optional

from django.core.files.storage import default_storage
from django.utils import timezone

from ..models import Media
from .imagekit import (
    ImageKitClient,
    build_responsive_urls,
    build_upload_tags,
    generate_cache_busting_url,
    generate_seo_filename,
)

logger = logging.getLogger(__name__)

FALLBACK_IMAGE = 'https://images.unsplash.com/photo-1593359677879-a4bb92f829d1'
DEFAULT_DESCRIPTION = 'SEO optimized image for IPTV blog'
LOCAL_UPLOAD_DIR = 'uploads/media'


def default_alt_text(context: Optional[str] = None) -> str:
    return f"IPTV related image - {context or 'Blog content'}"


def file_extension(name: str) -> str:
    _, ext = os.path.splitext(name or '')
    return ext.lstrip('.').lower() or 'jpg'


def fallback_upload_payload(uploaded_file, context=None, alt_text=None) -> Dict:
    """Відповідь-заглушка коли ImageKit не налаштований"""
    timestamp = int(time.time() * 1000)
    base = f'{FALLBACK_IMAGE}?fit=crop&auto=format'
    url = f'{base}&w=800&h=400&q=80&t={timestamp}'

    return {
        'success': True,
        'url': url,
        'original_url': url,
        'responsive_urls': {
            'thumbnail': f'{base}&w=150&h=150&q=80&t={timestamp}',
            'small': f'{base}&w=400&h=300&q=85&t={timestamp}',
            'medium': f'{base}&w=800&h=600&q=90&t={timestamp}',
            'large': f'{base}&w=1200&h=900&q=95&t={timestamp}',
            'original': url,
        },
        'file_id': f'fallback-{timestamp}',
        'filename': f'fallback-{uploaded_file.name}',
        'seo_filename': f'iptv-guide-{timestamp}.jpg',
        'size': uploaded_file.size,
        'thumbnail_url': f'{base}&w=150&h=150&q=80&t={timestamp}',
        'alt_text': alt_text or default_alt_text(context),
        'description': 'Fallback IPTV image (ImageKit not configured)',
        'tags': ['blog', 'article', 'iptv', 'fallback'],
        'uploaded_at': timezone.now().isoformat(),
        'cache_version': timestamp,
    }


def upload_to_imagekit(uploaded_file, context=None, alt_text=None, description=None,
                       client: Optional[ImageKitClient] = None) -> Dict:
    """
    Завантажує зображення в ImageKit з SEO-метаданими

    Raises:
        ImageKitError: помилка API
    """
    client = client or ImageKitClient()

    seo_filename = generate_seo_filename(uploaded_file.name, context)
    final_filename = f'{seo_filename}.{file_extension(uploaded_file.name)}'
    tags = build_upload_tags(context)
    alt_text = alt_text or default_alt_text(context)
    description = description or DEFAULT_DESCRIPTION

    result = client.upload(
        uploaded_file.read(),
        final_filename,
        tags=tags,
        custom_metadata={
            'altText': alt_text,
            'description': description,
            'uploadedAt': timezone.now().isoformat(),
            'context': context or 'general',
            'seoOptimized': 'true',
        },
    )

    cache_busting_url = generate_cache_busting_url(result['url'])

    return {
        'success': True,
        'url': cache_busting_url,
        'original_url': result['url'],
        'responsive_urls': build_responsive_urls(result['url'], cache_busting_url),
        'file_id': result.get('fileId', ''),
        'filename': result.get('name', final_filename),
        'seo_filename': final_filename,
        'size': result.get('size', uploaded_file.size),
        'thumbnail_url': result.get('thumbnailUrl', ''),
        'alt_text': alt_text,
        'description': description,
        'tags': tags,
        'uploaded_at': timezone.now().isoformat(),
        'cache_version': int(time.time() * 1000),
    }


def store_media(uploaded_file, alt='', caption='', client: Optional[ImageKitClient] = None) -> Media:
    """
    Зберігає файл медіатеки: в ImageKit якщо налаштований, інакше в default_storage
    """
    client = client or ImageKitClient()
    safe_name = generate_seo_filename(uploaded_file.name)
    filename = f'{safe_name}.{file_extension(uploaded_file.name)}'

    if client.is_configured:
        result = client.upload(uploaded_file.read(), filename, tags=build_upload_tags())
        url = result['url']
        provider_file_id = result.get('fileId', '')
        storage_name = ''
    else:
        storage_name = default_storage.save(f'{LOCAL_UPLOAD_DIR}/{filename}', uploaded_file)
        url = default_storage.url(storage_name)
        provider_file_id = ''

    media = Media.objects.create(
        filename=filename,
        original_name=uploaded_file.name,
        file_path=url,
        file_size=uploaded_file.size,
        mime_type=getattr(uploaded_file, 'content_type', '') or '',
        alt=alt,
        caption=caption,
        provider_file_id=provider_file_id,
        storage_name=storage_name,
    )
    logger.info(f"✅ Media stored: {media.original_name} ({media.file_size} bytes)")
    return media


def remove_media(media: Media, client: Optional[ImageKitClient] = None) -> None:
    """
    Видаляє файл з ImageKit або default_storage, потім запис медіатеки

    Raises:
        ImageKitError: ImageKit не видалив файл; запис лишається для повторної спроби
    """
    if media.provider_file_id:
        client = client or ImageKitClient()
        client.delete_file(media.provider_file_id)
    elif media.storage_name:
        default_storage.delete(media.storage_name)

    logger.info(f"🗑️ Media removed: {media.original_name}")
    media.delete()
