# media_library/services/imagekit.py
"""
Клієнт ImageKit для завантаження зображень статей
"""

import hashlib
import hmac
import json
import logging
import re
import secrets
import time
import uuid
from typing import Dict, List, Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

UPLOAD_URL = 'https://upload.imagekit.io/api/v1/files/upload'
FILES_URL = 'https://api.imagekit.io/v1/files'
DEFAULT_FOLDER = '/blog/articles/optimized'
AUTH_TOKEN_TTL = 60 * 30

RESPONSIVE_SIZES = {
    'thumbnail': 'w-150,h-150,c-maintain_ratio,q-80,f-webp',
    'small': 'w-400,h-300,c-maintain_ratio,q-85,f-webp',
    'medium': 'w-800,h-600,c-maintain_ratio,q-90,f-webp',
    'large': 'w-1200,h-900,c-maintain_ratio,q-95,f-webp',
}


class ImageKitError(Exception):
    """Помилка завантаження в ImageKit"""
    pass


def generate_seo_filename(original_name: str, context: Optional[str] = None) -> str:
    """
    SEO-дружня назва файлу: <назва>[-<контекст>]-<timestamp>-<random>

    Args:
        original_name: Оригінальна назва файлу
        context: Контекст (наприклад заголовок статті)

    Returns:
        Назва без розширення
    """
    timestamp = int(time.time() * 1000)
    random_id = secrets.token_hex(4)

    name_without_ext = re.sub(r'\.[^/.]+$', '', original_name or '')
    clean_name = name_without_ext.lower()
    clean_name = re.sub(r'[^a-z0-9\s-]', '', clean_name)
    clean_name = re.sub(r'\s+', '-', clean_name)
    clean_name = re.sub(r'-+', '-', clean_name)[:50]

    context_part = ''
    if context:
        context_part = '-' + re.sub(r'[^a-z0-9]', '', context.lower())[:20]

    return f'{clean_name}{context_part}-{timestamp}-{random_id}'


def generate_cache_busting_url(base_url: str) -> str:
    timestamp = int(time.time() * 1000)
    separator = '&' if '?' in base_url else '?'
    return f'{base_url}{separator}v={timestamp}&cache=fresh'


def build_responsive_urls(url: str, original: Optional[str] = None) -> Dict[str, str]:
    urls = {name: f'{url}?tr={transform}' for name, transform in RESPONSIVE_SIZES.items()}
    urls['original'] = original or url
    return urls


def build_upload_tags(context: Optional[str] = None) -> List[str]:
    tags = [
        'blog',
        'article',
        'iptv',
        'seo-optimized',
        f"uploaded-{time.strftime('%Y-%m-%d', time.gmtime())}",
    ]
    if context:
        tags.append('context-' + re.sub(r'[^a-z0-9]', '', context.lower())[:15])
    return tags


def get_optimized_image_url(image_path: str,
                            width: Optional[int] = None,
                            height: Optional[int] = None,
                            quality: Optional[int] = None,
                            format: Optional[str] = None,
                            crop: Optional[str] = None) -> str:
    """URL з трансформаціями ImageKit; без налаштованого endpoint повертає шлях як є"""
    base_url = getattr(settings, 'IMAGEKIT_URL_ENDPOINT', '')
    if not base_url:
        return image_path

    base_url = base_url.rstrip('/')
    image_path = image_path.lstrip('/')

    params = []
    if width:
        params.append(f'w-{width}')
    if height:
        params.append(f'h-{height}')
    if quality:
        params.append(f'q-{quality}')
    if format:
        params.append(f'f-{format}')
    if crop:
        params.append(f'c-{crop}')

    if not params:
        return f'{base_url}/{image_path}'
    return f"{base_url}/tr:{','.join(params)}/{image_path}"


def optimize_image_src(src: str, width: int = 800, height: int = 400, quality: int = 80) -> str:
    """Трансформований URL для зображень з нашого ImageKit endpoint; інші URL без змін"""
    base_url = getattr(settings, 'IMAGEKIT_URL_ENDPOINT', '').rstrip('/')
    if not src or not base_url or not src.startswith(base_url + '/'):
        return src
    return get_optimized_image_url(
        src[len(base_url):],
        width=width,
        height=height,
        quality=quality,
        format='auto',
        crop='maintain_ratio',
    )


class ImageKitClient:
    """Мінімальний клієнт ImageKit Upload API"""

    def __init__(self, public_key=None, private_key=None, url_endpoint=None, timeout=30):
        self.public_key = public_key if public_key is not None else getattr(settings, 'IMAGEKIT_PUBLIC_KEY', '')
        self.private_key = private_key if private_key is not None else getattr(settings, 'IMAGEKIT_PRIVATE_KEY', '')
        self.url_endpoint = url_endpoint if url_endpoint is not None else getattr(settings, 'IMAGEKIT_URL_ENDPOINT', '')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.auth = (self.private_key, '')

    @property
    def is_configured(self) -> bool:
        return bool(self.public_key and self.private_key and self.url_endpoint)

    def get_authentication_parameters(self) -> Optional[Dict]:
        """Параметри для клієнтського завантаження (token, expire, signature)"""
        if not self.is_configured:
            logger.warning("ImageKit is not configured. Client uploads are disabled.")
            return None

        token = str(uuid.uuid4())
        expire = int(time.time()) + AUTH_TOKEN_TTL
        signature = hmac.new(
            self.private_key.encode('utf-8'),
            f'{token}{expire}'.encode('utf-8'),
            hashlib.sha1,
        ).hexdigest()
        return {'token': token, 'expire': expire, 'signature': signature}

    def upload(self,
               file_bytes: bytes,
               file_name: str,
               folder: str = DEFAULT_FOLDER,
               tags: Optional[List[str]] = None,
               custom_metadata: Optional[Dict] = None) -> Dict:
        """
        Завантажує файл в ImageKit

        Returns:
            JSON відповідь ImageKit (fileId, name, url, thumbnailUrl, size...)

        Raises:
            ImageKitError: якщо клієнт не налаштований або API повернуло помилку
        """
        if not self.is_configured:
            raise ImageKitError("ImageKit is not configured")

        data = {
            'fileName': file_name,
            'folder': folder,
            'useUniqueFileName': 'true',
        }
        if tags:
            data['tags'] = ','.join(tags)
        if custom_metadata:
            data['customMetadata'] = json.dumps(custom_metadata)

        logger.info(f"📤 Uploading {file_name} to ImageKit ({len(file_bytes)} bytes)")

        try:
            response = self.session.post(
                UPLOAD_URL,
                data=data,
                files={'file': (file_name, file_bytes)},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"ImageKit upload failed: {e}")
            raise ImageKitError(str(e)) from e

        payload = response.json()
        logger.info(f"✅ ImageKit upload done: {payload.get('fileId')}")
        return payload

    def delete_file(self, file_id: str) -> None:
        """
        Видаляє файл з ImageKit за fileId

        Raises:
            ImageKitError: якщо клієнт не налаштований або API повернуло помилку
        """
        if not self.is_configured:
            raise ImageKitError("ImageKit is not configured")

        try:
            response = self.session.delete(f'{FILES_URL}/{file_id}', timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"ImageKit delete failed for {file_id}: {e}")
            raise ImageKitError(str(e)) from e

        logger.info(f"🗑️ ImageKit file deleted: {file_id}")
