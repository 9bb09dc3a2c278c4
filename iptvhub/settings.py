from decouple import config, Csv
from pathlib import Path
import logging
import re
from celery.schedules import crontab

# === 📁 BASE PATHS ===
BASE_DIR = Path(__file__).resolve().parent.parent

# === 🔐 CORE SECURITY ===
SECRET_KEY = config('SECRET_KEY')
DEBUG = config('DEBUG', default=False, cast=bool)

# ✅ Керуємо з .env: DJANGO_ALLOWED_HOSTS, DJANGO_CSRF_TRUSTED_ORIGINS
# приклад у .env:
# DJANGO_ALLOWED_HOSTS=localhost,127.0.0.1,iptv-blogg.site,www.iptv-blogg.site
ALLOWED_HOSTS = config('DJANGO_ALLOWED_HOSTS', default='localhost,127.0.0.1', cast=Csv())

_csrf_from_env = config('DJANGO_CSRF_TRUSTED_ORIGINS', default='', cast=Csv())
# Якщо у .env нема доменів для CSRF — додамо їх автоматично з ALLOWED_HOSTS (http/https)
if _csrf_from_env:
    CSRF_TRUSTED_ORIGINS = _csrf_from_env
else:
    CSRF_TRUSTED_ORIGINS = [f"http://{h}" for h in ALLOWED_HOSTS] + [f"https://{h}" for h in ALLOWED_HOSTS]

# === 📦 INSTALLED APPS ===
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django.contrib.sitemaps',

    # Third party
    'ckeditor',
    'ckeditor_uploader',
    'django_celery_beat',

    # Your apps
    'core.apps.CoreConfig',
    'blog.apps.BlogConfig',
    'media_library.apps.MediaLibraryConfig',
]

# === 🔧 MIDDLEWARE ===
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'iptvhub.urls'

# === 📄 TEMPLATES ===
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'core' / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'core.context_processors.seo_settings',
            ],
        },
    },
]

WSGI_APPLICATION = 'iptvhub.wsgi.application'

# === 🗄️ DATABASE ===
DATABASES = {
    'default': {
        'ENGINE': config('DB_ENGINE', default='django.db.backends.postgresql'),
        'NAME': config('DB_NAME', default='iptvhub'),
        'USER': config('DB_USER', default=''),
        'PASSWORD': config('DB_PASSWORD', default=''),
        'HOST': config('DB_HOST', default='localhost'),
        'PORT': config('DB_PORT', default='5432'),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# === 📦 CELERY ===
CELERY_BROKER_URL = config('CELERY_BROKER_URL', default='redis://localhost:6379/0')
CELERY_RESULT_BACKEND = config('CELERY_RESULT_BACKEND', default='redis://localhost:6379/0')
CELERY_ACCEPT_CONTENT = ['application/json']
CELERY_TASK_SERIALIZER = 'json'
CELERY_RESULT_SERIALIZER = 'json'
CELERY_TIMEZONE = 'UTC'
CELERY_BEAT_SCHEDULER = 'django_celery_beat.schedulers:DatabaseScheduler'

CELERY_BEAT_SCHEDULE = {
    'nightly-seo-score-refresh': {
        'task': 'blog.refresh_seo_scores',
        'schedule': crontab(hour=3, minute=0),
    },
}

# === 🌐 INTERNATIONALIZATION ===
LANGUAGE_CODE = 'en-us'
USE_I18N = True
USE_TZ = True
TIME_ZONE = 'UTC'

# === 📁 STATIC & MEDIA ===
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

MEDIA_URL = '/media/'
MEDIA_ROOT = BASE_DIR / 'media'

# === ✏️ CKEDITOR ===
CKEDITOR_UPLOAD_PATH = "uploads/"
CKEDITOR_CONFIGS = {
    'default': {
        'toolbar': 'Full',
        'height': 300,
        'width': '100%',
        'tabSpaces': 4,
        'extraPlugins': ','.join(['codesnippet']),
    },
}

# === 🖼️ IMAGEKIT ===
# Без усіх трьох ключів завантаження віддає заглушку (див. core.checks)
IMAGEKIT_PUBLIC_KEY = config('IMAGEKIT_PUBLIC_KEY', default='')
IMAGEKIT_PRIVATE_KEY = config('IMAGEKIT_PRIVATE_KEY', default='')
IMAGEKIT_URL_ENDPOINT = config('IMAGEKIT_URL_ENDPOINT', default='')

# === 🎯 SEO ===
SITE_URL = config('SITE_URL', default='https://iptv-blogg.site')
SITE_NAME = config('SITE_NAME', default='IPTV Hub')
SEO_INTERNAL_DOMAIN = config('SEO_INTERNAL_DOMAIN', default='iptv-blogg.site')

GOOGLE_ANALYTICS_ID = config('GOOGLE_ANALYTICS_ID', default=None)
GOOGLE_SITE_VERIFICATION = config('GOOGLE_SITE_VERIFICATION', default=None)

# === 📊 LOGGING ===
LOG_DIR = BASE_DIR / 'logs'
LOG_DIR.mkdir(exist_ok=True)


class StripEmojiFilter(logging.Filter):
    _EMOJI_RE = re.compile(r'[\U00010000-\U0010FFFF]|\uFE0F|[\u2600-\u26FF]')
    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self._EMOJI_RE.sub('', record.msg)
        return True

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'filters': {
        'strip_emoji': {'()': StripEmojiFilter},
    },
    'handlers': {
        'file': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': LOG_DIR / 'blog.log',
            'formatter': 'verbose',
            'encoding': 'utf-8',
        },
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
            'filters': ['strip_emoji'],
        },
    },
    'loggers': {
        'blog': {
            'handlers': ['file', 'console'],
            'level': 'INFO',
            'propagate': False,
        },
        'core': {
            'handlers': ['file', 'console'],
            'level': 'INFO',
            'propagate': False,
        },
        'media_library': {
            'handlers': ['file', 'console'],
            'level': 'INFO',
            'propagate': False,
        },
        'celery': {
            'handlers': ['file', 'console'],
            'level': 'INFO',
            'propagate': True,
        },
    },
}

# === 🔐 SECURITY HEADERS ===
SECURE_REFERRER_POLICY = 'strict-origin-when-cross-origin'

# === 📧 EMAIL ===
EMAIL_BACKEND = config('EMAIL_BACKEND', default='django.core.mail.backends.smtp.EmailBackend')
DEFAULT_FROM_EMAIL = config('DEFAULT_FROM_EMAIL', default='info@iptv-blogg.site')
SERVER_EMAIL = DEFAULT_FROM_EMAIL

# === ☁️ REVERSE PROXY ===
USE_X_FORWARDED_HOST = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

# ckeditor 4 попереджає про застарілу версію
SILENCED_SYSTEM_CHECKS = ['ckeditor.W001']
