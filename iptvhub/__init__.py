# Celery app підтягується разом з Django, щоб shared_task знайшли брокер
from .celery import app as celery_app

__all__ = ('celery_app',)
