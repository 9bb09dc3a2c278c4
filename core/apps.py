# core/apps.py
from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
    verbose_name = '⚙️ Сайт'

    def ready(self):
        # Реєструємо system checks для конфігурації оточення
        import core.checks  # noqa: F401
