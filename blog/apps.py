# blog/apps.py
from django.apps import AppConfig


class BlogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'blog'
    verbose_name = '📝 Блог'

    def ready(self):
        # Сигнали для лічильників тегів і SEO оцінки
        import blog.signals  # noqa: F401
