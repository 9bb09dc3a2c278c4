# core/models.py
from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils.text import slugify
from ckeditor.fields import RichTextField


class Tag(models.Model):
    """Теги статей"""

    name = models.CharField(max_length=50, unique=True)
    slug = models.SlugField(max_length=50, unique=True, blank=True)
    description = models.CharField(max_length=200, blank=True)
    color = models.CharField(
        max_length=7,
        default='#007bff',
        help_text="Hex color для відображення тегу"
    )

    # Статистика використання
    usage_count = models.PositiveIntegerField(default=0, help_text="Скільки статей використовують тег")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Tag"
        verbose_name_plural = "Tags"
        ordering = ['-usage_count', 'name']

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse('blog:tag_detail', kwargs={'slug': self.slug})

    def update_usage_count(self):
        """Оновлює лічильник використання"""
        self.usage_count = self.articles.count()
        self.save(update_fields=['usage_count'])

    @classmethod
    def get_popular_tags(cls, limit=10):
        return cls.objects.filter(usage_count__gt=0).order_by('-usage_count')[:limit]


class Page(models.Model):
    """Статичні сторінки (privacy policy, terms, contact...)"""
    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    content = RichTextField(blank=True)
    is_active = models.BooleanField(default=True)
    show_in_footer = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Page"
        verbose_name_plural = "Pages"
        ordering = ['title']

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.title)
        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse('core:page_detail', kwargs={'slug': self.slug})


def default_social_links():
    return {'twitter': '', 'facebook': '', 'instagram': '', 'youtube': ''}


class SiteSettings(models.Model):
    """Глобальні налаштування сайту (один запис, pk=1)"""
    site_name = models.CharField(max_length=100, default='IPTV Hub')
    site_description = models.TextField(max_length=500, blank=True)
    site_url = models.URLField(blank=True)

    logo_url = models.URLField(blank=True)
    favicon_url = models.URLField(blank=True)
    og_image_url = models.URLField(blank=True)

    default_meta_title = models.CharField(max_length=60, blank=True)
    default_meta_description = models.CharField(max_length=160, blank=True)
    default_meta_keywords = models.TextField(blank=True)

    contact_email = models.EmailField(blank=True)
    social_links = models.JSONField(default=default_social_links, blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Site settings"
        verbose_name_plural = "Site settings"

    def __str__(self):
        return self.site_name

    def save(self, *args, **kwargs):
        self.pk = 1
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        obj, _ = cls.objects.get_or_create(
            pk=1,
            defaults={
                'site_name': getattr(settings, 'SITE_NAME', 'IPTV Hub'),
                'site_url': getattr(settings, 'SITE_URL', ''),
            },
        )
        return obj

    def get_site_url(self):
        return (self.site_url or getattr(settings, 'SITE_URL', '')).rstrip('/')

    def get_logo_url(self):
        return self.logo_url or f"{self.get_site_url()}/logo.png"

    def get_og_image_url(self):
        return self.og_image_url or f"{self.get_site_url()}/og-image.jpg"
