import math

from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils import timezone
from django.utils.text import slugify
from ckeditor.fields import RichTextField

from .seo import analyze_seo, count_words, score_label, strip_tags


class Category(models.Model):
    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=100, unique=True)
    description = models.TextField(max_length=500, blank=True)
    color = models.CharField(max_length=7, blank=True, help_text="Hex, наприклад #1e90ff")
    icon = models.CharField(max_length=50, blank=True)

    # Меню
    show_in_menu = models.BooleanField(default=True)
    menu_order = models.PositiveIntegerField(default=0)
    menu_label = models.CharField(max_length=100, blank=True)

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["menu_order", "name"]
        verbose_name = "Category"
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def get_menu_label(self):
        return self.menu_label or self.name

    def get_absolute_url(self):
        return reverse("blog:category_detail", kwargs={"slug": self.slug})


class ArticleQuerySet(models.QuerySet):
    def published(self):
        return self.filter(status=Article.STATUS_PUBLISHED)


class Article(models.Model):
    STATUS_DRAFT = "DRAFT"
    STATUS_PUBLISHED = "PUBLISHED"
    STATUS_ARCHIVED = "ARCHIVED"
    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_PUBLISHED, "Published"),
        (STATUS_ARCHIVED, "Archived"),
    ]

    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    excerpt = models.TextField(max_length=500, blank=True)
    content = RichTextField()
    featured_image = models.URLField(max_length=500, blank=True)

    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name="articles")
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="articles",
    )
    tags = models.ManyToManyField("core.Tag", blank=True, related_name="articles")

    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_DRAFT)

    seo_title = models.CharField(max_length=60, blank=True)
    seo_description = models.CharField(max_length=160, blank=True)
    seo_keywords = models.CharField(max_length=255, blank=True)
    seo_score = models.PositiveSmallIntegerField(default=0, editable=False)

    view_count = models.PositiveIntegerField(default=0)

    published_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ArticleQuerySet.as_manager()

    class Meta:
        ordering = ["-published_at", "-created_at"]
        verbose_name = "Article"
        verbose_name_plural = "Articles"
        indexes = [
            models.Index(fields=["status", "-published_at"], name="article_status_published_idx"),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.title)[:200]
        if self.status == self.STATUS_PUBLISHED and not self.published_at:
            self.published_at = timezone.now()
        self.seo_score = self.run_seo_analysis().score
        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            kwargs["update_fields"] = set(update_fields) | {"seo_score", "published_at"}
        super().save(*args, **kwargs)

    @property
    def is_published(self):
        return self.status == self.STATUS_PUBLISHED

    @property
    def seo_score_label(self):
        return score_label(self.seo_score)

    def get_absolute_url(self):
        return reverse("blog:article_detail", kwargs={"slug": self.slug})

    def get_seo_title(self):
        return self.seo_title or self.title

    def get_seo_description(self):
        if self.seo_description:
            return self.seo_description
        return strip_tags(self.excerpt or "")[:160]

    def get_tag_names(self):
        # до першого збереження M2M недоступні
        if not self.pk:
            return []
        return [tag.name for tag in self.tags.all()]

    def get_word_count(self):
        return count_words(strip_tags(self.content))

    def get_read_time(self):
        return max(1, math.ceil(self.get_word_count() / 200))

    def run_seo_analysis(self):
        return analyze_seo(
            title=self.get_seo_title(),
            description=self.get_seo_description(),
            content=self.content,
            slug=self.slug,
            tags=self.get_tag_names(),
            internal_domain=getattr(settings, "SEO_INTERNAL_DOMAIN", ""),
        )

    def get_related_articles(self, limit=3):
        return (
            Article.objects.published()
            .filter(category_id=self.category_id)
            .exclude(pk=self.pk)
            .order_by("-published_at")[:limit]
        )

    def get_approved_comments(self):
        return self.comments.filter(is_approved=True, parent__isnull=True).prefetch_related("replies")


class Comment(models.Model):
    article = models.ForeignKey(Article, on_delete=models.CASCADE, related_name="comments")
    parent = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        related_name="replies",
        blank=True,
        null=True,
    )
    author_name = models.CharField(max_length=100)
    author_email = models.EmailField()
    content = models.TextField(max_length=1000)
    is_approved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        verbose_name = "Comment"
        verbose_name_plural = "Comments"

    def __str__(self):
        return f"{self.author_name} on {self.article}"
