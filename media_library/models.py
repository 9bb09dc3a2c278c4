from django.db import models


class Media(models.Model):
    """Завантажені зображення (ImageKit або локальне сховище)"""
    filename = models.CharField(max_length=255)
    original_name = models.CharField(max_length=255)
    file_path = models.CharField(max_length=1000, help_text="Публічний URL файлу")
    file_size = models.PositiveIntegerField(default=0)
    mime_type = models.CharField(max_length=50)

    alt = models.CharField(max_length=200, blank=True)
    caption = models.CharField(max_length=500, blank=True)

    provider_file_id = models.CharField(max_length=100, blank=True, help_text="fileId в ImageKit")
    storage_name = models.CharField(max_length=255, blank=True, help_text="Шлях у default_storage для локальних файлів")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Media file"
        verbose_name_plural = "Media files"

    def __str__(self):
        return self.original_name or self.filename

    @property
    def used_in_articles(self):
        return self.articles.count()

    def to_dict(self):
        links = list(self.articles.all())
        return {
            "id": self.pk,
            "filename": self.filename,
            "original_name": self.original_name,
            "url": self.file_path,
            "size": self.file_size,
            "mime_type": self.mime_type,
            "alt": self.alt,
            "caption": self.caption,
            "uploaded_at": self.created_at.isoformat(),
            "used_in_articles": len(links),
            "article_titles": [link.article.title for link in links],
            "article_slugs": [link.article.slug for link in links],
        }


class ArticleMedia(models.Model):
    """Зв'язок статті з медіафайлом"""
    article = models.ForeignKey("blog.Article", on_delete=models.CASCADE, related_name="media_links")
    media = models.ForeignKey(Media, on_delete=models.CASCADE, related_name="articles")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Article media"
        verbose_name_plural = "Article media"
        constraints = [
            models.UniqueConstraint(fields=["article", "media"], name="unique_article_media"),
        ]

    def __str__(self):
        return f"{self.media} → {self.article}"
