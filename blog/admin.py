from django.contrib import admin, messages
from django.utils import timezone
from django.utils.html import format_html, format_html_join

from media_library.models import ArticleMedia
from .models import Article, Category, Comment

SCORE_COLORS = {
    "Excellent": "#28a745",
    "Good": "#17a2b8",
    "Fair": "#ffc107",
    "Poor": "#fd7e14",
    "Needs Work": "#dc3545",
}


class ArticleMediaInline(admin.TabularInline):
    model = ArticleMedia
    extra = 0
    raw_id_fields = ["media"]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "show_in_menu", "menu_order", "is_active", "articles_count"]
    list_filter = ["is_active", "show_in_menu"]
    list_editable = ["show_in_menu", "menu_order", "is_active"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ("name",)}
    fieldsets = (
        ("🏷️ Основна інформація", {"fields": ("name", "slug", "description")}),
        ("🎨 Дизайн", {"fields": ("color", "icon")}),
        ("🧭 Меню", {"fields": ("show_in_menu", "menu_order", "menu_label")}),
        ("⚙️ Статус", {"fields": ("is_active",)}),
    )

    def articles_count(self, obj):
        return obj.articles.count()
    articles_count.short_description = "Статей"


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ["title", "status", "category", "seo_score_badge", "view_count", "published_at"]
    list_filter = ["status", "category", "published_at"]
    search_fields = ["title", "excerpt", "slug"]
    prepopulated_fields = {"slug": ("title",)}
    filter_horizontal = ["tags"]
    date_hierarchy = "published_at"
    readonly_fields = ["seo_panel", "view_count", "created_at", "updated_at"]
    inlines = [ArticleMediaInline]
    actions = ["make_published", "make_archived", "refresh_seo_score"]
    fieldsets = (
        ("📝 Контент", {"fields": ("title", "slug", "excerpt", "content", "featured_image")}),
        ("🗂️ Зв'язки", {"fields": ("category", "tags", "author")}),
        ("📋 Статус", {"fields": ("status", "published_at")}),
        ("🔍 SEO", {"fields": ("seo_title", "seo_description", "seo_keywords", "seo_panel")}),
        ("📅 Службове", {"fields": ("view_count", "created_at", "updated_at"), "classes": ("collapse",)}),
    )

    def get_changeform_initial_data(self, request):
        initial = super().get_changeform_initial_data(request)
        initial.setdefault("author", request.user.pk)
        return initial

    def seo_score_badge(self, obj):
        return format_html(
            '<span style="color:{};font-weight:bold;">{}/100</span>',
            SCORE_COLORS.get(obj.seo_score_label, "#6c757d"),
            obj.seo_score,
        )
    seo_score_badge.short_description = "SEO"
    seo_score_badge.admin_order_field = "seo_score"

    def seo_panel(self, obj):
        """Оцінка, розбивка по категоріях і поради аналізатора"""
        if not obj or not obj.pk:
            return "Збережіть статтю, щоб побачити SEO аналіз"

        analysis = obj.run_seo_analysis()
        breakdown = format_html_join(
            "",
            "<li>{}: {}/{}</li>",
            ((name.title(), part["score"], part["max"]) for name, part in analysis.breakdown().items()),
        )
        suggestions = format_html_join("", "<li>{}</li>", ((s,) for s in analysis.suggestions))

        return format_html(
            '<div><strong style="color:{};font-size:1.4em;">{}/100 · {}</strong>'
            "<ul>{}</ul><p><strong>Suggestions</strong></p><ul>{}</ul></div>",
            SCORE_COLORS.get(analysis.label, "#6c757d"),
            analysis.score,
            analysis.label,
            breakdown,
            suggestions or format_html("<li>{}</li>", "No suggestions, great job!"),
        )
    seo_panel.short_description = "SEO аналіз"

    @admin.action(description="✅ Опублікувати")
    def make_published(self, request, queryset):
        count = 0
        for article in queryset.exclude(status=Article.STATUS_PUBLISHED):
            article.status = Article.STATUS_PUBLISHED
            article.save()
            count += 1
        self.message_user(request, f"✅ Опубліковано {count} статей", messages.SUCCESS)

    @admin.action(description="📦 Архівувати")
    def make_archived(self, request, queryset):
        count = queryset.update(status=Article.STATUS_ARCHIVED, updated_at=timezone.now())
        self.message_user(request, f"📦 Архівовано {count} статей", messages.SUCCESS)

    @admin.action(description="🔍 Перерахувати SEO оцінку")
    def refresh_seo_score(self, request, queryset):
        for article in queryset:
            article.save()
        self.message_user(request, f"🔍 Оновлено SEO для {queryset.count()} статей", messages.SUCCESS)


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["author_name", "article", "short_content", "is_approved", "created_at"]
    list_filter = ["is_approved", "created_at"]
    search_fields = ["author_name", "author_email", "content", "article__title"]
    raw_id_fields = ["article", "parent"]
    actions = ["approve_comments"]

    def short_content(self, obj):
        return obj.content[:80]
    short_content.short_description = "Коментар"

    @admin.action(description="✅ Схвалити коментарі")
    def approve_comments(self, request, queryset):
        count = queryset.update(is_approved=True)
        self.message_user(request, f"✅ Схвалено {count} коментарів", messages.SUCCESS)
