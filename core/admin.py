from django.contrib import admin

from .models import Page, SiteSettings, Tag


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'color', 'usage_count']
    search_fields = ['name', 'slug']
    readonly_fields = ['usage_count', 'created_at', 'updated_at']
    prepopulated_fields = {'slug': ('name',)}

    fieldsets = (
        ('🏷️ Основна інформація', {
            'fields': ('name', 'slug', 'description')
        }),
        ('🎨 Дизайн', {
            'fields': ('color',)
        }),
        ('📊 Статистика', {
            'fields': ('usage_count', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ['title', 'slug', 'is_active', 'show_in_footer', 'updated_at']
    list_editable = ['is_active', 'show_in_footer']
    search_fields = ['title', 'slug']
    prepopulated_fields = {'slug': ('title',)}
    readonly_fields = ['updated_at']


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    list_display = ['site_name', 'site_url', 'updated_at']
    readonly_fields = ['updated_at']

    fieldsets = (
        ('🌐 Сайт', {
            'fields': ('site_name', 'site_description', 'site_url', 'contact_email')
        }),
        ('🖼️ Брендинг', {
            'fields': ('logo_url', 'favicon_url', 'og_image_url')
        }),
        ('🔍 SEO за замовчуванням', {
            'fields': ('default_meta_title', 'default_meta_description', 'default_meta_keywords')
        }),
        ('🔗 Соцмережі', {
            'fields': ('social_links',),
            'description': 'JSON: twitter, facebook, instagram, youtube'
        }),
        ('📅 Службове', {
            'fields': ('updated_at',),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        # Один запис на весь сайт
        return not SiteSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
