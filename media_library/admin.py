from django.contrib import admin
from django.utils.html import format_html

from .models import Media
from .services.uploads import remove_media


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin):
    list_display = ['preview', 'original_name', 'mime_type', 'file_size', 'used_in_articles', 'created_at']
    list_filter = ['mime_type', 'created_at']
    search_fields = ['original_name', 'filename', 'alt', 'caption']
    readonly_fields = ['preview', 'filename', 'file_path', 'file_size', 'mime_type', 'provider_file_id', 'storage_name', 'created_at']

    fieldsets = (
        ('🖼️ Файл', {
            'fields': ('preview', 'original_name', 'filename', 'file_path', 'file_size', 'mime_type')
        }),
        ('📝 Опис', {
            'fields': ('alt', 'caption')
        }),
        ('📅 Службове', {
            'fields': ('provider_file_id', 'storage_name', 'created_at'),
            'classes': ('collapse',)
        }),
    )

    def preview(self, obj):
        if not obj or not obj.file_path:
            return "—"
        return format_html('<img src="{}" alt="{}" style="max-height:60px;" />', obj.file_path, obj.alt)
    preview.short_description = "Прев'ю"

    def delete_model(self, request, obj):
        remove_media(obj)

    def delete_queryset(self, request, queryset):
        for media in queryset:
            remove_media(media)
