from django.contrib import admin
from .models import StringRecord


@admin.register(StringRecord)
class StringRecordAdmin(admin.ModelAdmin):
    """
    Admin configuration for analyzed strings. Records are immutable once stored,
    so every computed field is read-only.
    """
    list_display = [
        'value',
        'length',
        'is_palindrome',
        'unique_characters',
        'word_count',
        'created_at'
    ]
    list_filter = ['is_palindrome', 'created_at']
    search_fields = ['value', 'sha256_hash']
    ordering = ['-created_at']
    readonly_fields = [
        'sha256_hash',
        'length',
        'is_palindrome',
        'unique_characters',
        'word_count',
        'character_frequency_map',
        'created_at'
    ]

    fieldsets = (
        ('String', {
            'fields': ('value', 'sha256_hash')
        }),
        ('Properties', {
            'fields': ('length', 'is_palindrome', 'unique_characters', 'word_count', 'character_frequency_map')
        }),
        ('Metadata', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        }),
    )

    def has_change_permission(self, request, obj=None):
        return False
