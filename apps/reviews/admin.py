"""Admin registrations for the reviews domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Review, ReviewImage


class ReviewImageInline(admin.TabularInline):
    model = ReviewImage
    extra = 0
    fields = ('url',)


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('spot', 'user', 'stars', 'created_at')
    list_filter = ('stars',)
    search_fields = ('review', 'spot__name', 'user__email')
    readonly_fields = ('created_at', 'updated_at')
    inlines = [ReviewImageInline]
