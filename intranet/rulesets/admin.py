from django.contrib import admin

from .models import RuleSet


@admin.register(RuleSet)
class RuleSetAdmin(admin.ModelAdmin):
    list_display = ("simulator_key", "version", "name", "tenant", "is_active", "updated_at")
    list_filter = ("simulator_key", "is_active")
    search_fields = ("name",)
    readonly_fields = ("version", "is_active", "created_by", "created_at", "updated_at")
