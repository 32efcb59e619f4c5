from django.contrib import admin
from .models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ("action", "entity_type", "entity_id", "actor_email", "tenant_id", "created_at")
    list_filter = ("action", "entity_type")
    search_fields = ("actor_email", "entity_id")
    readonly_fields = ("data_json",)
