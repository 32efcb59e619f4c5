from rest_framework import serializers

from intranet.audit.models import AuditLog


class AuditLogSerializer(serializers.ModelSerializer):
    metadata = serializers.JSONField(source="data_json")

    class Meta:
        model = AuditLog
        fields = [
            "id",
            "tenant_id",
            "actor_user_id",
            "actor_email",
            "action",
            "entity_type",
            "entity_id",
            "metadata",
            "created_at",
        ]


class AuditCreateSerializer(serializers.Serializer):
    action = serializers.CharField(max_length=64)
    entity_type = serializers.CharField(max_length=64)
    entity_id = serializers.CharField(max_length=64, required=False, allow_null=True, allow_blank=True)
    metadata = serializers.DictField(required=False, default=dict)

    def validate_action(self, value):
        return value.strip().upper()
