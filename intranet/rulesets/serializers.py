from rest_framework import serializers

from intranet.rulesets.models import RuleSet


class RuleSetSerializer(serializers.ModelSerializer):
    tenant_id = serializers.UUIDField(read_only=True, allow_null=True)
    is_global = serializers.BooleanField(read_only=True)

    class Meta:
        model = RuleSet
        fields = [
            "id",
            "tenant_id",
            "simulator_key",
            "version",
            "name",
            "payload",
            "is_active",
            "is_global",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class RuleSetCreateSerializer(serializers.Serializer):
    # checked by the store so unknown keys map to UNKNOWN_SIMULATOR
    simulator_key = serializers.CharField(max_length=32)
    name = serializers.CharField(max_length=120, required=False, allow_blank=True, default="")
    # object, or the raw JSON text from the editor
    payload = serializers.JSONField()


class RuleSetUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=120, required=False, allow_blank=True)
    payload = serializers.JSONField(required=False)

    def validate(self, attrs):
        if "name" not in attrs and "payload" not in attrs:
            raise serializers.ValidationError("Provide name and/or payload")
        return attrs


class RuleSetCloneSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=120, required=False, allow_blank=True, default="")
