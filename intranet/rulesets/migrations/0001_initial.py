import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("tenants", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="RuleSet",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "simulator_key",
                    models.CharField(
                        choices=[
                            ("HONORARIOS", "Honorários Contábeis"),
                            ("RESCISAO", "Rescisão Trabalhista"),
                            ("FERIAS", "Férias"),
                            ("FATOR_R", "Fator R"),
                            ("SIMPLES_DAS", "DAS Simples Nacional"),
                        ],
                        max_length=32,
                    ),
                ),
                ("version", models.PositiveIntegerField()),
                ("name", models.CharField(max_length=120)),
                ("payload", models.JSONField(default=dict)),
                ("is_active", models.BooleanField(default=False)),
                ("created_by", models.BigIntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "tenant",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="rulesets",
                        to="tenants.tenant",
                    ),
                ),
            ],
            options={
                "ordering": ["simulator_key", "-version"],
                "indexes": [
                    models.Index(fields=["tenant", "simulator_key", "is_active"], name="ruleset_tenant_key_active_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("tenant", "simulator_key", "version"), name="uq_ruleset_tenant_key_version"),
                    models.UniqueConstraint(
                        condition=models.Q(("is_active", True)),
                        fields=("tenant", "simulator_key"),
                        name="uq_ruleset_one_active",
                    ),
                ],
            },
        ),
    ]
