from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("rulesets", "0001_initial"),
    ]

    operations = [
        migrations.AddConstraint(
            model_name="ruleset",
            constraint=models.UniqueConstraint(
                condition=models.Q(("tenant__isnull", True)),
                fields=("simulator_key", "version"),
                name="uq_ruleset_global_key_version",
            ),
        ),
        migrations.AddConstraint(
            model_name="ruleset",
            constraint=models.UniqueConstraint(
                condition=models.Q(("is_active", True), ("tenant__isnull", True)),
                fields=("simulator_key",),
                name="uq_ruleset_global_one_active",
            ),
        ),
    ]
