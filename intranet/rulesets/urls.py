from django.urls import path

from intranet.rulesets.api import (
    ruleset_activate,
    ruleset_active,
    ruleset_clone,
    ruleset_defaults,
    ruleset_detail,
    rulesets_collection,
)

urlpatterns = [
    path("rulesets", rulesets_collection, name="rulesets"),
    path("rulesets/active", ruleset_active, name="ruleset-active"),
    path("rulesets/defaults/<str:simulator_key>", ruleset_defaults, name="ruleset-defaults"),
    path("rulesets/<uuid:ruleset_id>", ruleset_detail, name="ruleset-detail"),
    path("rulesets/<uuid:ruleset_id>/activate", ruleset_activate, name="ruleset-activate"),
    path("rulesets/<uuid:ruleset_id>/clone", ruleset_clone, name="ruleset-clone"),
]
