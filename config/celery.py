import os
from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.base")

app = Celery("intranet")
app.config_from_object("django.conf:settings", namespace="CELERY")

# ✅ Ensure Celery imports tasks from these modules explicitly (deterministic)
app.conf.imports = (
    "intranet.audit.tasks",
)

app.autodiscover_tasks()
