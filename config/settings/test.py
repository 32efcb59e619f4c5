from .base import *  # noqa

DEBUG = False
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "test.sqlite3",
    }
}

CELERY_TASK_ALWAYS_EAGER = True

LOGGING["loggers"]["intranet"]["level"] = "WARNING"
# let pytest's caplog see application logs
LOGGING["loggers"]["intranet"]["propagate"] = True
