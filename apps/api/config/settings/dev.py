from .base import *
import os

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 로컬은 DB_NAME 없으면 sqlite
if not os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

LOGGING["root"]["level"] = os.getenv("LOG_LEVEL", "DEBUG")
