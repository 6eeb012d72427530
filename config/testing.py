import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "clockwise_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

LOCAL_TIMEZONE = "UTC"

CLASSIFIER_BACKEND = "rules"
CLASSIFIER_URL = ""
CLASSIFIER_API_KEY = ""
CLASSIFIER_TIMEOUT_SECONDS = 5.0

AUTO_INIT_DB = False
AUTO_SEED_DB = False
