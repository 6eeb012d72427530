import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "clockwise"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "clockwise_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "UTC")

CLASSIFIER_BACKEND = os.getenv("CLASSIFIER_BACKEND", "hosted")
CLASSIFIER_URL = os.getenv("CLASSIFIER_URL", "")
CLASSIFIER_API_KEY = os.getenv("CLASSIFIER_API_KEY", "")
CLASSIFIER_TIMEOUT_SECONDS = float(os.getenv("CLASSIFIER_TIMEOUT_SECONDS", "30"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
