import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "clockwise_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Timezone used to read naive form timestamps and to judge start/finish times.
LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "UTC")

# "rules" (deterministic) or "hosted" (language-model endpoint)
CLASSIFIER_BACKEND = os.getenv("CLASSIFIER_BACKEND", "rules")
CLASSIFIER_URL = os.getenv("CLASSIFIER_URL", "")
CLASSIFIER_API_KEY = os.getenv("CLASSIFIER_API_KEY", "")
CLASSIFIER_TIMEOUT_SECONDS = float(os.getenv("CLASSIFIER_TIMEOUT_SECONDS", "30"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
