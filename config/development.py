import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrms_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

# Punch-clock export layout: first punch column (0-based)
PUNCH_COLUMN_OFFSET = int(os.getenv("PUNCH_COLUMN_OFFSET", "5"))
# "append" keeps every imported record, "upsert" keeps one per employee and date
DUPLICATE_POLICY = os.getenv("DUPLICATE_POLICY", "append")
MAX_SAVE_RETRIES = int(os.getenv("MAX_SAVE_RETRIES", "3"))
