import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
JWT_SECRET = os.getenv("JWT_SECRET", "your-secret-key-change-in-production")
TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "24"))

# memory | json | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
DATA_DIR = os.getenv("DATA_DIR", "./data")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}

# If enabled with the mysql backend, schema.sql is applied on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

BOOTSTRAP_ADMIN = {
    "email": os.getenv("ADMIN_EMAIL", "admin@company.com"),
    "password": os.getenv("ADMIN_PASSWORD", "admin123"),
    "name": "System Administrator",
    "employee_id": "EMP001",
    "department": "IT",
}

DASHBOARD_ADMIN_ONLY = bool(int(os.getenv("DASHBOARD_ADMIN_ONLY", "0")))

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3001"))

DEBUG = True
