import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
JWT_SECRET = os.getenv("JWT_SECRET", "please-set-JWT_SECRET")
TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "24"))

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
DATA_DIR = os.getenv("DATA_DIR", "./data")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

BOOTSTRAP_ADMIN = {
    "email": os.getenv("ADMIN_EMAIL", "admin@company.com"),
    "password": os.getenv("ADMIN_PASSWORD", "admin123"),
    "name": "System Administrator",
    "employee_id": "EMP001",
    "department": "IT",
}

DASHBOARD_ADMIN_ONLY = bool(int(os.getenv("DASHBOARD_ADMIN_ONLY", "0")))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))

DEBUG = False
