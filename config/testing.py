SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret"
TOKEN_TTL_HOURS = 24

STORAGE_BACKEND = "memory"
DATA_DIR = None
DB_CONFIG = {}
AUTO_INIT_DB = False

BOOTSTRAP_ADMIN = {
    "email": "admin@company.com",
    "password": "admin123",
    "name": "System Administrator",
    "employee_id": "EMP001",
    "department": "IT",
}

DASHBOARD_ADMIN_ONLY = False

HOST = "127.0.0.1"
PORT = 3001

DEBUG = False
TESTING = True
