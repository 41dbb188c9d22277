import os
import tempfile

SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret"
TOKEN_TTL_HOURS = 8

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "lecture_attendance_test"),
}
DB_CONNECT_TIMEOUT = 2

UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), "lecture_attendance_uploads")
MAX_CONTENT_LENGTH = 4 * 1024 * 1024
API_PREFIX = ""
CORS_ORIGINS = "*"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
SEED_DEMO_USER = True
