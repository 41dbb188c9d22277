import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
JWT_SECRET = os.getenv("JWT_SECRET", "please-set-JWT_SECRET")
TOKEN_TTL_HOURS = Config.TOKEN_TTL_HOURS

DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}
DB_CONNECT_TIMEOUT = Config.DB_CONNECT_TIMEOUT

UPLOAD_FOLDER = Config.UPLOAD_FOLDER
MAX_CONTENT_LENGTH = Config.MAX_CONTENT_LENGTH
API_PREFIX = Config.API_PREFIX
CORS_ORIGINS = Config.CORS_ORIGINS

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
SEED_DEMO_USER = bool(int(os.getenv("SEED_DEMO_USER", "1")))
