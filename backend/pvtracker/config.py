import os

APP_NAME = os.environ.get("APP_NAME", "PV Installation Tracker API")
APP_VERSION = "1.0.0"

# SQLite file in the working directory unless a server database is configured
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./pvinstallations.db")
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# Empty disables the response cache
REDIS_URL = os.environ.get("REDIS_URL", "")
CACHE_TTL_SECONDS = int(os.environ.get("CACHE_TTL_SECONDS", "60"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost,http://localhost:5173").split(",")
    if origin.strip()
]
