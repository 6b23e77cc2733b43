"""
config.py
---------
Central configuration module. Loads environment variables (from the
.env file when running in development) and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

# ── Environment ───────────────────────────────────────────
ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

# Only the development environment reads a local .env file
if ENVIRONMENT == "development":
    load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "coffee_orders")
DB_USER: str = os.getenv("DB_USER", "postgres")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = os.getenv("DATABASE_URL") or (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# ── Connection Pool ───────────────────────────────────────
DB_MIN_CONNECTIONS: int = int(os.getenv("DB_MIN_CONNECTIONS", "1"))
DB_MAX_CONNECTIONS: int = int(os.getenv("DB_MAX_CONNECTIONS", "16"))
DB_POOL_TIMEOUT: float = float(os.getenv("DB_POOL_TIMEOUT", "5"))

# ── HTTP Listener ─────────────────────────────────────────
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "3000"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
