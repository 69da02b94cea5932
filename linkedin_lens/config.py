"""Configuration loaded from environment variables and dotenv."""

import os

from dotenv import load_dotenv

load_dotenv()

# ── Upstream proxy ─────────────────────────────────────────────────────────
LINKEDIN_PROXY_URL: str = os.getenv(
    "LINKEDIN_PROXY_URL", "http://localhost:8888/.netlify/functions"
).rstrip("/")
LINKEDIN_API_VERSION: str = os.getenv("LINKEDIN_API_VERSION", "202312")
LINKEDIN_CHANGELOG_COUNT: int = int(os.getenv("LINKEDIN_CHANGELOG_COUNT", "200"))
LINKEDIN_FETCH_TIMEOUT: float = float(os.getenv("LINKEDIN_FETCH_TIMEOUT", "30"))

# ── API server ─────────────────────────────────────────────────────────────
CORS_ALLOW_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

# ── Logging ────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
