"""
Development Settings
"""

from dotenv import load_dotenv

# Must run before intellibuy.config reads the environment
load_dotenv()

from .base import *  # noqa: E402

DEBUG = True
SECRET_KEY = config.security.secret_key
ALLOWED_HOSTS = ["*"]

# CORS - Allow all for local development
CORS_ALLOW_ALL_ORIGINS = True

# Disable rate limiting in development
REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {
    "anon": "10000/hour",
}
