import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    DATA_FILE = Path(os.getenv("JSONDOC_DATA_FILE", "data.json"))
    WEBSITE_DIR = Path(os.getenv("JSONDOC_WEBSITE_DIR", "website"))
    DATA_ATOMIC_WRITES = _env_bool("JSONDOC_ATOMIC_WRITES", False)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))
    DEBUG = _env_bool("DEBUG", False)

    # Read by flask_cors on init_app
    CORS_ORIGINS = "*"
    CORS_SEND_WILDCARD = True
    CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_ALLOW_HEADERS = ["X-Requested-With", "Content-Type", "Authorization"]


class DevConfig(Config):
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProdConfig(Config):
    DEBUG = False
