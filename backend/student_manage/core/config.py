from dotenv import load_dotenv
import os

load_dotenv()  # Loads variables from .env


def parse_boolean_env(name: str, default: bool = False) -> bool:
    raw = str(os.getenv(name, "") or "").strip()
    if not raw:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./student_manage.db")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))
RECONCILE_EXPLICIT_UNIQUE_NO = parse_boolean_env("RECONCILE_EXPLICIT_UNIQUE_NO")
DB_BOOTSTRAP_MODE = str(os.getenv("DB_BOOTSTRAP_MODE", "background") or "background").strip().lower()
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGIN_REGEX = os.getenv("CORS_ORIGIN_REGEX")

def parse_cors_origins(value: str):
    if not value:
        return []
    if value.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in value.split(",") if origin.strip()]
