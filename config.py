# config.py
import os
from dataclasses import dataclass
from pathlib import Path

APP_TITLE = "Form Portal Server"

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_ENV = "development"
DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
DEFAULT_JSON_LIMIT = 10 * 1024 * 1024  # 10 MB
DEFAULT_UPLOAD_DIR = BASE_DIR / "uploads"
DEFAULT_DATABASE_PATH = BASE_DIR / "db" / "app.db"
DEFAULT_LOG_LEVEL = "INFO"

# methods advertised to browsers on cross-origin preflight
CORS_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    env: str = DEFAULT_ENV
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    allowed_origins: tuple = (DEFAULT_ALLOWED_ORIGINS,)
    json_limit: int = DEFAULT_JSON_LIMIT
    upload_dir: Path = DEFAULT_UPLOAD_DIR
    database_path: Path = DEFAULT_DATABASE_PATH
    health_route_enabled: bool = True
    test_cookie_route_enabled: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def is_production(self) -> bool:
        return self.env == "production"


def parse_origins(raw: str) -> tuple:
    """Split a comma-separated origin list, trimming blanks; never empty."""
    origins = tuple(o.strip() for o in (raw or "").split(",") if o.strip())
    return origins or (DEFAULT_ALLOWED_ORIGINS,)


def _int(value, default: int) -> int:
    # non-numeric and zero both mean "use the default"
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


def _flag(value, default: bool) -> bool:
    if value is None:
        return default
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return default


def load_settings(environ=None) -> Settings:
    """Build Settings from the process environment (or a given mapping)."""
    env = os.environ if environ is None else environ
    return Settings(
        env=env.get("NODE_ENV") or DEFAULT_ENV,
        port=_int(env.get("PORT"), DEFAULT_PORT),
        host=env.get("HOST") or DEFAULT_HOST,
        allowed_origins=parse_origins(env.get("ALLOWED_ORIGINS", "")),
        json_limit=_int(env.get("JSON_LIMIT"), DEFAULT_JSON_LIMIT),
        upload_dir=Path(env["UPLOAD_DIR"]) if env.get("UPLOAD_DIR") else DEFAULT_UPLOAD_DIR,
        database_path=Path(env["DATABASE_PATH"]) if env.get("DATABASE_PATH") else DEFAULT_DATABASE_PATH,
        health_route_enabled=_flag(env.get("ENABLE_HEALTH_ROUTE"), True),
        test_cookie_route_enabled=_flag(env.get("ENABLE_TEST_COOKIE_ROUTE"), True),
        log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
