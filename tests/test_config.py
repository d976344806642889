from pathlib import Path

from config import (
    DEFAULT_DATABASE_PATH,
    DEFAULT_JSON_LIMIT,
    DEFAULT_UPLOAD_DIR,
    load_settings,
    parse_origins,
)


def test_defaults_when_environment_empty():
    settings = load_settings({})
    assert settings.env == "development"
    assert settings.port == 5000
    assert settings.host == "0.0.0.0"
    assert settings.allowed_origins == ("http://localhost:3000",)
    assert settings.json_limit == DEFAULT_JSON_LIMIT == 10 * 1024 * 1024
    assert settings.upload_dir == DEFAULT_UPLOAD_DIR
    assert settings.database_path == DEFAULT_DATABASE_PATH
    assert settings.health_route_enabled is True
    assert settings.test_cookie_route_enabled is True
    assert settings.is_production is False


def test_uploads_dir_sits_next_to_bootstrap():
    assert DEFAULT_UPLOAD_DIR == Path(__file__).resolve().parents[1] / "uploads"


def test_port_from_environment():
    assert load_settings({"PORT": "8080"}).port == 8080


def test_bad_port_falls_back_to_default():
    assert load_settings({"PORT": "http"}).port == 5000
    assert load_settings({"PORT": "0"}).port == 5000
    assert load_settings({"PORT": ""}).port == 5000


def test_node_env_selects_production():
    settings = load_settings({"NODE_ENV": "production"})
    assert settings.env == "production"
    assert settings.is_production


def test_only_node_env_selects_environment():
    settings = load_settings({"NODE_ENV": "production", "APP_ENV": "staging"})
    assert settings.env == "production"
    assert settings.is_production


def test_origins_are_split_and_trimmed():
    settings = load_settings({"ALLOWED_ORIGINS": " https://a.example , https://b.example:8443"})
    assert settings.allowed_origins == ("https://a.example", "https://b.example:8443")


def test_origins_never_empty():
    assert parse_origins("") == ("http://localhost:3000",)
    assert parse_origins(" , ,") == ("http://localhost:3000",)
    assert parse_origins("https://a.example,,") == ("https://a.example",)
    assert all("," not in o for o in parse_origins("a, b,c"))


def test_route_flags():
    settings = load_settings({"ENABLE_HEALTH_ROUTE": "false", "ENABLE_TEST_COOKIE_ROUTE": "Off"})
    assert settings.health_route_enabled is False
    assert settings.test_cookie_route_enabled is False
    # unrecognised values keep the default
    assert load_settings({"ENABLE_HEALTH_ROUTE": "maybe"}).health_route_enabled is True


def test_paths_and_limits_override():
    settings = load_settings(
        {"UPLOAD_DIR": "/srv/uploads", "DATABASE_PATH": "/srv/app.db", "JSON_LIMIT": "2048", "LOG_LEVEL": "debug"}
    )
    assert settings.upload_dir == Path("/srv/uploads")
    assert settings.database_path == Path("/srv/app.db")
    assert settings.json_limit == 2048
    assert settings.log_level == "DEBUG"
