import os
from pathlib import Path
from urllib.parse import unquote, urlparse

from django.core.exceptions import ImproperlyConfigured
from dotenv import load_dotenv

SQLITE_ENGINE = "django.db.backends.sqlite3"
SQLITE_LOCK_TIMEOUT_SECONDS = 20


def load_environment(base_dir):
    load_dotenv(base_dir / ".env")


def env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_list(name, default=None):
    value = os.getenv(name)
    if value is None:
        return default or []
    return [item.strip() for item in value.split(",") if item.strip()]


def env_first(*names, default=None):
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


def normalize_bind_address(raw_address):
    """Turn ``:8080``, ``8080`` or ``host:port`` into a ``host:port`` string."""
    value = (raw_address or "").strip()
    if not value:
        raise ImproperlyConfigured("bind address cannot be empty")

    host, sep, port = value.rpartition(":")
    if not sep:
        host, port = "", value
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ImproperlyConfigured(f"bind address has an invalid port: {raw_address}")

    return f"{host or '0.0.0.0'}:{port}"


def _sqlite_name(base_dir, raw_name):
    if raw_name == ":memory:":
        return raw_name
    path = Path(raw_name)
    if path.is_absolute():
        return str(path)
    return str(base_dir / path)


def _sqlite_database(base_dir, raw_name):
    # IMMEDIATE takes the write lock at BEGIN, so concurrent transfers queue
    # behind each other instead of failing with "database is locked".
    return {
        "ENGINE": SQLITE_ENGINE,
        "NAME": _sqlite_name(base_dir, raw_name),
        "OPTIONS": {
            "transaction_mode": "IMMEDIATE",
            "timeout": SQLITE_LOCK_TIMEOUT_SECONDS,
        },
        "TEST": {"NAME": str(base_dir / "test_db.sqlite3")},
    }


def _database_from_url(base_dir, database_url):
    parsed = urlparse(database_url)
    scheme = parsed.scheme.split("+", 1)[0]

    if scheme in {"postgres", "postgresql"}:
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": unquote(parsed.path.lstrip("/")),
            "USER": unquote(parsed.username or ""),
            "PASSWORD": unquote(parsed.password or ""),
            "HOST": parsed.hostname or "",
            "PORT": str(parsed.port or ""),
        }

    if scheme == "sqlite":
        if parsed.path in {"", "/"}:
            name = str(base_dir / "db.sqlite3")
        else:
            name = unquote(parsed.path)
            if parsed.netloc:
                name = f"/{parsed.netloc}{name}"
        return _sqlite_database(base_dir, name)

    raise ImproperlyConfigured(
        "DATABASE_URL must use sqlite://, postgres://, or postgresql://"
    )


def build_databases(base_dir):
    database_url = env_first("DATABASE_URL", "DSN")
    if database_url:
        return database_url, {"default": _database_from_url(base_dir, database_url)}

    db_engine = os.getenv("DB_ENGINE", SQLITE_ENGINE)
    raw_db_name = os.getenv("DB_NAME", "db.sqlite3")
    if db_engine == SQLITE_ENGINE:
        return database_url, {"default": _sqlite_database(base_dir, raw_db_name)}

    return database_url, {
        "default": {
            "ENGINE": db_engine,
            "NAME": raw_db_name,
            "USER": os.getenv("DB_USER", ""),
            "PASSWORD": os.getenv("DB_PASSWORD", ""),
            "HOST": os.getenv("DB_HOST", ""),
            "PORT": os.getenv("DB_PORT", ""),
        }
    }


def redact_database_url(database_url):
    if not database_url:
        return database_url
    parsed = urlparse(database_url)
    if not parsed.password:
        return database_url
    netloc = parsed.netloc.replace(f":{parsed.password}@", ":***@", 1)
    return parsed._replace(netloc=netloc).geturl()
