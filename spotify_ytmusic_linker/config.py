import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_config_dir, user_log_dir

APP_NAME = "spotify-ytmusic-linker"

REQUIRED_VARS = ("SPOTIPY_CLIENT_ID", "SPOTIPY_CLIENT_SECRET")


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    spotify_client_id: str
    spotify_client_secret: str
    search_limit: int = 10
    ytmusic_language: str = "en"
    log_level: str = "INFO"
    log_file: Path = Path("linker.log")


def config_dir() -> Path:
    return Path(user_config_dir(APP_NAME, appauthor=False))


def load_env_files():
    """Load .env from the working directory, then from the user config dir.

    Variables already present in the environment always win.
    """
    load_dotenv()
    user_env = config_dir() / ".env"
    if user_env.exists():
        load_dotenv(user_env)


def _int_var(environ, key, default):
    raw = environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {value}")
    return value


def load_settings(environ=None) -> Settings:
    if environ is None:
        load_env_files()
        environ = os.environ

    missing = [key for key in REQUIRED_VARS if not environ.get(key)]
    if missing:
        raise ConfigError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    log_file = environ.get("LINKER_LOG_FILE")
    return Settings(
        spotify_client_id=environ["SPOTIPY_CLIENT_ID"],
        spotify_client_secret=environ["SPOTIPY_CLIENT_SECRET"],
        search_limit=_int_var(environ, "LINKER_SEARCH_LIMIT", 10),
        ytmusic_language=environ.get("LINKER_YTMUSIC_LANGUAGE") or "en",
        log_level=(environ.get("LINKER_LOG_LEVEL") or "INFO").upper(),
        log_file=(
            Path(log_file)
            if log_file
            else Path(user_log_dir(APP_NAME, appauthor=False)) / "linker.log"
        ),
    )
