"""
Settings for the task list server and its clients, read from the environment.
"""

import os
from dataclasses import dataclass


def _env(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _env_int(name, default):
    try:
        return int(_env(name, default))
    except ValueError:
        return default


def _env_float(name, default):
    try:
        return float(_env(name, default))
    except ValueError:
        return default


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    tasks_file: str = "todos.json"
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"
    api_url: str = ""
    client_timeout: float = 10.0

    def __post_init__(self):
        if not self.api_url:
            self.api_url = f"http://localhost:{self.port}/tasks"


def load_settings() -> Settings:
    """Read the environment into a Settings. Called again by tests and callers to pick up overrides."""
    defaults = Settings()
    port = _env_int("TASKS_PORT", defaults.port)
    return Settings(
        tasks_file=_env("TASKS_FILE", defaults.tasks_file),
        host=_env("TASKS_HOST", defaults.host),
        port=port,
        debug=_env_bool("TASKS_DEBUG", defaults.debug),
        log_level=_env("TASKS_LOG_LEVEL", defaults.log_level).upper(),
        api_url=_env("TASKS_API_URL", f"http://localhost:{port}/tasks"),
        client_timeout=_env_float("TASKS_CLIENT_TIMEOUT", defaults.client_timeout),
    )


_settings = load_settings()

TASKS_FILE = _settings.tasks_file
HOST = _settings.host
PORT = _settings.port
DEBUG = _settings.debug
LOG_LEVEL = _settings.log_level

# Used by task_client.py and mcp_server.py
API_URL = _settings.api_url
CLIENT_TIMEOUT = _settings.client_timeout
