"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

# Cross-boundary channel contract
CHANNEL_EVENTS = "universal_experience_sdk/events"
METHOD_ON_KYC_EVENT = "onKycEvent"

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://localhost:5174")


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""

    api_host: str = "localhost"
    api_port: int = 8000
    log_level: str = "INFO"
    log_file: str = str(DEFAULT_LOG_PATH)
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    sim_enabled: bool = True

    @property
    def api_url(self) -> str:
        return f"http://{self.api_host}:{self.api_port}"


def _env_flag(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from environment variables (or an explicit mapping)."""
    env = os.environ if environ is None else environ

    origins = env.get("CORS_ORIGINS")
    cors_origins = (
        tuple(o.strip() for o in origins.split(",") if o.strip())
        if origins
        else DEFAULT_CORS_ORIGINS
    )

    log_file = env.get("LOG_FILE")
    if log_file:
        candidate = Path(log_file)
        log_file = str(candidate if candidate.is_absolute() else PROJECT_ROOT / candidate)
    else:
        log_file = str(DEFAULT_LOG_PATH)

    return Settings(
        api_host=env.get("API_HOST", "localhost"),
        api_port=int(env.get("API_PORT", "8000")),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        log_file=log_file,
        cors_origins=cors_origins,
        sim_enabled=_env_flag(env.get("SIM_ENABLED"), True),
    )
