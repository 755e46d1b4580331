"""
Configuration management for the Error Query Builder.
Loads from: 1) environment / .env, 2) defaults.

Settings are resolved once into an explicit `Settings` value that is handed
to the app factory and the CLI.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

from dotenv import load_dotenv

load_dotenv()

# Base paths
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"

DEFAULT_DATABASE_URL = f"sqlite+aiosqlite:///{DATA_DIR / 'query_history.db'}"
MAX_LLM_TEMPERATURE = 0.3
LLM_PROVIDERS = ("auto", "openai", "anthropic", "pattern")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get(key: str, default: Any, cast: type = str) -> Any:
    raw = os.getenv(key, default)
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        if default is None:
            return None
        raw = default
    if cast == bool:
        return str(raw).lower() in ("true", "1", "yes")
    if cast == list:
        return [item.strip() for item in str(raw).split(",") if item.strip()]
    return cast(raw)


@dataclass(frozen=True)
class Settings:
    """Resolved runtime configuration"""

    # API keys
    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # Models
    llm_provider: str = "auto"
    primary_llm: str = "gpt-4o-mini"
    anthropic_model: str = "claude-3-5-haiku-20241022"
    ai_gateway_account_id: str = ""
    ai_gateway_id: str = ""
    llm_temperature: float = 0.3
    llm_max_tokens: int = 500
    request_timeout: int = 30

    # Storage
    database_url: str = DEFAULT_DATABASE_URL
    history_default_limit: int = 10

    # Runtime
    environment: str = "development"
    log_level: str = "INFO"
    log_file: str = ""
    cors_origins: List[str] = field(default_factory=list)
    enable_metrics: bool = True


def load_settings() -> Settings:
    """Resolve settings from the environment (env > defaults)."""
    provider = _get("LLM_PROVIDER", "auto", str).lower()
    if provider not in LLM_PROVIDERS:
        raise ValueError(f"LLM_PROVIDER must be one of {', '.join(LLM_PROVIDERS)}, got {provider!r}")

    return Settings(
        openai_api_key=_get("OPENAI_API_KEY", "", str),
        anthropic_api_key=_get("ANTHROPIC_API_KEY", "", str),
        llm_provider=provider,
        primary_llm=_get("PRIMARY_LLM", "gpt-4o-mini", str),
        anthropic_model=_get("ANTHROPIC_MODEL", "claude-3-5-haiku-20241022", str),
        ai_gateway_account_id=_get("AI_GATEWAY_ACCOUNT_ID", "", str),
        ai_gateway_id=_get("AI_GATEWAY_ID", "", str),
        llm_temperature=min(_get("LLM_TEMPERATURE", "0.3", float), MAX_LLM_TEMPERATURE),
        llm_max_tokens=_get("LLM_MAX_TOKENS", "500", int),
        request_timeout=_get("REQUEST_TIMEOUT", "30", int),
        database_url=_get("DATABASE_URL", DEFAULT_DATABASE_URL, str),
        history_default_limit=_get("HISTORY_DEFAULT_LIMIT", "10", int),
        environment=_get("ENVIRONMENT", "development", str),
        log_level=_get("LOG_LEVEL", "INFO", str).upper(),
        log_file=_get("LOG_FILE", "", str),
        cors_origins=_get("CORS_ORIGINS", "", list),
        enable_metrics=_get("ENABLE_METRICS", "true", bool),
    )


def setup_logging(settings: Settings) -> None:
    """Configure root logging once for the API or the CLI."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def ensure_sqlite_dir(database_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    prefix = "sqlite+aiosqlite:///"
    if database_url.startswith(prefix) and ":memory:" not in database_url:
        Path(database_url[len(prefix):]).parent.mkdir(parents=True, exist_ok=True)


def get_config_summary(settings: Settings) -> str:
    """Returns a formatted summary of current configuration (no secrets)."""
    return f"""
Configuration Summary:
=====================
LLM Provider: {settings.llm_provider}
OpenAI Model: {settings.primary_llm} (key set: {bool(settings.openai_api_key)})
Anthropic Model: {settings.anthropic_model} (key set: {bool(settings.anthropic_api_key)})
AI Gateway: {settings.ai_gateway_id or 'disabled'}
Temperature: {settings.llm_temperature}

Database: {settings.database_url.split('@')[-1]}
Environment: {settings.environment}
Log Level: {settings.log_level}
"""


if __name__ == "__main__":
    print(get_config_summary(load_settings()))
