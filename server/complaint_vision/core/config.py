"""Application configuration management."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ProviderConfig(BaseModel):
    """Upstream multimodal provider (OpenAI-compatible chat completions)."""
    API_KEY: str = ""
    BASE_URL: str = "https://openrouter.ai/api"
    MODEL_NAME: str = "qwen/qwen-2.5-vl-7b-instruct"

    # Descriptive headers identifying the calling application
    REFERER: str = "https://nagar-rakshak.app"
    TITLE: str = "Nagar Rakshak"

    CONNECT_TIMEOUT: float = 5.0
    RESPONSE_TIMEOUT: float = 60.0  # vision models can take a while on large photos


class PromptsConfig(BaseModel):
    """Prompt template selection."""
    DIR: Optional[str] = None  # None means the bundled prompts directory
    SCENE: str = "complaint_analysis"
    TEMPLATE: str = "default"


def _load_yaml_config() -> dict:
    """Load configuration from server/config/app.yaml if it exists."""
    try:
        # complaint_vision/core/config.py -> server root
        server_root = Path(__file__).resolve().parent.parent.parent
        config_file = server_root / "config" / "app.yaml"

        if config_file.exists():
            with open(config_file, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
            logger.info(f"Loaded config file: {config_file}")
            return config
        logger.debug(f"Config file not found: {config_file}, using defaults")
        return {}
    except Exception as e:
        logger.warning(f"Failed to load YAML config: {e}, using defaults")
        return {}


def _apply_yaml_config(yaml_config: dict):
    """Push server settings from YAML into the environment unless already set.

    Only HOST / PORT / RELOAD / LOG_LEVEL go through the environment; provider
    and prompt settings are parsed explicitly in Settings.__init__.
    """
    server_config = yaml_config.get("server") or {}
    if server_config:
        os.environ.setdefault("HOST", str(server_config.get("host", "0.0.0.0")))
        os.environ.setdefault("PORT", str(server_config.get("port", 8000)))
        os.environ.setdefault("RELOAD", str(server_config.get("reload", False)).lower())

    logging_config = yaml_config.get("logging") or {}
    if logging_config.get("level"):
        os.environ.setdefault("LOG_LEVEL", str(logging_config["level"]))


class Settings(BaseSettings):
    """Main application settings."""
    app_name: str = "Complaint Vision Relay"
    version: str = "0.1.0"

    # Upstream credential, read from OPENROUTER_API_KEY (env or .env)
    openrouter_api_key: str = ""

    provider: ProviderConfig = ProviderConfig()
    prompts: PromptsConfig = PromptsConfig()

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        # YAML values act as environment defaults; real env vars win
        yaml_config = _load_yaml_config()
        if yaml_config:
            _apply_yaml_config(yaml_config)

        super().__init__(**kwargs)

        provider_cfg = (yaml_config or {}).get("provider") or {}
        if "provider" not in kwargs:
            # API key priority: OPENROUTER_API_KEY, then app.yaml provider.api_key
            self.provider = ProviderConfig(
                API_KEY=str(self.openrouter_api_key or provider_cfg.get("api_key") or ""),
                BASE_URL=str(provider_cfg.get("base_url") or ProviderConfig().BASE_URL),
                MODEL_NAME=str(provider_cfg.get("model_name") or ProviderConfig().MODEL_NAME),
                REFERER=str(provider_cfg.get("referer") or ProviderConfig().REFERER),
                TITLE=str(provider_cfg.get("title") or ProviderConfig().TITLE),
                CONNECT_TIMEOUT=float(provider_cfg.get("connect_timeout", 5.0)),
                RESPONSE_TIMEOUT=float(provider_cfg.get("response_timeout", 60.0)),
            )

        prompts_cfg = (yaml_config or {}).get("prompts") or {}
        if prompts_cfg and "prompts" not in kwargs:
            self.prompts = PromptsConfig(
                DIR=str(prompts_cfg.get("dir")) if prompts_cfg.get("dir") is not None else None,
                SCENE=str(prompts_cfg.get("scene", "complaint_analysis")),
                TEMPLATE=str(prompts_cfg.get("template", "default")),
            )

    @property
    def is_configured(self) -> bool:
        """True when the upstream credential is present."""
        return bool(self.provider.API_KEY.strip())


settings = Settings()
