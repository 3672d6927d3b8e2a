"""
Pydantic configuration models, loaded from YAML and overridden by environment.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "NAVROUTER_"


class APIConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    base_url: str = "https://api.kickstarter.com"
    client_id: Optional[str] = None
    timeout: int = Field(default=30, gt=0)


class RoutingConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Empty list routes navigations of any host.
    allowed_hosts: List[str] = Field(default_factory=list)


class TelemetryConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Events are teed to every listed backend; "none" or an empty list disables telemetry.
    backend: List[Literal["logging", "memory"]] = Field(default_factory=lambda: ["logging"])

    @field_validator("backend", mode="before")
    @classmethod
    def _split_backends(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            v = [b.strip() for b in v.split(",") if b.strip()]
        if isinstance(v, list):
            v = [b for b in v if b != "none"]
            return list(dict.fromkeys(v))
        return v


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    api: APIConfig = Field(default_factory=APIConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AppConfig":
        file_path = Path(path).expanduser()
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(data)

    def with_env(self, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Return a copy with `NAVROUTER_*` environment overrides applied."""
        env = os.environ if env is None else env
        data: Dict[str, Any] = self.model_dump()

        base_url = env.get(f"{ENV_PREFIX}API_BASE_URL")
        if base_url:
            data["api"]["base_url"] = base_url
        client_id = env.get(f"{ENV_PREFIX}CLIENT_ID")
        if client_id:
            data["api"]["client_id"] = client_id
        timeout = env.get(f"{ENV_PREFIX}API_TIMEOUT")
        if timeout:
            data["api"]["timeout"] = int(timeout)
        hosts = env.get(f"{ENV_PREFIX}ALLOWED_HOSTS")
        if hosts is not None:
            data["routing"]["allowed_hosts"] = [h.strip() for h in hosts.split(",") if h.strip()]
        backend = env.get(f"{ENV_PREFIX}TELEMETRY_BACKEND")
        if backend:
            data["telemetry"]["backend"] = backend
        level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            data["logging"]["level"] = level

        return AppConfig.model_validate(data)


def load_config(path: Optional[str | Path] = None, env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Load YAML config (defaults when no path), then apply environment overrides."""
    config = AppConfig.from_yaml(path) if path else AppConfig()
    return config.with_env(env)
