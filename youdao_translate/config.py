"""Configuration loading and validation for the translation client.

Endpoint and batch settings load from YAML, validated via Pydantic.
Credentials come only from environment variables and have no defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import BaseModel

from youdao_translate.errors import ConfigurationError

APP_ID_ENV = "YOUDAO_APP_ID"
APP_SECRET_ENV = "YOUDAO_APP_SECRET"


class BatchConfig(BaseModel):
    concurrency: int = 4
    output: str = "data/translations.jsonl"


class TranslatorConfig(BaseModel):
    endpoint: str = "https://openapi.youdao.com/api"
    timeout_seconds: float = 10.0
    source_lang: str = "auto"
    target_lang: str = "zh-CHS"
    batch: BatchConfig = BatchConfig()


class Credentials(BaseModel):
    app_id: str
    app_secret: str


def load_config(yaml_path: str) -> TranslatorConfig:
    """Load settings from YAML. A missing file yields the defaults."""
    if not Path(yaml_path).exists():
        return TranslatorConfig()
    with open(yaml_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return TranslatorConfig.model_validate(data)


def load_credentials(env: Mapping[str, str] | None = None) -> Credentials:
    """Read the application id and secret from the environment.

    Raises:
        ConfigurationError: If either variable is unset or empty.
    """
    if env is None:
        env = os.environ

    missing = [name for name in (APP_ID_ENV, APP_SECRET_ENV) if not env.get(name)]
    if missing:
        raise ConfigurationError(
            f"Youdao credentials not found (expected {', '.join(missing)})"
        )

    return Credentials(app_id=env[APP_ID_ENV], app_secret=env[APP_SECRET_ENV])
