from __future__ import annotations

import os
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

API_KEY_ENV_VAR = "MOMENTO_API_KEY"
DEFAULT_TTL_SECONDS = 600


def get_env_int(
    env_name: str,
    default_value: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    raw_value = os.getenv(env_name)
    if raw_value is None:
        value = default_value
    else:
        try:
            value = int(raw_value)
        except ValueError as exc:
            raise ValueError(
                f"{env_name} must be an integer, got {raw_value!r}"
            ) from exc

    if min_value is not None and value < min_value:
        raise ValueError(f"{env_name} must be >= {min_value}, got {value}")
    if max_value is not None and value > max_value:
        raise ValueError(f"{env_name} must be <= {max_value}, got {value}")
    return value


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    cache_name: str = Field(min_length=1)
    api_key_env_var: str = API_KEY_ENV_VAR
    default_ttl_seconds: int = Field(ge=1)
    configuration_profile: Literal["laptop", "in_region", "low_latency"]
    backend: Literal["momento", "memory"]
    log_level: str
    log_format: Literal["text", "json"]


def load_settings() -> Settings:
    return Settings(
        cache_name=os.getenv("MOMENTO_DEMO_CACHE_NAME", "sample-cache"),
        default_ttl_seconds=get_env_int(
            "MOMENTO_DEMO_DEFAULT_TTL_SECONDS", DEFAULT_TTL_SECONDS, min_value=1
        ),
        configuration_profile=os.getenv("MOMENTO_DEMO_PROFILE", "laptop").lower(),
        backend=os.getenv("MOMENTO_DEMO_BACKEND", "momento").lower(),
        log_level=os.getenv("MOMENTO_DEMO_LOG_LEVEL", "INFO").upper(),
        log_format=os.getenv("MOMENTO_DEMO_LOG_FORMAT", "text").lower(),
    )
