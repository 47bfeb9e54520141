"""Client configuration for the Face++ SDK."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

CN_BASE_URL = "https://api-cn.faceplusplus.com/facepp/v3"
US_BASE_URL = "https://api-us.faceplusplus.com/facepp/v3"


@dataclass(slots=True, frozen=True)
class ClientSettings:
    """Transport settings shared by every request issued from one SDK handle."""

    base_url: str = CN_BASE_URL
    timeout: float = 60.0
    debug: bool = False
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_default_settings() -> ClientSettings:
    """Return cached default settings instance."""

    return ClientSettings()
