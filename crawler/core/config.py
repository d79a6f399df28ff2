import os
from typing import Optional


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


class Settings:
    # Cache
    CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "300"))

    # Outbound requests. No timeout unless one is configured.
    REQUEST_TIMEOUT: Optional[float] = _optional_float("REQUEST_TIMEOUT")
    FOLLOW_REDIRECTS: bool = os.getenv("FOLLOW_REDIRECTS", "1").lower() in ("1", "true", "yes")
    ACCEPT: str = os.getenv(
        "ACCEPT",
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8",
    )
    ACCEPT_LANGUAGE: str = os.getenv("ACCEPT_LANGUAGE", "ko-KR,ko;q=0.9,en-US;q=0.8,en;q=0.7")

settings = Settings()
