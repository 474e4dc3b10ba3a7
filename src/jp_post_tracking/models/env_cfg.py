from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

DEFAULT_SEARCH_URL = "https://trackings.post.japanpost.jp/services/srv/search"
DEFAULT_TIMEOUT = 15


@dataclass(frozen=True)
class EnvCfg:
    """Settings we need from get_app_env()."""
    JP_POST_SEARCH_URL: str = DEFAULT_SEARCH_URL
    JP_POST_PROXY: Optional[str] = None
    JP_POST_PROXY_PORT: Optional[str] = None
    JP_POST_TIMEOUT: int = DEFAULT_TIMEOUT
