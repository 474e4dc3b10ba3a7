from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union
from urllib.parse import urlencode
import logging
import random

import requests

from jp_post_tracking.errors import TransportError
from jp_post_tracking.io.codes import remove_non_numeric_chars
from jp_post_tracking.models import EnvCfg
from jp_post_tracking.models.env_cfg import DEFAULT_SEARCH_URL, DEFAULT_TIMEOUT

from .transport import RequestsTransport

# The search form accepts up to ten numbers; we always send one.
_REQUEST_SLOTS = 10
# Bounds of the search button image, used as click coordinates.
_SEARCH_X_MAX = 160
_SEARCH_Y_MAX = 40


@dataclass
class JapanPostConfig:
    search_url: str = DEFAULT_SEARCH_URL
    proxy: Optional[str] = None
    port: Optional[Union[int, str]] = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, env_cfg: EnvCfg) -> "JapanPostConfig":
        return cls(
            search_url=env_cfg.JP_POST_SEARCH_URL,
            proxy=env_cfg.JP_POST_PROXY,
            port=env_cfg.JP_POST_PROXY_PORT,
            timeout=env_cfg.JP_POST_TIMEOUT,
        )


class JapanPostClient:
    """Fetches the Japan Post tracking result page for one number.

    Responsibilities:
    - build the query string the public search form would submit, including
      randomized click coordinates of the search button
    - route through a proxy when both host and port are configured
    - return the decoded HTML body, or raise TransportError on a network
      failure or an HTTP status outside 200..399

    No retries are attempted.
    """

    def __init__(
        self,
        cfg: Optional[JapanPostConfig] = None,
        transport: Optional[RequestsTransport] = None,
        *,
        rand: Optional[Callable[[int, int], int]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.cfg = cfg or JapanPostConfig()
        self.transport = transport or RequestsTransport(
            timeout=self.cfg.timeout, proxies=self.proxies())
        self._rand = rand or random.randint
        self.logger: logging.Logger = logger or logging.getLogger(
            "jp_post_tracking.api.japanpost"
        )

    def is_available_proxy(self) -> bool:
        return bool(self.cfg.proxy) and self.cfg.port not in (None, "")

    def proxies(self) -> Optional[Dict[str, str]]:
        if not self.is_available_proxy():
            return None
        proxy_url = f"http://{self.cfg.proxy}:{self.cfg.port}"
        return {"http": proxy_url, "https": proxy_url}

    def build_params(self, tracking_code: str) -> Dict[str, Any]:
        params: Dict[str, Any] = {"requestNo1": tracking_code}
        for i in range(2, _REQUEST_SLOTS + 1):
            params[f"requestNo{i}"] = ""
        params["search.x"] = self._rand(0, _SEARCH_X_MAX)
        params["search.y"] = self._rand(0, _SEARCH_Y_MAX)
        params["startingUrlPatten"] = ""
        params["locale"] = "ja"
        return params

    def build_request_url(self, tracking_code: str) -> str:
        return f"{self.cfg.search_url}?{urlencode(self.build_params(tracking_code))}"

    def fetch(self, tracking_code: str) -> str:
        code = remove_non_numeric_chars(tracking_code)
        url = self.build_request_url(code)
        self.logger.debug("Japan Post GET %s (proxy=%s)",
                          url, self.is_available_proxy())

        try:
            resp = self.transport.get(url)
        except requests.RequestException as ex:
            raise TransportError(f"Request error: {ex}") from ex

        status = resp.status_code
        if status < 200 or status >= 400:
            raise TransportError(
                f"Request failed. HTTP response code [{status}].")

        # the result page is UTF-8; requests falls back to ISO-8859-1 without a charset header
        if not resp.encoding or resp.encoding.lower() == "iso-8859-1":
            resp.encoding = resp.apparent_encoding or "utf-8"
        self.logger.debug("Japan Post response status=%s length=%d",
                          status, len(resp.text))
        return resp.text
