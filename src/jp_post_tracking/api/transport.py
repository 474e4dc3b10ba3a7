from __future__ import annotations

from typing import Any, Dict, Optional
import requests


class RequestsTransport:
    """Requests session wrapper.

    Single attempt per call; failures surface to the caller as requests
    exceptions.
    """

    def __init__(self, timeout: float = 15, proxies: Optional[Dict[str, str]] = None) -> None:
        self.session = requests.Session()
        self.timeout = timeout
        if proxies:
            self.session.proxies.update(proxies)

    def get(self, url: str, *, headers: Optional[Dict[str, str]] = None, params: Optional[Dict[str, Any]] = None):
        # connect timeout only; the result page may be slow to render
        return self.session.get(url, headers=headers, params=params, timeout=(self.timeout, None))
