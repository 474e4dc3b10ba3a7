# src/jp_post_tracking/api/client.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from jp_post_tracking.errors import TransportError
from jp_post_tracking.io.codes import remove_non_numeric_chars


class TrackingFetcher(Protocol):
    def fetch(self, tracking_code: str) -> str:
        ...


@dataclass
class ReplayClient:
    """Replay client serving result pages saved as ``<tracking code>.html``.

    The directory is checked on construction; a code without a saved page
    fails the same way a network error would, with TransportError.
    """

    replay_dir: Path

    def __post_init__(self) -> None:
        self.replay_dir = Path(self.replay_dir)
        if not self.replay_dir.exists():
            raise ValueError(f"Replay directory does not exist: {self.replay_dir}")
        if not self.replay_dir.is_dir():
            raise ValueError(
                f"ReplayClient requires a directory of <code>.html pages: {self.replay_dir}")

    def path_for(self, tracking_code: str) -> Path:
        return self.replay_dir / f"{remove_non_numeric_chars(tracking_code)}.html"

    def fetch(self, tracking_code: str) -> str:
        path = self.path_for(tracking_code)
        if not path.is_file():
            raise TransportError(f"No replay page for {tracking_code}: {path}")
        return path.read_text(encoding="utf-8")
