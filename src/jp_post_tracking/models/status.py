from __future__ import annotations
from dataclasses import dataclass, asdict, fields


@dataclass(frozen=True)
class TrackingStatus:
    """One event of the carrier's history table (two physical rows)."""
    datetime: str = ""      # 状態発生日
    status: str = ""        # 配送履歴
    detail: str = ""        # 詳細
    office: str = ""        # 取扱局
    postcode: str = ""      # 郵便番号
    prefecture: str = ""    # 県名等

    @classmethod
    def empty(cls) -> "TrackingStatus":
        """Sentinel for a slot that was never observed."""
        return cls()

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) == "" for f in fields(self))

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class Tracking:
    tracking_code: str                      # お問い合わせ番号 (digits only)
    statuses: tuple[TrackingStatus, ...]    # oldest first, as rendered

    def __post_init__(self) -> None:
        # accept any iterable but store an immutable tuple
        object.__setattr__(self, "statuses", tuple(self.statuses))
