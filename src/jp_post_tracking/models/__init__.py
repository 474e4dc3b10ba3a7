from .env_cfg import EnvCfg
from .status import Tracking, TrackingStatus

__all__ = ["EnvCfg", "Tracking", "TrackingStatus"]
