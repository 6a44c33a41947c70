from .config import DisplayConfig
from .device import DeviceOpenResult, OLEDDevice, open_display
from .models import ScreenFlags, ScreenId
from .renderer import ScreenRenderer
from .rotation import build_rotation_table
from .service import RotationScheduler

__all__ = [
    "DisplayConfig",
    "DeviceOpenResult",
    "OLEDDevice",
    "open_display",
    "ScreenFlags",
    "ScreenId",
    "ScreenRenderer",
    "build_rotation_table",
    "RotationScheduler",
]
