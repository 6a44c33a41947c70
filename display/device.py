from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from PIL import Image

from luma.core.error import Error as LumaError
from luma.core.interface.serial import i2c
from luma.oled.device import ssd1306

from .config import DisplayConfig


def _luma_ssd1306(cfg: DisplayConfig) -> Any:
    serial = i2c(port=cfg.i2c_bus, address=cfg.i2c_address)
    return ssd1306(serial, width=cfg.width, height=cfg.height, rotate=cfg.rotate)


class OLEDDevice:
    """
    Opened status panel. Wraps the luma device and keeps every frame at the
    panel's native size and 1-bit mode.
    """

    def __init__(self, cfg: DisplayConfig, dev: Any):
        self.cfg = cfg
        self._luma = dev

        if self.size != (cfg.width, cfg.height):
            w, h = self.size
            print(f"[DISPLAY] Warning: panel is {w}x{h}, configured for {cfg.width}x{cfg.height}")

    @property
    def size(self) -> Tuple[int, int]:
        return int(self._luma.width), int(self._luma.height)

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def blank(self) -> Image.Image:
        return Image.new("1", self.size, 0)

    def clear(self) -> None:
        self._luma.display(self.blank())

    def show(self, img: Image.Image) -> None:
        frame = img if img.mode == "1" else img.convert("1")
        if frame.size != self.size:
            # renderer and panel disagree: crop/pad at the top-left corner
            canvas = self.blank()
            canvas.paste(frame, (0, 0))
            frame = canvas
        self._luma.display(frame)


@dataclass(frozen=True)
class DeviceOpenResult:
    device: Optional[OLEDDevice] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.device is not None and self.error is None


def open_display(
    cfg: DisplayConfig,
    factory: Optional[Callable[[DisplayConfig], Any]] = None,
) -> DeviceOpenResult:
    """
    Open the one display session. Never retried: a missing panel, busy bus
    or denied permission comes back as a failed result for the caller.
    """
    factory = factory or _luma_ssd1306
    try:
        dev = factory(cfg)
    except (LumaError, OSError) as e:
        return DeviceOpenResult(error=f"{type(e).__name__}: {e}")
    return DeviceOpenResult(device=OLEDDevice(cfg, dev))
