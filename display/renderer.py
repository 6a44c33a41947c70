from __future__ import annotations

from typing import Callable, Dict, Optional

from PIL import Image, ImageDraw, ImageFont

from sysinfo.providers import SystemProviders

from .models import ScreenId

UNKNOWN = "--"


def _font() -> ImageFont.ImageFont:
    return ImageFont.load_default()


def _fmt(value: Optional[float], spec: str) -> str:
    if value is None:
        return UNKNOWN
    return format(value, spec)


def to_unit(celsius: Optional[float], unit: str) -> Optional[float]:
    if celsius is None:
        return None
    if unit.upper() == "F":
        return celsius * 9.0 / 5.0 + 32.0
    return celsius


class ScreenRenderer:
    """
    Draws one status screen as a 1-bit image.
    Top line: cached IP address. Second line: the screen payload.
    """

    def __init__(
        self,
        providers: SystemProviders,
        width: int = 128,
        height: int = 32,
        temperature_unit: str = "C",
    ):
        self.providers = providers
        self.width = width
        self.height = height
        self.temperature_unit = temperature_unit.upper()

        self._lines: Dict[ScreenId, Callable[[], str]] = {
            ScreenId.TEMPERATURE: self._temperature_line,
            ScreenId.CPU_MEMORY: self._cpu_memory_line,
            ScreenId.SD_MEMORY: self._sd_memory_line,
            ScreenId.HOSTNAME: self._hostname_line,
        }

    def __call__(self, screen: ScreenId) -> Image.Image:
        return self.render(screen)

    def render(self, screen: ScreenId) -> Image.Image:
        return self._draw(self._ip_line(), self._lines[screen]())

    def _draw(self, top: str, bottom: str) -> Image.Image:
        img = Image.new("1", (self.width, self.height), 0)
        draw = ImageDraw.Draw(img)
        font = _font()

        half = self.height // 2
        draw.text((0, 0), top, font=font, fill=1)
        draw.line([(0, half - 2), (self.width - 1, half - 2)], fill=1)
        draw.text((0, half), bottom, font=font, fill=1)
        return img

    # --- per-screen lines

    def _ip_line(self) -> str:
        ip = self.providers.ip.get()
        return f"IP:{ip or 'No IP'}"

    def _temperature_line(self) -> str:
        temp = to_unit(self.providers.temperature(), self.temperature_unit)
        return f"CPU TEMP: {_fmt(temp, '.1f')}{self.temperature_unit}"

    def _cpu_memory_line(self) -> str:
        info = self.providers.cpu_memory()
        return (
            f"CPU:{_fmt(info.cpu_percent, '.0f')}% "
            f"RAM:{_fmt(info.ram_used_mb, '.0f')}/{_fmt(info.ram_total_mb, '.0f')}MB"
        )

    def _sd_memory_line(self) -> str:
        info = self.providers.disk()
        return (
            f"SD: {_fmt(info.used_gb, '.1f')}/{_fmt(info.total_gb, '.0f')}GB "
            f"{_fmt(info.percent, '.0f')}%"
        )

    def _hostname_line(self) -> str:
        return f"HOST: {self.providers.hostname()}"
