from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScreenId(Enum):
    # declaration order is the rotation priority
    TEMPERATURE = "temperature"
    CPU_MEMORY = "cpu_memory"
    SD_MEMORY = "sd_memory"
    HOSTNAME = "hostname"


@dataclass(frozen=True)
class ScreenFlags:
    show_temperature: bool = True
    show_cpu_memory: bool = True
    show_sd_memory: bool = True
    show_hostname: bool = True

    # "C" or "F"
    temperature_unit: str = "C"

    def enabled(self, screen: ScreenId) -> bool:
        return {
            ScreenId.TEMPERATURE: self.show_temperature,
            ScreenId.CPU_MEMORY: self.show_cpu_memory,
            ScreenId.SD_MEMORY: self.show_sd_memory,
            ScreenId.HOSTNAME: self.show_hostname,
        }[screen]
