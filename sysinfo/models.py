from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class CpuMemoryInfo:
    cpu_percent: Optional[float] = None
    ram_used_mb: Optional[float] = None
    ram_total_mb: Optional[float] = None


@dataclass
class DiskInfo:
    used_gb: Optional[float] = None
    total_gb: Optional[float] = None
    percent: Optional[float] = None
