from __future__ import annotations

import socket
from dataclasses import dataclass, field
from typing import Callable, Optional

import psutil

from .models import CpuMemoryInfo, DiskInfo

THERMAL_ZONE_PATH = "/sys/class/thermal/thermal_zone0/temp"
SENSOR_KEYS = ("cpu_thermal", "cpu-thermal", "coretemp")

_MB = 1024 ** 2
_GB = 1024 ** 3


def read_cpu_temperature(path: str = THERMAL_ZONE_PATH) -> Optional[float]:
    """CPU temperature in °C, None if no sensor is readable."""
    try:
        with open(path) as f:
            return int(f.read().strip()) / 1000.0
    except (OSError, ValueError):
        pass

    sensors = getattr(psutil, "sensors_temperatures", None)
    if sensors is None:
        return None
    temps = sensors() or {}
    for key in SENSOR_KEYS:
        if temps.get(key):
            return float(temps[key][0].current)
    return None


def read_cpu_memory() -> CpuMemoryInfo:
    vm = psutil.virtual_memory()
    return CpuMemoryInfo(
        cpu_percent=float(psutil.cpu_percent(interval=None)),
        ram_used_mb=(vm.total - vm.available) / _MB,
        ram_total_mb=vm.total / _MB,
    )


def read_disk_usage(path: str = "/") -> DiskInfo:
    u = psutil.disk_usage(path)
    return DiskInfo(used_gb=u.used / _GB, total_gb=u.total / _GB, percent=float(u.percent))


def read_hostname() -> str:
    return socket.gethostname()


def _ip_from_interfaces() -> Optional[str]:
    stats = psutil.net_if_stats()
    for iface, addrs in psutil.net_if_addrs().items():
        if iface == "lo" or (iface in stats and not stats[iface].isup):
            continue
        for addr in addrs:
            if addr.family == socket.AF_INET and not addr.address.startswith("127."):
                return addr.address
    return None


def _ip_from_route() -> Optional[str]:
    # no packet is sent: connect() on UDP only picks the outgoing interface
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        return s.getsockname()[0]
    except OSError:
        return None
    finally:
        s.close()


def discover_ip_address() -> Optional[str]:
    return _ip_from_interfaces() or _ip_from_route()


class IpAddressCache:
    """
    IP is looked up once at startup and reused by every screen afterwards.
    """

    def __init__(self, lookup: Callable[[], Optional[str]] = discover_ip_address):
        self._lookup = lookup
        self._ip: Optional[str] = None
        self._done = False

    def discover(self) -> Optional[str]:
        self._ip = self._lookup()
        self._done = True
        return self._ip

    def get(self) -> Optional[str]:
        if not self._done:
            return self.discover()
        return self._ip


@dataclass
class SystemProviders:
    temperature: Callable[[], Optional[float]] = read_cpu_temperature
    cpu_memory: Callable[[], CpuMemoryInfo] = read_cpu_memory
    disk: Callable[[], DiskInfo] = read_disk_usage
    hostname: Callable[[], str] = read_hostname
    ip: IpAddressCache = field(default_factory=IpAddressCache)
