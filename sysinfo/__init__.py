from .models import CpuMemoryInfo, DiskInfo
from .providers import (
    IpAddressCache,
    SystemProviders,
    discover_ip_address,
    read_cpu_memory,
    read_cpu_temperature,
    read_disk_usage,
    read_hostname,
)

__all__ = [
    "CpuMemoryInfo",
    "DiskInfo",
    "IpAddressCache",
    "SystemProviders",
    "discover_ip_address",
    "read_cpu_memory",
    "read_cpu_temperature",
    "read_disk_usage",
    "read_hostname",
]
