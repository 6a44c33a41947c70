import pytest

from display.config import DisplayConfig
from display.device import OLEDDevice
from sysinfo.models import CpuMemoryInfo, DiskInfo
from sysinfo.providers import IpAddressCache, SystemProviders

from tests.fakes import FakeLuma


@pytest.fixture
def fake_luma():
    return FakeLuma()


@pytest.fixture
def oled(fake_luma):
    return OLEDDevice(DisplayConfig(), fake_luma)


@pytest.fixture
def fake_providers():
    return SystemProviders(
        temperature=lambda: 47.25,
        cpu_memory=lambda: CpuMemoryInfo(cpu_percent=12.0, ram_used_mb=345.0, ram_total_mb=3906.0),
        disk=lambda: DiskInfo(used_gb=5.12, total_gb=29.0, percent=18.0),
        hostname=lambda: "raspberrypi",
        ip=IpAddressCache(lambda: "192.168.1.20"),
    )
