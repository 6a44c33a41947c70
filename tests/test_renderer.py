import pytest

from display.models import ScreenId
from display.renderer import ScreenRenderer, to_unit
from sysinfo.models import CpuMemoryInfo, DiskInfo
from sysinfo.providers import IpAddressCache, SystemProviders


@pytest.mark.parametrize("screen", list(ScreenId))
def test_every_screen_renders_full_frame(fake_providers, screen):
    img = ScreenRenderer(fake_providers).render(screen)

    assert img.size == (128, 32)
    assert img.mode == "1"
    assert img.getbbox() is not None


def test_lines(fake_providers):
    r = ScreenRenderer(fake_providers)

    assert r._ip_line() == "IP:192.168.1.20"
    assert r._temperature_line() == "CPU TEMP: 47.2C"
    assert r._cpu_memory_line() == "CPU:12% RAM:345/3906MB"
    assert r._sd_memory_line() == "SD: 5.1/29GB 18%"
    assert r._hostname_line() == "HOST: raspberrypi"


def test_fahrenheit(fake_providers):
    fake_providers.temperature = lambda: 100.0
    r = ScreenRenderer(fake_providers, temperature_unit="f")
    assert r._temperature_line() == "CPU TEMP: 212.0F"


def test_unknown_values_render_placeholders():
    providers = SystemProviders(
        temperature=lambda: None,
        cpu_memory=lambda: CpuMemoryInfo(),
        disk=lambda: DiskInfo(),
        hostname=lambda: "pi",
        ip=IpAddressCache(lambda: None),
    )
    r = ScreenRenderer(providers)

    assert r._ip_line() == "IP:No IP"
    assert r._temperature_line() == "CPU TEMP: --C"
    assert r._cpu_memory_line() == "CPU:--% RAM:--/--MB"
    assert r._sd_memory_line() == "SD: --/--GB --%"


def test_ip_looked_up_once(fake_providers):
    calls = []
    fake_providers.ip = IpAddressCache(lambda: calls.append(1) or "10.0.0.2")
    r = ScreenRenderer(fake_providers)

    for screen in ScreenId:
        r(screen)

    assert calls == [1]


def test_to_unit():
    assert to_unit(100.0, "F") == pytest.approx(212.0)
    assert to_unit(21.5, "C") == 21.5
    assert to_unit(None, "F") is None
