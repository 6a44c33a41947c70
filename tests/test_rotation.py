from itertools import product

import pytest

from display.models import ScreenFlags, ScreenId
from display.rotation import build_rotation_table


@pytest.mark.parametrize("bits", list(product([False, True], repeat=4)))
def test_table_is_enabled_screens_in_priority_order(bits):
    flags = ScreenFlags(*bits)
    table = build_rotation_table(flags)

    assert len(table) == sum(bits)
    expected = [sid for sid, on in zip(ScreenId, bits) if on]
    assert list(table) == expected


def test_fixed_order():
    assert build_rotation_table(ScreenFlags()) == (
        ScreenId.TEMPERATURE,
        ScreenId.CPU_MEMORY,
        ScreenId.SD_MEMORY,
        ScreenId.HOSTNAME,
    )


def test_hostname_only():
    flags = ScreenFlags(show_temperature=False, show_cpu_memory=False, show_sd_memory=False)
    assert build_rotation_table(flags) == (ScreenId.HOSTNAME,)


def test_all_disabled_is_empty():
    assert build_rotation_table(ScreenFlags(False, False, False, False)) == ()


def test_deterministic():
    flags = ScreenFlags(show_cpu_memory=False)
    assert build_rotation_table(flags) == build_rotation_table(flags)
