from __future__ import annotations

from typing import Tuple

from .models import ScreenFlags, ScreenId

RotationTable = Tuple[ScreenId, ...]


def build_rotation_table(flags: ScreenFlags) -> RotationTable:
    """
    Enabled screens in fixed priority order:
    TEMPERATURE -> CPU_MEMORY -> SD_MEMORY -> HOSTNAME.
    All flags off gives an empty table.
    """
    return tuple(sid for sid in ScreenId if flags.enabled(sid))
