from __future__ import annotations

import sys
import threading
from typing import Callable, Optional, Sequence

from PIL import Image

from luma.core.error import Error as LumaError

from .config import DisplayConfig
from .device import OLEDDevice
from .models import ScreenId


class RotationScheduler:
    """
    Round-robin over the rotation table, forever.
    Call run() from the main thread; stop() (e.g. from a signal handler)
    is noticed within one dwell step.
    """

    def __init__(
        self,
        device: OLEDDevice,
        table: Sequence[ScreenId],
        render: Callable[[ScreenId], Image.Image],
        cfg: Optional[DisplayConfig] = None,
        show_identity: bool = True,
        discover_ip: Optional[Callable[[], object]] = None,
        wait: Optional[Callable[[float], bool]] = None,
    ):
        self.cfg = cfg or DisplayConfig()
        self.device = device
        self.table = tuple(table)
        self.render = render
        self.show_identity = show_identity
        self.discover_ip = discover_ip

        self._stop_evt = threading.Event()
        # wait(seconds) -> True once stopped
        self._wait = wait or self._stop_evt.wait

        self.cursor = 0

    @property
    def stopped(self) -> bool:
        return self._stop_evt.is_set()

    def stop(self) -> None:
        self._stop_evt.set()

    def run(self) -> None:
        if self._prologue():
            return

        if not self.table:
            self._idle()
            return

        while not self.stopped:
            self._show(self.table[self.cursor])
            if self._dwell(self.cfg.dwell_s):
                return
            self.cursor = (self.cursor + 1) % len(self.table)

    def _prologue(self) -> bool:
        if self.discover_ip is not None:
            self.discover_ip()

        if self.show_identity:
            self._show(ScreenId.HOSTNAME)
            return self._dwell(self.cfg.identity_dwell_s)
        return self.stopped

    def _idle(self) -> None:
        print("No screens enabled in configuration; display idle.", file=sys.stderr)
        try:
            self.device.clear()
        except (LumaError, OSError) as e:
            print(f"[DISPLAY] clear failed: {e}", file=sys.stderr)
        while not self._wait(self.cfg.dwell_step_s):
            pass

    def _dwell(self, seconds: float) -> bool:
        step = self.cfg.dwell_step_s
        steps = max(1, int(round(seconds / step)))
        for _ in range(steps):
            if self._wait(step):
                return True
        return False

    def _show(self, screen: ScreenId) -> None:
        try:
            self.device.show(self.render(screen))
        except Exception as e:
            print(f"[DISPLAY] render/show failed for {screen.value}: {e}", file=sys.stderr)
