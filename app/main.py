# app/main.py

from __future__ import annotations

import argparse
import signal
import sys
import time
from typing import Callable, List, Optional

from luma.core.error import Error as LumaError

from app.screen_config import DEFAULT_CONFIG_PATH, load_screen_flags
from display.config import DisplayConfig
from display.device import DeviceOpenResult, open_display
from display.renderer import ScreenRenderer
from display.rotation import build_rotation_table
from display.service import RotationScheduler
from sysinfo.providers import SystemProviders


# =========================================================
# CLI
# =========================================================

def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="SSD1306 status panel: rotate system status screens")
    p.add_argument("-d", "--debug", action="store_true", help="Trace configuration parsing.")
    return p


# =========================================================
# Main
# =========================================================

def main(
    argv: Optional[List[str]] = None,
    config_path: str = DEFAULT_CONFIG_PATH,
    cfg: Optional[DisplayConfig] = None,
    open_device: Callable[[DisplayConfig], DeviceOpenResult] = open_display,
    providers: Optional[SystemProviders] = None,
    make_scheduler: Callable[..., RotationScheduler] = RotationScheduler,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    args = build_arg_parser().parse_args(argv)
    cfg = cfg or DisplayConfig()

    # =========================================================
    # Configuration
    # =========================================================

    flags, loaded = load_screen_flags(config_path, debug=args.debug)
    if not loaded:
        print(f"Warning: Could not load {config_path}, using defaults.", file=sys.stderr)

    table = build_rotation_table(flags)
    if args.debug:
        print("[SYSTEM] Rotation:", ", ".join(s.value for s in table) or "(empty)")

    # =========================================================
    # Hardware
    # =========================================================

    result = open_device(cfg)
    if not result.ok:
        print(f"I2C device failed to open: {result.error}", file=sys.stderr)
        return 1
    device = result.device

    sleep(cfg.settle_delay_s)

    providers = providers or SystemProviders()
    renderer = ScreenRenderer(
        providers,
        width=device.width,
        height=device.height,
        temperature_unit=flags.temperature_unit,
    )

    scheduler = make_scheduler(
        device,
        table,
        renderer,
        cfg=cfg,
        show_identity=flags.show_hostname,
        discover_ip=providers.ip.discover,
    )

    def _on_signal(signum, _frame):
        print(f"[SYSTEM] Signal {signum} received, stopping")
        scheduler.stop()

    prev_term = signal.signal(signal.SIGTERM, _on_signal)
    prev_int = signal.signal(signal.SIGINT, _on_signal)

    print("[SYSTEM] Display rotation started")

    try:
        scheduler.run()
    finally:
        signal.signal(signal.SIGTERM, prev_term)
        signal.signal(signal.SIGINT, prev_int)

        print("[SYSTEM] Shutting down")
        try:
            device.clear()
        except (LumaError, OSError) as e:
            print("[DISPLAY] clear failed:", e, file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
