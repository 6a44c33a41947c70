from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayConfig:
    # I2C (i2cdetect -y 1 shows the panel at 0x3c)
    i2c_bus: int = 1
    i2c_address: int = 0x3C

    # OLED SSD1306 128x32
    width: int = 128
    height: int = 32

    # rotate: 0..3 (0=0°, 1=90°, 2=180°, 3=270°)
    rotate: int = 0

    # power-up stabilization before the first frame
    settle_delay_s: float = 0.15

    # per-screen dwell, waited in dwell_step_s slices
    dwell_s: float = 3.0
    dwell_step_s: float = 1.0

    # boot identity (hostname) screen
    identity_dwell_s: float = 3.0
