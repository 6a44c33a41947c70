# app/screen_config.py

from __future__ import annotations

from typing import Dict, Optional, Tuple

from display.models import ScreenFlags

DEFAULT_CONFIG_PATH = "display.cfg"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

# config key -> ScreenFlags field
_FLAG_KEYS: Dict[str, str] = {
    "show_temperature": "show_temperature",
    "temperature": "show_temperature",
    "show_cpu_memory": "show_cpu_memory",
    "cpu_memory": "show_cpu_memory",
    "show_sd_memory": "show_sd_memory",
    "sd_memory": "show_sd_memory",
    "show_hostname": "show_hostname",
    "hostname": "show_hostname",
}

_UNITS = {"c": "C", "celsius": "C", "f": "F", "fahrenheit": "F"}


def parse_bool(value: str) -> Optional[bool]:
    v = value.strip().strip("\"'").lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def _strip_comment(line: str) -> str:
    for mark in ("#", ";"):
        pos = line.find(mark)
        if pos >= 0:
            line = line[:pos]
    return line.strip()


def _split(line: str) -> Optional[Tuple[str, str]]:
    # "key = value" or "key: value", whichever separator comes first
    positions = [p for p in (line.find("="), line.find(":")) if p > 0]
    if not positions:
        return None
    pos = min(positions)
    key = line[:pos].strip().lower().replace("-", "_")
    return key, line[pos + 1:].strip()


def parse_screen_flags(text: str, debug: bool = False) -> ScreenFlags:
    """
    Tolerant key/value parser. Unknown keys, bad values and lines without
    a separator are skipped; every flag not set explicitly stays enabled.
    """
    values: Dict[str, object] = {}

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = _strip_comment(raw)
        if not line:
            continue

        kv = _split(line)
        if kv is None:
            if debug:
                print(f"[CONFIG] line {lineno}: skipped (no separator): {raw.strip()!r}")
            continue
        key, value = kv

        if key in _FLAG_KEYS:
            flag = parse_bool(value)
            if flag is None:
                if debug:
                    print(f"[CONFIG] line {lineno}: {key}: invalid boolean {value!r}, keeping default")
                continue
            values[_FLAG_KEYS[key]] = flag
            if debug:
                print(f"[CONFIG] {_FLAG_KEYS[key]} = {flag}")
        elif key == "temperature_unit":
            unit = _UNITS.get(value.strip("\"'").lower())
            if unit is None:
                if debug:
                    print(f"[CONFIG] line {lineno}: unknown temperature unit {value!r}, keeping default")
                continue
            values["temperature_unit"] = unit
            if debug:
                print(f"[CONFIG] temperature_unit = {unit}")
        elif debug:
            print(f"[CONFIG] line {lineno}: ignoring unknown key {key!r}")

    return ScreenFlags(**values)


def load_screen_flags(path: str = DEFAULT_CONFIG_PATH, debug: bool = False) -> Tuple[ScreenFlags, bool]:
    """
    Returns (flags, loaded). A missing or unreadable file gives the all-enabled
    defaults and loaded=False; the caller decides how to warn.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        if debug:
            print(f"[CONFIG] cannot read {path}: {e}")
        return ScreenFlags(), False

    if debug:
        print(f"[CONFIG] loading {path}")
    flags = parse_screen_flags(text, debug=debug)
    if debug:
        print(f"[CONFIG] result: {flags}")
    return flags, True
