"""Saved progress: level, health, elapsed time, highscore and best time."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path

FIELD_SIZE = 50
DEFAULT_LOWTIME = 99999 * 40
_ATOL_RE = re.compile(rb"\s*([+-]?\d+)")


@dataclass
class SaveData:
    level: int = 0
    health: int = 10
    time: int = 0
    highscore: int = 0
    lowtime: int = DEFAULT_LOWTIME


def default_save_path():
    """Location of the save file in the machine-wide application data folder."""
    if sys.platform == "win32":
        base = Path(os.environ.get("PROGRAMDATA", r"C:\ProgramData"))
    else:
        base = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return base / "AyselEvren" / "Cengaver The Prism Operation" / "Save.sav"


def _atol(raw):
    match = _ATOL_RE.match(raw.split(b"\0", 1)[0])
    return int(match.group(1)) if match else 0


def _field(number):
    return str(number).encode("ascii")[:FIELD_SIZE].ljust(FIELD_SIZE, b"\0")


def load_game(path=None):
    """Read a save file; a missing file gives the default values."""
    path = Path(path) if path is not None else default_save_path()
    if not path.is_file():
        return SaveData()
    data = path.read_bytes()
    result = SaveData()
    if len(data) > 0:
        result.level = data[0]
    if len(data) > 1:
        result.health = data[1]
    fields = [data[2 + i * FIELD_SIZE: 2 + (i + 1) * FIELD_SIZE] for i in range(3)]
    result.time = _atol(fields[0])
    result.highscore = _atol(fields[1])
    result.lowtime = _atol(fields[2]) or DEFAULT_LOWTIME
    return result


def save_game(path, level, time, health, highscore, lowtime):
    """Write a save file; a highscore or lowtime that is not positive is left blank."""
    path = Path(path) if path is not None else default_save_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    content = bytes([level & 0xFF, health & 0xFF]) + _field(time)
    content += _field(highscore) if highscore > 0 else b"\0" * FIELD_SIZE
    if lowtime > 0:
        content += _field(lowtime)
    path.write_bytes(content)