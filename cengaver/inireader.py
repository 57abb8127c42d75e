"""Reader for Windows-style profile (INI) files."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .constants import LEVEL_MAX_HEIGHT, LEVEL_MAX_WIDTH

_STRING_LIMIT = 254
_LARGE_STRING_LIMIT = LEVEL_MAX_WIDTH * LEVEL_MAX_HEIGHT
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _unquote(value):
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


class IniReader:
    """Read values from an INI file; missing files and keys yield defaults.

    Section and key names are matched case-insensitively, and the first
    occurrence of a section or key wins.
    """

    def __init__(self, filename):
        self.filename = os.fspath(filename)
        self._data = {}
        self._names = []
        self._parse()

    def _parse(self):
        if not self.filename:
            return
        path = Path(self.filename)
        if not path.is_file():
            return
        current = None
        for raw in path.read_bytes().decode("latin-1").splitlines():
            line = raw.strip()
            if not line or line.startswith(";"):
                continue
            if line.startswith("["):
                end = line.find("]")
                name = (line[1:end] if end != -1 else line[1:]).strip()
                folded = name.casefold()
                if folded not in self._data:
                    self._data[folded] = {}
                    self._names.append(name)
                current = self._data[folded]
                continue
            if current is None or "=" not in line:
                continue
            key, _, value = line.partition("=")
            current.setdefault(key.strip().casefold(), _unquote(value.strip()))

    def _lookup(self, section, key):
        return self._data.get(section.casefold(), {}).get(key.casefold())

    def read_integer(self, section, key, default=0):
        value = self._lookup(section, key)
        if value is None:
            return default
        match = _INT_RE.match(value)
        return int(match.group(1)) if match else 0

    def read_float(self, section, key, default=0.0):
        value = self._lookup(section, key)
        if value is None:
            value = f"{default:f}"
        match = _FLOAT_RE.match(value)
        return float(match.group(1)) if match else 0.0

    def read_boolean(self, section, key, default=False):
        value = self._lookup(section, key)
        if value is None:
            return bool(default)
        return value in ("True", "true")

    def read_string(self, section, key, default=""):
        value = self._lookup(section, key)
        return (default if value is None else value)[:_STRING_LIMIT]

    def read_large_string(self, section, key, default=""):
        value = self._lookup(section, key)
        return (default if value is None else value)[:_LARGE_STRING_LIMIT]

    def section_count(self):
        return len(self._names) % 256

    def sections(self):
        """Section names in file order."""
        return list(self._names)