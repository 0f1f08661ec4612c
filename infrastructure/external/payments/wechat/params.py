"""
Flat string map used for every WeChat Pay request and response.

Setters mutate the map in place and return the same instance so calls can be
chained; nothing is copied.
"""
from __future__ import annotations

import re


_INT_RE = re.compile(r"[+-]?[0-9]+")


class Params(dict[str, str]):
    """Case-sensitive ``str -> str`` map with typed accessors."""

    def set_string(self, key: str, value: str) -> "Params":
        self[key] = value
        return self

    def get_string(self, key: str) -> str:
        return self.get(key, "")

    def set_int(self, key: str, value: int) -> "Params":
        self[key] = str(int(value))
        return self

    def get_int(self, key: str) -> int:
        """Return the integer value of ``key``, or 0 if absent or malformed."""
        raw = self.get_string(key)
        if not _INT_RE.fullmatch(raw):
            return 0
        return int(raw)

    def contains_key(self, key: str) -> bool:
        return key in self
