from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JsonConfig:
    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = False
    compact: bool = True  # no spaces after "," and ":"

    def separators(self) -> tuple[str, str] | None:
        if self.compact and self.indent is None:
            return (",", ":")
        return None
