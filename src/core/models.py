from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

OPACITY_MIN = 0.2
OPACITY_MAX = 1.0
DEFAULT_OPACITY = 0.92
DEFAULT_WINDOW_LEFT = 60.0
DEFAULT_WINDOW_TOP = 60.0


@dataclass(frozen=True)
class ShortcutItem:
    name: str = ""
    keys: str = ""
    note: str = ""


@dataclass(frozen=True)
class ShortcutCategory:
    name: str = ""
    items: tuple[ShortcutItem, ...] = ()


@dataclass(frozen=True)
class ShortcutCatalog:
    categories: tuple[ShortcutCategory, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.categories

    def item_count(self) -> int:
        return sum(len(c.items) for c in self.categories)


@dataclass
class CatalogLoadResult:
    """
    Outcome of a catalog load.

    `data` is always usable (possibly empty). `error_message` is advisory text
    for the user and may be set together with an empty catalog.
    """

    data: ShortcutCatalog = field(default_factory=ShortcutCatalog)
    error_message: Optional[str] = None

    @property
    def has_error(self) -> bool:
        return bool(self.error_message)


def clamp_opacity(value: float) -> float:
    v = float(value)
    if math.isnan(v):
        return DEFAULT_OPACITY
    return max(OPACITY_MIN, min(OPACITY_MAX, v))


def _finite_or(value: float, default: float) -> float:
    v = float(value)
    return v if math.isfinite(v) else default


@dataclass
class AppSettings:
    opacity: float = DEFAULT_OPACITY
    is_pinned: bool = False
    window_left: float = DEFAULT_WINDOW_LEFT
    window_top: float = DEFAULT_WINDOW_TOP

    @classmethod
    def create_default(cls) -> "AppSettings":
        return cls()

    def sanitized(self) -> "AppSettings":
        """Copy with opacity clamped and non-finite coordinates replaced by defaults."""
        return AppSettings(
            opacity=clamp_opacity(self.opacity),
            is_pinned=bool(self.is_pinned),
            window_left=_finite_or(self.window_left, DEFAULT_WINDOW_LEFT),
            window_top=_finite_or(self.window_top, DEFAULT_WINDOW_TOP),
        )
