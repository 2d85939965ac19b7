"""Watchlist table model: rows, quality labels and row actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Hashable, Mapping, Optional, Protocol

from opcuadiag.status_codes import translate_status_code
from opcuadiag.trending import Color, color_for_node_id

PALETTE: tuple[Color, ...] = (
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (255, 0, 255),
    (0, 255, 255),
    (255, 128, 0),
    (128, 0, 255),
    (0, 255, 128),
    (255, 128, 128),
    (128, 255, 128),
    (128, 128, 255),
)

_QUALITY_OK = ("OK", (0, 255, 0))
_QUALITY_UNCERTAIN = ("?", (255, 165, 0))
_QUALITY_BAD = ("!", (255, 0, 0))


class _MonitoredItem(Protocol):
    display_name: str
    status: int
    show_in_trend: bool
    trend_color: Optional[Color]

    def value_string(self) -> str: ...

    def quality_icon(self) -> str: ...

    def timestamp_string(self) -> str: ...

    def is_trendable(self) -> bool: ...


class MonitorActionKind(enum.Enum):
    REMOVE = "remove"
    TOGGLE_TREND = "toggle_trend"
    CHANGE_COLOR = "change_color"
    EXPORT_CSV = "export_csv"
    EXPORT_JSON = "export_json"


@dataclass(frozen=True)
class MonitorAction:
    """A request raised from the watchlist."""

    kind: MonitorActionKind
    node_id: Any = None
    color: Optional[Color] = None


@dataclass(frozen=True)
class MonitorRow:
    """One displayed watchlist row."""

    node_id: Any
    display_name: str
    value: str
    quality: str
    quality_color: Color
    status_text: str
    timestamp: str
    trendable: bool
    show_in_trend: bool
    color: Optional[Color]


def quality_label(quality_icon: str) -> tuple[str, Color]:
    """Map an item's quality icon to the shown text and its colour."""
    if quality_icon == "OK":
        return _QUALITY_OK
    if quality_icon == "?":
        return _QUALITY_UNCERTAIN
    return _QUALITY_BAD


def trend_color(node_id: Hashable, item: _MonitoredItem) -> Color:
    """The item's chosen colour, or the one derived from its node id."""
    if item.trend_color is not None:
        return tuple(item.trend_color)
    return color_for_node_id(node_id)


class MonitorPanel:
    """Builds watchlist rows and the actions its controls raise."""

    def rows(self, monitored_items: Mapping[Any, _MonitoredItem]) -> list[MonitorRow]:
        ordered = sorted(monitored_items.items(), key=lambda kv: kv[1].display_name)
        rows = []
        for node_id, item in ordered:
            quality, quality_color = quality_label(item.quality_icon())
            rows.append(
                MonitorRow(
                    node_id=node_id,
                    display_name=item.display_name,
                    value=item.value_string(),
                    quality=quality,
                    quality_color=quality_color,
                    status_text=translate_status_code(item.status),
                    timestamp=item.timestamp_string(),
                    trendable=item.is_trendable(),
                    show_in_trend=item.show_in_trend,
                    color=trend_color(node_id, item) if item.show_in_trend else None,
                )
            )
        return rows

    def toggle_trend(self, node_id: Any, item: _MonitoredItem) -> MonitorAction:
        if not item.is_trendable():
            raise ValueError("Cannot graph non-numeric values (dates, strings)")
        return MonitorAction(MonitorActionKind.TOGGLE_TREND, node_id)

    def change_color(self, node_id: Any, rgb: Color) -> MonitorAction:
        rgb = tuple(rgb)
        if rgb not in PALETTE:
            raise ValueError(f"colour {rgb!r} is not in the palette")
        return MonitorAction(MonitorActionKind.CHANGE_COLOR, node_id, rgb)

    def remove(self, node_id: Any) -> MonitorAction:
        return MonitorAction(MonitorActionKind.REMOVE, node_id)