"""Live trend data: time windows, visible points and per-node colours."""

from __future__ import annotations

import colorsys
import hashlib
import math
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Mapping, Sequence

TIME_WINDOWS: tuple[int, ...] = (30, 60, 300, 600)
DEFAULT_TIME_WINDOW = 60

Color = tuple[int, int, int]
Point = tuple[float, float]


def color_for_node_id(node_id: Hashable) -> Color:
    """A stable, saturated RGB colour derived from the node id's text."""
    digest = hashlib.blake2b(str(node_id).encode("utf-8"), digest_size=8).digest()
    value_hash = int.from_bytes(digest, "little")
    hue = (value_hash % 360) / 360.0
    saturation = 0.7 + ((value_hash >> 8) % 30) / 100.0
    brightness = 0.8 + ((value_hash >> 16) % 20) / 100.0
    r, g, b = colorsys.hsv_to_rgb(hue, saturation, brightness)
    return (round(r * 255), round(g * 255), round(b * 255))


def format_time(timestamp: float) -> str:
    """Format seconds since the epoch as HH:MM:SS (UTC time of day)."""
    if math.isfinite(timestamp) and timestamp >= 0:
        secs = int(timestamp)
        hours = (secs // 3600) % 24
        minutes = (secs // 60) % 60
        seconds = secs % 60
        return f"{hours:02}:{minutes:02}:{seconds:02}"
    if math.isnan(timestamp):
        return "NaN"
    return f"{timestamp:.0f}"


@dataclass(frozen=True)
class TrendSeries:
    """One plotted line."""

    node_id: Any
    name: str
    color: Color
    points: list[Point] = field(default_factory=list)


@dataclass
class TrendingPanel:
    """State of the trend plot: which time window is shown."""

    time_window: int = DEFAULT_TIME_WINDOW

    def __post_init__(self) -> None:
        self.set_time_window(self.time_window)

    def set_time_window(self, seconds: int) -> None:
        if seconds not in TIME_WINDOWS:
            raise ValueError(
                f"time window must be one of {TIME_WINDOWS}, got {seconds!r}"
            )
        self.time_window = seconds

    def window_bounds(self, now: float) -> tuple[float, float]:
        """Return the (start, end) of the visible time range."""
        return (now - self.time_window, now)

    def visible_points(self, history: Iterable[Point], now: float) -> list[Point]:
        start, _ = self.window_bounds(now)
        return [(t, v) for t, v in history if t >= start]

    def trend_series(
        self, monitored_items: Mapping[Any, Any], now: float
    ) -> list[TrendSeries]:
        """Series for every item that is trended, numeric and has history."""
        series = []
        for node_id, item in monitored_items.items():
            history: Sequence[Point] = item.history
            if not (item.show_in_trend and item.is_trendable() and history):
                continue
            color = (
                tuple(item.trend_color)
                if item.trend_color is not None
                else color_for_node_id(node_id)
            )
            series.append(
                TrendSeries(
                    node_id=node_id,
                    name=item.display_name,
                    color=color,
                    points=self.visible_points(history, now),
                )
            )
        return series