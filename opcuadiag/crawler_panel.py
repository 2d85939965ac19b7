"""Crawler panel state: crawl settings, progress and export requests."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, Optional

ROOT_FOLDER_NODE_ID = "i=84"
DEFAULT_MAX_DEPTH = 5
DEFAULT_MAX_NODES = 500_000
MIN_DEPTH = 1
MAX_DEPTH = 10

STATUS_STARTING = "Connecting..."
CRAWL_COMPLETE = "Crawl complete."


@dataclass(frozen=True)
class CrawlConfig:
    """How far and from where the address space is walked."""

    max_depth: int = DEFAULT_MAX_DEPTH
    max_nodes: int = DEFAULT_MAX_NODES
    start_node: Any = ROOT_FOLDER_NODE_ID


class CrawlerActionKind(enum.Enum):
    START_CRAWL = "start_crawl"
    EXPORT_JSON = "export_json"
    EXPORT_CSV = "export_csv"
    JUMP_TO_NODE = "jump_to_node"


@dataclass(frozen=True)
class CrawlerAction:
    """A request raised from the crawler panel."""

    kind: CrawlerActionKind
    config: Optional[CrawlConfig] = None
    node_id: Any = None


@dataclass
class CrawlerPanel:
    """Settings and results of an address-space crawl."""

    config: CrawlConfig = field(default_factory=CrawlConfig)
    results: list = field(default_factory=list)
    is_crawling: bool = False
    status: str = ""
    start_time: Optional[float] = None
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    def set_max_depth(self, depth: int) -> None:
        if not MIN_DEPTH <= depth <= MAX_DEPTH:
            raise ValueError(
                f"max depth must be between {MIN_DEPTH} and {MAX_DEPTH}, got {depth!r}"
            )
        self.config = replace(self.config, max_depth=depth)

    def start_crawl(self, now: Optional[float] = None) -> CrawlerAction:
        """Begin a crawl with the current settings."""
        if self.is_crawling:
            raise RuntimeError("a crawl is already running")
        self.is_crawling = True
        self.results.clear()
        self.status = STATUS_STARTING
        self.start_time = self.clock() if now is None else now
        return CrawlerAction(CrawlerActionKind.START_CRAWL, config=self.config)

    def finish(self, results: Iterable[Any]) -> None:
        """Store the nodes a crawl returned and leave the running state."""
        self.results = list(results)
        self.is_crawling = False
        self.start_time = None

    def elapsed_text(self, now: Optional[float] = None) -> Optional[str]:
        """Whole seconds the running crawl has taken, or None when idle."""
        if not self.is_crawling or self.start_time is None:
            return None
        if now is None:
            now = self.clock()
        return f"{int(max(0.0, now - self.start_time))}s"

    def summary(self) -> str:
        """Completion line when there are results, else the current status."""
        if self.results:
            head = CRAWL_COMPLETE.split(".")[0] or "Complete"
            return f"✓ {head} {len(self.results)} nodes"
        return self.status

    def _require_results(self) -> None:
        if not self.results:
            raise ValueError("nothing to export: no crawl results")

    def export_json(self) -> CrawlerAction:
        self._require_results()
        return CrawlerAction(CrawlerActionKind.EXPORT_JSON)

    def export_csv(self) -> CrawlerAction:
        self._require_results()
        return CrawlerAction(CrawlerActionKind.EXPORT_CSV)