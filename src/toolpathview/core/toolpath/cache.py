"""Cache of render-ready segments keyed by view parameters."""

from __future__ import annotations

from collections import OrderedDict
from typing import NamedTuple, Optional

from ...config.presets import LodConfig
from .base import ParsedDocument, PathSegment
from .lod import prepare_render_segments

# Most recently used views kept per document
MAX_VIEWS = 32


class CacheKey(NamedTuple):
    is_travel: bool
    zoom_bucket: int          # zoom in hundredths
    pan_bucket: tuple[int, int]


def make_key(is_travel: bool, zoom: float, pan: tuple[float, float]) -> CacheKey:
    return CacheKey(is_travel, round(zoom * 100), (round(pan[0]), round(pan[1])))


class SegmentCache:
    """Keeps prepared segments for recently used views of one document.

    Segment preparation depends only on the travel class, so each class is
    prepared once and shared by every view entry.  View entries are
    evicted least recently used first once more than *max_views* exist.
    The cache empties itself when asked about a different document, and
    :meth:`invalidate` empties it for style or settings changes.
    """

    def __init__(self, config: Optional[LodConfig] = None, max_views: int = MAX_VIEWS):
        if max_views < 1:
            raise ValueError("max_views must be at least 1")
        self._config = config or LodConfig()
        self._max_views = max_views
        self._document: Optional[ParsedDocument] = None
        self._prepared: dict[bool, list[PathSegment]] = {}
        self._entries: OrderedDict[CacheKey, list[PathSegment]] = OrderedDict()

    @property
    def config(self) -> LodConfig:
        return self._config

    @config.setter
    def config(self, value: LodConfig) -> None:
        self._config = value
        self.invalidate()

    def __len__(self) -> int:
        return len(self._entries)

    def invalidate(self) -> None:
        self._prepared.clear()
        self._entries.clear()

    def get(
        self,
        document: ParsedDocument,
        is_travel: bool,
        zoom: float = 1.0,
        pan: tuple[float, float] = (0.0, 0.0),
    ) -> list[PathSegment]:
        """Prepared segments of one class for the given view."""
        if document is not self._document:
            self._document = document
            self.invalidate()

        key = make_key(is_travel, zoom, pan)
        cached = self._entries.get(key)
        if cached is not None:
            self._entries.move_to_end(key)
            return list(cached)

        if is_travel not in self._prepared:
            self._prepared[is_travel] = prepare_render_segments(
                document, is_travel, self._config,
            )
        cached = self._prepared[is_travel]
        self._entries[key] = cached
        if len(self._entries) > self._max_views:
            self._entries.popitem(last=False)
        return list(cached)
