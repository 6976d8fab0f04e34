from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .config import LOGGER_NAME, TableSettings
from .errors import InvalidHandle, OutsideRoot
from .geometry import Rectangle, overlaps, split

RectLike = Union[Rectangle, Tuple[int, int, int, int]]

_TABLE_IDS = itertools.count(1)


@dataclass(frozen=True, order=True)
class WindowKey:
    """Opaque handle to a window record, valid until its table is reset."""

    owner: int
    slot: int

    def __repr__(self) -> str:
        return f"WindowKey({self.owner}:{self.slot})"


@dataclass(frozen=True)
class WindowNode:
    key: WindowKey
    rect: Rectangle
    parents: Tuple[WindowKey, ...]
    children: Tuple[WindowKey, ...]


@dataclass
class _WindowRecord:
    key: WindowKey
    rect: Rectangle
    parents: List[WindowKey] = field(default_factory=list)
    children: List[WindowKey] = field(default_factory=list)


@dataclass
class _ResolveFrame:
    roots: Sequence[WindowKey]
    fragments: List[Rectangle]
    found: List[WindowKey] = field(default_factory=list)
    leftovers: bool = False
    # Matched window whose children the frame above is resolving.
    pending: Optional[WindowKey] = None


def _as_rectangle(rect: RectLike) -> Rectangle:
    if isinstance(rect, Rectangle):
        return rect
    return Rectangle(*rect)


class WindowTable:
    """Overlap graph of rectangular windows, rooted at the first insert.

    Every later window must share area with the root. Its parents are the
    deepest windows that cover it; a window is only reported itself when
    part of its overlap with the new rectangle is not covered by any of its
    children. Edges are kept reciprocal.

    Not thread-safe. Callers sharing a table must serialize access.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, settings: Optional[TableSettings] = None) -> None:
        self.logger = (logger or logging.getLogger(LOGGER_NAME)).getChild("WindowTable")
        self.settings = settings or TableSettings()
        self._id = next(_TABLE_IDS)
        self._slots = itertools.count()
        self._windows: Dict[int, _WindowRecord] = {}
        self._root: Optional[WindowKey] = None

    def __len__(self) -> int:
        return len(self._windows)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, WindowKey) and key.owner == self._id and key.slot in self._windows

    def root(self) -> Optional[WindowKey]:
        return self._root

    def iterate(self) -> Iterator[Tuple[WindowKey, Rectangle]]:
        return iter([(record.key, record.rect) for record in self._windows.values()])

    def reset(self) -> None:
        dropped = len(self._windows)
        self._windows.clear()
        self._root = None
        self.logger.info("reset: dropped %d window(s)", dropped)

    def insert(self, rect: RectLike) -> WindowKey:
        rect = _as_rectangle(rect)
        if self._root is None:
            key = self._allocate(rect)
            self._root = key
            self.logger.debug("insert %r %s as root", key, rect.as_tuple())
            return key

        root_rect = self._windows[self._root.slot].rect
        if not overlaps(rect, root_rect):
            self.logger.debug("reject %s: outside root %s", rect.as_tuple(), root_rect.as_tuple())
            raise OutsideRoot(rect, root_rect)

        parents, _ = self._resolve([self._root], rect)
        key = self._allocate(rect)
        for parent in parents:
            self._windows[parent.slot].children.append(key)
        self._windows[key.slot].parents = list(parents)
        self.logger.debug("insert %r %s with %d parent(s)", key, rect.as_tuple(), len(parents))
        return key

    def overlapping(self, rect: RectLike) -> Tuple[WindowKey, ...]:
        rect = _as_rectangle(rect)
        if self._root is None:
            return ()
        if not overlaps(rect, self._windows[self._root.slot].rect):
            return ()
        found, _ = self._resolve([self._root], rect)
        return tuple(found)

    def rect(self, key: WindowKey) -> Rectangle:
        return self._lookup(key).rect

    def parents(self, key: WindowKey) -> Tuple[WindowKey, ...]:
        return tuple(self._lookup(key).parents)

    def children(self, key: WindowKey) -> Tuple[WindowKey, ...]:
        return tuple(self._lookup(key).children)

    def node(self, key: WindowKey) -> WindowNode:
        record = self._lookup(key)
        return WindowNode(
            key=record.key,
            rect=record.rect,
            parents=tuple(record.parents),
            children=tuple(record.children),
        )

    def dump_tree(self, max_depth: Optional[int] = None) -> Optional[Dict[str, Any]]:
        if self._root is None:
            return None
        depth_limit = self.settings.dump_max_depth if max_depth is None else max_depth
        tree = self._dump_node(self._root, 0)
        pending = [tree]
        while pending:
            node = pending.pop()
            if node["depth"] >= depth_limit:
                continue
            for child in self._windows[node["key"].slot].children:
                entry = self._dump_node(child, node["depth"] + 1)
                node["children"].append(entry)
                pending.append(entry)
        return tree

    def _dump_node(self, key: WindowKey, depth: int) -> Dict[str, Any]:
        return {
            "key": key,
            "rect": self._windows[key.slot].rect.as_tuple(),
            "depth": depth,
            "children": [],
        }

    def _allocate(self, rect: Rectangle) -> WindowKey:
        key = WindowKey(self._id, next(self._slots))
        self._windows[key.slot] = _WindowRecord(key=key, rect=rect)
        return key

    def _lookup(self, key: WindowKey) -> _WindowRecord:
        if not isinstance(key, WindowKey):
            raise InvalidHandle(key, "not a WindowKey")
        if key.owner != self._id:
            raise InvalidHandle(key, "issued by another table")
        record = self._windows.get(key.slot)
        if record is None:
            raise InvalidHandle(key, "stale after reset")
        return record

    def _resolve(self, roots: Sequence[WindowKey], rect: Rectangle) -> Tuple[List[WindowKey], bool]:
        """Return the deepest windows under ``roots`` overlapping ``rect``.

        The second value is True when some part of ``rect`` is covered by
        none of ``roots``.

        Children are visited through an explicit stack of frames; a frame
        hands its result back to the frame below it when it runs out of
        fragments.
        """
        frames = [_ResolveFrame(roots=roots, fragments=[rect])]
        finished: Optional[Tuple[List[WindowKey], bool]] = None

        while True:
            frame = frames[-1]
            if finished is not None:
                child_found, child_leftovers = finished
                finished = None
                frame.found.extend(child_found)
                if child_leftovers:
                    frame.found.append(frame.pending)
                frame.pending = None

            if not frame.fragments:
                frames.pop()
                finished = (sorted(set(frame.found)), frame.leftovers)
                if not frames:
                    return finished
                continue

            fragment = frame.fragments.pop()
            match = None
            # First match wins, in the order the roots were given.
            for candidate in frame.roots:
                pieces = split(fragment, self._windows[candidate.slot].rect)
                if pieces is not None:
                    match = (candidate, pieces)
                    break

            if match is None:
                frame.leftovers = True
                if self.settings.trace_resolver:
                    self.logger.debug("resolve: leftover %s", fragment.as_tuple())
                continue

            matched, (overlap, remainders) = match
            if self.settings.trace_resolver:
                self.logger.debug(
                    "resolve: %s matched %r, %d remainder(s)",
                    fragment.as_tuple(),
                    matched,
                    len(remainders),
                )
            frame.fragments.extend(remainders)
            frame.pending = matched
            frames.append(_ResolveFrame(roots=self._windows[matched.slot].children, fragments=[overlap]))


__all__ = ["WindowKey", "WindowNode", "WindowTable"]
