"""Entity store — owns every wall and opening in the plan."""

from __future__ import annotations
import logging
import threading
from typing import Iterable

from planner.errors import DuplicateEntity
from planner.models import Wall, Opening

logger = logging.getLogger(__name__)


class EntityStore:
    """
    In-memory collection of walls and openings, indexed by id.

    Both mappings keep insertion order, which is also the order used for
    spatial scans. Mutations build a new mapping and swap it in under a
    lock, so a reader holding the result of `list_walls()` or
    `list_openings()` never sees a half-applied change.
    """

    def __init__(self) -> None:
        self._walls: dict[str, Wall] = {}
        self._openings: dict[str, Opening] = {}
        self._lock = threading.RLock()

    # Walls

    def add_wall(self, wall: Wall) -> None:
        with self._lock:
            if wall.id in self._walls:
                raise DuplicateEntity(f"wall {wall.id!r} already exists")
            self._walls = {**self._walls, wall.id: wall}
        logger.debug("Added wall %s", wall.id)

    def remove_wall(self, wall_id: str) -> Wall | None:
        with self._lock:
            if wall_id not in self._walls:
                return None
            walls = dict(self._walls)
            removed = walls.pop(wall_id)
            self._walls = walls
        logger.debug("Removed wall %s", wall_id)
        return removed

    def get_wall(self, wall_id: str) -> Wall | None:
        return self._walls.get(wall_id)

    def list_walls(self) -> list[Wall]:
        return list(self._walls.values())

    # Openings

    def add_opening(self, opening: Opening) -> None:
        with self._lock:
            if opening.id in self._openings:
                raise DuplicateEntity(f"opening {opening.id!r} already exists")
            self._openings = {**self._openings, opening.id: opening}
        logger.debug("Added %s %s", opening.type.value, opening.id)

    def remove_opening(self, opening_id: str) -> Opening | None:
        with self._lock:
            if opening_id not in self._openings:
                return None
            openings = dict(self._openings)
            removed = openings.pop(opening_id)
            self._openings = openings
        logger.debug("Removed opening %s", opening_id)
        return removed

    def get_opening(self, opening_id: str) -> Opening | None:
        return self._openings.get(opening_id)

    def list_openings(self) -> list[Opening]:
        return list(self._openings.values())

    # Bulk

    def replace(
        self,
        walls: Iterable[Wall] | None = None,
        openings: Iterable[Opening] | None = None,
    ) -> None:
        """
        Swap in new wall and/or opening collections in one step.

        A collection passed as None is left as it is.
        """
        new_walls = _index(walls, "wall") if walls is not None else None
        new_openings = _index(openings, "opening") if openings is not None else None
        with self._lock:
            if new_walls is not None:
                self._walls = new_walls
            if new_openings is not None:
                self._openings = new_openings

    def clear(self) -> None:
        with self._lock:
            self._walls = {}
            self._openings = {}
        logger.info("Cleared all walls and openings")

    def __len__(self) -> int:
        return len(self._walls) + len(self._openings)


def _index(items: Iterable[Wall] | Iterable[Opening], label: str) -> dict:
    indexed: dict = {}
    for item in items:
        if item.id in indexed:
            raise DuplicateEntity(f"{label} {item.id!r} appears more than once")
        indexed[item.id] = item
    return indexed
