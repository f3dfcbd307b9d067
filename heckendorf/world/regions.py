# heckendorf/world/regions.py
"""Region bookkeeping: which carved tiles are known to be connected.

Every room is carved with a fresh region id.  When a corridor joins two
regions, one id is rewritten to the other over the whole area, so two empty
tiles sharing an id are always reachable from one another.
"""

from __future__ import annotations

from typing import Dict, Optional, Set

import numpy as np
import structlog

from heckendorf.constants import NO_REGION, TileKind
from heckendorf.world.area import Area, Coord

log = structlog.get_logger(__name__)


def region_of(area: Area, coord: Coord) -> Optional[int]:
    return area.region_at(area.index(*coord))


def merge_regions(area: Area, old: int, new: int) -> int:
    """Retag every tile of region ``old`` with ``new``; returns the tile count."""
    if old == new:
        return 0
    mask = area.regions == old
    count = int(np.count_nonzero(mask))
    area.regions[mask] = new
    area.metrics["regions_merged"] += 1
    log.debug("Merged regions", old=old, new=new, tiles=count)
    return count


def region_ids(area: Area) -> Set[int]:
    """Distinct region ids present on empty tiles."""
    ids = np.unique(area.regions[area.tiles == TileKind.EMPTY])
    return {int(i) for i in ids if i != NO_REGION}


def region_sizes(area: Area) -> Dict[int, int]:
    ids, counts = np.unique(area.regions[area.tiles == TileKind.EMPTY], return_counts=True)
    return {int(i): int(c) for i, c in zip(ids, counts) if i != NO_REGION}


__all__ = ["region_of", "merge_regions", "region_ids", "region_sizes"]
