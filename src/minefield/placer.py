"""
Mine placement.

Seeds mines into an empty grid while keeping the first opened cell
(and by default its neighbors) safe, then computes the hint counts.
"""
import logging
import random
from typing import AbstractSet, List, Optional

from .errors import InsufficientSpace
from .grid import Coord, Grid

logger = logging.getLogger(__name__)


def place(
    grid: Grid,
    exclude: AbstractSet[Coord],
    rng: Optional[random.Random] = None,
) -> List[Coord]:
    """
    Place ``grid.mine_count`` mines uniformly at random.

    Args:
        grid: Empty grid to populate.
        exclude: Coordinates that must stay mine-free.
        rng: Random source; the global ``random`` module when omitted.

    Returns:
        The chosen mine coordinates.

    Raises:
        InsufficientSpace: If fewer eligible cells than mines remain.
        RuntimeError: If the grid already holds its mines.
    """
    if grid.mines_placed:
        raise RuntimeError("Mines already placed on this grid")

    candidates = [coord for coord in grid.coordinates() if coord not in exclude]
    if len(candidates) < grid.mine_count:
        raise InsufficientSpace(
            f"{grid.mine_count} mines do not fit in "
            f"{len(candidates)} eligible cells"
        )

    mines = (rng or random).sample(candidates, grid.mine_count)
    for coord in mines:
        grid.place_mine(coord)
    grid.finish_placement()

    logger.debug("Placed %d mines on %dx%d grid",
                 len(mines), grid.height, grid.width)
    return mines


def place_around(
    grid: Grid,
    first_click: Coord,
    rng: Optional[random.Random] = None,
    protect_neighbors: bool = True,
) -> List[Coord]:
    """
    Place mines so the first opened cell is safe.

    The clicked cell and its neighbors are excluded. When that leaves
    too few cells (small, dense boards) only the clicked cell is
    excluded.

    Args:
        grid: Empty grid to populate.
        first_click: Coordinate of the first open.
        rng: Random source.
        protect_neighbors: Exclude the neighborhood too, not only the cell.

    Returns:
        The chosen mine coordinates.
    """
    exclude = {first_click}
    if protect_neighbors:
        exclude.update(grid.neighbors(first_click))
    else:
        grid.get(first_click)  # bounds check

    try:
        return place(grid, exclude, rng)
    except InsufficientSpace:
        if len(exclude) == 1:
            raise
        logger.info(
            "Neighborhood of %s too large to keep clear; "
            "protecting the clicked cell only", first_click
        )
        return place(grid, {first_click}, rng)
