"""Named region presets for spawn placement."""

from typing import Union

from .models import Region, RegionBounds


def resolve_region_bounds(region: Union[Region, str], radius: int = 2000) -> RegionBounds:
    """
    Map a region name to its bounding rectangle.

    ``center`` is a half-radius box around the origin, the four compass
    regions are full-radius half planes and ``random`` spans the whole
    spawnable square. Unknown names fall back to ``random``.
    """
    name = region.value if isinstance(region, Region) else str(region)
    half = radius // 2

    if name == Region.CENTER.value:
        return RegionBounds(min_x=-half, max_x=half, min_y=-half, max_y=half)
    if name == Region.NORTH.value:
        return RegionBounds(min_x=-radius, max_x=radius, min_y=0, max_y=radius)
    if name == Region.SOUTH.value:
        return RegionBounds(min_x=-radius, max_x=radius, min_y=-radius, max_y=0)
    if name == Region.EAST.value:
        return RegionBounds(min_x=0, max_x=radius, min_y=-radius, max_y=radius)
    if name == Region.WEST.value:
        return RegionBounds(min_x=-radius, max_x=0, min_y=-radius, max_y=radius)
    return RegionBounds(min_x=-radius, max_x=radius, min_y=-radius, max_y=radius)
