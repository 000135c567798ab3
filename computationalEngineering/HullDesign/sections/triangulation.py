# -- Planar Region Triangulation -- #

'''
Turns closed 2D loops into polygons and triangles with shapely.

Loops are combined under the even-odd rule by successive symmetric
differences, so a loop nested inside an odd number of others bounds a hole.
Each resulting polygon is split by a constrained Delaunay triangulation
(shapely.constrained_delaunay_triangles), which keeps every boundary edge and
adds no interior points.

Sean Bowman [10/18/2026]
'''

from __future__ import annotations

from functools import reduce

import numpy as np
import shapely
from shapely.geometry import Polygon


######################################################################
# -- Loops to Polygons -- #
######################################################################

def polygonalParts(geometry) -> list[Polygon]:
    '''Non-empty polygons contained in a (possibly mixed) shapely geometry.'''
    parts = []
    for part in shapely.get_parts(geometry):
        if isinstance(part, Polygon):
            if not part.is_empty:
                parts.append(part)
        elif part.geom_type in ('MultiPolygon', 'GeometryCollection'):
            parts.extend(polygonalParts(part))
    return parts


def loopPolygons(loop: np.ndarray) -> list[Polygon]:
    '''
    Polygon(s) bounded by one closed loop.

    A self-touching or self-crossing loop is repaired with shapely.make_valid
    and may come back as several polygons.
    '''
    polygon = Polygon(np.asarray(loop, dtype=np.float64))
    if polygon.is_valid:
        return [polygon]
    return polygonalParts(shapely.make_valid(polygon))


def evenOddRegion(loops: list[np.ndarray]) -> list[Polygon]:
    '''
    Region enclosed by a set of closed loops under the even-odd rule.

    Parameters:
    -----------
    loops : list[np.ndarray]
        Closed 2D loops, each shape (N, 2), closing point not repeated

    Returns:
    --------
    list[Polygon] : Disjoint polygons with holes, largest first
    '''
    pieces = [p for loop in loops if len(loop) >= 3 for p in loopPolygons(loop)]
    if not pieces:
        return []

    region = reduce(shapely.symmetric_difference, pieces)
    polygons = [p for p in polygonalParts(region) if p.area > 0.0]
    return sorted(polygons, key=lambda p: -p.area)


######################################################################
# -- Triangulation -- #
######################################################################

def triangulatePolygon(polygon: Polygon) -> np.ndarray:
    '''
    Constrained Delaunay triangles covering a polygon with holes.

    Parameters:
    -----------
    polygon : Polygon
        Valid shapely polygon

    Returns:
    --------
    np.ndarray : Triangle corners, shape (T, 3, 2), each counter-clockwise;
        zero-area triangles are dropped
    '''
    polygon = shapely.remove_repeated_points(polygon)
    triangles = polygonalParts(shapely.constrained_delaunay_triangles(polygon))
    if not triangles:
        return np.zeros((0, 3, 2))

    corners = np.array([np.asarray(t.exterior.coords)[:3, :2] for t in triangles])
    ab = corners[:, 1] - corners[:, 0]
    ac = corners[:, 2] - corners[:, 0]
    cross = ab[:, 0] * ac[:, 1] - ab[:, 1] * ac[:, 0]

    keep = np.abs(cross) > 1e-12 * polygon.area
    corners = corners[keep]
    clockwise = cross[keep] < 0.0
    corners[clockwise] = corners[clockwise][:, ::-1]
    return corners
