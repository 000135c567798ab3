# -- Planar Region Triangulation Tests -- #

'''
Even-odd loop grouping and constrained Delaunay triangulation, with holes,
nested islands, collinear, repeated and self-touching points.

Sean Bowman [10/18/2026]
'''

import numpy as np
import pytest
from shapely.geometry import Point, Polygon

from computationalEngineering.HullDesign.sections.triangulation import (
    evenOddRegion,
    loopPolygons,
    triangulatePolygon,
)


def _signedAreas(corners):
    ab = corners[:, 1] - corners[:, 0]
    ac = corners[:, 2] - corners[:, 0]
    return 0.5 * (ab[:, 0] * ac[:, 1] - ab[:, 1] * ac[:, 0])


SQUARE = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]]


######################################################################
# -- Triangulation -- #
######################################################################

def testSquare():
    corners = triangulatePolygon(Polygon(SQUARE))
    assert corners.shape == (2, 3, 2)
    areas = _signedAreas(corners)
    assert (areas > 0.0).all()
    assert areas.sum() == pytest.approx(1.0)


def testClockwiseInputGivesCounterClockwiseTriangles():
    corners = triangulatePolygon(Polygon(SQUARE[::-1]))
    areas = _signedAreas(corners)
    assert (areas > 0.0).all()
    assert areas.sum() == pytest.approx(1.0)


def testConcaveLShape():
    outer = [[0, 0], [2, 0], [2, 1], [1, 1], [1, 2], [0, 2]]
    corners = triangulatePolygon(Polygon(outer))
    assert len(corners) == 4
    areas = _signedAreas(corners)
    assert (areas > 0.0).all()
    assert areas.sum() == pytest.approx(3.0)

    # No triangle covers the notch
    centroids = corners.mean(axis=1)
    assert not ((centroids[:, 0] > 1.0) & (centroids[:, 1] > 1.0)).any()


def testUShapedBand():
    '''Thin U band like a hull wall section.'''
    outer = [
        [-20, 25], [-20, 0], [20, 0], [20, 25],
        [18.8, 25], [18.8, 1.2], [-18.8, 1.2], [-18.8, 25],
    ]
    corners = triangulatePolygon(Polygon(outer))
    areas = _signedAreas(corners)
    assert (areas > 0.0).all()
    assert areas.sum() == pytest.approx(40.0 * 25.0 - 37.6 * 23.8)


def testCornersAreBoundaryPoints():
    outer = [[0, 0], [4, 0], [4, 4], [0, 4]]
    hole = [[1, 1], [3, 1], [3, 3], [1, 3]]
    corners = triangulatePolygon(Polygon(outer, [hole]))
    boundary = {tuple(p) for p in np.array(outer + hole, dtype=float)}
    assert {tuple(p) for p in corners.reshape(-1, 2)} <= boundary


def testCollinearAndRepeatedPoints():
    outer = [[0, 0], [0.5, 0], [1, 0], [1, 0], [1, 0.5], [1, 1], [0, 1]]
    corners = triangulatePolygon(Polygon(outer))
    areas = _signedAreas(corners)
    assert (areas > 0.0).all()
    assert areas.sum() == pytest.approx(1.0)


######################################################################
# -- Even-Odd Region -- #
######################################################################

def testSquareWithHole():
    outer = np.array([[0, 0], [4, 0], [4, 4], [0, 4]], dtype=float)
    hole = np.array([[1, 1], [3, 1], [3, 3], [1, 3]], dtype=float)
    polygons = evenOddRegion([hole, outer])
    assert len(polygons) == 1
    assert len(polygons[0].interiors) == 1
    assert polygons[0].area == pytest.approx(12.0)

    corners = triangulatePolygon(polygons[0])
    assert _signedAreas(corners).sum() == pytest.approx(12.0)
    centroids = corners.mean(axis=1)
    inHole = (centroids > 1.0).all(axis=1) & (centroids < 3.0).all(axis=1)
    assert not inHole.any()


def testIslandInsideHole():
    outer = np.array([[0, 0], [10, 0], [10, 10], [0, 10]], dtype=float)
    hole = np.array([[2, 2], [8, 2], [8, 8], [2, 8]], dtype=float)
    island = np.array([[4, 4], [6, 4], [6, 6], [4, 6]], dtype=float)
    polygons = evenOddRegion([island, outer, hole])
    assert [p.area for p in polygons] == pytest.approx([64.0, 4.0])
    assert polygons[1].contains(Point(5.0, 5.0))


def testDisjointLoopsLargestFirst():
    small = np.array([[10, 0], [11, 0], [11, 1], [10, 1]], dtype=float)
    big = np.array([[0, 0], [4, 0], [4, 4], [0, 4]], dtype=float)
    polygons = evenOddRegion([small, big])
    assert [p.area for p in polygons] == pytest.approx([16.0, 1.0])


def testBowtieLoopIsRepaired():
    bowtie = np.array([[0, 0], [2, 2], [2, 0], [0, 2]], dtype=float)
    parts = loopPolygons(bowtie)
    assert len(parts) == 2
    assert sum(p.area for p in parts) == pytest.approx(2.0)


def testDegenerateLoopsGiveNothing():
    line = np.array([[0, 0], [1, 0], [2, 0]], dtype=float)
    assert evenOddRegion([line]) == []
    assert evenOddRegion([np.zeros((2, 2))]) == []
    assert evenOddRegion([]) == []
