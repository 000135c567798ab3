# -- Plane Cross-Section Extractor -- #

'''
Cuts a closed triangle mesh with a plane and returns the capped region.

The algorithm:
  1. If any vertex lies within tolerance of the plane, the cut is taken on a
     plane shifted a few tolerances back against the normal, so faces lying
     in the plane resolve to the material behind them
  2. Segments where the plane crosses the triangles come from
     trimesh.intersections.mesh_plane and are projected onto the requested
     plane
  3. Segment endpoints closer than tolerance are merged into shared nodes
     (scipy cKDTree pairs, connected components); segments collapsing onto a
     single node are dropped
  4. Nodes are walked into closed loops; chains that do not close are dropped
  5. Loops are projected to 2D by dropping the dominant axis of the normal,
     combined under the even-odd rule and triangulated with shapely
  6. Triangle corners are lifted back onto the plane

Sean Bowman [10/10/2026]
'''

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
import trimesh
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components
from scipy.spatial import cKDTree
from shapely.geometry import Polygon

from computationalEngineering.HullDesign import constants as const
from computationalEngineering.HullDesign.geometry.hullMesh import HullMesh
from computationalEngineering.HullDesign.sections.triangulation import (
    evenOddRegion,
    triangulatePolygon,
)


_AXES = {'x': 0, 'y': 1, 'z': 2}


######################################################################
# -- Clip Plane -- #
######################################################################

@dataclass
class ClipPlane:
    '''
    Plane of points p with normal . p = offset.

    The normal is normalised on construction (offset scaled to match).

    Parameters:
    -----------
    normal : np.ndarray
        Plane normal, shape (3,)
    offset : float
        Signed distance of the plane from the origin along the normal [mm]
    '''

    normal: np.ndarray
    offset: float = 0.0

    def __post_init__(self) -> None:
        normal = np.asarray(self.normal, dtype=np.float64).reshape(3)
        length = float(np.linalg.norm(normal))
        if length == 0.0:
            raise ValueError('ClipPlane normal must be non-zero')
        self.normal = normal / length
        self.offset = float(self.offset) / length

    @classmethod
    def axis(cls, axis: str, position: float) -> ClipPlane:
        '''
        Plane perpendicular to a coordinate axis.

        Parameters:
        -----------
        axis : str
            'x', 'y' or 'z'
        position : float
            Coordinate of the plane along that axis [mm]

        Returns:
        --------
        ClipPlane : The axis-aligned plane
        '''
        if axis not in _AXES:
            raise ValueError(
                f'Unknown axis \'{axis}\'. '
                f'Available: {list(_AXES.keys())}'
            )
        normal = np.zeros(3)
        normal[_AXES[axis]] = 1.0
        return cls(normal=normal, offset=position)

    @classmethod
    def fromPointNormal(cls, point, normal) -> ClipPlane:
        '''Plane through a point with the given normal.'''
        normal = np.asarray(normal, dtype=np.float64)
        return cls(normal=normal, offset=float(np.dot(normal, point)))

    def signedDistance(self, points: np.ndarray) -> np.ndarray:
        '''Signed distance of points (N, 3) to the plane.'''
        return np.asarray(points, dtype=np.float64) @ self.normal - self.offset

    @property
    def dominantAxis(self) -> int:
        '''Index of the largest normal component.'''
        return int(np.argmax(np.abs(self.normal)))

    def project(self, points: np.ndarray) -> np.ndarray:
        '''
        Drop the dominant axis to get 2D coordinates.

        The kept axes are taken in cyclic order after the dropped one, so
        counter-clockwise 2D winding corresponds to the positive dominant axis.

        Parameters:
        -----------
        points : np.ndarray
            Points on the plane, shape (N, 3)

        Returns:
        --------
        np.ndarray : Projected points, shape (N, 2)
        '''
        k = self.dominantAxis
        return np.asarray(points)[:, [(k + 1) % 3, (k + 2) % 3]]

    def lift(self, points2d: np.ndarray) -> np.ndarray:
        '''
        Inverse of project: place 2D coordinates back on the plane.

        Parameters:
        -----------
        points2d : np.ndarray
            Projected coordinates, shape (N, 2)

        Returns:
        --------
        np.ndarray : Points on the plane, shape (N, 3)
        '''
        points2d = np.asarray(points2d, dtype=np.float64).reshape(-1, 2)
        k = self.dominantAxis
        u, v = (k + 1) % 3, (k + 2) % 3
        points = np.zeros((len(points2d), 3))
        points[:, u] = points2d[:, 0]
        points[:, v] = points2d[:, 1]
        points[:, k] = (
            self.offset - self.normal[u] * points2d[:, 0] - self.normal[v] * points2d[:, 1]
        ) / self.normal[k]
        return points

    def snap(self, points: np.ndarray) -> np.ndarray:
        '''Orthogonal projection of 3D points (..., 3) onto the plane.'''
        points = np.asarray(points, dtype=np.float64)
        distance = points @ self.normal - self.offset
        return points - distance[..., None] * self.normal

    def shifted(self, distance: float) -> ClipPlane:
        '''Parallel plane moved by distance along the normal.'''
        return ClipPlane(normal=self.normal, offset=self.offset + distance)


######################################################################
# -- Capped Region -- #
######################################################################

@dataclass
class CappedRegion:
    '''
    Triangulated region where a plane cuts the hull.

    Parameters:
    -----------
    plane : ClipPlane
        The cutting plane
    vertices : np.ndarray
        Region vertices on the plane, shape (V, 3)
    triangles : np.ndarray
        Vertex index triples, shape (T, 3), wound counter-clockwise about
        the plane normal
    outerLoop : np.ndarray
        Outer boundary of the largest piece, shape (N, 3)
    holeLoops : list[np.ndarray]
        Holes inside the outer boundary
    islands : list[tuple[np.ndarray, list[np.ndarray]]]
        Further disjoint pieces as (outer, holes) pairs
    '''

    plane: ClipPlane
    vertices: np.ndarray
    triangles: np.ndarray
    outerLoop: np.ndarray
    holeLoops: list[np.ndarray] = field(default_factory=list)
    islands: list[tuple[np.ndarray, list[np.ndarray]]] = field(default_factory=list)

    def _loopArea(self, loop: np.ndarray) -> float:
        projected = Polygon(self.plane.project(loop)).area
        return projected / abs(self.plane.normal[self.plane.dominantAxis])

    @property
    def outerArea(self) -> float:
        '''Area enclosed by the outer boundary of the largest piece [mm^2].'''
        return self._loopArea(self.outerLoop)

    @property
    def holeArea(self) -> float:
        '''Total area of the holes in the largest piece [mm^2].'''
        return sum(self._loopArea(h) for h in self.holeLoops)

    @property
    def boundaryArea(self) -> float:
        '''Net area from the loops: outers minus holes, all pieces [mm^2].'''
        total = self.outerArea - self.holeArea
        for outer, holes in self.islands:
            total += self._loopArea(outer) - sum(self._loopArea(h) for h in holes)
        return total

    @property
    def area(self) -> float:
        '''Area covered by the triangles [mm^2].'''
        if len(self.triangles) == 0:
            return 0.0
        tri = self.vertices[self.triangles]
        cross = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
        return float(0.5 * np.linalg.norm(cross, axis=1).sum())

    @property
    def loopCount(self) -> int:
        '''Number of boundary loops over all pieces.'''
        return 1 + len(self.holeLoops) + sum(1 + len(h) for _, h in self.islands)

    def toHullMesh(self) -> HullMesh:
        '''The cap as an (open) HullMesh for rendering.'''
        return HullMesh(self.vertices, self.triangles)


######################################################################
# -- Segment Extraction -- #
######################################################################

def clearCutPlane(
    mesh: HullMesh,
    plane: ClipPlane,
    tolerance: float,
) -> ClipPlane:
    '''
    Plane actually used for the cut: the requested plane, or a parallel one
    moved back against the normal until no vertex is within tolerance of it.

    Parameters:
    -----------
    mesh : HullMesh
        Triangle mesh
    plane : ClipPlane
        Requested cutting plane
    tolerance : float
        Distance within which a vertex counts as on the plane [mm]

    Returns:
    --------
    ClipPlane : Plane clear of every vertex (the largest shift if none is)
    '''
    distances = plane.signedDistance(mesh.vertices)
    for step in const.planeShiftSteps:
        shift = step * tolerance
        if not np.any(np.abs(distances + shift) <= tolerance):
            return plane.shifted(-shift)
    return plane.shifted(-const.planeShiftSteps[-1] * tolerance)


def intersectSegments(
    mesh: HullMesh,
    plane: ClipPlane,
    tolerance: float,
) -> np.ndarray:
    '''
    Segments where the plane crosses the mesh triangles.

    Parameters:
    -----------
    mesh : HullMesh
        Triangle mesh
    plane : ClipPlane
        Cutting plane
    tolerance : float
        Distance within which a vertex counts as on the plane [mm]

    Returns:
    --------
    np.ndarray : Segments on the requested plane, shape (S, 2, 3)
    '''
    if mesh.faceCount == 0:
        return np.zeros((0, 2, 3))

    cut = clearCutPlane(mesh, plane, tolerance)
    segments = trimesh.intersections.mesh_plane(
        mesh.toTrimesh(),
        plane_normal=cut.normal,
        plane_origin=cut.normal * cut.offset,
    )
    segments = np.asarray(segments, dtype=np.float64).reshape(-1, 2, 3)
    return plane.snap(segments)


######################################################################
# -- Loop Stitching -- #
######################################################################

def mergeEndpoints(
    points: np.ndarray,
    tolerance: float,
) -> tuple[np.ndarray, np.ndarray]:
    '''
    Cluster points closer than tolerance (transitively) into nodes.

    Parameters:
    -----------
    points : np.ndarray
        Points, shape (N, 3)
    tolerance : float
        Merge distance [mm]

    Returns:
    --------
    tuple[np.ndarray, np.ndarray] : Node positions (mean of each cluster),
        shape (M, 3), and the node label of every point, shape (N,)
    '''
    n = len(points)
    pairs = cKDTree(points).query_pairs(r=tolerance, output_type='ndarray')
    graph = coo_matrix(
        (np.ones(len(pairs)), (pairs[:, 0], pairs[:, 1])),
        shape=(n, n),
    )
    nNodes, labels = connected_components(graph, directed=False)

    counts = np.bincount(labels, minlength=nNodes).astype(np.float64)
    nodes = np.zeros((nNodes, 3))
    np.add.at(nodes, labels, points)
    return nodes / counts[:, None], labels


def stitchLoops(
    segments: np.ndarray,
    tolerance: float,
) -> list[np.ndarray]:
    '''
    Chain segments into closed loops.

    Endpoints within tolerance share a node, so segments shorter than the
    tolerance collapse and are discarded. Each remaining segment is an edge
    between two nodes (duplicates counted once); loops are walked edge by
    edge until they return to their starting node. Chains that run into a
    dead end are not closed boundaries and are dropped.

    Parameters:
    -----------
    segments : np.ndarray
        Segments, shape (S, 2, 3)
    tolerance : float
        Endpoint matching distance [mm]

    Returns:
    --------
    list[np.ndarray] : Closed loops of shape (N, 3), closing point not
        repeated, each with at least three points
    '''
    if len(segments) == 0:
        return []

    nodes, labels = mergeEndpoints(segments.reshape(-1, 3), tolerance)
    edges = labels.reshape(-1, 2)
    edges = edges[edges[:, 0] != edges[:, 1]]
    if len(edges) == 0:
        return []
    edges = np.unique(np.sort(edges, axis=1), axis=0)

    incident: dict[int, list[int]] = {}
    for e, (a, b) in enumerate(edges):
        incident.setdefault(int(a), []).append(e)
        incident.setdefault(int(b), []).append(e)

    used = np.zeros(len(edges), dtype=bool)
    loops: list[np.ndarray] = []

    for seed in range(len(edges)):
        if used[seed]:
            continue
        used[seed] = True
        start, current = int(edges[seed][0]), int(edges[seed][1])
        chain = [start]
        closed = False

        while True:
            if current == start:
                closed = True
                break
            chain.append(current)
            nextEdge = next((e for e in incident[current] if not used[e]), None)
            if nextEdge is None:
                break
            used[nextEdge] = True
            a, b = int(edges[nextEdge][0]), int(edges[nextEdge][1])
            current = b if a == current else a

        if closed and len(chain) >= const.minLoopPoints:
            loops.append(nodes[chain])

    return loops


def dropRepeats(loop: np.ndarray, tolerance: float) -> np.ndarray:
    '''Remove consecutive points closer than tolerance (including the wrap).'''
    kept = [loop[0]]
    for p in loop[1:]:
        if np.linalg.norm(p - kept[-1]) > tolerance:
            kept.append(p)
    while len(kept) > 1 and np.linalg.norm(kept[-1] - kept[0]) <= tolerance:
        kept.pop()
    return np.array(kept)


######################################################################
# -- Region Assembly -- #
######################################################################

def regionFromLoops(
    loops: list[np.ndarray],
    plane: ClipPlane,
) -> Optional[CappedRegion]:
    '''
    Build a triangulated CappedRegion from closed 3D loops on a plane.

    Loops are combined under the even-odd rule: a loop inside an odd number
    of other loops bounds a hole. The largest resulting piece supplies the
    outer boundary and holes; the others become islands.

    Parameters:
    -----------
    loops : list[np.ndarray]
        Closed loops, each shape (N, 3), closing point not repeated
    plane : ClipPlane
        Plane the loops lie on

    Returns:
    --------
    CappedRegion | None : None if the loops enclose no area
    '''
    loops2d = [
        plane.project(np.asarray(loop, dtype=np.float64))
        for loop in loops if len(loop) >= const.minLoopPoints
    ]
    polygons = evenOddRegion(loops2d)
    if not polygons:
        return None

    corners = np.concatenate([triangulatePolygon(p) for p in polygons])
    if len(corners) == 0:
        return None

    # Triangles only use boundary points, so exact matches identify shared corners
    points2d, inverse = np.unique(corners.reshape(-1, 2), axis=0, return_inverse=True)
    triangles = inverse.reshape(-1, 3)

    # Counter-clockwise in the projection means +dominant axis
    if plane.normal[plane.dominantAxis] < 0.0:
        triangles = triangles[:, ::-1]

    def ring(coords) -> np.ndarray:
        return plane.lift(np.asarray(coords)[:-1, :2])

    pieces = [(ring(p.exterior.coords), [ring(h.coords) for h in p.interiors]) for p in polygons]
    outer, holes = pieces[0]
    return CappedRegion(
        plane=plane,
        vertices=plane.lift(points2d),
        triangles=np.ascontiguousarray(triangles),
        outerLoop=outer,
        holeLoops=holes,
        islands=pieces[1:],
    )


######################################################################
# -- Public Entry Point -- #
######################################################################

def defaultTolerance(mesh: HullMesh) -> float:
    '''Endpoint matching tolerance scaled to the mesh size [mm].'''
    diagonal = mesh.boundingBoxDiagonal
    return max(diagonal * const.sectionToleranceFraction, 1e-9)


def extractSection(
    mesh: HullMesh,
    plane: ClipPlane,
    tolerance: Optional[float] = None,
) -> Optional[CappedRegion]:
    '''
    Cut a mesh with a plane and triangulate the exposed region.

    A plane through mesh vertices (a station, the floor top, the gunwale) is
    evaluated a few tolerances behind itself, so a face lying in the plane
    counts as material when the solid lies behind it and as empty otherwise.
    The returned region always lies on the requested plane.

    Parameters:
    -----------
    mesh : HullMesh
        Closed triangle mesh
    plane : ClipPlane
        Cutting plane
    tolerance : float | None
        Absolute matching tolerance [mm]; defaults to 1e-4 of the mesh
        bounding-box diagonal

    Returns:
    --------
    CappedRegion | None : None if the plane misses the mesh or no closed
        loop enclosing area can be formed
    '''
    if tolerance is None:
        tolerance = defaultTolerance(mesh)

    segments = intersectSegments(mesh, plane, tolerance)
    if len(segments) == 0:
        return None

    loops = stitchLoops(segments, tolerance)
    return regionFromLoops(loops, plane)
