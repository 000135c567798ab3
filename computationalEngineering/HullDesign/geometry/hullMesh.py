# -- Indexed Hull Mesh -- #

'''
Indexed triangle mesh container returned by the shell mesher.

Holds vertex positions, triangle indices and an optional per-face surface tag.
Derived quantities (face normals, vertex normals, edge use counts, enclosed
volume) are computed lazily with numpy and cached.

Sean Bowman [10/05/2026]
'''

from __future__ import annotations

from enum import IntEnum
from typing import Optional

import numpy as np
import trimesh


class SurfaceTag(IntEnum):
    '''Which part of the shell a face belongs to.'''

    OUTER = 0
    INNER = 1
    RIM = 2
    TRANSOM_OUTER = 3
    TRANSOM_INNER = 4
    TRANSOM_TOP = 5
    BOW_OUTER = 6
    BOW_INNER = 7
    BOW_RIM = 8
    ACCESSORY = 9


class HullMesh:
    '''
    Triangle mesh with float64 vertices and int64 faces.

    Faces wind counter-clockwise when viewed from outside the material,
    so face normals point away from the shell wall.
    '''

    def __init__(
        self,
        vertices: np.ndarray,
        faces: np.ndarray,
        faceTags: Optional[np.ndarray] = None,
    ) -> None:
        '''
        Parameters:
        -----------
        vertices : np.ndarray
            Vertex positions, shape (V, 3) [mm]
        faces : np.ndarray
            Triangle vertex indices, shape (F, 3)
        faceTags : np.ndarray | None
            SurfaceTag value per face, shape (F,)
        '''
        self.vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
        self.faces = np.asarray(faces, dtype=np.int64).reshape(-1, 3)
        if faceTags is None:
            self.faceTags = None
        else:
            self.faceTags = np.asarray(faceTags, dtype=np.int64).reshape(-1)

        self._faceNormals: Optional[np.ndarray] = None
        self._vertexNormals: Optional[np.ndarray] = None

    def __repr__(self) -> str:
        return f'HullMesh(vertices={len(self.vertices)}, faces={len(self.faces)})'

    @property
    def vertexCount(self) -> int:
        return len(self.vertices)

    @property
    def faceCount(self) -> int:
        return len(self.faces)

    ######################################################################
    # -- Normals & Areas -- #
    ######################################################################

    def _crossProducts(self) -> np.ndarray:
        tri = self.vertices[self.faces]
        return np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])

    @property
    def faceAreas(self) -> np.ndarray:
        '''Triangle areas, shape (F,) [mm^2].'''
        return 0.5 * np.linalg.norm(self._crossProducts(), axis=1)

    @property
    def faceNormals(self) -> np.ndarray:
        '''
        Unit face normals, shape (F, 3).
        Zero-area faces get a zero normal.
        '''
        if self._faceNormals is None:
            cross = self._crossProducts()
            lengths = np.linalg.norm(cross, axis=1)
            normals = np.zeros_like(cross)
            nonZero = lengths > 0.0
            normals[nonZero] = cross[nonZero] / lengths[nonZero, None]
            self._faceNormals = normals
        return self._faceNormals

    @property
    def vertexNormals(self) -> np.ndarray:
        '''
        Area-weighted average of adjacent face normals, shape (V, 3).

        The un-normalised cross product of each face is twice its area times
        its unit normal, so summing it per corner gives the area weighting.
        '''
        if self._vertexNormals is None:
            cross = self._crossProducts()
            accum = np.zeros_like(self.vertices)
            for corner in range(3):
                np.add.at(accum, self.faces[:, corner], cross)
            lengths = np.linalg.norm(accum, axis=1)
            normals = np.zeros_like(accum)
            nonZero = lengths > 0.0
            normals[nonZero] = accum[nonZero] / lengths[nonZero, None]
            self._vertexNormals = normals
        return self._vertexNormals

    ######################################################################
    # -- Topology Checks -- #
    ######################################################################

    def edgeUseCounts(self) -> tuple[np.ndarray, np.ndarray]:
        '''
        Count how many faces use each undirected edge.

        Returns:
        --------
        tuple[np.ndarray, np.ndarray] :
            (unique sorted edges shape (E, 2), use count per edge shape (E,))
        '''
        edges = np.concatenate([
            self.faces[:, [0, 1]],
            self.faces[:, [1, 2]],
            self.faces[:, [2, 0]],
        ])
        edges.sort(axis=1)
        unique, counts = np.unique(edges, axis=0, return_counts=True)
        return unique, counts

    def boundaryEdges(self) -> np.ndarray:
        '''Edges used by anything other than exactly two faces, shape (K, 2).'''
        unique, counts = self.edgeUseCounts()
        return unique[counts != 2]

    @property
    def isClosed(self) -> bool:
        '''True if every edge is shared by exactly two triangles.'''
        return len(self.faces) > 0 and len(self.boundaryEdges()) == 0

    def hasValidFaces(self) -> bool:
        '''True if every face has three distinct in-range vertex indices.'''
        if len(self.faces) == 0:
            return True
        inRange = (self.faces >= 0).all() and (self.faces < len(self.vertices)).all()
        f = self.faces
        distinct = (f[:, 0] != f[:, 1]) & (f[:, 1] != f[:, 2]) & (f[:, 0] != f[:, 2])
        return bool(inRange and distinct.all())

    @property
    def eulerCharacteristic(self) -> int:
        '''V - E + F, equal to 2 for a closed genus-0 surface.'''
        unique, _ = self.edgeUseCounts()
        return len(self.vertices) - len(unique) + len(self.faces)

    ######################################################################
    # -- Measurements -- #
    ######################################################################

    @property
    def volume(self) -> float:
        '''
        Signed enclosed volume by the divergence theorem [mm^3].
        Positive when faces wind outward. Only meaningful when isClosed.
        '''
        tri = self.vertices[self.faces]
        return float(np.einsum('ij,ij->i', tri[:, 0], np.cross(tri[:, 1], tri[:, 2])).sum() / 6.0)

    @property
    def bounds(self) -> np.ndarray:
        '''Axis-aligned bounds, shape (2, 3): [min, max].'''
        return np.array([self.vertices.min(axis=0), self.vertices.max(axis=0)])

    @property
    def boundingBoxDiagonal(self) -> float:
        '''Length of the axis-aligned bounding-box diagonal [mm].'''
        if len(self.vertices) == 0:
            return 0.0
        lo, hi = self.bounds
        return float(np.linalg.norm(hi - lo))

    def facesWithTag(self, tag: SurfaceTag) -> np.ndarray:
        '''Indices of faces carrying the given surface tag.'''
        if self.faceTags is None:
            return np.zeros(0, dtype=np.int64)
        return np.nonzero(self.faceTags == int(tag))[0]

    ######################################################################
    # -- Conversion -- #
    ######################################################################

    def toTrimesh(self) -> trimesh.Trimesh:
        '''
        Convert to a trimesh.Trimesh without merging or reordering vertices.

        Returns:
        --------
        trimesh.Trimesh : Mesh sharing this mesh's vertex order
        '''
        return trimesh.Trimesh(vertices=self.vertices, faces=self.faces, process=False)

    @classmethod
    def concatenate(cls, meshes: list[HullMesh]) -> HullMesh:
        '''
        Join several meshes into one, offsetting face indices.

        Parameters:
        -----------
        meshes : list[HullMesh]
            Meshes to join, in order

        Returns:
        --------
        HullMesh : Combined mesh (tags kept only if every part has them)
        '''
        vertexBlocks = []
        faceBlocks = []
        tagBlocks = []
        offset = 0
        for mesh in meshes:
            vertexBlocks.append(mesh.vertices)
            faceBlocks.append(mesh.faces + offset)
            tagBlocks.append(mesh.faceTags)
            offset += len(mesh.vertices)

        tags = None
        if tagBlocks and all(t is not None for t in tagBlocks):
            tags = np.concatenate(tagBlocks)

        return cls(np.concatenate(vertexBlocks), np.concatenate(faceBlocks), tags)
