# -- Hollow Hull Shell Mesher -- #

'''
Generates a closed, hollow-shell triangle mesh of the RC boat hull.

Stitches cross-section profiles from the transom to the bow tip. The wall
of every section is one closed outline (outer U, rim across the top of the
port wall, inner U reversed, rim across the starboard wall), so sweeping it
from station to station gives a tube of wall material with no open edges.
The two ends are then closed:

  1. Stern: the first section's inner ring is replaced by a copy shifted
     forward by one wall thickness. The outer ring is fan-capped facing aft,
     the shifted inner ring is fan-capped facing forward, and a flat strip
     joins their top edges, giving a transom plate exactly one wall thick.
  2. Bow: the last full section is joined to the collapsed tip profile.
     Outer and inner fans converge on their tip points and four wedge
     triangles at the gunwale corners route through the inner tip.

Every edge is shared by exactly two triangles and faces wind outward from
the wall material. All geometry in millimeters.

Sean Bowman [10/06/2026]
'''

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import trimesh

from computationalEngineering.HullDesign import constants as const
from computationalEngineering.HullDesign.geometry.hullMesh import HullMesh, SurfaceTag
from computationalEngineering.HullDesign.geometry.parameters import HullParameters
from computationalEngineering.HullDesign.geometry.profile import (
    CollapsedProfile,
    FullProfile,
    ProfileGenerator,
    RingPoint,
    UNIQUE_RING_POINTS,
    isCollapsedStation,
    ringIndex,
)


######################################################################
# -- Resolution Presets -- #
######################################################################

RESOLUTION_PRESETS = {
    'draft': {'sternSections': 2, 'bowSections': 10},
    'standard': {'sternSections': const.sternSections, 'bowSections': const.bowSections},
    'high': {'sternSections': 6, 'bowSections': 40},
}

# Ring edges swept along the hull: every consecutive pair except the open top
_PATH_EDGES = [
    (ringIndex(p), ringIndex(p + 1))
    for p in range(RingPoint.BOTTOM_CENTER, RingPoint.BOTTOM_CENTER_CLOSE)
    if p != RingPoint.TOP_LEFT
]

_TL = ringIndex(RingPoint.TOP_LEFT)
_TR = ringIndex(RingPoint.TOP_RIGHT)
_BC = ringIndex(RingPoint.BOTTOM_CENTER)


@dataclass
class Station:
    '''
    One longitudinal sample of the hull.

    Parameters:
    -----------
    z : float
        Station position, hull centred so z spans [-L/2, L/2] [mm]
    scale : float
        Beam scale factor
    bowProgress : float
        0 along the stern run, 1 at the bow tip
    isTip : bool
        True for the collapsed bow tip
    '''

    z: float
    scale: float
    bowProgress: float
    isTip: bool = False


class ShellMesher:
    '''
    Builds the hollow hull shell from hull parameters.

    Examples:
    ---------
    >>> mesher = ShellMesher.fromPreset(HullParameters.default(), 'standard')
    >>> mesh = mesher.generate()
    >>> mesh.isClosed
    True
    '''

    def __init__(
        self,
        params: HullParameters,
        sternSections: int = const.sternSections,
        bowSections: int = const.bowSections,
    ) -> None:
        '''
        Parameters:
        -----------
        params : HullParameters
            Hull dimensions (mm)
        sternSections : int
            Constant-section intervals along the stern run
        bowSections : int
            Tapered intervals along the bow run, the last ending at the tip
        '''
        self._params = params
        self._sternSections = max(1, int(sternSections))
        self._bowSections = max(1, int(bowSections))
        self._generator = ProfileGenerator(params)

        # Cached mesh, generated on first call to generate() or getMesh()
        self._mesh: Optional[HullMesh] = None

    @classmethod
    def fromPreset(cls, params: HullParameters, preset: str = 'standard') -> ShellMesher:
        '''
        Create a mesher using a named resolution preset.

        Parameters:
        -----------
        params : HullParameters
            Hull dimensions
        preset : str
            Resolution preset name: 'draft', 'standard', or 'high'

        Returns:
        --------
        ShellMesher : Configured mesher
        '''
        if preset not in RESOLUTION_PRESETS:
            raise ValueError(
                f'Unknown preset \'{preset}\'. '
                f'Available: {list(RESOLUTION_PRESETS.keys())}'
            )
        return cls(params, **RESOLUTION_PRESETS[preset])

    @property
    def params(self) -> HullParameters:
        return self._params

    @property
    def transomThickness(self) -> float:
        '''Thickness of the transom plate, one wall thickness [mm].'''
        return self._params.wallThickness

    ######################################################################
    # -- Public Generation -- #
    ######################################################################

    def generate(self) -> HullMesh:
        '''
        Generate the closed hull shell.

        Returns:
        --------
        HullMesh : Vertices in mm, outward-wound faces tagged by surface
        '''
        stations = self.stations()
        if len(stations) < 2 or stations[0].isTip:
            # Whole hull narrower than the tip threshold
            self._mesh = HullMesh(np.zeros((0, 3)), np.zeros((0, 3), dtype=np.int64), np.zeros(0))
            return self._mesh

        vertices, faces, tags = self._buildMesh(stations)
        self._mesh = HullMesh(vertices, faces, tags)
        return self._mesh

    def getMesh(self) -> HullMesh:
        '''Get the generated mesh, creating it on first access.'''
        if self._mesh is None:
            self.generate()
        return self._mesh

    def toTrimesh(self) -> trimesh.Trimesh:
        '''The shell as a trimesh.Trimesh with the mesher's vertex order.'''
        return self.getMesh().toTrimesh()

    def computeVolume(self) -> float:
        '''
        Volume of shell material in mm^3.

        Returns:
        --------
        float : Enclosed volume (0 if the mesh is not closed)
        '''
        mesh = self.getMesh()
        if not mesh.isClosed:
            return 0.0
        return abs(mesh.volume)

    ######################################################################
    # -- Station Sampling -- #
    ######################################################################

    def stations(self) -> list[Station]:
        '''
        Longitudinal stations from transom to bow tip.

        The stern run has sternSections + 1 full stations. The bow run adds
        bowSections stations with the scale falling linearly to 0, the last
        forced to the tip. The first station that collapses ends the list.

        Returns:
        --------
        list[Station] : Stations in increasing z
        '''
        p = self._params
        bowLength = p.bowLength
        sternLength = p.sternLength
        hullCenterZ = (bowLength - sternLength) / 2.0

        stations: list[Station] = []
        for i in range(self._sternSections + 1):
            t = i / self._sternSections
            z = -sternLength + t * sternLength - hullCenterZ
            stations.append(Station(z=z, scale=1.0, bowProgress=0.0))

        for i in range(1, self._bowSections + 1):
            t = i / self._bowSections
            z = t * bowLength - hullCenterZ
            stations.append(Station(
                z=z, scale=1.0 - t, bowProgress=t, isTip=(i == self._bowSections),
            ))

        for i, station in enumerate(stations):
            if isCollapsedStation(p, station.scale, station.isTip):
                station.isTip = True
                return stations[:i + 1]
        return stations

    def profiles(self, stations: Optional[list[Station]] = None) -> list:
        '''Cross-section profile at every station.'''
        if stations is None:
            stations = self.stations()
        return [
            self._generator.profile(s.z, s.scale, s.bowProgress, s.isTip)
            for s in stations
        ]

    ######################################################################
    # -- Mesh Assembly -- #
    ######################################################################

    def _buildMesh(
        self, stations: list[Station]
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        '''
        Assemble vertices and faces for the full shell.

        Vertex layout: each full section stores its unique outer ring points
        followed by its unique inner ring points. The first section's inner
        ring is the transom copy. The tip adds two vertices.

        Parameters:
        -----------
        stations : list[Station]
            Stations from stations(), the last one a tip

        Returns:
        --------
        tuple[np.ndarray, np.ndarray, np.ndarray] :
            (vertices shape (V, 3), faces shape (F, 3), tags shape (F,))
        '''
        profiles = self.profiles(stations)
        fullProfiles: list[FullProfile] = profiles[:-1]
        tip: CollapsedProfile = profiles[-1]

        # Transom: inner ring of the first section moves forward one wall thickness
        first = stations[0]
        transomInner = self._generator.profile(
            first.z + self.transomThickness, first.scale, first.bowProgress,
        ).inner

        vertexBlocks = []
        outerOffsets: list[int] = []
        innerOffsets: list[int] = []
        nextIndex = 0
        for k, section in enumerate(fullProfiles):
            inner = transomInner if k == 0 else section.inner
            vertexBlocks.append(section.outer[:UNIQUE_RING_POINTS])
            vertexBlocks.append(inner[:UNIQUE_RING_POINTS])
            outerOffsets.append(nextIndex)
            innerOffsets.append(nextIndex + UNIQUE_RING_POINTS)
            nextIndex += 2 * UNIQUE_RING_POINTS

        tipOuter = nextIndex
        tipInner = nextIndex + 1
        vertexBlocks.append(np.array([tip.outerTip, tip.innerTip]))

        faceList: list[list[int]] = []
        tagList: list[int] = []

        # Wall tube between every pair of full sections
        for k in range(len(fullProfiles) - 1):
            self._addWallSegment(
                faceList, tagList,
                outerA=outerOffsets[k], innerA=innerOffsets[k],
                outerB=outerOffsets[k + 1], innerB=innerOffsets[k + 1],
            )

        self._addBowClosure(
            faceList, tagList, outerOffsets[-1], innerOffsets[-1], tipOuter, tipInner,
        )
        self._addTransom(faceList, tagList, outerOffsets[0], innerOffsets[0])

        vertices = np.concatenate(vertexBlocks).astype(np.float64)
        faces = np.array(faceList, dtype=np.int64)
        tags = np.array(tagList, dtype=np.int64)
        return vertices, faces, tags

    def _addWallSegment(
        self,
        faceList: list[list[int]],
        tagList: list[int],
        outerA: int,
        innerA: int,
        outerB: int,
        innerB: int,
    ) -> None:
        '''
        Triangulate the wall tube between an aft section A and a forward section B.

        Outer quads face away from the hull axis, inner quads are wound the
        other way so they face into the hollow, and the two rim quads close
        the top of each side wall.

        Parameters:
        -----------
        faceList : list[list[int]]
            Accumulator for face triples (modified in place)
        tagList : list[int]
            Accumulator for face tags (modified in place)
        outerA, innerA : int
            Starting vertex index of section A's outer / inner ring
        outerB, innerB : int
            Starting vertex index of section B's outer / inner ring
        '''
        for p, q in _PATH_EDGES:
            faceList.append([outerA + p, outerB + p, outerB + q])
            faceList.append([outerA + p, outerB + q, outerA + q])
            tagList.extend([SurfaceTag.OUTER] * 2)

        for p, q in _PATH_EDGES:
            faceList.append([innerA + p, innerA + q, innerB + q])
            faceList.append([innerA + p, innerB + q, innerB + p])
            tagList.extend([SurfaceTag.INNER] * 2)

        # Port rim (outer TL -> inner TL)
        faceList.append([outerA + _TL, outerB + _TL, innerB + _TL])
        faceList.append([outerA + _TL, innerB + _TL, innerA + _TL])
        # Starboard rim (outer TR -> inner TR)
        faceList.append([outerA + _TR, innerA + _TR, innerB + _TR])
        faceList.append([outerA + _TR, innerB + _TR, outerB + _TR])
        tagList.extend([SurfaceTag.RIM] * 4)

    def _addBowClosure(
        self,
        faceList: list[list[int]],
        tagList: list[int],
        outerA: int,
        innerA: int,
        tipOuter: int,
        tipInner: int,
    ) -> None:
        '''
        Join the last full section to the collapsed bow tip.

        This is the wall segment with section B shrunk to the two tip points
        and its degenerate triangles dropped.

        Parameters:
        -----------
        faceList : list[list[int]]
            Accumulator for face triples (modified in place)
        tagList : list[int]
            Accumulator for face tags (modified in place)
        outerA, innerA : int
            Starting vertex index of the last full section's rings
        tipOuter, tipInner : int
            Vertex indices of the outer and inner tip points
        '''
        for p, q in _PATH_EDGES:
            faceList.append([outerA + p, tipOuter, outerA + q])
            tagList.append(SurfaceTag.BOW_OUTER)

        for p, q in _PATH_EDGES:
            faceList.append([innerA + p, innerA + q, tipInner])
            tagList.append(SurfaceTag.BOW_INNER)

        # Gunwale wedges route through the inner tip to seal the wall
        faceList.append([outerA + _TL, tipOuter, tipInner])
        faceList.append([outerA + _TL, tipInner, innerA + _TL])
        faceList.append([outerA + _TR, innerA + _TR, tipInner])
        faceList.append([outerA + _TR, tipInner, tipOuter])
        tagList.extend([SurfaceTag.BOW_RIM] * 4)

    def _addTransom(
        self,
        faceList: list[list[int]],
        tagList: list[int],
        outerOffset: int,
        innerOffset: int,
    ) -> None:
        '''
        Close the stern with a plate one wall thickness deep.

        Parameters:
        -----------
        faceList : list[list[int]]
            Accumulator for face triples (modified in place)
        tagList : list[int]
            Accumulator for face tags (modified in place)
        outerOffset : int
            Starting vertex index of the outer stern ring
        innerOffset : int
            Starting vertex index of the shifted inner ring
        '''
        # Fans from bottom centre around the full ring (including the open
        # top edge), outer facing aft and inner facing forward
        for i in range(1, UNIQUE_RING_POINTS - 1):
            faceList.append([outerOffset + _BC, outerOffset + i, outerOffset + i + 1])
            tagList.append(SurfaceTag.TRANSOM_OUTER)

        for i in range(1, UNIQUE_RING_POINTS - 1):
            faceList.append([innerOffset + _BC, innerOffset + i + 1, innerOffset + i])
            tagList.append(SurfaceTag.TRANSOM_INNER)

        # Top of the plate between the outer and inner top edges
        faceList.append([outerOffset + _TL, innerOffset + _TR, outerOffset + _TR])
        faceList.append([outerOffset + _TL, innerOffset + _TL, innerOffset + _TR])
        tagList.extend([SurfaceTag.TRANSOM_TOP] * 2)


def buildShell(params: HullParameters, resolution: str = 'standard') -> HullMesh:
    '''
    Build the closed hull shell for a parameter set.

    Parameters:
    -----------
    params : HullParameters
        Hull dimensions
    resolution : str
        Resolution preset name: 'draft', 'standard', or 'high'

    Returns:
    --------
    HullMesh : The hull shell
    '''
    return ShellMesher.fromPreset(params, resolution).generate()
