# -- Analytic Axis-Aligned Sections -- #

'''
Cross-sections of the hull on axis-aligned planes, built directly from the
parametric outline instead of cutting a mesh.

  z-plane (transverse) : the wall band of the profile at that station, or
                         the solid outer U inside the transom plate
  y-plane (waterplane) : outer planform at that height, with the hollow as
                         a hole once the plane is above the inner bottom
  x-plane (buttock)    : one notched loop; the top of the hull is open, so
                         the bottom wall, transom plate and bow walls join
                         into a single outline

Bow stations follow the straight taper and the deep-V bilge rule. The rake
displacement of a raked stem is not applied; cut the mesh with
extractSection() for an exact raked-bow section.

Sean Bowman [10/11/2026]
'''

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from computationalEngineering.HullDesign import constants as const
from computationalEngineering.HullDesign.geometry.parameters import HullParameters
from computationalEngineering.HullDesign.geometry.profile import (
    ProfileGenerator,
    RingPoint,
    UNIQUE_RING_POINTS,
    effectiveBilgeRadius,
    isCollapsedStation,
    ringIndex,
)
from computationalEngineering.HullDesign.sections.planeIntersection import (
    CappedRegion,
    ClipPlane,
    dropRepeats,
    regionFromLoops,
)


# Coincident-point tolerance for analytic outlines [mm]
_POINT_EPS = 1e-9

_TL = ringIndex(RingPoint.TOP_LEFT)
_TR = ringIndex(RingPoint.TOP_RIGHT)

# Outer ring from the port gunwale, under the keel, to the starboard gunwale
_OUTER_PATH = list(range(_TL, -1, -1)) + list(range(UNIQUE_RING_POINTS - 1, _TR - 1, -1))

# Inner ring back from the starboard gunwale to the port gunwale
_INNER_PATH = list(range(_TR, UNIQUE_RING_POINTS)) + list(range(0, _TL + 1))


class _HullExtent:
    '''Longitudinal layout of the hull for a given overall length.'''

    def __init__(self, params: HullParameters, totalLength: Optional[float]) -> None:
        length = params.boatLength if totalLength is None else totalLength
        self.bowLength = length * params.bowLengthPercent / 100.0
        self.sternLength = length - self.bowLength
        self.zStern = -length / 2.0
        self.zJoin = self.zStern + self.sternLength
        self.zBow = length / 2.0

    def station(self, z: float) -> Optional[tuple[float, float]]:
        '''(scale, bowProgress) at z, or None outside the hull.'''
        if z < self.zStern or z > self.zBow:
            return None
        if z <= self.zJoin or self.bowLength <= 0.0:
            return 1.0, 0.0
        progress = min(1.0, (z - self.zJoin) / self.bowLength)
        return 1.0 - progress, progress


######################################################################
# -- Outline Helpers -- #
######################################################################

def _halfWidthAt(y: float, halfBeam: float, radius: float, bottom: float) -> float:
    '''Half-width of a U ring at height y (y >= bottom).'''
    if radius > 0.0 and y < bottom + radius:
        dy = y - (bottom + radius)
        return halfBeam - radius + math.sqrt(max(0.0, radius * radius - dy * dy))
    return halfBeam


def _bottomAt(ax: float, halfBeam: float, radius: float, bottom: float) -> float:
    '''Height of a U ring's bottom at lateral offset |x| = ax (ax <= halfBeam).'''
    flat = halfBeam - radius
    if ax <= flat:
        return bottom
    dx = ax - flat
    return bottom + radius - math.sqrt(max(0.0, radius * radius - dx * dx))


######################################################################
# -- Per-Axis Sections -- #
######################################################################

def _transverseLoops(
    params: HullParameters, extent: _HullExtent, z: float,
) -> Optional[list[np.ndarray]]:
    station = extent.station(z)
    if station is None:
        return None
    scale, progress = station
    if isCollapsedStation(params, scale):
        return None

    section = ProfileGenerator(params).profile(z, scale, progress)
    outer = section.outer[:UNIQUE_RING_POINTS].copy()
    inner = section.inner[:UNIQUE_RING_POINTS].copy()
    outer[:, 2] = z
    inner[:, 2] = z

    if z < extent.zStern + params.wallThickness:
        # Inside the transom plate the section is solid
        return [outer]
    return [np.concatenate([outer[_OUTER_PATH], inner[_INNER_PATH]])]


def _waterplaneLoops(
    params: HullParameters, extent: _HullExtent, y: float, nSamples: int,
) -> Optional[list[np.ndarray]]:
    if y < 0.0 or y > params.hullHeight:
        return None

    t = params.wallThickness
    left = []
    right = []
    for z in np.linspace(extent.zStern, extent.zBow, nSamples + 1):
        scale, progress = extent.station(float(z))
        if isCollapsedStation(params, scale):
            x = 0.0
        else:
            radius = effectiveBilgeRadius(params, scale, progress)
            x = _halfWidthAt(y, params.halfBeam * scale, radius, 0.0)
        left.append([-x, y, z])
        right.append([x, y, z])
    loops = [np.array(left + right[::-1])]

    if y > t:
        holeLeft = []
        holeRight = []
        for z in np.linspace(extent.zStern + t, extent.zBow, nSamples + 1):
            scale, progress = extent.station(float(z))
            innerHalfBeam = params.halfBeam * scale - t
            if isCollapsedStation(params, scale) or innerHalfBeam <= const.profileEpsilonMm:
                continue
            innerRadius = max(0.0, effectiveBilgeRadius(params, scale, progress) - t)
            x = _halfWidthAt(y, innerHalfBeam, innerRadius, t)
            holeLeft.append([-x, y, z])
            holeRight.append([x, y, z])
        if len(holeLeft) >= 2:
            loops.append(np.array(holeLeft + holeRight[::-1]))

    return loops


def _buttockLoops(
    params: HullParameters, extent: _HullExtent, x: float, nSamples: int,
) -> Optional[list[np.ndarray]]:
    ax = abs(x)
    if ax > params.halfBeam:
        return None

    t = params.wallThickness
    height = params.hullHeight
    zTransom = extent.zStern + t

    # Forward limit where the tapered beam narrows to |x|
    zEnd = extent.zJoin + extent.bowLength * (1.0 - ax / params.halfBeam)
    zs = np.linspace(extent.zStern, zEnd, nSamples + 1)

    def outerBottom(z: float) -> float:
        scale, progress = extent.station(z)
        halfBeam = params.halfBeam * scale
        radius = effectiveBilgeRadius(params, scale, progress)
        return _bottomAt(min(ax, halfBeam), halfBeam, radius, 0.0)

    def innerBottom(z: float) -> Optional[float]:
        scale, progress = extent.station(z)
        innerHalfBeam = params.halfBeam * scale - t
        if ax >= innerHalfBeam or innerHalfBeam <= const.profileEpsilonMm:
            return None
        innerRadius = max(0.0, effectiveBilgeRadius(params, scale, progress) - t)
        return _bottomAt(ax, innerHalfBeam, innerRadius, t)

    bottom = [[x, outerBottom(float(z)), float(z)] for z in zs]

    top = []
    for z in zs[::-1]:
        z = float(z)
        if z <= zTransom:
            continue
        yInner = innerBottom(z)
        top.append([x, height if yInner is None else yInner, z])

    # Step up the forward face of the transom plate
    if zTransom < zEnd:
        yInner = innerBottom(zTransom)
        if yInner is not None:
            top.append([x, yInner, zTransom])
        top.append([x, height, zTransom])
    top.append([x, height, extent.zStern])

    return [np.array(bottom + top)]


######################################################################
# -- Public Entry Point -- #
######################################################################

def analyticSection(
    params: HullParameters,
    axis: str,
    position: float,
    totalLength: Optional[float] = None,
    nSamples: int = 64,
) -> Optional[CappedRegion]:
    '''
    Section of the hull on an axis-aligned plane, without a mesh.

    Parameters:
    -----------
    params : HullParameters
        Hull parameters
    axis : str
        'x' (buttock), 'y' (waterplane) or 'z' (transverse)
    position : float
        Plane coordinate in hull-centred millimeters
    totalLength : float | None
        Hull length [mm], defaults to params.boatLength
    nSamples : int
        Longitudinal samples per side for the x and y planes

    Returns:
    --------
    CappedRegion | None : None if the plane lies outside the hull or the
        hull has no beam
    '''
    plane = ClipPlane.axis(axis, position)
    if params.halfBeam <= 0.0:
        return None
    extent = _HullExtent(params, totalLength)

    if axis == 'z':
        loops = _transverseLoops(params, extent, position)
    elif axis == 'y':
        loops = _waterplaneLoops(params, extent, position, nSamples)
    else:
        loops = _buttockLoops(params, extent, position, nSamples)

    if loops is None:
        return None
    loops = [dropRepeats(loop, _POINT_EPS) for loop in loops]
    return regionFromLoops(loops, plane)
