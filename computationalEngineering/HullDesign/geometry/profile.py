# -- Hull Cross-Section Profile Generator -- #

'''
Builds one hull cross-section (an outer ring and an inner ring) at a given
longitudinal station.

Coordinate convention (shared by every HullDesign module):
  x : lateral, port side negative
  y : vertical, keel at y = 0, gunwale at y = hullHeight
  z : longitudinal, bow toward +z

Each ring is a U shape traced from the bottom centre, around the port bilge
arc, up to the two gunwale corners (the top between them is open), down the
starboard bilge arc and back to the bottom centre:

    TOP_LEFT                       TOP_RIGHT
       |                               |
       |                               |
        \\ LEFT_BILGE     RIGHT_BILGE  /
          `----- BOTTOM_CENTER -----'

The inner ring is the same layout inset by the wall thickness. Near the bow
tip the whole section collapses to a pair of points on the centreline.

Sean Bowman [10/04/2026]
'''

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

import numpy as np

from computationalEngineering.HullDesign import constants as const
from computationalEngineering.HullDesign.geometry.parameters import BowType, HullParameters
from computationalEngineering.HullDesign.units import degreesToRadians


######################################################################
# -- Ring Point Roles -- #
######################################################################

class RingPoint(IntEnum):
    '''Named position of a point within a profile ring.'''

    BOTTOM_CENTER = 0
    LEFT_BILGE_START = 1
    LEFT_BILGE_END = const.bilgeSegments
    TOP_LEFT = const.bilgeSegments + 1
    TOP_RIGHT = const.bilgeSegments + 2
    RIGHT_BILGE_START = const.bilgeSegments + 3
    RIGHT_BILGE_END = 2 * const.bilgeSegments + 2
    BOTTOM_CENTER_CLOSE = 2 * const.bilgeSegments + 3


# Unique points per ring once the repeated bottom-centre point is dropped
UNIQUE_RING_POINTS = const.outerPoints - 1


def ringIndex(role: int) -> int:
    '''
    Resolve a ring role to its offset among the unique ring vertices.

    The closing point is the same vertex as the bottom centre, so it maps
    back to offset 0. Every consumer that stores rings without the repeated
    point resolves roles through this function.

    Parameters:
    -----------
    role : int
        RingPoint or raw ring position in [0, OUTER_POINTS)

    Returns:
    --------
    int : Offset in [0, UNIQUE_RING_POINTS)
    '''
    return int(role) % UNIQUE_RING_POINTS


######################################################################
# -- Profile Variants -- #
######################################################################

@dataclass
class FullProfile:
    '''
    A complete cross-section.

    Parameters:
    -----------
    outer : np.ndarray
        Outer ring, shape (OUTER_POINTS, 3), closing point repeated
    inner : np.ndarray
        Inner ring, same layout, inset by the wall thickness
    '''

    outer: np.ndarray
    inner: np.ndarray

    isCollapsed = False


@dataclass
class CollapsedProfile:
    '''
    The bow tip, where the section has shrunk to the centreline.

    Parameters:
    -----------
    outerTip : np.ndarray
        Outer tip point (x = 0, y = 0), shape (3,)
    innerTip : np.ndarray
        Inner tip point (x = 0, y = wallThickness), shape (3,)
    '''

    outerTip: np.ndarray
    innerTip: np.ndarray

    isCollapsed = True


CrossSectionProfile = Union[FullProfile, CollapsedProfile]


######################################################################
# -- Shared Radius Rules -- #
######################################################################

def deepVBilgeRadius(params: HullParameters, bowProgress: float) -> float:
    '''
    Unscaled bilge radius after the deep-V entry reduction.

    r * (1 - progress * (0.5 + 0.45 * entryAngle / 45)) for deep-V bows,
    the plain bilge radius otherwise.

    Parameters:
    -----------
    params : HullParameters
        Hull parameters
    bowProgress : float
        0 at the start of the bow run, 1 at the tip

    Returns:
    --------
    float : Bilge radius before station scaling [mm]
    '''
    radius = params.bilgeRadius
    if params.bowType is BowType.DEEP_V and bowProgress > 0.0:
        sharpness = params.bowEntryAngle / const.deepVMaxEntryAngleDeg
        reduction = const.deepVBaseReduction + sharpness * const.deepVAngleReduction
        radius *= 1.0 - bowProgress * reduction
    return radius


def effectiveBilgeRadius(
    params: HullParameters, scale: float, bowProgress: float
) -> float:
    '''
    Bilge radius actually used at a station, clamped to fit the section.

    Returns:
    --------
    float : max(0, min(r * scale, halfBeam - eps, hullHeight - eps)) [mm]
    '''
    halfBeam = params.halfBeam * scale
    radius = min(
        deepVBilgeRadius(params, bowProgress) * scale,
        halfBeam - const.profileEpsilonMm,
        params.hullHeight - const.profileEpsilonMm,
    )
    return max(0.0, radius)


def isCollapsedStation(params: HullParameters, scale: float, isTip: bool = False) -> bool:
    '''True if a station at this scale degenerates to the bow tip.'''
    return (
        isTip
        or params.halfBeam * scale < const.tipHalfBeamMm
        or scale < const.tipScale
    )


######################################################################
# -- Profile Generator -- #
######################################################################

class ProfileGenerator:
    '''
    Generates cross-section profiles for one set of hull parameters.

    Examples:
    ---------
    >>> gen = ProfileGenerator(HullParameters.default())
    >>> section = gen.profile(z=0.0, scale=1.0, bowProgress=0.0)
    >>> section.outer.shape
    (20, 3)
    '''

    def __init__(self, params: HullParameters) -> None:
        self._params = params
        self._rakeTan = math.tan(degreesToRadians(params.bowRakeAngle))

        # Quarter-arc sample angles, bottom to side
        arc = np.linspace(0.0, 1.0, const.bilgeSegments) * (math.pi / 2.0)
        self._arcSin = np.sin(arc)
        self._arcCos = np.cos(arc)

    @property
    def params(self) -> HullParameters:
        return self._params

    def rakeOffset(self, y, bowProgress: float):
        '''
        Longitudinal displacement of a raked stem at height y.

        Parameters:
        -----------
        y : float | np.ndarray
            Height(s) above the keel [mm]
        bowProgress : float
            0 at the start of the bow run, 1 at the tip

        Returns:
        --------
        float | np.ndarray : z displacement [mm], zero unless the bow is raked
        '''
        if self._params.bowType is not BowType.RAKED or bowProgress == 0.0:
            return 0.0 * y
        return y * self._rakeTan * bowProgress

    def profile(
        self,
        z: float,
        scale: float = 1.0,
        bowProgress: float = 0.0,
        isTip: bool = False,
    ) -> CrossSectionProfile:
        '''
        Build the cross-section at a station.

        Parameters:
        -----------
        z : float
            Longitudinal station position [mm]
        scale : float
            Beam scale factor, 1 along the stern run, tapering to 0 at the tip
        bowProgress : float
            0 along the stern run, 1 at the bow tip
        isTip : bool
            Force the collapsed tip profile

        Returns:
        --------
        FullProfile | CollapsedProfile : Outer/inner rings or the tip pair
        '''
        p = self._params
        t = p.wallThickness

        if isCollapsedStation(p, scale, isTip):
            tipZ = z + self.rakeOffset(p.hullHeight / 2.0, bowProgress)
            return CollapsedProfile(
                outerTip=np.array([0.0, 0.0, tipZ]),
                innerTip=np.array([0.0, t, tipZ]),
            )

        halfBeam = p.halfBeam * scale
        radius = effectiveBilgeRadius(p, scale, bowProgress)

        innerHalfBeam = max(const.profileEpsilonMm, halfBeam - t)
        innerRadius = max(0.0, radius - t)

        outer = self._ring(halfBeam, radius, 0.0, z, bowProgress)
        inner = self._ring(innerHalfBeam, innerRadius, t, z, bowProgress)
        return FullProfile(outer=outer, inner=inner)

    def _ring(
        self,
        halfBeam: float,
        radius: float,
        bottomY: float,
        z: float,
        bowProgress: float,
    ) -> np.ndarray:
        '''
        Trace one U-shaped ring in RingPoint order.

        Parameters:
        -----------
        halfBeam : float
            Half-width of the ring [mm]
        radius : float
            Bilge radius of the ring [mm]
        bottomY : float
            Height of the flat bottom [mm]
        z : float
            Station position before rake displacement [mm]
        bowProgress : float
            Bow progress for the rake displacement

        Returns:
        --------
        np.ndarray : Ring points, shape (OUTER_POINTS, 3)
        '''
        top = self._params.hullHeight
        flat = halfBeam - radius

        ring = np.zeros((const.outerPoints, 3))

        # Port arc runs bottom -> side, starboard arc runs side -> bottom
        arcY = bottomY + radius - self._arcCos * radius
        leftX = -flat - self._arcSin * radius
        rightX = (flat + self._arcSin * radius)[::-1]

        left = slice(RingPoint.LEFT_BILGE_START, RingPoint.LEFT_BILGE_END + 1)
        right = slice(RingPoint.RIGHT_BILGE_START, RingPoint.RIGHT_BILGE_END + 1)

        ring[RingPoint.BOTTOM_CENTER, :2] = (0.0, bottomY)
        ring[left, 0] = leftX
        ring[left, 1] = arcY
        ring[RingPoint.TOP_LEFT, :2] = (-halfBeam, top)
        ring[RingPoint.TOP_RIGHT, :2] = (halfBeam, top)
        ring[right, 0] = rightX
        ring[right, 1] = arcY[::-1]
        ring[RingPoint.BOTTOM_CENTER_CLOSE, :2] = (0.0, bottomY)

        ring[:, 2] = z + self.rakeOffset(ring[:, 1], bowProgress)
        return ring
