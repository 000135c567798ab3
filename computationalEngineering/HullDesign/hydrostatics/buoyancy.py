# -- Hydrostatic Waterline Model -- #

'''
Static buoyancy, shell mass and equilibrium waterline for the RC boat hull.

The hull is modelled analytically: a constant U-shaped section along the stern
run and a linearly tapering section along the bow run. Displaced volume at a
waterline height is the stern section area times the stern length plus a
trapezoid-rule integral of the section area over the bow taper. The waterline
is the height at which displaced water mass equals total boat mass, found by
bisection (displaced volume is monotonic in height).

Lengths in mm, masses in g, volumes in mm^3.

Sean Bowman [10/08/2026]
'''

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy.integrate import trapezoid

from computationalEngineering.HullDesign import constants as const
from computationalEngineering.HullDesign.geometry.parameters import HullParameters
from computationalEngineering.HullDesign.geometry.profile import effectiveBilgeRadius
from computationalEngineering.HullDesign.units import gramsToPennies, mm3ToCm3


######################################################################
# -- Section Area -- #
######################################################################

def crossSectionArea(beam: float, bilgeRadius: float, height: float) -> float:
    '''
    Area of the U-shaped hull section from the keel up to a given height.

    Three regimes, with r = min(bilgeRadius, beam / 2):
      - r <= 0      : rectangle, beam * h
      - h <= r      : centre strip plus two partial circular corners,
                      (beam - 2r) h + 2 * r^2 (theta - sin(theta) cos(theta)) / 2
                      with theta = acos((r - h) / r)
      - h > r       : rectangle less the square corners plus quarter circles,
                      beam * h + 2 (pi r^2 / 4 - r^2)

    Parameters:
    -----------
    beam : float
        Section width [mm]
    bilgeRadius : float
        Bottom corner radius [mm]
    height : float
        Height above the keel [mm]

    Returns:
    --------
    float : Area [mm^2], 0 for height <= 0
    '''
    if height <= 0.0 or beam <= 0.0:
        return 0.0

    r = min(bilgeRadius, beam / 2.0)
    if r <= 0.0:
        return beam * height

    if height <= r:
        theta = math.acos((r - height) / r)
        corner = r * r * (theta - math.sin(theta) * math.cos(theta)) / 2.0
        return (beam - 2.0 * r) * height + 2.0 * corner

    return beam * height + 2.0 * (math.pi * r * r / 4.0 - r * r)


def _bowStations(nSegments: int) -> tuple[np.ndarray, np.ndarray]:
    '''Scale and bow progress at the ends of each bow integration segment.'''
    progress = np.linspace(0.0, 1.0, nSegments + 1)
    return 1.0 - progress, progress


def _outerArea(params: HullParameters, scale: float, progress: float, height: float) -> float:
    return crossSectionArea(
        params.beam * scale,
        effectiveBilgeRadius(params, scale, progress),
        height,
    )


def _innerArea(params: HullParameters, scale: float, progress: float) -> float:
    '''Area of the hollow inside the wall at a station, up to the gunwale.'''
    t = params.wallThickness
    innerBeam = params.beam * scale - 2.0 * t
    if innerBeam <= 0.0:
        return 0.0
    innerRadius = max(0.0, effectiveBilgeRadius(params, scale, progress) - t)
    return crossSectionArea(innerBeam, innerRadius, params.hullHeight - t)


######################################################################
# -- Volumes & Masses -- #
######################################################################

def displacedVolume(
    params: HullParameters,
    waterlineHeight: float,
    totalLength: Optional[float] = None,
    nSegments: int = const.bowIntegrationSegments,
) -> float:
    '''
    Volume of water displaced with the keel at depth waterlineHeight.

    Parameters:
    -----------
    params : HullParameters
        Hull parameters
    waterlineHeight : float
        Waterline height above the keel [mm]
    totalLength : float | None
        Hull length [mm], defaults to params.boatLength
    nSegments : int
        Bow integration segments

    Returns:
    --------
    float : Displaced volume [mm^3]
    '''
    if waterlineHeight <= 0.0:
        return 0.0

    length = params.boatLength if totalLength is None else totalLength
    bowLength = length * params.bowLengthPercent / 100.0
    sternLength = length - bowLength

    sternVolume = _outerArea(params, 1.0, 0.0, waterlineHeight) * sternLength

    scales, progress = _bowStations(nSegments)
    areas = [
        _outerArea(params, s, p, waterlineHeight)
        for s, p in zip(scales, progress)
    ]
    bowVolume = trapezoid(areas, x=progress * bowLength)

    return float(sternVolume + bowVolume)


def shellVolume(
    params: HullParameters,
    totalLength: Optional[float] = None,
    nSegments: int = const.bowIntegrationSegments,
) -> float:
    '''
    Volume of printed material in the hull shell.

    Wall band (outer section less the hollow) over the whole length, plus the
    transom plate, which fills the hollow for one wall thickness at the stern.

    Returns:
    --------
    float : Shell volume [mm^3]
    '''
    length = params.boatLength if totalLength is None else totalLength
    bowLength = length * params.bowLengthPercent / 100.0
    sternLength = length - bowLength
    height = params.hullHeight

    outerStern = _outerArea(params, 1.0, 0.0, height)
    innerStern = _innerArea(params, 1.0, 0.0)
    sternVolume = (outerStern - innerStern) * sternLength
    transomVolume = innerStern * params.wallThickness

    scales, progress = _bowStations(nSegments)
    bandAreas = [
        _outerArea(params, s, p, height) - _innerArea(params, s, p)
        for s, p in zip(scales, progress)
    ]
    bowVolume = trapezoid(bandAreas, x=progress * bowLength)

    return float(sternVolume + transomVolume + bowVolume)


def hullMass(params: HullParameters, totalLength: Optional[float] = None) -> float:
    '''Printed PLA hull mass [g].'''
    return mm3ToCm3(shellVolume(params, totalLength)) * const.plaDensityGPerCm3


def totalMass(params: HullParameters, totalLength: Optional[float] = None) -> float:
    '''Hull mass plus motor, battery and ballast [g].'''
    return hullMass(params, totalLength) + params.payloadMass


######################################################################
# -- Waterline Solver -- #
######################################################################

@dataclass
class WaterlineResult:
    '''
    Equilibrium waterline for one parameter set.

    Parameters:
    -----------
    waterlineHeight : float
        Height of the waterline above the keel [mm], in [0, hullHeight]
    displacedVolume : float
        Displaced volume at that height [mm^3]
    requiredVolume : float
        Volume of water weighing the total mass [mm^3]
    hullMass : float
        Printed shell mass [g]
    totalMass : float
        Shell plus payload [g]
    iterations : int
        Bisection steps taken
    converged : bool
        True if a tolerance was met before the iteration limit
    wouldSink : bool
        True if the waterline is at or above 95% of the hull height
    '''

    waterlineHeight: float
    displacedVolume: float
    requiredVolume: float
    hullMass: float
    totalMass: float
    iterations: int
    converged: bool
    wouldSink: bool


def solveWaterline(
    params: HullParameters,
    totalLength: Optional[float] = None,
) -> WaterlineResult:
    '''
    Find the waterline height where displaced water mass equals boat mass.

    Bisection over [0, hullHeight]. Stops when the displaced volume is within
    0.1% of the required volume or the bracket is narrower than 0.1 mm, and
    returns the last midpoint. After 50 iterations the bracket midpoint is
    returned. A hull too heavy to float converges against hullHeight.

    Parameters:
    -----------
    params : HullParameters
        Hull parameters and payload masses
    totalLength : float | None
        Hull length [mm], defaults to params.boatLength

    Returns:
    --------
    WaterlineResult : Waterline height, volumes, masses and solver state
    '''
    shellMass = hullMass(params, totalLength)
    mass = shellMass + params.payloadMass
    requiredVolume = mass / const.waterDensityGPerMm3

    def residual(height: float) -> float:
        '''Residual: displaced - required volume.'''
        return displacedVolume(params, height, totalLength) - requiredVolume

    low = 0.0
    high = params.hullHeight
    height = 0.0
    iterations = 0
    converged = False

    if requiredVolume <= 0.0:
        # Massless boat rests on the surface
        converged = True
    else:
        for iterations in range(1, const.waterlineMaxIterations + 1):
            height = (low + high) / 2.0
            error = residual(height)

            if abs(error) < requiredVolume * const.waterlineRelativeTolerance:
                converged = True
                break

            if error < 0.0:
                low = height
            else:
                high = height

            if high - low < const.waterlineBracketToleranceMm:
                converged = True
                break
        else:
            height = (low + high) / 2.0

    height = min(max(height, 0.0), params.hullHeight)
    return WaterlineResult(
        waterlineHeight=height,
        displacedVolume=displacedVolume(params, height, totalLength),
        requiredVolume=requiredVolume,
        hullMass=shellMass,
        totalMass=mass,
        iterations=iterations,
        converged=converged,
        wouldSink=height >= params.hullHeight * const.sinkThresholdFraction,
    )


def wouldSink(params: HullParameters, totalLength: Optional[float] = None) -> bool:
    '''True if the boat floats at or above 95% of the hull height.'''
    return solveWaterline(params, totalLength).wouldSink


######################################################################
# -- Model Wrapper -- #
######################################################################

class BuoyancyModel:
    '''
    Hydrostatics for one hull, with cached mass and waterline.

    Examples:
    ---------
    >>> model = BuoyancyModel(HullParameters.default())
    >>> model.waterline().wouldSink
    False
    '''

    def __init__(self, params: HullParameters, totalLength: Optional[float] = None) -> None:
        '''
        Parameters:
        -----------
        params : HullParameters
            Hull parameters including payload masses
        totalLength : float | None
            Hull length [mm], defaults to params.boatLength
        '''
        self._params = params
        self._totalLength = params.boatLength if totalLength is None else totalLength

        # Cache computed values
        self._shellVolume: float | None = None
        self._waterline: WaterlineResult | None = None

    @property
    def params(self) -> HullParameters:
        return self._params

    def shellVolume(self) -> float:
        '''Printed shell volume [mm^3].'''
        if self._shellVolume is None:
            self._shellVolume = shellVolume(self._params, self._totalLength)
        return self._shellVolume

    def hullMass(self) -> float:
        '''Printed PLA hull mass [g].'''
        return mm3ToCm3(self.shellVolume()) * const.plaDensityGPerCm3

    def totalMass(self) -> float:
        '''Hull plus payload [g].'''
        return self.hullMass() + self._params.payloadMass

    def displacedVolume(self, waterlineHeight: float) -> float:
        '''Displaced volume at a waterline height [mm^3].'''
        return displacedVolume(self._params, waterlineHeight, self._totalLength)

    def maxDisplacedVolume(self) -> float:
        '''Displaced volume with the hull submerged to the gunwale [mm^3].'''
        return self.displacedVolume(self._params.hullHeight)

    def reserveBuoyancy(self) -> float:
        '''Extra mass the hull could carry before water reaches the gunwale [g].'''
        return self.maxDisplacedVolume() * const.waterDensityGPerMm3 - self.totalMass()

    def waterline(self) -> WaterlineResult:
        '''Equilibrium waterline (solved once and cached).'''
        if self._waterline is None:
            self._waterline = solveWaterline(self._params, self._totalLength)
        return self._waterline

    def freeboard(self) -> float:
        '''Height of the gunwale above the waterline [mm].'''
        return self._params.hullHeight - self.waterline().waterlineHeight

    def wouldSink(self) -> bool:
        return self.waterline().wouldSink

    def ballastPennies(self) -> float:
        '''Ballast mass in pennies, rounded to 0.1.'''
        return gramsToPennies(self._params.ballastWeight)

    def displacementCurve(self, nPoints: int = 50) -> tuple[np.ndarray, np.ndarray]:
        '''
        Displaced volume sampled over [0, hullHeight].

        Returns:
        --------
        tuple[np.ndarray, np.ndarray] : (heights [mm], volumes [mm^3])
        '''
        heights = np.linspace(0.0, self._params.hullHeight, nPoints)
        volumes = np.array([self.displacedVolume(float(h)) for h in heights])
        return heights, volumes
