# -- Buoyancy & Waterline Tests -- #

'''
Section area regimes, displaced volume, shell mass and the waterline solver.

Sean Bowman [10/16/2026]
'''

import math

import numpy as np
import pytest

from computationalEngineering.HullDesign import constants as const
from computationalEngineering.HullDesign.geometry.parameters import BowType, HullParameters
from computationalEngineering.HullDesign.hydrostatics.buoyancy import (
    BuoyancyModel,
    crossSectionArea,
    displacedVolume,
    hullMass,
    shellVolume,
    solveWaterline,
    totalMass,
    wouldSink,
)


######################################################################
# -- Section Area -- #
######################################################################

def testRectangleWithoutBilge():
    assert crossSectionArea(40.0, 0.0, 10.0) == pytest.approx(400.0)


def testNoAreaAtOrBelowKeel():
    assert crossSectionArea(40.0, 5.0, 0.0) == 0.0
    assert crossSectionArea(40.0, 5.0, -3.0) == 0.0
    assert crossSectionArea(0.0, 5.0, 10.0) == 0.0


def testAboveBilgeSubtractsCorners():
    r = 5.0
    expected = 40.0 * 20.0 - 2.0 * (r * r - math.pi * r * r / 4.0)
    assert crossSectionArea(40.0, r, 20.0) == pytest.approx(expected)


def testWithinBilgeIsContinuous():
    '''Partial-corner and full-corner formulas agree at h = r.'''
    r = 5.0
    below = crossSectionArea(40.0, r, r - 1e-9)
    above = crossSectionArea(40.0, r, r + 1e-9)
    assert below == pytest.approx(above, abs=1e-6)
    assert crossSectionArea(40.0, r, r) == pytest.approx(30.0 * r + math.pi * r * r / 2.0)


def testRadiusClampedToHalfBeam():
    '''A bilge radius wider than the section behaves as a semicircular bottom.'''
    assert crossSectionArea(10.0, 20.0, 8.0) == pytest.approx(crossSectionArea(10.0, 5.0, 8.0))
    assert crossSectionArea(10.0, 5.0, 5.0) == pytest.approx(math.pi * 25.0 / 2.0)


def testAreaIncreasesWithHeight():
    heights = np.linspace(0.0, 25.0, 101)
    areas = [crossSectionArea(40.0, 5.0, float(h)) for h in heights]
    assert np.all(np.diff(areas) > 0.0)


######################################################################
# -- Volumes & Masses -- #
######################################################################

def testDisplacedVolumeMonotonic(defaultParams):
    heights = np.linspace(0.0, defaultParams.hullHeight, 40)
    volumes = [displacedVolume(defaultParams, float(h)) for h in heights]
    assert volumes[0] == 0.0
    assert np.all(np.diff(volumes) > 0.0)


def testDisplacedVolumeOfBox():
    '''Zero bilge: stern prism plus a linearly tapered bow wedge.'''
    p = HullParameters.flatBottomBox()
    h = 10.0
    sternPart = p.beam * h * p.sternLength
    bowPart = p.beam * h * p.bowLength / 2.0
    assert displacedVolume(p, h) == pytest.approx(sternPart + bowPart)


def testDisplacedVolumeScalesWithLength(defaultParams):
    short = displacedVolume(defaultParams, 10.0, totalLength=75.0)
    full = displacedVolume(defaultParams, 10.0)
    assert short == pytest.approx(full / 2.0)


def testShellVolumeOfBox():
    '''Band area along the stern run, transom plate, and the bow integral.'''
    p = HullParameters.flatBottomBox()
    band = 50.0 * 20.0 - 47.6 * 18.8
    stern = band * p.sternLength
    transom = 47.6 * 18.8 * p.wallThickness
    volume = shellVolume(p)
    assert volume > stern + transom
    assert volume < stern + transom + band * p.bowLength


def testMassFromShellVolume(defaultParams):
    expected = shellVolume(defaultParams) / 1000.0 * const.plaDensityGPerCm3
    assert hullMass(defaultParams) == pytest.approx(expected)
    assert hullMass(defaultParams) > 0.0
    assert totalMass(defaultParams) == pytest.approx(expected + 33.0)


######################################################################
# -- Waterline -- #
######################################################################

def testDefaultHullFloats(defaultParams):
    result = solveWaterline(defaultParams)
    assert result.converged
    assert 0.0 < result.waterlineHeight < defaultParams.hullHeight
    assert not result.wouldSink
    assert result.iterations <= const.waterlineMaxIterations
    assert result.displacedVolume == pytest.approx(result.requiredVolume, rel=0.02)
    assert result.requiredVolume == pytest.approx(result.totalMass / const.waterDensityGPerMm3)


def testWaterlineRisesWithBallast(defaultParams):
    light = solveWaterline(defaultParams).waterlineHeight
    heavy = solveWaterline(defaultParams.withUpdates(ballastWeight=30.0)).waterlineHeight
    assert heavy > light


def testHeavyBallastSinks(defaultParams):
    params = defaultParams.withUpdates(ballastWeight=500.0)
    result = solveWaterline(params)
    assert result.wouldSink
    assert result.waterlineHeight <= params.hullHeight
    assert result.waterlineHeight >= params.hullHeight * const.sinkThresholdFraction
    assert wouldSink(params)


def testMasslessBoatSitsOnSurface():
    p = HullParameters(wallThickness=0.0, motorWeight=0.0, batteryWeight=0.0)
    result = solveWaterline(p)
    assert result.waterlineHeight == 0.0
    assert result.converged
    assert not result.wouldSink


@pytest.mark.parametrize('bowType', list(BowType))
def testWaterlineWithinHull(bowType):
    p = HullParameters(bowType=bowType, ballastWeight=20.0)
    result = solveWaterline(p)
    assert 0.0 <= result.waterlineHeight <= p.hullHeight


######################################################################
# -- Model Wrapper -- #
######################################################################

def testModelMatchesFunctions(defaultParams):
    model = BuoyancyModel(defaultParams)
    assert model.shellVolume() == pytest.approx(shellVolume(defaultParams))
    assert model.hullMass() == pytest.approx(hullMass(defaultParams))
    assert model.totalMass() == pytest.approx(totalMass(defaultParams))
    assert model.waterline() is model.waterline()
    assert model.waterline().waterlineHeight == pytest.approx(
        solveWaterline(defaultParams).waterlineHeight
    )


def testFreeboardAndReserve(defaultParams):
    model = BuoyancyModel(defaultParams)
    assert model.freeboard() == pytest.approx(
        defaultParams.hullHeight - model.waterline().waterlineHeight
    )
    assert model.maxDisplacedVolume() == pytest.approx(
        displacedVolume(defaultParams, defaultParams.hullHeight)
    )
    assert model.reserveBuoyancy() > 0.0
    assert not model.wouldSink()


def testDisplacementCurve(defaultParams):
    heights, volumes = BuoyancyModel(defaultParams).displacementCurve(25)
    assert heights.shape == volumes.shape == (25,)
    assert heights[0] == 0.0
    assert heights[-1] == pytest.approx(defaultParams.hullHeight)
    assert np.all(np.diff(volumes) > 0.0)


def testModelBallastPennies():
    model = BuoyancyModel(HullParameters(ballastWeight=25.0))
    assert model.ballastPennies() == pytest.approx(10.0)
