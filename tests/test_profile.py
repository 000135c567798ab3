# -- Cross-Section Profile Tests -- #

'''
Ring layout, wall inset, bilge rules, rake displacement and tip collapse.

Sean Bowman [10/16/2026]
'''

import math

import numpy as np
import pytest

from computationalEngineering.HullDesign import constants as const
from computationalEngineering.HullDesign.geometry.parameters import BowType, HullParameters
from computationalEngineering.HullDesign.geometry.profile import (
    CollapsedProfile,
    FullProfile,
    ProfileGenerator,
    RingPoint,
    UNIQUE_RING_POINTS,
    deepVBilgeRadius,
    effectiveBilgeRadius,
    isCollapsedStation,
    ringIndex,
)


def testRingIndexWrapsClosingPoint():
    assert UNIQUE_RING_POINTS == const.outerPoints - 1
    assert ringIndex(RingPoint.BOTTOM_CENTER_CLOSE) == ringIndex(RingPoint.BOTTOM_CENTER) == 0
    assert ringIndex(RingPoint.TOP_LEFT) == 9
    assert ringIndex(RingPoint.TOP_RIGHT) == 10


def testFullProfileLayout(defaultParams):
    section = ProfileGenerator(defaultParams).profile(z=-10.0)
    assert isinstance(section, FullProfile)
    assert not section.isCollapsed
    assert section.outer.shape == (const.outerPoints, 3)
    assert section.inner.shape == (const.outerPoints, 3)

    outer = section.outer
    np.testing.assert_allclose(outer[RingPoint.BOTTOM_CENTER], [0.0, 0.0, -10.0])
    np.testing.assert_allclose(outer[RingPoint.BOTTOM_CENTER_CLOSE], outer[RingPoint.BOTTOM_CENTER])
    np.testing.assert_allclose(outer[RingPoint.TOP_LEFT], [-20.0, 25.0, -10.0])
    np.testing.assert_allclose(outer[RingPoint.TOP_RIGHT], [20.0, 25.0, -10.0])
    np.testing.assert_allclose(outer[:, 2], -10.0)


def testRingIsMirrorSymmetric(defaultParams):
    outer = ProfileGenerator(defaultParams).profile(z=0.0).outer
    left = outer[RingPoint.LEFT_BILGE_START:RingPoint.TOP_LEFT + 1]
    right = outer[RingPoint.TOP_RIGHT:RingPoint.RIGHT_BILGE_END + 1][::-1]
    np.testing.assert_allclose(left[:, 0], -right[:, 0])
    np.testing.assert_allclose(left[:, 1], right[:, 1])


def testBilgeArcEndpoints(defaultParams):
    outer = ProfileGenerator(defaultParams).profile(z=0.0).outer
    # Arc starts at the end of the flat bottom and ends on the side wall
    np.testing.assert_allclose(outer[RingPoint.LEFT_BILGE_START, :2], [-15.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(outer[RingPoint.LEFT_BILGE_END, :2], [-20.0, 5.0], atol=1e-12)

    # Every arc point is one radius from the arc centre
    arc = outer[RingPoint.LEFT_BILGE_START:RingPoint.LEFT_BILGE_END + 1, :2]
    radii = np.linalg.norm(arc - np.array([-15.0, 5.0]), axis=1)
    np.testing.assert_allclose(radii, 5.0)


def testInnerRingInsetByWall(defaultParams):
    section = ProfileGenerator(defaultParams).profile(z=0.0)
    t = defaultParams.wallThickness
    inner = section.inner
    np.testing.assert_allclose(inner[RingPoint.BOTTOM_CENTER, :2], [0.0, t])
    np.testing.assert_allclose(inner[RingPoint.TOP_LEFT, :2], [-20.0 + t, 25.0])
    np.testing.assert_allclose(inner[RingPoint.TOP_RIGHT, :2], [20.0 - t, 25.0])
    assert inner[RingPoint.LEFT_BILGE_END, 0] == pytest.approx(-20.0 + t)


def testBowScaleNarrowsRing(defaultParams):
    section = ProfileGenerator(defaultParams).profile(z=30.0, scale=0.5, bowProgress=0.5)
    assert section.outer[RingPoint.TOP_RIGHT, 0] == pytest.approx(10.0)
    assert section.outer[RingPoint.TOP_RIGHT, 1] == pytest.approx(25.0)


######################################################################
# -- Bilge Radius Rules -- #
######################################################################

def testDeepVReducesBilgeTowardTip():
    p = HullParameters.deepV()
    reduction = 0.5 + (40.0 / 45.0) * 0.45
    assert deepVBilgeRadius(p, 0.0) == pytest.approx(8.0)
    assert deepVBilgeRadius(p, 1.0) == pytest.approx(8.0 * (1.0 - reduction))
    assert deepVBilgeRadius(p, 0.5) == pytest.approx(8.0 * (1.0 - 0.5 * reduction))


def testOtherBowTypesKeepBilge(defaultParams):
    assert deepVBilgeRadius(defaultParams, 0.8) == defaultParams.bilgeRadius
    assert deepVBilgeRadius(HullParameters.raked(), 0.8) == 5.0


def testBilgeRadiusClampedToSection():
    p = HullParameters(beam=8.0, bilgeRadius=10.0)
    assert effectiveBilgeRadius(p, 1.0, 0.0) == pytest.approx(4.0 - const.profileEpsilonMm)
    shallow = HullParameters(hullHeight=3.0, bilgeRadius=10.0)
    assert effectiveBilgeRadius(shallow, 1.0, 0.0) == pytest.approx(3.0 - const.profileEpsilonMm)
    assert effectiveBilgeRadius(HullParameters.flatBottomBox(), 1.0, 0.0) == 0.0


######################################################################
# -- Rake -- #
######################################################################

def testRakeOffset():
    gen = ProfileGenerator(HullParameters.raked())
    expected = 10.0 * math.tan(math.radians(35.0)) * 0.5
    assert gen.rakeOffset(10.0, 0.5) == pytest.approx(expected)
    assert gen.rakeOffset(10.0, 0.0) == 0.0


def testPlumbHasNoRake(defaultParams):
    gen = ProfileGenerator(defaultParams)
    assert gen.rakeOffset(10.0, 0.7) == 0.0
    section = gen.profile(z=40.0, scale=0.3, bowProgress=0.7)
    np.testing.assert_allclose(section.outer[:, 2], 40.0)


def testRakedRingLeansForward():
    p = HullParameters.raked()
    section = ProfileGenerator(p).profile(z=40.0, scale=0.5, bowProgress=0.5)
    outer = section.outer
    tanRake = math.tan(math.radians(35.0))
    np.testing.assert_allclose(outer[:, 2], 40.0 + outer[:, 1] * tanRake * 0.5)
    assert outer[RingPoint.TOP_LEFT, 2] > outer[RingPoint.BOTTOM_CENTER, 2]


######################################################################
# -- Tip Collapse -- #
######################################################################

def testTipProfile(defaultParams):
    tip = ProfileGenerator(defaultParams).profile(z=75.0, scale=0.0, bowProgress=1.0, isTip=True)
    assert isinstance(tip, CollapsedProfile)
    assert tip.isCollapsed
    np.testing.assert_allclose(tip.outerTip, [0.0, 0.0, 75.0])
    np.testing.assert_allclose(tip.innerTip, [0.0, defaultParams.wallThickness, 75.0])


def testRakedTipDisplacedByHalfHeight():
    p = HullParameters.raked()
    tip = ProfileGenerator(p).profile(z=75.0, scale=0.0, bowProgress=1.0, isTip=True)
    expected = 75.0 + 12.5 * math.tan(math.radians(35.0))
    assert tip.outerTip[2] == pytest.approx(expected)
    assert tip.innerTip[2] == pytest.approx(expected)


def testCollapseThresholds(defaultParams):
    assert isCollapsedStation(defaultParams, 0.01)
    assert isCollapsedStation(defaultParams, 0.5, isTip=True)
    # Half-beam 0.4 mm is below the tip threshold
    assert isCollapsedStation(defaultParams, 0.02)
    assert not isCollapsedStation(defaultParams, 0.05)


@pytest.mark.parametrize('bowType', list(BowType))
@pytest.mark.parametrize('scale, progress', [(0.03, 0.97), (0.05, 0.95), (0.2, 0.8)])
def testNarrowStationsStayFinite(bowType, scale, progress):
    p = HullParameters(bowType=bowType)
    section = ProfileGenerator(p).profile(z=70.0, scale=scale, bowProgress=progress)
    assert isinstance(section, FullProfile)
    assert np.isfinite(section.outer).all()
    assert np.isfinite(section.inner).all()
    # Inner ring never inverts past the centreline
    assert section.inner[RingPoint.TOP_LEFT, 0] <= -const.profileEpsilonMm + 1e-12
    assert section.inner[RingPoint.TOP_RIGHT, 0] >= const.profileEpsilonMm - 1e-12
