# -- Analytic Section Tests -- #

'''
Axis-aligned sections built from the parametric outline.

Sean Bowman [10/16/2026]
'''

import pytest

from computationalEngineering.HullDesign.geometry.parameters import BowType, HullParameters
from computationalEngineering.HullDesign.hydrostatics.buoyancy import crossSectionArea
from computationalEngineering.HullDesign.sections.analyticSections import analyticSection


######################################################################
# -- Transverse -- #
######################################################################

def testSternBandMatchesAreaModel(defaultParams):
    p = defaultParams
    t = p.wallThickness
    band = (crossSectionArea(p.beam, p.bilgeRadius, p.hullHeight)
            - crossSectionArea(p.beam - 2 * t, p.bilgeRadius - t, p.hullHeight - t))

    region = analyticSection(p, 'z', -30.0)
    assert region is not None
    assert region.loopCount == 1
    assert region.area == pytest.approx(band, rel=0.01)
    assert region.area == pytest.approx(region.boundaryArea, rel=1e-9)


def testBoxBandIsExact():
    region = analyticSection(HullParameters.flatBottomBox(), 'z', -20.0)
    assert region.area == pytest.approx(50.0 * 20.0 - 47.6 * 18.8, rel=1e-9)


def testTransomPlateIsSolidOuterU(defaultParams):
    p = defaultParams
    region = analyticSection(p, 'z', -74.5)
    assert region.holeLoops == []
    assert region.area == pytest.approx(
        crossSectionArea(p.beam, p.bilgeRadius, p.hullHeight), rel=0.01,
    )


def testBowSectionsShrink(defaultParams):
    areas = [analyticSection(defaultParams, 'z', z).area for z in (20.0, 40.0, 60.0)]
    assert areas[0] > areas[1] > areas[2] > 0.0


def testCollapsedTipIsNone(defaultParams):
    assert analyticSection(defaultParams, 'z', defaultParams.halfLength) is None


def testTotalLengthOverride(defaultParams):
    # 100 mm hull: the stern run ends at z = 10
    assert analyticSection(defaultParams, 'z', 70.0, totalLength=100.0) is None
    stern = analyticSection(defaultParams, 'z', -30.0, totalLength=100.0)
    assert stern.area == pytest.approx(analyticSection(defaultParams, 'z', -30.0).area)


######################################################################
# -- Waterplane -- #
######################################################################

def testWaterplaneAboveFloorHasHole(defaultParams):
    region = analyticSection(defaultParams, 'y', 10.0)
    assert region is not None
    assert len(region.holeLoops) == 1
    assert region.islands == []
    assert 0.0 < region.area < region.outerArea


def testWaterplaneInsideFloorIsSolid(defaultParams):
    region = analyticSection(defaultParams, 'y', 0.5)
    assert region.holeLoops == []
    assert region.area == pytest.approx(region.outerArea, rel=1e-6)


def testWaterplaneNarrowerInBilge(defaultParams):
    low = analyticSection(defaultParams, 'y', 0.5)
    high = analyticSection(defaultParams, 'y', 0.5 + defaultParams.bilgeRadius)
    assert low.outerArea < high.outerArea


######################################################################
# -- Buttock -- #
######################################################################

def testButtockIsSingleLoop(defaultParams):
    region = analyticSection(defaultParams, 'x', 5.0)
    assert region is not None
    assert region.loopCount == 1
    assert region.holeLoops == []
    assert region.area > 0.0


def testButtockMirrored(defaultParams):
    left = analyticSection(defaultParams, 'x', -5.0)
    right = analyticSection(defaultParams, 'x', 5.0)
    assert left.area == pytest.approx(right.area)


######################################################################
# -- Range & Validation -- #
######################################################################

@pytest.mark.parametrize('axis, position', [
    ('z', 100.0),
    ('z', -80.0),
    ('x', 30.0),
    ('y', -1.0),
    ('y', 26.0),
])
def testOutsideHullIsNone(defaultParams, axis, position):
    assert analyticSection(defaultParams, axis, position) is None


def testUnknownAxisRaises(defaultParams):
    with pytest.raises(ValueError):
        analyticSection(defaultParams, 'w', 0.0)


@pytest.mark.parametrize('bowType', list(BowType))
def testEveryBowTypeSections(bowType):
    params = HullParameters(bowType=bowType)
    for axis, position in [('z', 30.0), ('y', 12.0), ('x', 8.0)]:
        region = analyticSection(params, axis, position)
        assert region is not None
        assert region.area > 0.0


@pytest.mark.parametrize('axis', ['x', 'y', 'z'])
def testZeroBeamHasNoSection(axis):
    assert analyticSection(HullParameters(beam=0.0), axis, 0.0) is None
