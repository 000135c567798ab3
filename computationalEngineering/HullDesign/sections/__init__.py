# -- Sections Subpackage -- #

'''
Planar sections of the hull, either cut from a mesh or built from the
parametric outline, triangulated into capped regions.
'''

from computationalEngineering.HullDesign.sections.planeIntersection import (
    CappedRegion,
    ClipPlane,
    extractSection,
)
from computationalEngineering.HullDesign.sections.analyticSections import analyticSection
