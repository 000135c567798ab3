# -- Geometry Subpackage -- #

'''
Hull parameters, cross-section profiles, and watertight shell meshing.
'''

from computationalEngineering.HullDesign.geometry.parameters import BowType, HullParameters
from computationalEngineering.HullDesign.geometry.profile import ProfileGenerator, RingPoint
from computationalEngineering.HullDesign.geometry.hullMesh import HullMesh, SurfaceTag
from computationalEngineering.HullDesign.geometry.shellMesher import ShellMesher
