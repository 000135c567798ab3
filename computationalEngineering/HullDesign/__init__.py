# -- HullDesign Package -- #

'''
Parametric RC boat hull generator.

Builds a watertight, printable hull shell from a handful of dimensions,
estimates its static waterline, and cuts planar sections through the
result. Visualization lives in HullDesign.visualization and needs plotly.

Sean Bowman [10/14/2026]
'''

__version__ = '0.1.0'

from computationalEngineering.HullDesign.geometry.parameters import BowType, HullParameters
from computationalEngineering.HullDesign.geometry.shellMesher import ShellMesher, buildShell
from computationalEngineering.HullDesign.hydrostatics.buoyancy import BuoyancyModel, solveWaterline
from computationalEngineering.HullDesign.sections.planeIntersection import ClipPlane, extractSection
from computationalEngineering.HullDesign.sections.analyticSections import analyticSection
from computationalEngineering.HullDesign.export.stlExporter import StlExporter
