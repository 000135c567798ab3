# -- Hydrostatics Subpackage -- #

'''
Static buoyancy: section areas, displaced volume, shell mass, and the
equilibrium waterline.
'''

from computationalEngineering.HullDesign.hydrostatics.buoyancy import (
    BuoyancyModel,
    WaterlineResult,
    solveWaterline,
)
