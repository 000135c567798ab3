# -- Visualization Subpackage -- #

'''
Plotly-based interactive views of the hull, its sections and its
displacement curve.
'''

from computationalEngineering.HullDesign.visualization.hullPlots import (
    createHullDashboard,
    plotCrossSection,
    plotDisplacementCurve,
    plotHull3d,
)
