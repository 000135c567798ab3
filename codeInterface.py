# -- Code Interface (Entry-Point) -- #

'''
Main interface for the Computational Engineering Toolkit.

Demonstrates the parametric RC boat hull pipeline:
    1. Generate a watertight hull shell from parametric cross-sections
    2. Solve the static waterline for the motor, battery and ballast
    3. Cut transverse sections from the mesh and check them against the
       analytic outline
    4. Export STL and visualize the hull, sections and displacement in Plotly

Run directly:
    python codeInterface.py

Sean Bowman [10/15/2026]
'''

import os

import numpy as np

from computationalEngineering.HullDesign.export.stlExporter import StlExporter
from computationalEngineering.HullDesign.geometry.parameters import presetParameters
from computationalEngineering.HullDesign.geometry.shellMesher import RESOLUTION_PRESETS, ShellMesher
from computationalEngineering.HullDesign.hydrostatics.buoyancy import BuoyancyModel
from computationalEngineering.HullDesign.sections.analyticSections import analyticSection
from computationalEngineering.HullDesign.sections.planeIntersection import ClipPlane, extractSection
from computationalEngineering.HullDesign.units import mm3ToCm3
from computationalEngineering.HullDesign.visualization.hullPlots import (
    createHullDashboard,
    plotCrossSection,
)

# Clear terminal
os.system('cls' if os.name == 'nt' else 'clear')


######################################################################
# -- Configuration -- #
######################################################################

# Hull to generate: 'default', 'raked', 'deepV', or 'flatBottomBox'
hullPreset = 'default'

# Mesh resolution: 'draft', 'standard', or 'high'
meshResolution = 'standard'

# Ballast added to the default payload [g]
ballastGrams = 10.0

# Output directory for generated STL files
outputDir = 'output'

# Whether to open the Plotly figures
showPlots = True


######################################################################
# -- Hull Parameter Selection -- #
######################################################################

params = presetParameters(hullPreset).withUpdates(ballastWeight=ballastGrams)

print('=' * 60)
print('  PARAMETRIC RC BOAT HULL GENERATOR')
print('=' * 60)
params.printSummary()


######################################################################
# -- Mesh Generation -- #
######################################################################

print('\nGenerating hull shell...')
resSettings = RESOLUTION_PRESETS[meshResolution]
mesher = ShellMesher(params, **resSettings)
mesh = mesher.generate()

print(f'  Resolution:  {meshResolution} '
      f'({resSettings["sternSections"]} stern x {resSettings["bowSections"]} bow sections)')
print(f'  Vertices:    {mesh.vertexCount:,}')
print(f'  Faces:       {mesh.faceCount:,}')
print(f'  Closed:      {mesh.isClosed}')
print(f'  Euler:       {mesh.eulerCharacteristic}')

# Compare the mesh volume against the analytic shell integration
model = BuoyancyModel(params)
meshVolCm3 = mm3ToCm3(mesher.computeVolume())
analyticVolCm3 = mm3ToCm3(model.shellVolume())
volDiffPct = abs(meshVolCm3 - analyticVolCm3) / analyticVolCm3 * 100
print(f'  Mesh Volume: {meshVolCm3:.2f} cm^3')
print(f'  Analytic:    {analyticVolCm3:.2f} cm^3 (integration)')
print(f'  Difference:  {volDiffPct:.2f}%')


######################################################################
# -- Waterline -- #
######################################################################

result = model.waterline()

print('\n' + '=' * 60)
print('  HYDROSTATICS')
print('=' * 60)
print(f'  Hull Mass:   {result.hullMass:.2f} g')
print(f'  Total Mass:  {result.totalMass:.2f} g  ({params.ballastPennies:.1f} pennies ballast)')
print(f'  Waterline:   {result.waterlineHeight:.2f} mm of {params.hullHeight:.1f} mm')
print(f'  Freeboard:   {model.freeboard():.2f} mm')
print(f'  Reserve:     {model.reserveBuoyancy():.1f} g')
print(f'  Status:      {"SINKS" if result.wouldSink else "floats"}')


######################################################################
# -- Section Validation -- #
######################################################################

print('\n' + '=' * 60)
print('  TRANSVERSE SECTIONS (mesh cut vs. analytic)')
print('=' * 60)

# Stations as fractions of length from the transom, inside the stern run
stations = [0.05, 0.20, 0.40]
sternFraction = 1.0 - params.bowLengthPercent / 100.0
stations = [s for s in stations if s < sternFraction]

print(f'\n  {"Station":<10s}  {"z (mm)":>8s}  {"Mesh":>9s}  {"Analytic":>9s}  {"Diff":>7s}')
print('  ' + '-' * 50)
for fraction in stations:
    z = -params.halfLength + fraction * params.boatLength
    cut = extractSection(mesh, ClipPlane.axis('z', z))
    exact = analyticSection(params, 'z', z)
    if cut is None or exact is None:
        print(f'  {fraction:<10.2f}  {z:8.1f}  {"--":>9s}  {"--":>9s}')
        continue
    diff = cut.area - exact.area
    print(f'  {fraction:<10.2f}  {z:8.1f}  {cut.area:9.2f}  {exact.area:9.2f}  {diff:+7.3f}')

midCut = extractSection(mesh, ClipPlane.axis('y', params.hullHeight / 2.0))
if midCut is not None:
    print(f'\n  Waterplane at half height: {midCut.area:.1f} mm^2, '
          f'{midCut.loopCount} loops, {len(midCut.holeLoops)} hole(s)')


######################################################################
# -- STL Export -- #
######################################################################

os.makedirs(outputDir, exist_ok=True)
stlPath = os.path.join(outputDir, f'{hullPreset}_hull.stl')
StlExporter().exportHull(params, stlPath, resolution=meshResolution)
print(f'\n  Exported: {stlPath}')


######################################################################
# -- Visualization -- #
######################################################################

if showPlots:
    print('\nBuilding visualizations...')

    dashboard = createHullDashboard(params, mesh, model)
    dashboard.show()

    # Keep the cut off the keel line so it always crosses the walls
    waterHeight = float(np.clip(result.waterlineHeight, 0.5, params.hullHeight))
    waterplane = extractSection(mesh, ClipPlane.axis('y', waterHeight))
    if waterplane is not None:
        plotCrossSection(waterplane, title='Waterplane Section').show()
