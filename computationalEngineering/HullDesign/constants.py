# -- Physical & Tessellation Constants for Hull Design -- #

'''
Physical, material and tessellation constants for the parametric RC boat hull.

All lengths in millimeters and masses in grams, matching the printable-part
convention used throughout HullDesign.

Sean Bowman [10/03/2026]
'''

######################################################################
# -- Water & Material Properties -- #
######################################################################

# Fresh water density [g/mm^3] (1 g/cm^3)
waterDensityGPerMm3: float = 0.001

# PLA filament density [g/cm^3]
# Typical value for printed parts at 100% infill
plaDensityGPerCm3: float = 1.25

# US penny mass [g]
# Used to express ballast in a unit that is easy to weigh out
pennyMassG: float = 2.5

# Fraction of hull height at which the waterline is reported as sinking
sinkThresholdFraction: float = 0.95

######################################################################
# -- Cross-Section Tessellation -- #
######################################################################

# Points along each quarter-circle bilge arc
bilgeSegments: int = 8

# Points per profile ring: bottom + left arc + 2 top corners + right arc + closing bottom
outerPoints: int = 2 * bilgeSegments + 4

# Clearance kept between the bilge radius and the half-beam / height [mm]
profileEpsilonMm: float = 0.1

# Half-beam below which a station collapses to the bow tip [mm]
tipHalfBeamMm: float = 0.5

# Scale below which a station collapses to the bow tip
tipScale: float = 0.02

######################################################################
# -- Longitudinal Stations -- #
######################################################################

# Constant-section intervals along the stern run
sternSections: int = 3

# Tapered intervals along the bow run
bowSections: int = 20

######################################################################
# -- Deep-V Bilge Reduction -- #
######################################################################

# Bilge radius fraction removed at the tip for a 0 deg entry angle
deepVBaseReduction: float = 0.5

# Additional fraction removed per unit of (entryAngle / 45 deg)
deepVAngleReduction: float = 0.45

# Entry angle that maps to the full additional reduction [deg]
deepVMaxEntryAngleDeg: float = 45.0

######################################################################
# -- Waterline Solver -- #
######################################################################

# Segments used to integrate the tapered bow
bowIntegrationSegments: int = 20

# Maximum bisection iterations
waterlineMaxIterations: int = 50

# Relative displaced-volume tolerance
waterlineRelativeTolerance: float = 1e-3

# Bracket width tolerance [mm]
waterlineBracketToleranceMm: float = 0.1

######################################################################
# -- Cross-Section Extraction -- #
######################################################################

# Default endpoint matching tolerance as a fraction of the mesh bounding-box diagonal
sectionToleranceFraction: float = 1e-4

# Minimum number of points for a stitched loop to be kept
minLoopPoints: int = 3

# Shifts (in tolerances) tried when a cutting plane passes through mesh
# vertices; the cut is taken on the first shifted plane clear of vertices
planeShiftSteps: tuple[float, ...] = (0.0, 2.0, 3.0, 5.0, 8.0, 13.0)


######################################################################
# -- Build Plate -- #
######################################################################

# Default printer bed edge length [mm]
defaultBuildPlateMm: float = 140.0

# Motor mount cylinder tessellation
motorMountSegments: int = 16
