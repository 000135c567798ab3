# -- Visualization Theme -- #

'''
Centralized dark-mode theme for all HullDesign Plotly visualizations.

Change colors or template here to restyle every plot at once.

Sean Bowman [10/13/2026]
'''

# Plotly template
TEMPLATE = 'plotly_dark'

# Primary color palette (Material Design, visible on dark backgrounds)
BLUE = '#42A5F5'
RED = '#EF5350'
GREEN = '#66BB6A'
ORANGE = '#FFA726'
CYAN = '#26C6DA'

# Neutrals
WHITE = '#E0E0E0'
REFERENCE_LINE = '#888888'

# Surface roles
HULL_COLOR = BLUE
MOUNT_COLOR = ORANGE
SECTION_COLOR = RED
WATER_COLOR = CYAN
WATER_OPACITY = 0.25

# Shared Mesh3d lighting
MESH_LIGHTING = dict(
    ambient=0.3, diffuse=0.7, specular=0.3,
    roughness=0.5, fresnel=0.2,
)
