# -- Hull Geometry Visualizations -- #

'''
Plotly-based interactive plots for the RC boat hull: the 3D shell with its
waterline, cut sections, and the displacement curve.

Hull coordinates are x lateral, y up, z toward the bow. Plots show the boat
lying along the screen x axis with height on the vertical axis, so 3D traces
map (x, y, z) -> (z, x, y).

Sean Bowman [10/13/2026]
'''

from __future__ import annotations

from typing import Optional

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from computationalEngineering.HullDesign import constants as const
from computationalEngineering.HullDesign.geometry.hullMesh import HullMesh
from computationalEngineering.HullDesign.geometry.motorMount import buildMotorMount
from computationalEngineering.HullDesign.geometry.parameters import HullParameters
from computationalEngineering.HullDesign.geometry.shellMesher import buildShell
from computationalEngineering.HullDesign.hydrostatics.buoyancy import BuoyancyModel
from computationalEngineering.HullDesign.sections.analyticSections import analyticSection
from computationalEngineering.HullDesign.sections.planeIntersection import CappedRegion
from computationalEngineering.HullDesign.units import mm3ToCm3
from computationalEngineering.HullDesign.visualization import theme


# Axis titles of the projected 2D coordinates, keyed by the dropped axis
_SECTION_AXES = {
    0: ('Y: Height (mm)', 'Z: Length (mm)'),
    1: ('Z: Length (mm)', 'X: Beam (mm)'),
    2: ('X: Beam (mm)', 'Y: Height (mm)'),
}

_SCENE = dict(
    xaxis=dict(title='Length (mm)', showbackground=False),
    yaxis=dict(title='Beam (mm)', showbackground=False),
    zaxis=dict(title='Height (mm)', showbackground=False),
    aspectmode='data',
    camera=dict(
        eye=dict(x=1.4, y=1.2, z=0.7),
        up=dict(x=0, y=0, z=1),
    ),
)


######################################################################
# -- Trace Builders -- #
######################################################################

def meshTrace(
    mesh: HullMesh,
    color: str = theme.HULL_COLOR,
    name: str = 'Hull',
    opacity: float = 0.9,
) -> go.Mesh3d:
    '''
    Mesh3d trace for a HullMesh in display coordinates.

    Parameters:
    -----------
    mesh : HullMesh
        Triangle mesh in hull coordinates
    color : str
        Surface color
    name : str
        Legend name
    opacity : float
        Surface opacity

    Returns:
    --------
    go.Mesh3d : Plotly trace
    '''
    verts = mesh.vertices
    faces = mesh.faces
    return go.Mesh3d(
        x=verts[:, 2], y=verts[:, 0], z=verts[:, 1],
        i=faces[:, 0], j=faces[:, 1], k=faces[:, 2],
        color=color,
        opacity=opacity,
        flatshading=True,
        lighting=theme.MESH_LIGHTING,
        lightposition=dict(x=1000, y=500, z=2000),
        name=name,
        showscale=False,
        hoverinfo='skip',
    )


def waterlineTrace(params: HullParameters, height: float, margin: float = 10.0) -> go.Mesh3d:
    '''Translucent horizontal rectangle at the waterline height.'''
    halfLength = params.halfLength + margin
    halfBeam = params.halfBeam + margin
    return go.Mesh3d(
        x=[-halfLength, halfLength, halfLength, -halfLength],
        y=[-halfBeam, -halfBeam, halfBeam, halfBeam],
        z=[height] * 4,
        i=[0, 0], j=[1, 2], k=[2, 3],
        color=theme.WATER_COLOR,
        opacity=theme.WATER_OPACITY,
        name=f'Waterline ({height:.1f} mm)',
        showscale=False,
        hoverinfo='name',
    )


def _sectionTraces(region: CappedRegion, color: str = theme.SECTION_COLOR) -> list[go.Scatter]:
    '''Filled triangles plus boundary outlines of a section, in plane coordinates.'''
    traces = []

    # Each triangle is its own closed subpath, so holes stay unfilled
    if len(region.triangles):
        tri2d = region.plane.project(region.vertices)[region.triangles]
        xs = []
        ys = []
        for a, b, c in tri2d:
            xs.extend([a[0], b[0], c[0], a[0], None])
            ys.extend([a[1], b[1], c[1], a[1], None])
        traces.append(go.Scatter(
            x=xs, y=ys, mode='lines', fill='toself',
            fillcolor=color, line=dict(color=color, width=0),
            opacity=0.5, name='Section', hoverinfo='skip',
        ))

    loops = [region.outerLoop] + list(region.holeLoops)
    for outer, holes in region.islands:
        loops.append(outer)
        loops.extend(holes)

    for loop in loops:
        pts = region.plane.project(loop)
        pts = np.vstack([pts, pts[:1]])
        traces.append(go.Scatter(
            x=pts[:, 0], y=pts[:, 1], mode='lines',
            line=dict(color=theme.WHITE, width=1.5),
            showlegend=False,
        ))

    return traces


######################################################################
# -- Standalone Figures -- #
######################################################################

def plotHull3d(
    params: HullParameters,
    mesh: Optional[HullMesh] = None,
    waterlineHeight: Optional[float] = None,
    showMotorMount: bool = True,
) -> go.Figure:
    '''
    3D view of the hull shell with optional waterline plane and motor mount.

    Parameters:
    -----------
    params : HullParameters
        Hull parameters
    mesh : HullMesh | None
        Pre-built shell; generated at standard resolution if None
    waterlineHeight : float | None
        Waterline height above the keel [mm]; no plane drawn if None
    showMotorMount : bool
        Draw the motor mount cylinder and neck

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    if mesh is None:
        mesh = buildShell(params)

    fig = go.Figure()
    fig.add_trace(meshTrace(mesh))
    if showMotorMount:
        fig.add_trace(meshTrace(buildMotorMount(params), theme.MOUNT_COLOR, 'Motor Mount', 1.0))
    if waterlineHeight is not None:
        fig.add_trace(waterlineTrace(params, waterlineHeight))

    fig.update_layout(
        title=f'Hull Shell ({params.bowType.value} bow)',
        scene=_SCENE,
        template=theme.TEMPLATE,
        height=600,
    )
    return fig


def plotCrossSection(region: CappedRegion, title: Optional[str] = None) -> go.Figure:
    '''
    Filled section cap with its boundary loops.

    Parameters:
    -----------
    region : CappedRegion
        Section from extractSection() or analyticSection()
    title : str | None
        Figure title

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    fig = go.Figure()
    for trace in _sectionTraces(region):
        fig.add_trace(trace)

    xTitle, yTitle = _SECTION_AXES[region.plane.dominantAxis]
    fig.update_layout(
        title=title or f'Section: {region.area:.1f} mm^2, {region.loopCount} loop(s)',
        xaxis_title=xTitle,
        yaxis_title=yTitle,
        yaxis=dict(scaleanchor='x', scaleratio=1),
        template=theme.TEMPLATE,
        height=400,
    )
    return fig


def plotDisplacementCurve(model: BuoyancyModel, nPoints: int = 50) -> go.Figure:
    '''
    Displaced volume against waterline height, with the equilibrium point.

    Parameters:
    -----------
    model : BuoyancyModel
        Hydrostatics for the hull
    nPoints : int
        Heights sampled over [0, hullHeight]

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    fig = go.Figure()
    for trace in _displacementTraces(model, nPoints):
        fig.add_trace(trace)
    _addDisplacementMarkers(fig, model)

    fig.update_layout(
        title='Displacement Curve',
        xaxis_title='Waterline Height (mm)',
        yaxis_title='Displaced Volume (cm^3)',
        template=theme.TEMPLATE,
        height=400,
    )
    return fig


def _displacementTraces(model: BuoyancyModel, nPoints: int) -> list[go.Scatter]:
    heights, volumes = model.displacementCurve(nPoints)
    result = model.waterline()
    return [
        go.Scatter(
            x=heights, y=mm3ToCm3(volumes), mode='lines',
            name='Displaced Volume', line=dict(color=theme.BLUE, width=2),
        ),
        go.Scatter(
            x=[result.waterlineHeight], y=[mm3ToCm3(result.displacedVolume)],
            mode='markers', name='Equilibrium',
            marker=dict(color=theme.GREEN if not result.wouldSink else theme.RED, size=10),
        ),
    ]


def _addDisplacementMarkers(fig: go.Figure, model: BuoyancyModel, row=None, col=None) -> None:
    '''Required-volume line and sink threshold on a displacement plot.'''
    result = model.waterline()
    fig.add_hline(
        y=mm3ToCm3(result.requiredVolume),
        line=dict(color=theme.REFERENCE_LINE, dash='dash', width=1),
        row=row, col=col,
    )
    fig.add_vline(
        x=model.params.hullHeight * const.sinkThresholdFraction,
        line=dict(color=theme.RED, dash='dot', width=1),
        row=row, col=col,
    )


######################################################################
# -- Dashboard -- #
######################################################################

def createHullDashboard(
    params: HullParameters,
    mesh: Optional[HullMesh] = None,
    model: Optional[BuoyancyModel] = None,
) -> go.Figure:
    '''
    Three-panel overview: 3D hull with waterline, midship section and
    displacement curve.

    Parameters:
    -----------
    params : HullParameters
        Hull parameters
    mesh : HullMesh | None
        Pre-built shell; generated at standard resolution if None
    model : BuoyancyModel | None
        Hydrostatics; built from params if None

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    if mesh is None:
        mesh = buildShell(params)
    if model is None:
        model = BuoyancyModel(params)
    result = model.waterline()

    fig = make_subplots(
        rows=2, cols=2,
        specs=[
            [{'type': 'scene', 'colspan': 2}, None],
            [{'type': 'xy'}, {'type': 'xy'}],
        ],
        row_heights=[0.6, 0.4],
        subplot_titles=[
            '3D Hull Shell',
            'Stern Run Section', 'Displacement Curve',
        ],
        vertical_spacing=0.08,
        horizontal_spacing=0.08,
    )


    # -- Panel 1: 3D Hull -- #

    fig.add_trace(meshTrace(mesh), row=1, col=1)
    fig.add_trace(meshTrace(buildMotorMount(params), theme.MOUNT_COLOR, 'Motor Mount', 1.0), row=1, col=1)
    fig.add_trace(waterlineTrace(params, result.waterlineHeight), row=1, col=1)
    fig.update_scenes(_SCENE, row=1, col=1)


    # -- Panel 2: Section halfway along the stern run -- #

    zMid = -params.halfLength + params.sternLength / 2.0
    region = analyticSection(params, 'z', zMid)
    if region is not None:
        for trace in _sectionTraces(region):
            fig.add_trace(trace, row=2, col=1)
    fig.update_xaxes(title_text='Beam (mm)', row=2, col=1)
    fig.update_yaxes(title_text='Height (mm)', row=2, col=1)


    # -- Panel 3: Displacement -- #

    for trace in _displacementTraces(model, 50):
        fig.add_trace(trace, row=2, col=2)
    _addDisplacementMarkers(fig, model, row=2, col=2)
    fig.update_xaxes(title_text='Waterline Height (mm)', row=2, col=2)
    fig.update_yaxes(title_text='Volume (cm^3)', row=2, col=2)

    status = 'SINKS' if result.wouldSink else 'floats'
    fig.update_layout(
        title=(f'RC Boat Hull: waterline {result.waterlineHeight:.1f} mm, '
               f'total mass {result.totalMass:.1f} g ({status})'),
        template=theme.TEMPLATE,
        height=900,
    )
    return fig
