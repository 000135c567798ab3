# -- HullDesign Analysis Runner -- #

'''
Command-line entry point for generating and analysing an RC boat hull.

Loads hull parameters (from JSON or preset), applies any dimension overrides,
builds the watertight shell, solves the static waterline, and optionally
exports STL, cuts a section, and opens the interactive dashboard.

Usage:
    python -m computationalEngineering.HullDesign.runner                     # Default hull
    python -m computationalEngineering.HullDesign.runner --preset deepV      # Deep-V preset
    python -m computationalEngineering.HullDesign.runner --json hull.json    # Saved parameters
    python -m computationalEngineering.HullDesign.runner --bow-type raked --length 140
    python -m computationalEngineering.HullDesign.runner --ballast 20 --stl output/hull.stl
    python -m computationalEngineering.HullDesign.runner --section z 0 --plot

Sean Bowman [10/14/2026]
'''

from __future__ import annotations

import argparse
from typing import Optional

from computationalEngineering.HullDesign.export.stlExporter import StlExporter
from computationalEngineering.HullDesign.geometry.parameters import (
    BowType,
    HullParameters,
    PARAMETER_PRESETS,
    presetParameters,
)
from computationalEngineering.HullDesign.geometry.shellMesher import RESOLUTION_PRESETS, ShellMesher
from computationalEngineering.HullDesign.hydrostatics.buoyancy import BuoyancyModel
from computationalEngineering.HullDesign.sections.planeIntersection import ClipPlane, extractSection
from computationalEngineering.HullDesign.units import mm3ToCm3


# CLI flag -> HullParameters field for numeric overrides
_OVERRIDES = {
    'length': 'boatLength',
    'beam': 'beam',
    'height': 'hullHeight',
    'wall': 'wallThickness',
    'bilge': 'bilgeRadius',
    'bow_percent': 'bowLengthPercent',
    'rake': 'bowRakeAngle',
    'entry': 'bowEntryAngle',
    'motor': 'motorWeight',
    'battery': 'batteryWeight',
    'ballast': 'ballastWeight',
}


def buildParser() -> argparse.ArgumentParser:
    '''Build the CLI argument parser.'''
    parser = argparse.ArgumentParser(
        description='HullDesign -- Parametric RC boat hull generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '--preset', type=str, default='default',
        choices=list(PARAMETER_PRESETS),
        help='Hull preset (default: default)',
    )
    parser.add_argument(
        '--json', type=str, default=None,
        help='Path to saved hull parameters JSON file',
    )
    parser.add_argument(
        '--save-json', type=str, default=None,
        help='Write the final parameters to a JSON file',
    )
    parser.add_argument(
        '--bow-type', type=str, default=None,
        choices=[b.value for b in BowType],
        help='Override the bow shape',
    )

    # Dimension and mass overrides
    parser.add_argument('--length', type=float, default=None, help='Boat length in mm')
    parser.add_argument('--beam', type=float, default=None, help='Beam in mm')
    parser.add_argument('--height', type=float, default=None, help='Hull height in mm')
    parser.add_argument('--wall', type=float, default=None, help='Wall thickness in mm')
    parser.add_argument('--bilge', type=float, default=None, help='Bilge radius in mm')
    parser.add_argument('--bow-percent', type=float, default=None, help='Bow length as %% of length')
    parser.add_argument('--rake', type=float, default=None, help='Bow rake angle in degrees')
    parser.add_argument('--entry', type=float, default=None, help='Deep-V entry angle in degrees')
    parser.add_argument('--motor', type=float, default=None, help='Motor mass in g')
    parser.add_argument('--battery', type=float, default=None, help='Battery mass in g')
    parser.add_argument('--ballast', type=float, default=None, help='Ballast mass in g')

    parser.add_argument(
        '--resolution', type=str, default='standard',
        choices=list(RESOLUTION_PRESETS),
        help='Mesh resolution preset (default: standard)',
    )
    parser.add_argument(
        '--stl', type=str, default=None,
        help='Export the hull to this STL path',
    )
    parser.add_argument(
        '--no-mount', action='store_true',
        help='Leave the motor mount out of the STL export',
    )
    parser.add_argument(
        '--ascii', action='store_true',
        help='Write ASCII STL instead of binary',
    )
    parser.add_argument(
        '--section', nargs=2, metavar=('AXIS', 'POSITION'), default=None,
        help='Cut the mesh on an axis-aligned plane, e.g. --section z 0',
    )
    parser.add_argument(
        '--plot', action='store_true',
        help='Open the interactive dashboard in a browser',
    )

    return parser


def loadParameters(args: argparse.Namespace) -> HullParameters:
    '''Load hull parameters from args, then apply command-line overrides.'''
    if args.json:
        params = HullParameters.fromJson(args.json)
    else:
        params = presetParameters(args.preset)

    changes = {
        field: getattr(args, flag)
        for flag, field in _OVERRIDES.items()
        if getattr(args, flag) is not None
    }
    if args.bow_type is not None:
        changes['bowType'] = BowType(args.bow_type)

    return params.withUpdates(**changes) if changes else params


def runAnalysis(
    params: HullParameters,
    resolution: str = 'standard',
    stlPath: Optional[str] = None,
    includeMotorMount: bool = True,
    binary: bool = True,
    section: Optional[tuple[str, float]] = None,
    showDashboard: bool = False,
) -> None:
    '''
    Run the full pipeline.

    1. Print the parameter table
    2. Generate the shell mesh and report its checks
    3. Solve the static waterline
    4. Optionally cut a section, export STL, and open the dashboard

    Parameters:
    -----------
    params : HullParameters
        Hull parameters
    resolution : str
        Mesh resolution preset
    stlPath : str | None
        STL output path; no export if None
    includeMotorMount : bool
        Include the motor mount in the STL
    binary : bool
        Binary (True) or ASCII (False) STL
    section : tuple[str, float] | None
        (axis, position) of a plane to cut, or None
    showDashboard : bool
        Whether to generate and show the interactive dashboard
    '''
    print()
    print('=' * 62)
    print('  HULLDESIGN ANALYSIS')
    print('=' * 62)
    print()

    ######################################################################
    # Parameters
    ######################################################################
    params.printSummary()
    print()

    ######################################################################
    # Shell Mesh
    ######################################################################
    print('-' * 62)
    print('  SHELL MESH')
    print('-' * 62)

    mesher = ShellMesher.fromPreset(params, resolution)
    mesh = mesher.getMesh()

    print(f'  Resolution:        {resolution:>8}')
    print(f'  Vertices:          {mesh.vertexCount:8d}')
    print(f'  Faces:             {mesh.faceCount:8d}')
    if mesh.faceCount == 0:
        print('  Mesh is empty: hull dimensions too small to build a shell.')
    else:
        print(f'  Closed:            {"Yes" if mesh.isClosed else "NO":>8}')
        print(f'  Euler Char.:       {mesh.eulerCharacteristic:8d}')
        print(f'  Enclosed Volume:   {mm3ToCm3(mesh.volume):8.2f} cm^3  (mesh)')
    print()

    ######################################################################
    # Hydrostatics
    ######################################################################
    print('-' * 62)
    print('  HYDROSTATICS')
    print('-' * 62)

    model = BuoyancyModel(params)
    result = model.waterline()

    print(f'  Shell Volume:      {mm3ToCm3(model.shellVolume()):8.2f} cm^3')
    print(f'  Hull Mass:         {result.hullMass:8.2f} g  (PLA)')
    print(f'  Total Mass:        {result.totalMass:8.2f} g')
    print(f'  Max Displacement:  {mm3ToCm3(model.maxDisplacedVolume()):8.2f} cm^3')
    print(f'  Reserve Buoyancy:  {model.reserveBuoyancy():8.2f} g')
    print()
    print(f'  Waterline:         {result.waterlineHeight:8.2f} mm  '
          f'({100.0 * result.waterlineHeight / params.hullHeight:.0f}% of hull height)')
    print(f'  Freeboard:         {model.freeboard():8.2f} mm')
    print(f'  Solver:            {result.iterations:8d} iterations  '
          f'({"converged" if result.converged else "iteration limit"})')
    print(f'  Status:            {"SINKS" if result.wouldSink else "floats":>8}')
    print()

    ######################################################################
    # Section
    ######################################################################
    if section is not None:
        axis, position = section
        print('-' * 62)
        print(f'  SECTION  {axis} = {position:.2f} mm')
        print('-' * 62)

        region = extractSection(mesh, ClipPlane.axis(axis, position))
        if region is None:
            print('  Plane does not cut the hull.')
        else:
            print(f'  Loops:             {region.loopCount:8d}')
            print(f'  Holes:             {len(region.holeLoops):8d}')
            print(f'  Triangles:         {len(region.triangles):8d}')
            print(f'  Area:              {region.area:8.2f} mm^2')
        print()

    ######################################################################
    # Export
    ######################################################################
    if stlPath is not None:
        print('-' * 62)
        print('  STL EXPORT')
        print('-' * 62)
        StlExporter().exportHull(
            params, stlPath,
            includeMotorMount=includeMotorMount,
            binary=binary,
            resolution=resolution,
        )
        print()

    ######################################################################
    # Dashboard
    ######################################################################
    if showDashboard:
        from computationalEngineering.HullDesign.visualization.hullPlots import createHullDashboard

        print('-' * 62)
        print('  Generating interactive dashboard...')
        fig = createHullDashboard(params, mesh, model)
        fig.show()
        print('  Dashboard opened in browser.')

    print('=' * 62)
    print('  Analysis complete.')
    print('=' * 62)


def main(argv: Optional[list[str]] = None) -> None:
    '''CLI entry point.'''
    parser = buildParser()
    args = parser.parse_args(argv)

    params = loadParameters(args)
    if args.save_json:
        params.toJson(args.save_json)

    section = None
    if args.section is not None:
        axis, position = args.section
        if axis not in ('x', 'y', 'z'):
            parser.error(f"section axis must be 'x', 'y' or 'z', got {axis!r}")
        try:
            section = (axis, float(position))
        except ValueError:
            parser.error(f'section position must be a number, got {position!r}')

    runAnalysis(
        params=params,
        resolution=args.resolution,
        stlPath=args.stl,
        includeMotorMount=not args.no_mount,
        binary=not args.ascii,
        section=section,
        showDashboard=args.plot,
    )


if __name__ == '__main__':
    main()
