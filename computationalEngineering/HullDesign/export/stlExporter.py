# -- STL Export Wrapper -- #

'''
Exports the generated hull (and optional motor mount) as STL files.

Wraps ShellMesher and the motor mount builder with convenience methods for
exporting presets and custom parameter sets in a single call.

Sean Bowman [10/12/2026]
'''

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import trimesh

from computationalEngineering.HullDesign.geometry.motorMount import buildMotorMountParts
from computationalEngineering.HullDesign.geometry.parameters import (
    HullParameters,
    PARAMETER_PRESETS,
    presetParameters,
)
from computationalEngineering.HullDesign.geometry.shellMesher import ShellMesher


def defaultStlName() -> str:
    '''Timestamped file name, boat-hull-<milliseconds>.stl.'''
    return f'boat-hull-{int(time.time() * 1000)}.stl'


class StlExporter:
    '''
    Exports parametric hull geometry as STL files.

    Examples:
    ---------
    >>> exporter = StlExporter()
    >>> exporter.exportPreset('raked', 'output/')
    >>> exporter.exportHull(customParams, 'output/custom.stl', includeMotorMount=False)
    '''

    def buildExportMesh(
        self,
        params: HullParameters,
        includeMotorMount: bool = True,
        resolution: str = 'standard',
    ) -> trimesh.Trimesh:
        '''
        Assemble the printable geometry as one trimesh.

        Parameters:
        -----------
        params : HullParameters
            Hull dimensions
        includeMotorMount : bool
            Append the motor mount cylinder and neck
        resolution : str
            Mesh resolution preset: 'draft', 'standard', or 'high'

        Returns:
        --------
        trimesh.Trimesh : Hull shell, plus mount parts if requested
        '''
        shell = ShellMesher.fromPreset(params, resolution).toTrimesh()
        if not includeMotorMount:
            return shell
        return trimesh.util.concatenate([shell] + buildMotorMountParts(params))

    def exportHull(
        self,
        params: HullParameters,
        outputPath: Optional[str] = None,
        includeMotorMount: bool = True,
        binary: bool = True,
        resolution: str = 'standard',
    ) -> str:
        '''
        Export a hull from parameters to an STL file.

        Parameters:
        -----------
        params : HullParameters
            Hull dimensions
        outputPath : str | None
            Output file path; defaults to a timestamped name in the working directory
        includeMotorMount : bool
            Include the motor mount bodies
        binary : bool
            If True, write binary STL. If False, write ASCII STL.
        resolution : str
            Mesh resolution preset

        Returns:
        --------
        str : Path to the exported STL file
        '''
        path = Path(outputPath) if outputPath else Path(defaultStlName())
        path.parent.mkdir(parents=True, exist_ok=True)

        mesh = self.buildExportMesh(params, includeMotorMount, resolution)
        fileType = 'stl' if binary else 'stl_ascii'
        mesh.export(str(path), file_type=fileType)

        print(f'Exported {path.name}: '
              f'{len(mesh.vertices)} vertices, '
              f'{len(mesh.faces)} faces')

        return str(path)

    def exportPreset(
        self,
        presetName: str,
        outputDir: str,
        includeMotorMount: bool = True,
        binary: bool = True,
        resolution: str = 'standard',
    ) -> str:
        '''
        Export a named parameter preset to an STL file.

        Parameters:
        -----------
        presetName : str
            Preset name, one of PARAMETER_PRESETS
        outputDir : str
            Output directory (file named '{presetName}_hull.stl')
        includeMotorMount : bool
            Include the motor mount bodies
        binary : bool
            If True, write binary STL
        resolution : str
            Mesh resolution preset

        Returns:
        --------
        str : Path to the exported STL file
        '''
        params = presetParameters(presetName)
        outDir = Path(outputDir)
        outDir.mkdir(parents=True, exist_ok=True)
        return self.exportHull(
            params,
            str(outDir / f'{presetName}_hull.stl'),
            includeMotorMount=includeMotorMount,
            binary=binary,
            resolution=resolution,
        )

    def exportAllPresets(self, outputDir: str, resolution: str = 'standard') -> list[str]:
        '''Export every parameter preset into outputDir.'''
        return [
            self.exportPreset(name, outputDir, resolution=resolution)
            for name in PARAMETER_PRESETS
        ]
