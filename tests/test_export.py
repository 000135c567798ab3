# -- STL Export Tests -- #

'''
STL files written by StlExporter, read back with trimesh.

Sean Bowman [10/16/2026]
'''

import re

import numpy as np
import pytest
import trimesh

from computationalEngineering.HullDesign.export.stlExporter import StlExporter, defaultStlName
from computationalEngineering.HullDesign.geometry.parameters import PARAMETER_PRESETS


def testExportShellOnlyIsWatertight(defaultParams, tmp_path):
    path = StlExporter().exportHull(
        defaultParams, str(tmp_path / 'hull.stl'), includeMotorMount=False,
    )
    mesh = trimesh.load(path)
    assert mesh.is_watertight
    assert mesh.volume > 0.0
    lo, hi = mesh.bounds
    assert lo[2] == pytest.approx(-75.0)
    assert hi[2] == pytest.approx(75.0)


def testExportWithMountReachesBelowKeel(defaultParams, tmp_path):
    path = StlExporter().exportHull(defaultParams, str(tmp_path / 'hull.stl'))
    mesh = trimesh.load(path)
    assert mesh.bounds[0][1] == pytest.approx(-5.0)
    assert mesh.bounds[1][1] == pytest.approx(defaultParams.hullHeight)


def testExportPrintsSummary(defaultParams, tmp_path, capsys):
    StlExporter().exportHull(defaultParams, str(tmp_path / 'hull.stl'), resolution='draft')
    assert 'Exported hull.stl' in capsys.readouterr().out


def testAsciiExport(defaultParams, tmp_path):
    path = StlExporter().exportHull(
        defaultParams, str(tmp_path / 'hull.stl'), binary=False, resolution='draft',
    )
    with open(path, 'rb') as f:
        assert f.read(5) == b'solid'


def testExportCreatesParentDirectory(defaultParams, tmp_path):
    target = tmp_path / 'nested' / 'dir' / 'hull.stl'
    path = StlExporter().exportHull(defaultParams, str(target), resolution='draft')
    assert target.exists()
    assert path == str(target)


def testBuildExportMeshAddsMount(defaultParams):
    exporter = StlExporter()
    shell = exporter.buildExportMesh(defaultParams, includeMotorMount=False, resolution='draft')
    full = exporter.buildExportMesh(defaultParams, includeMotorMount=True, resolution='draft')
    assert len(full.faces) > len(shell.faces)
    assert np.allclose(full.vertices[:len(shell.vertices)], shell.vertices)


def testExportPresetNaming(tmp_path):
    path = StlExporter().exportPreset('raked', str(tmp_path), resolution='draft')
    assert path.endswith('raked_hull.stl')
    assert (tmp_path / 'raked_hull.stl').exists()


def testExportAllPresets(tmp_path):
    paths = StlExporter().exportAllPresets(str(tmp_path), resolution='draft')
    assert len(paths) == len(PARAMETER_PRESETS)
    for name in PARAMETER_PRESETS:
        assert (tmp_path / f'{name}_hull.stl').exists()


def testDefaultStlName():
    assert re.fullmatch(r'boat-hull-\d+\.stl', defaultStlName())


def testDefaultPathUsesWorkingDirectory(defaultParams, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = StlExporter().exportHull(defaultParams, resolution='draft')
    assert re.fullmatch(r'boat-hull-\d+\.stl', path)
    assert (tmp_path / path).exists()
