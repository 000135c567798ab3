# -- Shared Test Fixtures -- #

'''
Parameter sets and meshes shared across the HullDesign test modules.

Meshes are module-independent and expensive enough to build once per session.

Sean Bowman [10/16/2026]
'''

import pytest

from computationalEngineering.HullDesign.geometry.parameters import HullParameters
from computationalEngineering.HullDesign.geometry.shellMesher import buildShell


@pytest.fixture
def defaultParams():
    return HullParameters.default()


@pytest.fixture(scope='session')
def defaultMesh():
    '''Default hull at standard resolution.'''
    return buildShell(HullParameters.default())


@pytest.fixture(scope='session')
def boxMesh():
    '''Flat-bottom, zero-bilge hull at standard resolution.'''
    return buildShell(HullParameters.flatBottomBox())
