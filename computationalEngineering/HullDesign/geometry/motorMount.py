# -- Motor Mount Accessory Mesh -- #

'''
Under-hull motor mount: a cylinder running along the boat axis, hung below
the keel by a rectangular neck.

Built with trimesh.creation primitives and placed with the same longitudinal
centring as the shell, so the transom sits at z = -L/2.

Sean Bowman [10/07/2026]
'''

from __future__ import annotations

import numpy as np
import trimesh

from computationalEngineering.HullDesign import constants as const
from computationalEngineering.HullDesign.geometry.hullMesh import HullMesh, SurfaceTag
from computationalEngineering.HullDesign.geometry.parameters import HullParameters


def motorMountCenterZ(params: HullParameters) -> float:
    '''Mount centre position along the boat axis [mm].'''
    return -params.halfLength + params.motorMountFromStern


def buildMotorMountParts(params: HullParameters) -> list[trimesh.Trimesh]:
    '''
    Build the cylinder and neck as separate closed trimesh solids.

    Parameters:
    -----------
    params : HullParameters
        Hull parameters with the motor mount dimensions

    Returns:
    --------
    list[trimesh.Trimesh] : [cylinder, neck]
    '''
    radius = params.motorMountDiameter / 2.0
    centerZ = motorMountCenterZ(params)

    # trimesh cylinders are built along +z, which is already the boat axis
    cylinder = trimesh.creation.cylinder(
        radius=radius,
        height=params.motorMountLength,
        sections=const.motorMountSegments,
    )
    cylinder.apply_translation([0.0, -params.motorMountOffset - radius, centerZ])

    neckHeight = params.motorMountOffset + radius
    neck = trimesh.creation.box(
        extents=[params.motorMountNeckWidth, neckHeight, params.motorMountLength],
    )
    neck.apply_translation([0.0, -neckHeight / 2.0, centerZ])

    return [cylinder, neck]


def buildMotorMount(params: HullParameters) -> HullMesh:
    '''
    Motor mount as a single HullMesh tagged ACCESSORY.

    Parameters:
    -----------
    params : HullParameters
        Hull parameters with the motor mount dimensions

    Returns:
    --------
    HullMesh : Cylinder and neck, concatenated
    '''
    parts = [
        HullMesh(
            np.asarray(part.vertices),
            np.asarray(part.faces),
            np.full(len(part.faces), int(SurfaceTag.ACCESSORY)),
        )
        for part in buildMotorMountParts(params)
    ]
    return HullMesh.concatenate(parts)
