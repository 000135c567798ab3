# -- Hull Parameters Dataclass -- #

'''
Parametric RC boat hull dimensions, payload masses and bow configuration.

All spatial dimensions are stored in millimeters and all masses in grams.
Instances are immutable; use withUpdates() to derive a modified copy.

Parameter files are versioned records of the form
    {"version": 1, "params": {...}, "savedAt": "<ISO-8601>"}
and loading merges a (possibly partial) record over the defaults.

Sean Bowman [10/03/2026]
'''

from __future__ import annotations

import json
import math
from dataclasses import dataclass, asdict, fields, replace
from datetime import datetime, timezone
from enum import Enum

from computationalEngineering.HullDesign import constants as const
from computationalEngineering.HullDesign.units import gramsToPennies


# Save-file format version
PARAMS_VERSION = 1


class BowType(str, Enum):
    '''Bow shape option.'''

    PLUMB = 'plumb'
    RAKED = 'raked'
    DEEP_V = 'deepV'


@dataclass(frozen=True)
class HullParameters:
    '''
    Parameters defining a printable RC boat hull.
    Lengths in millimeters, angles in degrees, masses in grams.

    Factory classmethods provide named presets (default, raked, deepV, flatBottomBox).
    '''

    #--------------------------------------------------------------------#
    # -- Build Plate -- #
    #--------------------------------------------------------------------#
    # Square printer bed edge length [mm]
    buildPlateSize: float = const.defaultBuildPlateMm

    #--------------------------------------------------------------------#
    # -- Hull Dimensions -- #
    #--------------------------------------------------------------------#
    # Overall length, transom to bow tip [mm]
    boatLength: float = 150.0

    # Maximum width [mm]
    beam: float = 40.0

    # Keel to gunwale height [mm]
    hullHeight: float = 25.0

    # Shell wall thickness [mm]
    wallThickness: float = 1.2

    # Radius of the rounded bottom corners [mm], 0 = sharp chine
    bilgeRadius: float = 5.0

    #--------------------------------------------------------------------#
    # -- Bow Configuration -- #
    #--------------------------------------------------------------------#
    bowType: BowType = BowType.PLUMB

    # Tapered bow run as a percentage of boat length [%]
    bowLengthPercent: float = 40.0

    # Forward lean of a raked stem [deg]
    bowRakeAngle: float = 30.0

    # Entry sharpness of a deep-V bow [deg], 45 = sharpest
    bowEntryAngle: float = 20.0

    #--------------------------------------------------------------------#
    # -- Motor Mount -- #
    #--------------------------------------------------------------------#
    # Cylinder diameter [mm]
    motorMountDiameter: float = 4.0

    # Gap between the hull bottom and the cylinder [mm]
    motorMountOffset: float = 1.0

    # Width of the rectangular neck joining cylinder to hull [mm]
    motorMountNeckWidth: float = 3.0

    # Extrusion along the boat axis [mm]
    motorMountLength: float = 22.0

    # Mount centre distance from the transom [mm]
    motorMountFromStern: float = 50.0

    #--------------------------------------------------------------------#
    # -- Payload [g] -- #
    #--------------------------------------------------------------------#
    motorWeight: float = 10.0
    batteryWeight: float = 23.0
    ballastWeight: float = 0.0

    def __post_init__(self) -> None:
        # Accept the plain string form ('plumb', 'raked', 'deepV')
        if not isinstance(self.bowType, BowType):
            object.__setattr__(self, 'bowType', BowType(self.bowType))

    #--------------------------------------------------------------------#
    # -- Computed Properties -- #
    #--------------------------------------------------------------------#
    @property
    def halfBeam(self) -> float:
        '''Half the maximum beam [mm].'''
        return self.beam / 2.0

    @property
    def halfLength(self) -> float:
        '''Half the overall length [mm].'''
        return self.boatLength / 2.0

    @property
    def bowLength(self) -> float:
        '''Length of the tapered bow run [mm].'''
        return self.boatLength * self.bowLengthPercent / 100.0

    @property
    def sternLength(self) -> float:
        '''Length of the constant-section stern run [mm].'''
        return self.boatLength - self.bowLength

    @property
    def maxLength(self) -> float:
        '''
        Longest hull that fits the build plate placed on its diagonal [mm].

        With the hull shifted a quarter beam toward the plate corner,
        length <= plateSize * sqrt(2) - beam / 2.
        '''
        return max(0.0, self.buildPlateSize * math.sqrt(2.0) - self.beam / 2.0)

    @property
    def fitsBuildPlate(self) -> bool:
        '''True if the hull length is within the diagonal build-plate limit.'''
        return self.boatLength <= self.maxLength

    @property
    def payloadMass(self) -> float:
        '''Motor + battery + ballast [g].'''
        return self.motorWeight + self.batteryWeight + self.ballastWeight

    @property
    def ballastPennies(self) -> float:
        '''Ballast expressed in pennies (2.5 g each), rounded to 0.1.'''
        return gramsToPennies(self.ballastWeight)

    def withUpdates(self, **changes) -> HullParameters:
        '''
        Return a copy with the given fields replaced.

        Parameters:
        -----------
        **changes
            Field name / value pairs

        Returns:
        --------
        HullParameters : Modified copy
        '''
        return replace(self, **changes)

    #--------------------------------------------------------------------#
    # -- Factory Presets -- #
    #--------------------------------------------------------------------#
    @classmethod
    def default(cls) -> HullParameters:
        '''
        150 mm plumb-bow hull with a 5 mm bilge.
        Fits a 140 mm build plate on the diagonal.
        '''
        return cls()

    @classmethod
    def raked(cls) -> HullParameters:
        '''Default hull with a 35 deg raked stem and a longer bow run.'''
        return cls(
            bowType=BowType.RAKED,
            bowLengthPercent=45.0,
            bowRakeAngle=35.0,
        )

    @classmethod
    def deepV(cls) -> HullParameters:
        '''Narrow, deep hull with a sharp deep-V entry.'''
        return cls(
            beam=36.0,
            hullHeight=28.0,
            bilgeRadius=8.0,
            bowType=BowType.DEEP_V,
            bowLengthPercent=50.0,
            bowEntryAngle=40.0,
        )

    @classmethod
    def flatBottomBox(cls) -> HullParameters:
        '''Sharp-chine barge with no bilge radius.'''
        return cls(
            beam=50.0,
            hullHeight=20.0,
            bilgeRadius=0.0,
            bowLengthPercent=25.0,
        )

    #--------------------------------------------------------------------#
    # -- Dictionary & JSON I/O -- #
    #--------------------------------------------------------------------#
    def toDict(self) -> dict:
        '''
        Flat dictionary of all parameters with the bow type as a string.

        Returns:
        --------
        dict : camelCase parameter names mapped to values
        '''
        data = asdict(self)
        data['bowType'] = self.bowType.value
        return data

    @classmethod
    def fromDict(cls, data: dict | None) -> HullParameters:
        '''
        Merge a partial parameter dictionary over the defaults.

        Unknown keys are ignored. Values of the wrong type (or an unknown
        bow type) fall back to the default for that field.

        Parameters:
        -----------
        data : dict | None
            Partial parameter dictionary

        Returns:
        --------
        HullParameters : Merged parameters
        '''
        defaults = cls()
        if not data:
            return defaults

        merged = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.name == 'bowType':
                try:
                    merged[f.name] = BowType(value)
                except ValueError:
                    print(f'  Ignoring unknown bowType {value!r}, using {defaults.bowType.value!r}')
                continue
            # bool is an int subclass but never a valid dimension
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                print(f'  Ignoring invalid {f.name} {value!r}, using {getattr(defaults, f.name)}')
                continue
            if not math.isfinite(value):
                print(f'  Ignoring non-finite {f.name}, using {getattr(defaults, f.name)}')
                continue
            merged[f.name] = float(value)

        return replace(defaults, **merged)

    def toJson(self, filePath: str) -> None:
        '''
        Save parameters as a versioned JSON record.

        Parameters:
        -----------
        filePath : str
            Output file path
        '''
        data = {
            'version': PARAMS_VERSION,
            'params': self.toDict(),
            'savedAt': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        with open(filePath, 'w') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def fromJson(cls, filePath: str) -> HullParameters:
        '''
        Load parameters from a versioned JSON record.

        Older versions are merged over the current defaults so fields added
        since the file was written take their default values.

        Parameters:
        -----------
        filePath : str
            Path to JSON parameter file

        Returns:
        --------
        HullParameters : Loaded parameters
        '''
        with open(filePath, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f'Failed to parse parameter file {filePath}: {e}') from e

        if not isinstance(data, dict) or not isinstance(data.get('params'), dict):
            raise ValueError(
                f'Parameter file {filePath} is missing a "params" object'
            )

        version = data.get('version')
        if version != PARAMS_VERSION:
            print(f'  Migrating parameters from version {version} to {PARAMS_VERSION}')

        return cls.fromDict(data['params'])

    #--------------------------------------------------------------------#
    # -- Display -- #
    #--------------------------------------------------------------------#
    def printSummary(self) -> None:
        '''Print hull parameters to console in a formatted table.'''
        print('=' * 58)
        print('  HULL PARAMETERS SUMMARY')
        print('=' * 58)
        print(f'  Length:            {self.boatLength:8.1f} mm  (max {self.maxLength:.1f} mm)')
        print(f'  Beam:              {self.beam:8.1f} mm')
        print(f'  Hull Height:       {self.hullHeight:8.1f} mm')
        print(f'  Wall Thickness:    {self.wallThickness:8.2f} mm')
        print(f'  Bilge Radius:      {self.bilgeRadius:8.1f} mm')
        print('-' * 58)
        print(f'  Bow Type:          {self.bowType.value:>8}')
        print(f'  Bow Length:        {self.bowLengthPercent:8.1f} %   ({self.bowLength:.1f} mm)')
        if self.bowType is BowType.RAKED:
            print(f'  Rake Angle:        {self.bowRakeAngle:8.1f} deg')
        elif self.bowType is BowType.DEEP_V:
            print(f'  Entry Angle:       {self.bowEntryAngle:8.1f} deg')
        print('-' * 58)
        print(f'  Motor Mount:       {self.motorMountDiameter:5.1f} mm dia x {self.motorMountLength:.1f} mm, '
              f'{self.motorMountFromStern:.1f} mm from stern')
        print('-' * 58)
        print(f'  Motor:             {self.motorWeight:8.1f} g')
        print(f'  Battery:           {self.batteryWeight:8.1f} g')
        print(f'  Ballast:           {self.ballastWeight:8.1f} g  ({self.ballastPennies:.1f} pennies)')
        print(f'  Plate Fit:         {"Yes" if self.fitsBuildPlate else "NO":>8}')
        print('=' * 58)


#--------------------------------------------------------------------#
# -- Preset Name to Factory Mapping -- #
#--------------------------------------------------------------------#

PARAMETER_PRESETS = {
    'default': HullParameters.default,
    'raked': HullParameters.raked,
    'deepV': HullParameters.deepV,
    'flatBottomBox': HullParameters.flatBottomBox,
}


def presetParameters(name: str) -> HullParameters:
    '''
    Build a named parameter preset.

    Parameters:
    -----------
    name : str
        Preset name: 'default', 'raked', 'deepV' or 'flatBottomBox'

    Returns:
    --------
    HullParameters : Preset parameters
    '''
    if name not in PARAMETER_PRESETS:
        raise ValueError(
            f'Unknown preset \'{name}\'. '
            f'Available: {list(PARAMETER_PRESETS.keys())}'
        )
    return PARAMETER_PRESETS[name]()
