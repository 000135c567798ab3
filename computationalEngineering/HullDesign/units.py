# -- Unit Conversion Helpers -- #

'''
Conversion functions used at the read-out boundary.

Hull geometry is built in millimeters and masses are tracked in grams.
These helpers convert to the units shown to the user.

Sean Bowman [10/03/2026]
'''

import math

from computationalEngineering.HullDesign import constants as const


def mm3ToCm3(valueMm3: float) -> float:
    '''Convert cubic millimeters to cubic centimeters.'''
    return valueMm3 * 1e-3


def gramsToPennies(grams: float) -> float:
    '''Convert a mass in grams to a count of pennies, rounded to 0.1.'''
    return round(grams / const.pennyMassG, 1)


def degreesToRadians(deg: float) -> float:
    '''Convert degrees to radians.'''
    return deg * math.pi / 180.0
