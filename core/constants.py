# core/constants.py
"""
Static electrical constants shared by the components and the analyzer.
"""
from types import MappingProxyType

# Resistor power-rating label -> rated dissipation in watts.
POWER_RATING_MAP = MappingProxyType({
    "1/8W": 0.125,
    "1/4W": 0.25,
    "1/2W": 0.5,
    "1W": 1.0,
    "2W": 2.0,
})

POWER_RATINGS = tuple(POWER_RATING_MAP)
DEFAULT_POWER_RATING = "1/4W"

# Switches are modelled as resistors at the extremes.
SWITCH_RESISTANCE = MappingProxyType({
    "open": 1e9,     # 1 GOhm
    "closed": 1e-3,  # 1 mOhm
})

PIVOT_TOLERANCE = 1e-12

DEFAULT_GROUND = "0"
