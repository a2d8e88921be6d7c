# core/components/resistor.py
"""
Resistor component plugin for DCSim.
A linear resistor with a thermal power rating.
"""
import math
from typing import Any, Dict, Optional

from core.components.base import Component, ComponentType
from core.components.plugin_loader import ComponentFactory
from core.constants import DEFAULT_POWER_RATING, POWER_RATING_MAP
from core.exceptions import ParameterError


class ResistorComponent(Component):
    """
    Two-terminal resistor.

    Parameters:
      resistance: resistance in Ohms (float, > 0)
      power_rating: one of the labels in POWER_RATING_MAP
    """
    type_name = "resistor"
    kind = ComponentType.RESISTOR

    def __init__(self, comp_id: Optional[str], start_node: Any, end_node: Any,
                 resistance: float, power_rating: str = DEFAULT_POWER_RATING):
        super().__init__(comp_id, start_node, end_node)
        try:
            resistance = float(resistance)
        except (TypeError, ValueError) as exc:
            raise ParameterError(f"Resistor '{comp_id}' has non-numeric resistance {resistance!r}.") from exc
        if not (resistance > 0 and math.isfinite(resistance)):
            raise ParameterError(f"Resistor '{comp_id}' must have finite positive resistance, got {resistance}.")
        if power_rating not in POWER_RATING_MAP:
            raise ParameterError(
                f"Resistor '{comp_id}' has unknown power rating {power_rating!r}; "
                f"expected one of {', '.join(POWER_RATING_MAP)}."
            )
        self.resistance = resistance
        self.power_rating = power_rating

    @property
    def effective_resistance(self) -> float:
        return self.resistance

    @property
    def rated_power(self) -> float:
        return POWER_RATING_MAP[self.power_rating]

    def describe(self) -> str:
        return (f"A {self.resistance:g} Ohm resistor (rated for {self.power_rating}) "
                f"between node {self.start_node} and {self.end_node}.")

    def params(self) -> Dict[str, Any]:
        return {"resistance": self.resistance, "power_rating": self.power_rating}


ComponentFactory.register(ResistorComponent)
