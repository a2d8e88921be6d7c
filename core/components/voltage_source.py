# core/components/voltage_source.py
"""
Ideal DC voltage source. The start node is the positive terminal.
"""
import math
from typing import Any, Dict, Optional

from core.components.base import Component, ComponentType
from core.components.plugin_loader import ComponentFactory
from core.exceptions import ParameterError


class VoltageSourceComponent(Component):
    type_name = "voltage_source"
    kind = ComponentType.VOLTAGE_SOURCE

    def __init__(self, comp_id: Optional[str], start_node: Any, end_node: Any, voltage: float):
        super().__init__(comp_id, start_node, end_node)
        try:
            self.voltage = float(voltage)
        except (TypeError, ValueError) as exc:
            raise ParameterError(f"Voltage source '{comp_id}' has non-numeric voltage {voltage!r}.") from exc
        if not math.isfinite(self.voltage):
            raise ParameterError(f"Voltage source '{comp_id}' must have a finite voltage, got {self.voltage}.")

    @property
    def effective_resistance(self) -> None:
        return None

    def describe(self) -> str:
        return (f"A {self.voltage:g}V DC source between node {self.start_node} (+) "
                f"and {self.end_node} (-).")

    def params(self) -> Dict[str, Any]:
        return {"voltage": self.voltage}


ComponentFactory.register(VoltageSourceComponent)
