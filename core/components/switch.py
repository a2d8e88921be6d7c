# core/components/switch.py
"""
Switch component plugin for DCSim.
Modelled as a resistor of extreme value instead of an ideal open/short.
"""
from typing import Any, Dict, Optional

from core.components.base import Component, ComponentType
from core.components.plugin_loader import ComponentFactory
from core.constants import SWITCH_RESISTANCE


class SwitchComponent(Component):
    type_name = "switch"
    kind = ComponentType.SWITCH

    def __init__(self, comp_id: Optional[str], start_node: Any, end_node: Any, is_open: bool = False):
        super().__init__(comp_id, start_node, end_node)
        self.is_open = bool(is_open)

    @property
    def effective_resistance(self) -> float:
        return SWITCH_RESISTANCE["open"] if self.is_open else SWITCH_RESISTANCE["closed"]

    def toggle(self) -> None:
        self.is_open = not self.is_open

    def describe(self) -> str:
        state = "OPEN" if self.is_open else "CLOSED"
        return (f"A switch between node {self.start_node} and {self.end_node}, "
                f"which is currently {state}.")

    @classmethod
    def from_params(cls, comp_id, start_node, end_node, params):
        params = dict(params)
        if "open" in params:
            params["is_open"] = params.pop("open")
        return cls(comp_id, start_node, end_node, **params)

    def params(self) -> Dict[str, Any]:
        return {"open": self.is_open}


ComponentFactory.register(SwitchComponent)
