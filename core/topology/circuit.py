# core/topology/circuit.py
import logging
import uuid
from typing import Any, List, Optional

from core.analysis.analyzer import analyze
from core.analysis.results import AnalysisResult
from core.components.base import Component
from core.components.plugin_loader import ComponentFactory
from core.components.resistor import ResistorComponent
from core.components.switch import SwitchComponent
from core.components.voltage_source import VoltageSourceComponent
from core.constants import DEFAULT_GROUND
from core.exceptions import DCSimError


def new_component_id() -> str:
    return str(uuid.uuid4())


class Circuit:
    """
    Editable circuit: an ordered component list plus the selected ground node.
    Component order is the order of branch results in every analysis.
    """

    def __init__(self, ground_node: str = DEFAULT_GROUND):
        self.components: List[Component] = []
        self.ground_node = str(ground_node)

    def add_component(self, comp: Component) -> Component:
        if comp.id is None:
            comp.id = new_component_id()
        elif any(c.id == comp.id for c in self.components):
            raise DCSimError(f"Component '{comp.id}' already exists.")
        self.components.append(comp)
        return comp

    def new_component(self, type_name: str, start_node: Any, end_node: Any,
                      comp_id: Optional[str] = None, **params) -> Component:
        comp = ComponentFactory.create(type_name, comp_id, start_node, end_node, params)
        return self.add_component(comp)

    def _find_component(self, comp_id: str) -> Component:
        comp = next((c for c in self.components if c.id == comp_id), None)
        if comp is None:
            raise DCSimError(f"Component '{comp_id}' not found.")
        return comp

    def remove_component(self, comp_id: str) -> None:
        self.components.remove(self._find_component(comp_id))

    def toggle_switch(self, comp_id: str) -> None:
        comp = self._find_component(comp_id)
        if not isinstance(comp, SwitchComponent):
            raise DCSimError(f"Component '{comp_id}' is not a switch.")
        comp.toggle()

    def set_ground(self, node_id: Any) -> None:
        self.ground_node = str(node_id)

    def clear(self) -> None:
        self.components = []

    def nodes(self) -> List[str]:
        return sorted({n for c in self.components for n in c.nodes})

    def analyze(self) -> AnalysisResult:
        logging.debug("Analyzing %d components with ground '%s'.",
                      len(self.components), self.ground_node)
        return analyze(list(self.components), self.ground_node)

    @classmethod
    def sample(cls) -> "Circuit":
        """9 V source feeding a two-stage resistor ladder, ground '0'."""
        circuit = cls(ground_node="0")
        for comp in (
            VoltageSourceComponent(None, "1", "0", voltage=9),
            ResistorComponent(None, "1", "2", resistance=1000, power_rating="1/4W"),
            ResistorComponent(None, "2", "0", resistance=2000, power_rating="1/4W"),
            ResistorComponent(None, "2", "3", resistance=500, power_rating="1/8W"),
            ResistorComponent(None, "3", "0", resistance=1000, power_rating="1/4W"),
        ):
            circuit.add_component(comp)
        return circuit

    def __len__(self) -> int:
        return len(self.components)
