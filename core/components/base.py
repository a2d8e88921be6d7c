# core/components/base.py
"""
Base Component API for DCSim.
Every component is a two-terminal branch between a start node and an end node.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from core.exceptions import ParameterError


class ComponentType(Enum):
    RESISTOR = "Resistor"
    VOLTAGE_SOURCE = "Voltage Source"
    SWITCH = "Switch"


def _node_id(value: Any, role: str, comp_id: Optional[str]) -> str:
    if value is None or str(value) == "":
        raise ParameterError(f"Component '{comp_id}' has an empty {role} node.")
    return str(value)


class Component(ABC):
    """
    Abstract base class for all DC components.

    Subclasses set `type_name` (the netlist/factory key) and `kind`
    (the discriminant the analyzer dispatches on).
    """
    type_name: str = ""
    kind: ComponentType

    def __init__(self, comp_id: Optional[str], start_node: Any, end_node: Any):
        self.id = comp_id
        self.start_node = _node_id(start_node, "start", comp_id)
        self.end_node = _node_id(end_node, "end", comp_id)

    @property
    def nodes(self) -> Tuple[str, str]:
        return self.start_node, self.end_node

    @property
    @abstractmethod
    def effective_resistance(self) -> Optional[float]:
        """
        Resistance used for conductance stamping, in ohms.
        None for components handled through an auxiliary MNA row.
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """One-line human readable description."""
        pass

    @classmethod
    def from_params(cls, comp_id: Optional[str], start_node: Any, end_node: Any,
                    params: Dict[str, Any]) -> "Component":
        """Build from netlist-style parameter names (the keys of `params()`)."""
        return cls(comp_id, start_node, end_node, **params)

    def params(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type_name,
            "start": self.start_node,
            "end": self.end_node,
            **self.params(),
        }

    def __repr__(self) -> str:
        extra = ", ".join(f"{k}={v!r}" for k, v in self.params().items())
        return (f"{type(self).__name__}({self.id!r}, {self.start_node!r}, "
                f"{self.end_node!r}{', ' + extra if extra else ''})")
