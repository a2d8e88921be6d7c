# core/analysis/results.py
"""
Immutable result records produced by a DC analysis.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class NodeVoltage:
    node_id: str
    voltage: float

    def to_dict(self) -> Dict[str, Any]:
        return {"nodeId": self.node_id, "voltage": self.voltage}


@dataclass(frozen=True)
class BranchResult:
    """
    Electrical quantities of one component.

    current is signed, positive from start node to end node. power is None
    for voltage sources; warning is set only on thermally overloaded resistors.
    """
    component_id: Optional[str]
    current: Optional[float] = None
    power: Optional[float] = None
    warning: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"componentId": self.component_id}
        if self.current is not None:
            out["current"] = self.current
        if self.power is not None:
            out["power"] = self.power
        if self.warning is not None:
            out["warning"] = self.warning
        return out


@dataclass(frozen=True)
class AnalysisResult:
    node_voltages: Tuple[NodeVoltage, ...] = ()
    branch_results: Tuple[BranchResult, ...] = ()

    def voltage(self, node_id: str) -> float:
        for nv in self.node_voltages:
            if nv.node_id == node_id:
                return nv.voltage
        raise KeyError(node_id)

    def branch(self, component_id: str) -> BranchResult:
        for br in self.branch_results:
            if br.component_id == component_id:
                return br
        raise KeyError(component_id)

    @property
    def voltages(self) -> Dict[str, float]:
        return {nv.node_id: nv.voltage for nv in self.node_voltages}

    @property
    def warnings(self) -> List[BranchResult]:
        return [br for br in self.branch_results if br.warning]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodeVoltages": [nv.to_dict() for nv in self.node_voltages],
            "branchResults": [br.to_dict() for br in self.branch_results],
        }
