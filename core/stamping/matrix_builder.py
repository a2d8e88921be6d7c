# core/stamping/matrix_builder.py
"""
Assemble the dense Modified Nodal Analysis system A @ x = b.

Unknowns are ordered as
    [ V(node_0) ... V(node_{N-2}) | I(source_0) ... I(source_{M-1}) ]
with the ground node eliminated. Conductance branches are stamped into the
nodal block; every ideal voltage source adds one constraint row/column pair.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from core.components.base import Component, ComponentType
from core.exceptions import ConfigurationError
from utils.logging_config import get_logger

logger = get_logger(__name__)


def collect_nodes(components: Sequence[Component]) -> List[str]:
    """Distinct node ids in first-seen order (start before end)."""
    seen: Dict[str, None] = {}
    for comp in components:
        seen.setdefault(comp.start_node)
        seen.setdefault(comp.end_node)
    return list(seen)


@dataclass(frozen=True)
class MNAIndex:
    """
    Unknown numbering for one analysis call.

    Attributes:
        ground: Reference node id (fixed at 0 V, not an unknown).
        node_index: Non-ground node id -> row/column in A.
        source_index: Position of a voltage source in the component list ->
            its ordinal among voltage sources. The matrix row of the source is
            len(node_index) + ordinal, both when stamping and when decoding.
    """
    ground: str
    node_index: Dict[str, int]
    source_index: Dict[int, int]

    @classmethod
    def build(cls, components: Sequence[Component], ground: str) -> "MNAIndex":
        nodes = collect_nodes(components)
        if ground not in nodes:
            raise ConfigurationError(ground)
        node_index = {n: i for i, n in enumerate(x for x in nodes if x != ground)}
        positions = [pos for pos, comp in enumerate(components)
                     if comp.kind is ComponentType.VOLTAGE_SOURCE]
        source_index = {pos: k for k, pos in enumerate(positions)}
        return cls(ground=ground, node_index=node_index, source_index=source_index)

    @property
    def n_nodes(self) -> int:
        """Number of non-ground nodes."""
        return len(self.node_index)

    @property
    def n_sources(self) -> int:
        return len(self.source_index)

    @property
    def size(self) -> int:
        return self.n_nodes + self.n_sources

    def node(self, node_id: str) -> Optional[int]:
        """Matrix index of a node, or None for ground."""
        if node_id == self.ground:
            return None
        return self.node_index[node_id]

    def source_row(self, position: int) -> int:
        return self.n_nodes + self.source_index[position]


class MatrixBuilder:
    def __init__(self, index: MNAIndex):
        self.index = index

    def assemble(self, components: Sequence[Component]) -> Tuple[np.ndarray, np.ndarray]:
        """
        Stamp every component into a fresh (A, b) pair.
        """
        size = self.index.size
        A = np.zeros((size, size), dtype=float)
        b = np.zeros(size, dtype=float)

        for pos, comp in enumerate(components):
            i = self.index.node(comp.start_node)
            j = self.index.node(comp.end_node)
            if comp.kind is ComponentType.VOLTAGE_SOURCE:
                self._stamp_voltage_source(A, b, i, j, self.index.source_row(pos), comp.voltage)
            elif comp.kind in (ComponentType.RESISTOR, ComponentType.SWITCH):
                resistance = comp.effective_resistance
                if resistance is not None and resistance > 0:
                    self._stamp_conductance(A, i, j, 1.0 / resistance)
            else:
                raise TypeError(f"Unsupported component kind: {comp.kind!r}")

        logger.debug("Assembled MNA system: %d nodes, %d sources, size %d",
                     self.index.n_nodes, self.index.n_sources, size)
        return A, b

    @staticmethod
    def _stamp_conductance(A: np.ndarray, i: Optional[int], j: Optional[int], g: float) -> None:
        if i is not None:
            A[i, i] += g
        if j is not None:
            A[j, j] += g
        if i is not None and j is not None:
            A[i, j] -= g
            A[j, i] -= g

    @staticmethod
    def _stamp_voltage_source(A: np.ndarray, b: np.ndarray, i: Optional[int], j: Optional[int],
                              k: int, voltage: float) -> None:
        # V(i) - V(j) = voltage; the source current leaves node i
        if i is not None:
            A[k, i] = 1.0
            A[i, k] = 1.0
        if j is not None:
            A[k, j] = -1.0
            A[j, k] = -1.0
        b[k] = voltage
