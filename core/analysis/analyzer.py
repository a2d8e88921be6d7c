# core/analysis/analyzer.py
"""
DC operating-point analysis of resistor / voltage-source / switch networks.

analyze() is a pure function of (components, ground): it builds the MNA
index and system, solves it, and maps the solution back to node voltages
and per-branch current, power and thermal warnings.
"""
from typing import Dict, Sequence, Union

import numpy as np

from core.analysis.results import AnalysisResult, BranchResult, NodeVoltage
from core.components.base import Component, ComponentType
from core.constants import PIVOT_TOLERANCE
from core.exceptions import AnalysisError, SingularMatrixError, UnsolvableSystemError
from core.numeric.gauss_jordan import solve_linear_system
from core.stamping.matrix_builder import MatrixBuilder, MNAIndex
from utils.logging_config import get_logger

logger = get_logger(__name__)

UNSOLVABLE_MESSAGE = "The circuit is unsolvable. Check for floating nodes or invalid configurations."


def thermal_warning(power: float, rated_power: float) -> str:
    return f"Thermal overload! Power ({power:.3f}W) > Rating ({rated_power:g}W)"


def analyze(components: Sequence[Component], ground_node_id: str,
            tol: float = PIVOT_TOLERANCE) -> AnalysisResult:
    """
    Solve the DC operating point of `components` relative to `ground_node_id`.

    Raises:
        ConfigurationError: ground node is not an endpoint of any component.
        UnsolvableSystemError: the MNA matrix is singular.
    """
    components = tuple(components)
    if not components:
        return AnalysisResult()

    index = MNAIndex.build(components, str(ground_node_id))
    A, b = MatrixBuilder(index).assemble(components)

    try:
        solution = solve_linear_system(A, b, tol=tol)
    except SingularMatrixError as exc:
        logger.debug("MNA solve failed: %s", exc)
        raise UnsolvableSystemError(UNSOLVABLE_MESSAGE) from exc

    voltages = _decode_voltages(index, solution)
    branches = [_branch_result(pos, comp, index, voltages, solution)
                for pos, comp in enumerate(components)]

    return AnalysisResult(
        node_voltages=tuple(NodeVoltage(n, v) for n, v in voltages.items()),
        branch_results=tuple(branches),
    )


def analyze_or_error(components: Sequence[Component], ground_node_id: str,
                     tol: float = PIVOT_TOLERANCE) -> Union[AnalysisResult, str]:
    """Like analyze(), but returns the error message instead of raising."""
    try:
        return analyze(components, ground_node_id, tol=tol)
    except AnalysisError as exc:
        return str(exc)


def _decode_voltages(index: MNAIndex, solution: np.ndarray) -> Dict[str, float]:
    voltages = {index.ground: 0.0}
    for node_id, i in index.node_index.items():
        voltages[node_id] = float(solution[i])
    return voltages


def _branch_result(pos: int, comp: Component, index: MNAIndex,
                   voltages: Dict[str, float], solution: np.ndarray) -> BranchResult:
    if comp.kind is ComponentType.VOLTAGE_SOURCE:
        return BranchResult(comp.id, current=float(solution[index.source_row(pos)]))

    if comp.kind in (ComponentType.RESISTOR, ComponentType.SWITCH):
        resistance = comp.effective_resistance
        if resistance is None or not resistance > 0:
            return BranchResult(comp.id)
        current = (voltages[comp.start_node] - voltages[comp.end_node]) / resistance
        power = current * current * resistance
        warning = None
        if comp.kind is ComponentType.RESISTOR and power > comp.rated_power:
            warning = thermal_warning(power, comp.rated_power)
            logger.warning("Resistor '%s': %s", comp.id, warning)
        return BranchResult(comp.id, current=current, power=power, warning=warning)

    raise TypeError(f"Unsupported component kind: {comp.kind!r}")
