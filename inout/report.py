# inout/report.py
"""
Plain-text rendering of a circuit and its analysis result.
"""
from typing import Sequence

from core.analysis.results import AnalysisResult, BranchResult
from core.components.base import Component


def format_branch(comp: Component, branch: BranchResult) -> str:
    detail = f"- {comp.kind.value} {comp.id} ({comp.start_node}-{comp.end_node}): "
    if branch.current is not None:
        detail += f"Current: {branch.current * 1000:.2f} mA. "
    if branch.power is not None:
        detail += f"Power: {branch.power * 1000:.2f} mW. "
    if branch.warning:
        detail += f"WARNING: {branch.warning}"
    return detail.rstrip()


def format_report(components: Sequence[Component], result: AnalysisResult) -> str:
    """
    Render component descriptions, node voltages and branch quantities.
    `result` must come from analyzing `components` (branch order matches).
    """
    lines = ["Circuit Definition:"]
    lines += [comp.describe() for comp in components]
    lines += ["", "Node Voltages:"]
    lines += [f" - Node {nv.node_id}: {nv.voltage:.3f} V" for nv in result.node_voltages]
    lines += ["", "Branch Analysis:"]
    lines += [format_branch(comp, branch) for comp, branch in zip(components, result.branch_results)]
    return "\n".join(lines)
