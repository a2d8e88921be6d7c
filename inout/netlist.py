# inout/netlist.py
"""
Load, validate and save YAML netlists.

Example:

    ground: "0"
    components:
      - {id: V1, type: voltage_source, start: "1", end: "0", voltage: 9}
      - {id: R1, type: resistor, start: "1", end: "0", resistance: 1000, power_rating: 1/4W}
      - {id: S1, type: switch, start: "1", end: "2", open: true}
"""
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from cerberus import Validator

from core.components.plugin_loader import ComponentFactory
from core.constants import DEFAULT_GROUND, POWER_RATINGS
from core.exceptions import DCSimError, NetlistError
from core.topology.circuit import Circuit
from utils.logging_config import get_logger

logger = get_logger(__name__)


def _optional_str(value: Any) -> Any:
    return None if value is None else str(value)


NETLIST_SCHEMA: Dict[str, Any] = {
    "ground": {"type": "string", "coerce": str, "empty": False, "default": DEFAULT_GROUND},
    "components": {
        "type": "list",
        "required": True,
        "nullable": True,
        "schema": {
            "type": "dict",
            "schema": {
                "id": {"type": "string", "coerce": _optional_str, "nullable": True, "empty": False},
                "type": {
                    "type": "string",
                    "required": True,
                    "allowed": ["resistor", "voltage_source", "switch"],
                },
                "start": {"type": "string", "coerce": str, "required": True, "empty": False},
                "end": {"type": "string", "coerce": str, "required": True, "empty": False},
                "resistance": {"type": "number", "min": 0},
                "power_rating": {"type": "string", "allowed": list(POWER_RATINGS)},
                "voltage": {"type": "number"},
                "open": {"type": "boolean"},
            },
        },
    },
}

# Fields each component type must carry after schema validation.
REQUIRED_FIELDS: Dict[str, List[str]] = {
    "resistor": ["resistance"],
    "voltage_source": ["voltage"],
    "switch": [],
}

_STRUCTURAL_KEYS = ("id", "type", "start", "end")


def _ensure_unique(seq: List[str], kind: str) -> None:
    dup = {x for x in seq if seq.count(x) > 1}
    if dup:
        raise NetlistError(f"Duplicate {kind}: {', '.join(sorted(dup))}")


def validate_netlist(raw: Any) -> Dict[str, Any]:
    """Schema-check a parsed YAML document and return the normalized copy."""
    if not isinstance(raw, dict):
        raise NetlistError("Netlist must be a mapping with a 'components' list.")
    v = Validator(NETLIST_SCHEMA, allow_unknown=False)
    if not v.validate(raw):
        raise NetlistError(f"Netlist schema violations: {v.errors}")
    doc = v.document
    doc["components"] = doc.get("components") or []

    for n, cdoc in enumerate(doc["components"]):
        missing = [f for f in REQUIRED_FIELDS[cdoc["type"]] if f not in cdoc]
        if missing:
            label = cdoc.get("id") or f"#{n}"
            raise NetlistError(f"Component '{label}' ({cdoc['type']}) missing {', '.join(missing)}")

    _ensure_unique([c["id"] for c in doc["components"] if c.get("id") is not None], "component IDs")
    return doc


def circuit_from_dict(doc: Dict[str, Any]) -> Circuit:
    doc = validate_netlist(doc)
    circuit = Circuit(ground_node=doc["ground"])
    for cdoc in doc["components"]:
        params = {k: v for k, v in cdoc.items() if k not in _STRUCTURAL_KEYS}
        try:
            circuit.new_component(cdoc["type"], cdoc["start"], cdoc["end"],
                                  comp_id=cdoc.get("id"), **params)
        except DCSimError as exc:
            raise NetlistError(f"Cannot instantiate component '{cdoc.get('id')}': {exc}") from exc
    return circuit


def load_netlist(path: Union[str, Path]) -> Circuit:
    """Read -> validate -> instantiate a netlist file."""
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as exc:
        raise NetlistError(f"Failed to read YAML '{path}': {exc}") from exc
    circuit = circuit_from_dict(raw)
    logger.info("Loaded %d components from %s (ground '%s').",
                len(circuit.components), path, circuit.ground_node)
    return circuit


def to_yaml_dict(circuit: Circuit) -> Dict[str, Any]:
    return {
        "ground": circuit.ground_node,
        "components": [comp.to_dict() for comp in circuit.components],
    }


def save_netlist(circuit: Circuit, path: Union[str, Path]) -> None:
    with open(path, "w") as f:
        yaml.safe_dump(to_yaml_dict(circuit), f, sort_keys=False)
