#!/usr/bin/env python
# simulator.py
"""
Command-line runner for DCSim: load a netlist (or the built-in sample),
run the DC analysis and print a report or JSON.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from core.exceptions import DCSimError
from core.topology.circuit import Circuit
from inout.netlist import load_netlist
from inout.report import format_report
from utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DC circuit analysis (Modified Nodal Analysis).")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--netlist", type=Path, help="Path to YAML netlist file")
    source.add_argument("--sample", action="store_true", help="Analyze the built-in ladder circuit")
    parser.add_argument("--ground", help="Override the netlist's ground node")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--output", type=Path, help="Write output to a file instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    parser.add_argument("--log-file", help="Also write log output to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    try:
        circuit = Circuit.sample() if args.sample else load_netlist(args.netlist)
        if args.ground is not None:
            circuit.set_ground(args.ground)
        result = circuit.analyze()
    except DCSimError as e:
        logger.error("Analysis failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        text = json.dumps(result.to_dict(), indent=2)
    else:
        text = format_report(circuit.components, result)

    if args.output:
        args.output.write_text(text + "\n")
        logger.info("Results written to %s", args.output)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
