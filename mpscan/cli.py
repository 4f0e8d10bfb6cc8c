"""Command-line entry point for the port scanner."""

from __future__ import annotations

import argparse
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

from mpscan.connection import create_summary
from mpscan.helper import create_targets, print_results, validate_port_range
from mpscan.scan import ScanFlags, parse_ports, parse_targets


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the scanner's options."""
    parser = argparse.ArgumentParser(
        prog="mpscan",
        description="Scan open ports on target IP addresses or hostnames.",
        allow_abbrev=False,
    )
    parser.add_argument("-target", "--target", dest="target", default="",
                        help="The hostname or IP address to be scanned.")
    parser.add_argument("-start-port", "--start-port", dest="start_port", type=int, default=1,
                        help="The lower bound port to begin scanning.")
    parser.add_argument("-end-port", "--end-port", dest="end_port", type=int, default=1024,
                        help="The upper bound port to finish scanning.")
    parser.add_argument("-workers", "--workers", dest="workers", type=int, default=100,
                        help="The number of concurrent workers to launch per target.")
    parser.add_argument("-timeout", "--timeout", dest="timeout", type=int, default=5,
                        help="The maximum time in seconds to wait for connections to be established.")
    parser.add_argument("-ports", "--ports", dest="ports", type=parse_ports, action="extend", default=[],
                        help="Comma-separated list of ports (e.g., -ports=22,80,443). "
                             "Setting this overrides -start-port and -end-port.")
    parser.add_argument("-targets", "--targets", dest="targets", type=parse_targets, default=[],
                        help="Comma-separated list of targets (e.g., -targets=localhost,scanme.nmap.org). "
                             "Targets are aggregated with -target.")
    parser.add_argument("-json", "--json", dest="json", action="store_true",
                        help="Also output a JSON file of the scan results.")
    parser.add_argument("-debug", "--debug", dest="debug", action="store_true",
                        help="Displays option values for debugging.")
    return parser


def _list_text(values: Iterable[object]) -> str:
    return "[" + " ".join(str(value) for value in values) + "]"


def _print_debug(args: argparse.Namespace, targets: list[str]) -> None:
    rows = [
        ("[-target]", args.target),
        ("[-start-port]", args.start_port),
        ("[-end-port]", args.end_port),
        ("[-workers]", args.workers),
        ("[-timeout]", args.timeout),
        ("[-ports]", _list_text(args.ports)),
        ("[-targets]", _list_text(args.targets)),
        ("[-json]", str(args.json).lower()),
        ("[-debug]", str(args.debug).lower()),
        ("[TARGETS]", _list_text(targets)),
    ]
    print("\n[DEBUG]\n")
    for label, value in rows:
        print(f"{label:<15} {value}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scanner with the given command-line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("-workers must be at least 1")

    args.start_port, args.end_port = validate_port_range(args.start_port, args.end_port)
    targets = create_targets(args.target, args.targets)

    if args.debug:
        _print_debug(args, targets)

    print("\n[SCAN START]\n")
    flag_sets = [
        ScanFlags(
            target=target,
            start_port=args.start_port,
            end_port=args.end_port,
            workers=args.workers,
            timeout=args.timeout,
            ports=list(args.ports),
        )
        for target in targets
    ]
    with ThreadPoolExecutor(max_workers=len(flag_sets)) as pool:
        futures = [
            pool.submit(create_summary, flags, position)
            for position, flags in enumerate(flag_sets)
        ]
        summaries = [future.result() for future in futures]

    print_results(summaries, args.timeout, args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())