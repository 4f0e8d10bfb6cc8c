"""Data types describing scan parameters and scan results."""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field
from typing import Any, Iterable

MIN_PORT = 1
MAX_PORT = 65535

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Address:
    """A hostname paired with a port."""

    hostname: str
    port: int

    def __str__(self) -> str:
        host = f"[{self.hostname}]" if ":" in self.hostname else self.hostname
        return f"{host}:{self.port}"


@dataclass
class ScanFlags:
    """Parameters used when scanning a single target."""

    target: str
    start_port: int = 1
    end_port: int = 1024
    workers: int = 100
    timeout: int = 5
    ports: list[int] = field(default_factory=list)


@dataclass
class Summary:
    """Statistics of one completed scan."""

    hostname: str
    total_ports_scanned: int = 0
    open_ports: list[int] = field(default_factory=list)
    time_taken: float = 0.0

    @property
    def open_port_count(self) -> int:
        return len(self.open_ports)

    def add_port(self, port: int) -> None:
        """Record an open port, keeping the list in ascending order."""
        bisect.insort(self.open_ports, port)

    def to_dict(self) -> dict[str, Any]:
        """Return the summary in its JSON output shape."""
        return {
            "Hostname": self.hostname,
            "TotalPortsScanned": self.total_ports_scanned,
            "OpenPortCount": self.open_port_count,
            "OpenPorts": list(self.open_ports) if self.open_ports else None,
            "TimeTaken": int(round(self.time_taken * 1_000_000_000)),
        }

    def __str__(self) -> str:
        ports = " ".join(str(port) for port in self.open_ports)
        return (
            f"[{self.hostname}]\n"
            f"Total Ports Scanned: {self.total_ports_scanned}\n"
            f"Open Ports Count: {self.open_port_count}\n"
            f"Open Ports: [{ports}]\n"
            f"Time Taken: {self.time_taken:.3f}s"
        )


def parse_ports(value: str) -> list[int]:
    """Parse a comma-separated port list, dropping invalid or out-of-range entries."""
    ports = []
    for part in value.split(","):
        match = _LEADING_INT.match(part)
        if match is None:
            continue
        port = int(match.group(1))
        if MIN_PORT <= port <= MAX_PORT:
            ports.append(port)
    return ports


def format_ports(ports: Iterable[int]) -> str:
    """Render ports as a comma-separated string."""
    return ",".join(str(port) for port in ports)


def parse_targets(value: str) -> list[str]:
    """Split a comma-separated list of targets."""
    return value.split(",")


def format_targets(targets: Iterable[str]) -> str:
    """Render targets as a comma-separated string."""
    return ",".join(targets)