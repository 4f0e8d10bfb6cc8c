"""Concurrent TCP port scanning and banner grabbing."""

from __future__ import annotations

import random
import socket
import threading
import time
from concurrent.futures import ThreadPoolExecutor

from tqdm import tqdm

from mpscan.scan import Address, ScanFlags, Summary

HTTP_PORT = 80
BANNER_SIZE = 1024
MAX_RETRIES = 1
_BANNER_HEADERS = ("server", "x-powered-by", "date")


def dial_timeout(seconds: int) -> float:
    """Return the connection timeout, in seconds, for a given setting."""
    return float(seconds)


def _connect(hostname: str, port: int, timeout: float) -> socket.socket:
    return socket.create_connection((hostname, port), timeout=timeout or None)


def _attempt_scan(address: Address, timeout: float, summary: Summary, lock: threading.Lock, bar: tqdm) -> None:
    for attempt in range(1, MAX_RETRIES + 1):
        try:
            with _connect(address.hostname, address.port, timeout):
                pass
        except OSError:
            time.sleep(int((1 << attempt) * random.random()))
            continue
        with lock:
            summary.add_port(address.port)
        break
    with lock:
        bar.update(1)


def create_summary(flags: ScanFlags, position: int = 0) -> Summary:
    """Scan the target's ports concurrently and summarise the open ones.

    A non-empty ``flags.ports`` overrides the start/end port range.
    """
    if flags.workers < 1:
        raise ValueError("workers must be at least 1")

    if flags.ports:
        ports = list(flags.ports)
        total = len(ports)
    else:
        ports = list(range(flags.start_port, flags.end_port + 1))
        total = flags.end_port - flags.start_port + 1

    summary = Summary(hostname=flags.target, total_ports_scanned=total)
    timeout = dial_timeout(flags.timeout)
    lock = threading.Lock()

    started = time.perf_counter()
    with tqdm(total=len(ports), desc=f"[{flags.target}]", unit="ports", position=position) as bar:
        with ThreadPoolExecutor(max_workers=flags.workers) as pool:
            futures = [
                pool.submit(_attempt_scan, Address(flags.target, port), timeout, summary, lock, bar)
                for port in ports
            ]
            for future in futures:
                future.result()
    summary.time_taken = time.perf_counter() - started
    return summary


def _http_banner(data: bytes) -> str | None:
    """Pick a banner from an HTTP response's headers, or None if there is none."""
    lines = [line.rstrip("\r") for line in data.decode("latin-1").split("\n")]
    status = lines[0].split()
    if len(status) < 2 or not status[0].startswith("HTTP/"):
        return None
    if len(status[1]) != 3 or not status[1].isdigit():
        return None

    headers: dict[str, str] = {}
    for line in lines[1:]:
        if line == "":
            break
        name, sep, value = line.partition(":")
        if not sep or not name or name != name.strip():
            return None
        headers.setdefault(name.lower(), value.strip())
    else:
        return None

    for key in _BANNER_HEADERS:
        if headers.get(key):
            return headers[key]
    return None


def grab_banner(hostname: str, port: int, timeout: int) -> str | None:
    """Connect to a port and return its banner, or None if none could be read.

    Port 80 is sent an HTTP request and its response headers are used; other
    ports are expected to send something as soon as the connection opens.
    """
    seconds = dial_timeout(timeout)
    try:
        with _connect(hostname, port, seconds) as conn:
            if port == HTTP_PORT:
                request = f"GET / HTTP/1.1\r\nHost: {hostname}\r\n\r\n"
                conn.sendall(request.encode())
                banner = _http_banner(conn.recv(BANNER_SIZE))
            else:
                data = conn.recv(BANNER_SIZE)
                banner = data.decode("utf-8", errors="replace") if data else None
    except OSError:
        return None
    return banner.strip() if banner is not None else None


def print_banner(summary: Summary, timeout: int) -> None:
    """Print the banner of every open port in the summary that offers one."""
    for port in summary.open_ports:
        banner = grab_banner(summary.hostname, port, timeout)
        if banner is not None:
            print(f"[{Address(summary.hostname, port)}] {banner}")