# mpscan

`mpscan` scans TCP ports on one or more hosts at the same time. It shows a
progress bar for each target. It tries to read a service banner from every open
port it finds and prints a summary for each host. It can also save the results
as JSON.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Usage

```
mpscan [options]
```

You can also start it with `python -m mpscan.cli`. If no target is given,
`localhost` is scanned.

Each option can be written with one dash or with two: `-target` and `--target`
are the same option. A value can follow the option after a space or after `=`.

| Option | Default | Meaning |
| --- | --- | --- |
| `-target HOST` | none | Hostname or IP address to scan. |
| `-targets A,B,...` | none | Comma-separated list of more targets. They are added after `-target`. If the option is given more than once, only the last list counts. |
| `-start-port N` | `1` | First port of the range. A value outside 1–65535 falls back to 1. |
| `-end-port N` | `1024` | Last port of the range. A value outside 1–65535 falls back to 1024. |
| `-ports P,Q,...` | none | Comma-separated list of ports. If it is set, it replaces the start/end range. An entry that does not start with a number is skipped, and so is a port outside 1–65535. If the option is given more than once, the lists are joined. |
| `-workers N` | `100` | Number of concurrent workers for each target. It must be at least 1. |
| `-timeout N` | `5` | Connection timeout in seconds. |
| `-json` | off | Also write the results to `YYYYMMDD-HHMMSS-mpscan.json` in the current directory. |
| `-debug` | off | Print the parsed option values and the final target list before the scan starts. |

### Examples

Scan the default range on the local machine:

```
mpscan
```

Scan a few common ports on two hosts and save the results as JSON:

```
mpscan -targets=localhost,scanme.nmap.org -ports=22,80,443 -json
```

## Output

The output has three sections:

- **SCAN START**: one progress bar for each target.
- **BANNERS**: one line for each open port that gives a banner. For most
  ports, the banner is the first data the service sends after the connection
  opens, read up to 1024 bytes and with surrounding whitespace removed. For
  port 80, an HTTP `GET /` request is sent, and the value of the reply's
  `Server` header is shown. If that header is missing, the `X-Powered-By`
  header is used, and after that the `Date` header. A port that gives nothing
  is not listed.
- **SCAN SUMMARY**: for each host, the number of ports scanned, the number of
  open ports, the open ports in ascending order, and the time the scan took in
  seconds.

Each port gets one connection attempt. When an attempt fails, the worker pauses
for a random time before it moves on to the next port. The pause is 0 or 1
second.

### JSON file

The file holds one object for each target. Each object has these keys:

- `Hostname`
- `TotalPortsScanned`
- `OpenPortCount`
- `OpenPorts`: a list, or `null` when no port is open.
- `TimeTaken`: in nanoseconds.

## Library use

The modules can also be used from Python:

```python
from mpscan.scan import ScanFlags, parse_ports
from mpscan.connection import create_summary, grab_banner, print_banner
from mpscan.helper import write_json

summary = create_summary(ScanFlags(target="localhost", ports=parse_ports("22,80")), 0)
print(summary)
print(grab_banner("localhost", 22, 5))
print_banner(summary, 5)
write_json([summary], ".")
```

The functions do the following:

- `create_summary` returns a `Summary`. It has `hostname`, `total_ports_scanned`,
  `open_ports`, `open_port_count` and `time_taken`, and a `to_dict()` method
  that gives the JSON shape.
- `grab_banner` returns the banner text, or `None` if no banner could be read.
- `write_json` writes the timestamped file into the directory you give it and
  returns its path.

## Limits

- Only TCP connect scans are done. There is no UDP scanning and no
  service or version detection beyond the banner read described above.
- Targets are scanned at the same time. The order of the banner lines follows
  the order in which the hosts answer.

Only scan hosts that you are allowed to scan.