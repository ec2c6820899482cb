"""Writers for the per-host stats of an Ansible summary."""

from __future__ import annotations

import json
import sys
from typing import TextIO

from .models import AnsibleSummary


def add_color(prefix: str, value: int, color: str) -> str:
    """Format ``prefix=value``, wrapped in a coloured span when value > 0."""
    if value > 0:
        return f'<span style="color:{color}">{prefix}={value}</span>'
    return f"{prefix}={value}"


class Output:
    """Writes summary stats to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    @property
    def _out(self) -> TextIO:
        return sys.stdout if self.stream is None else self.stream

    def write_stats(self, summary: AnsibleSummary) -> None:
        """Write one plain-text recap line per host."""
        out = self._out
        for hostname, s in summary.stats.items():
            out.write(
                f"{hostname:<50}  ok={s.ok:2d}  changed={s.changed}  "
                f"unreachable={s.unreachable:2d} failures={s.failures:2d} "
                f"skipped={s.skipped:2d} rescued={s.rescued:2d} ignored={s.ignored:2d}\n"
            )

    def write_stats_html(self, summary: AnsibleSummary) -> None:
        """Write one recap line per host with non-zero counters coloured."""
        out = self._out
        for hostname, s in summary.stats.items():
            parts = [
                add_color("ok", s.ok, "green"),
                add_color("changed", s.changed, "orange"),
                add_color("unreachable", s.unreachable, "red"),
                add_color("failures", s.failures, "red"),
                add_color("skipped", s.skipped, "blue"),
                add_color("rescued", s.rescued, "orange"),
                add_color("ignored", s.ignored, "black"),
            ]
            out.write(f"{hostname:<50}  {' '.join(parts)}\n")

    def write_stats_json(self, summary: AnsibleSummary) -> None:
        """Write the stats as indented JSON, hosts sorted by name."""
        data = {host: summary.stats[host].to_dict() for host in sorted(summary.stats)}
        self._out.write(json.dumps(data, indent=4) + "\n")