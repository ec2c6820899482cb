"""Data model for the JSON report of ansible-playbook's json callback.

The report is produced with ANSIBLE_CALLBACKS_ENABLED=json and
ANSIBLE_STDOUT_CALLBACK=json.
"""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, dataclass, field, fields
from os import PathLike
from typing import Any, TextIO, Union

StrPath = Union[str, "PathLike[str]"]


class SummaryError(Exception):
    """Raised when a summary cannot be read or decoded."""


def _get(obj: Any, key: str | None, kind: type, default: Any) -> Any:
    """Fetch obj[key] (or obj itself), checking its JSON type; null gives default."""
    value = obj.get(key) if key is not None else obj
    if value is None:
        return default
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise SummaryError(f"{key or 'value'}: expected {kind.__name__}, got {value!r}")
    return value


@dataclass
class Play:
    """Basic information about a play."""

    name: str = ""
    id: str = ""


@dataclass
class Task:
    """Basic information about a task."""

    name: str = ""


@dataclass
class Host:
    """State of one host for one task."""

    changed: bool = False


@dataclass
class Stat:
    """Recap counters of a playbook run for one host."""

    changed: int = 0
    failures: int = 0
    ignored: int = 0
    ok: int = 0
    rescued: int = 0
    skipped: int = 0
    unreachable: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Stat:
        """Build a Stat from its JSON object; missing counters are zero."""
        obj = _get(data, None, dict, {})
        return cls(**{f.name: _get(obj, f.name, int, 0) for f in fields(cls)})

    def to_dict(self) -> dict[str, int]:
        """Return the counters as a JSON-ready mapping."""
        return asdict(self)


@dataclass
class TaskResult:
    """A task together with the state of every host it ran on."""

    hosts: dict[str, Host] = field(default_factory=dict)
    task: Task = field(default_factory=Task)


@dataclass
class PlayResult:
    """A whole play run: play information and its tasks."""

    play: Play = field(default_factory=Play)
    tasks: list[TaskResult] = field(default_factory=list)


def _task_result(data: Any) -> TaskResult:
    obj = _get(data, None, dict, {})
    hosts = _get(obj, "hosts", dict, {})
    task = _get(obj, "task", dict, {})
    return TaskResult(
        hosts={
            name: Host(changed=_get(_get(value, None, dict, {}), "changed", bool, False))
            for name, value in hosts.items()
        },
        task=Task(name=_get(task, "name", str, "")),
    )


def _play_result(data: Any) -> PlayResult:
    obj = _get(data, None, dict, {})
    play = _get(obj, "play", dict, {})
    return PlayResult(
        play=Play(name=_get(play, "name", str, ""), id=_get(play, "id", str, "")),
        tasks=[_task_result(t) for t in _get(obj, "tasks", list, [])],
    )


@dataclass
class AnsibleSummary:
    """The plays and per-host stats of an ansible-playbook JSON report."""

    plays: list[PlayResult] = field(default_factory=list)
    stats: dict[str, Stat] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> AnsibleSummary:
        """Build a summary from decoded JSON; unknown keys are ignored."""
        obj = _get(data, None, dict, {})
        return cls(
            plays=[_play_result(p) for p in _get(obj, "plays", list, [])],
            stats={h: Stat.from_dict(v) for h, v in _get(obj, "stats", dict, {}).items()},
        )

    @classmethod
    def from_file(cls, path: StrPath) -> AnsibleSummary:
        """Read a summary from a JSON file; only its first JSON value is used."""
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except UnicodeDecodeError as err:
            raise SummaryError(f"failed to decode JSON: {err}") from err
        except OSError as err:
            raise SummaryError(f"failed to open file {path}: {err}") from err
        try:
            value, _ = json.JSONDecoder().raw_decode(text.lstrip(" \t\r\n"))
            return cls.from_dict(value)
        except (ValueError, SummaryError) as err:
            raise SummaryError(f"failed to decode JSON: {err}") from err

    def _changed(self):
        for play in self.plays:
            for result in play.tasks:
                for hostname, host in result.hosts.items():
                    if host.changed:
                        yield hostname, result.task

    def changed_tasks(self) -> list[str]:
        """Names of tasks that changed on at least one host, in run order."""
        return [
            result.task.name
            for play in self.plays
            for result in play.tasks
            if any(host.changed for host in result.hosts.values())
        ]

    def has_changed_or_failed(self) -> bool:
        """True if any task changed on any host."""
        return next(self._changed(), None) is not None

    def print_tasks_not_ok(self, file: TextIO | None = None) -> None:
        """Print every host/task pair that was not synchronised."""
        out = sys.stdout if file is None else file
        for index, (hostname, task) in enumerate(self._changed()):
            if index == 0:
                print("Tasks not synchronised :", file=out)
            print(f"On Host {hostname:>30} task {task.name} is not synchronised.", file=out)


def load_summary(path: StrPath) -> AnsibleSummary:
    """Read a summary from a JSON file."""
    return AnsibleSummary.from_file(path)