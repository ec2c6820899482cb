# ansiblesummary

This package turns the JSON report that `ansible-playbook` writes into a short overview. The overview shows each host and the result of each task on it.

## Producing the input

Have Ansible write its results as JSON:

```sh
export ANSIBLE_CALLBACKS_ENABLED=json
export ANSIBLE_STDOUT_CALLBACK=json
ansible-playbook site.yml > result.json
```

## Command line

```sh
ansible-summary -input result.json
```

This prints the following, in order:

1. Every host/task pair where the task changed the host. Before the first pair it prints the heading `Tasks not synchronised :`.
2. A line of asterisks.
3. One line of statistics per host.

The statistics lines list these counters for each host: `ok`, `changed`, `unreachable`, `failures`, `skipped`, `rescued` and `ignored`. Any counter above zero is wrapped in a coloured HTML `<span>`, which is useful in merge-request comments and other HTML views.

```sh
ansible-summary -input result.json -json
```

This prints only the per-host statistics, as JSON indented by four spaces, with the hosts sorted by name.

```sh
ansible-summary -version
```

This prints the version.

Each option may be written with one dash or with two (`-input` or `--input`).

### Exit status

| Code | Meaning                                                        |
|------|----------------------------------------------------------------|
| 0    | no task changed any host                                       |
| 1    | missing `-input`, unreadable or invalid input, or write errors |
| 2    | at least one task changed a host                               |

The exit status lets CI pipelines detect drift between a playbook and the hosts it manages. Code 2 is decided by the per-task `changed` flags only. Failures counted in the stats do not change the exit status.

## Library use

```python
import sys

from ansiblesummary.models import AnsibleSummary, SummaryError
from ansiblesummary.output import Output

try:
    summary = AnsibleSummary.from_file("result.json")
except SummaryError as exc:
    sys.exit(str(exc))

summary.print_tasks_not_ok(sys.stdout)
Output(sys.stdout).write_stats(summary)

print(summary.changed_tasks())
if summary.has_changed_or_failed():
    print("drift detected")
```

### `ansiblesummary.models`

- `AnsibleSummary`
  - `from_file(path)` reads a report from disk. `load_summary(path)` does the same.
  - `from_dict(data)` builds a summary from JSON that has already been decoded.
  - Both raise `SummaryError` when the file cannot be opened or its content is not valid. Unknown keys are ignored, and missing values take defaults.
- `AnsibleSummary.plays` is a list of `PlayResult`. Each `PlayResult` has:
  - `play`, a `Play` with `name` and `id`;
  - `tasks`, a list of `TaskResult`. Each `TaskResult` has `task`, a `Task` with `name`, and `hosts`, a mapping of host name to `Host`, where `Host.changed` is a flag.
- `AnsibleSummary.stats` maps host names to `Stat` counters. `Stat.from_dict` and `Stat.to_dict` convert them to and from JSON objects.
- `changed_tasks()` returns the names of tasks that changed at least one host, in run order.
- `has_changed_or_failed()` is true if any task changed any host.
- `print_tasks_not_ok(file=None)` prints the changed host/task pairs, to stdout by default.

### `ansiblesummary.output`

`Output(stream=None)` writes to the given text stream, or to stdout if none is given. It has three writers:

- `write_stats`: plain, aligned text.
- `write_stats_html`: the same lines, with counters above zero coloured using `add_color`.
- `write_stats_json`: indented JSON with the hosts sorted by name.