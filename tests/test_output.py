import io
import json

from ansiblesummary.models import AnsibleSummary, Stat
from ansiblesummary.output import Output, add_color


def _data():
    return AnsibleSummary(stats={"host1": Stat(ok=5, changed=1, skipped=2)})


def _render(method, summary):
    buf = io.StringIO()
    getattr(Output(buf), method)(summary)
    return buf.getvalue()


def test_write_stats_json():
    result = _render("write_stats_json", _data())
    assert "host1" in result
    assert '"ok": 5' in result
    assert '"changed": 1' in result
    assert json.loads(result) == {
        "host1": {
            "changed": 1,
            "failures": 0,
            "ignored": 0,
            "ok": 5,
            "rescued": 0,
            "skipped": 2,
            "unreachable": 0,
        }
    }


def test_write_stats_json_sorts_hosts():
    summary = AnsibleSummary(stats={"zeta": Stat(), "alpha": Stat()})
    result = _render("write_stats_json", summary)
    assert result.index("alpha") < result.index("zeta")
    assert result.endswith("}\n")


def test_write_stats_html():
    result = _render("write_stats_html", _data())
    assert "host1" in result
    assert "ok=5" in result
    assert "changed=1" in result
    assert '<span style="color:blue">skipped=2</span>' in result
    assert "failures=0" in result


def test_write_stats():
    result = _render("write_stats", _data())
    assert "host1" in result
    assert "ok= 5" in result
    assert "changed=1" in result
    assert result == (
        "host1" + " " * 45
        + "  ok= 5  changed=1  unreachable= 0 failures= 0 skipped= 2 rescued= 0 ignored= 0\n"
    )


def test_add_color():
    assert add_color("ok", 5, "green") == '<span style="color:green">ok=5</span>'
    assert add_color("failures", 0, "red") == "failures=0"


def test_default_stream_is_stdout(capsys):
    Output().write_stats(_data())
    assert "ok= 5" in capsys.readouterr().out