import json

import pytest

from slide_relay.tools.remote.record_jsonl import record_line
from slide_relay.tools.remote.replay_jsonl import delays_s, load_events
from slide_relay.tools.remote.send import build_message, make_parser


def parse(*argv):
    return make_parser().parse_args(list(argv))


def test_command_message():
    msg = build_message(parse("command", "goto", "--params", "4"))
    assert msg["type"] == "command"
    assert msg["command"] == "goto"
    assert msg["params"] == 4
    assert isinstance(msg["timestamp"], int)


def test_command_params_fall_back_to_string():
    assert build_message(parse("command", "say", "--params", "hello"))["params"] == "hello"


def test_command_without_params():
    assert build_message(parse("command", "next"))["params"] is None


def test_state_message_only_carries_given_fields():
    msg = build_message(parse("state", "--slide", "3", "--auto", "on", "--set", "theme=dark", "--set", "n=[1,2]"))
    assert msg == {"type": "state", "currentSlide": 3, "isAutoMode": True, "theme": "dark", "n": [1, 2]}


def test_state_rejects_bad_set():
    with pytest.raises(SystemExit):
        build_message(parse("state", "--set", "novalue"))


def test_bad_on_off_is_a_usage_error():
    with pytest.raises(SystemExit):
        parse("state", "--auto", "maybe")


def test_record_line_wraps_message():
    line = record_line('{"type":"command","command":"next","timestamp":1}', ts=1234)
    assert json.loads(line) == {"ts": 1234, "msg": {"type": "command", "command": "next", "timestamp": 1}}


def test_record_line_skips_garbage():
    assert record_line("nope") is None


def test_load_events_both_formats(tmp_path):
    p = tmp_path / "talk.jsonl"
    p.write_text(
        "\n".join(
            [
                json.dumps({"ts": 1000, "msg": {"type": "state", "currentSlide": 2}}),
                "",
                json.dumps({"type": "command", "command": "next", "timestamp": 5}),
                json.dumps({"ts": 1500, "msg": {"type": "command", "command": "reset", "timestamp": 6}}),
                json.dumps([1, 2]),
            ]
        ),
        encoding="utf-8",
    )
    events = load_events(p)
    assert [ts for ts, _ in events] == [1000, None, 1500]
    assert events[1][1]["command"] == "next"

    commands = load_events(p, only_type="command")
    assert [m["command"] for _, m in commands] == ["next", "reset"]


def test_delays_follow_recorded_timing():
    events = [(1000, {}), (1500, {}), (None, {}), (2500, {})]
    assert delays_s(events, speed=2.0, default_dt_ms=100) == [0.0, 0.25, 0.05, 0.5]
