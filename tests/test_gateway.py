import asyncio

import pytest

from xcoder_py.client.errors import TransportFailure, ValidationFailure
from xcoder_py.client.gateway import CommandGateway
from xcoder_py.client.models import Problem
from xcoder_py.events import EventBus

from conftest import FakeBackend, Recorder, verdict


def make_gateway(backend=None):
    recorder = Recorder()
    events = EventBus()
    events.subscribe(recorder)
    return CommandGateway(backend or FakeBackend(), events), recorder


def test_problem_is_parsed():
    gateway, _ = make_gateway()
    result = asyncio.run(gateway.get_problem())
    assert result.ok
    assert isinstance(result.value, Problem)
    assert result.value.title == "A - Chord"


def test_absent_problem_is_not_a_failure():
    backend = FakeBackend()
    backend.values["get_problem"] = None
    gateway, recorder = make_gateway(backend)

    result = asyncio.run(gateway.get_problem())

    assert result.ok
    assert result.value is None
    assert recorder.events == []


def test_failure_is_reported_not_raised():
    backend = FakeBackend()
    backend.failures["get_problem"] = TransportFailure("get_problem", "pipe closed")
    gateway, recorder = make_gateway(backend)

    result = asyncio.run(gateway.get_problem())

    assert not result
    assert isinstance(result.error, TransportFailure)
    assert "cannot_get_problem" in recorder.board
    assert recorder.events[0].message == "pipe closed"


def test_repeated_failures_replace_each_other():
    backend = FakeBackend()
    backend.failures["next"] = ValidationFailure("next", "no next problem")
    gateway, recorder = make_gateway(backend)

    async def go():
        await gateway.next()
        await gateway.next()
        await gateway.next()

    asyncio.run(go())

    assert len(recorder.events) == 3
    assert len(recorder.board) == 1


def test_directory_failure_uses_its_own_id():
    backend = FakeBackend()
    backend.failures["set_directory"] = ValidationFailure("set_directory", "bad path")
    gateway, recorder = make_gateway(backend)

    asyncio.run(gateway.set_directory("/nope"))

    (notification,) = recorder.board.drain()
    assert notification.id == "directory_not_set"
    assert notification.title == "Directory not found"


def test_malformed_problem_becomes_transport_failure():
    backend = FakeBackend()
    backend.values["get_problem"] = {"title": "missing ids"}
    gateway, recorder = make_gateway(backend)

    result = asyncio.run(gateway.get_problem())

    assert not result
    assert isinstance(result.error, TransportFailure)
    assert "cannot_get_problem" in recorder.board


def test_verdicts_are_parsed_in_order():
    backend = FakeBackend()
    backend.values["run"] = [verdict("AC"), verdict("WA")]
    gateway, _ = make_gateway(backend)

    result = asyncio.run(gateway.run())

    assert [v.status for v in result.value] == ["AC", "WA"]


def test_null_verdicts_mean_empty():
    backend = FakeBackend()
    backend.values["submit"] = None
    gateway, _ = make_gateway(backend)
    assert asyncio.run(gateway.submit()).value == ()


def test_setters_send_wire_argument_names():
    backend = FakeBackend()
    gateway, recorder = make_gateway(backend)

    async def go():
        await gateway.set_contest_type("ARC")
        await gateway.set_problem_type(["A", "Ex"])
        await gateway.set_show_solved(False)

    asyncio.run(go())

    assert backend.calls == [
        ("set_contest_type", {"contestType": "ARC"}),
        ("set_problem_type", {"problemTypes": ["A", "Ex"]}),
        ("set_show_solved", {"showSolved": False}),
    ]
    messages = [n.message for n in recorder.board.drain()]
    assert messages == ["contest type set to ARC", "problem types set to A, Ex"]


@pytest.mark.parametrize(
    "command", ["get_directory", "get_editor", "get_language", "get_contest_type"]
)
@pytest.mark.parametrize("bad_value", [3, ["x"], {"id": "cpp"}, True])
def test_non_string_settings_are_malformed(command, bad_value):
    backend = FakeBackend()
    backend.values[command] = bad_value
    gateway, recorder = make_gateway(backend)

    result = asyncio.run(getattr(gateway, command)())

    assert not result
    assert isinstance(result.error, TransportFailure)
    assert f"cannot_{command}" in recorder.board


def test_null_setting_reads_as_unset():
    backend = FakeBackend()
    backend.values["get_editor"] = None
    gateway, _ = make_gateway(backend)

    result = asyncio.run(gateway.get_editor())

    assert result.ok
    assert result.value == ""
