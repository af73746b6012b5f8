"""Pytest configuration and fixtures for xcoder_py tests."""

import asyncio
from typing import Any, Dict, List, Tuple

import pytest

from xcoder_py.events import NotificationBoard, WindowResize
from xcoder_py.session import Session


PROBLEM_A = {
    "contest_id": 123,
    "contest_type": "abc",
    "problem_id": "A",
    "title": "A - Chord",
    "description": "<p>Score : 100 points</p><h3>Problem Statement</h3><p>1 \\leq N</p>",
    "time_limit": 4,
    "memory_limit": 1024,
    "test_cases_link": "https://example.com/abc123/A",
}

PROBLEM_B = dict(PROBLEM_A, problem_id="B", title="B - Reverse")


def verdict(status: str, **extra) -> Dict[str, Any]:
    data = {
        "input": "3\n",
        "output": "6\n",
        "answer": "6\n",
        "status": status,
        "time": 0.01,
        "memory": 4,
    }
    data.update(extra)
    return data


class FakeBackend:
    """
    Scripted in-memory backend with the transport interface.

    values:   command -> value, or callable(**arguments) producing one
    failures: command -> CommandError raised instead of answering
    gates:    command -> asyncio.Event the command waits on before answering
    """

    def __init__(self):
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.values: Dict[str, Any] = {
            "get_directory": "",
            "get_editor": "",
            "get_language": "cpp",
            "get_contest_type": "ABC",
            "get_problem_type": ["A", "B", "C"],
            "get_show_solved": True,
            "get_problem": PROBLEM_A,
            "run": [],
            "submit": [],
        }
        self.failures: Dict[str, Exception] = {}
        self.gates: Dict[str, asyncio.Event] = {}
        self.closed = False

    async def invoke(self, command: str, **arguments: Any) -> Any:
        self.calls.append((command, arguments))
        gate = self.gates.get(command)
        if gate is not None:
            await gate.wait()
        if command in self.failures:
            raise self.failures[command]
        value = self.values.get(command)
        if callable(value):
            value = value(**arguments)
        return value

    def close(self) -> None:
        self.closed = True

    def count(self, command: str) -> int:
        return sum(1 for name, _ in self.calls if name == command)

    def commands(self) -> List[str]:
        return [name for name, _ in self.calls]


class Recorder:
    """Event listener keeping everything it sees."""

    def __init__(self):
        self.events = []
        self.board = NotificationBoard()

    def __call__(self, event):
        self.events.append(event)
        self.board(event)

    @property
    def resizes(self):
        return [e for e in self.events if isinstance(e, WindowResize)]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def session(backend, recorder):
    s = Session(backend)
    s.events.subscribe(recorder)
    return s
