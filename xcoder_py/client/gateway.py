"""Uniform async boundary between the session core and the backend."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .errors import CommandError, TransportFailure
from .models import Problem, Verdict
from ..events import EventBus


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of one gateway call.
    ok=True with value=None is a legitimate "nothing there" answer and is
    distinct from ok=False, which always carries the error.
    """

    ok: bool
    value: Any = None
    error: Optional[CommandError] = None

    def __bool__(self) -> bool:
        return self.ok


class CommandGateway:
    """
    One coroutine per backend command.
    Failures are reported on the event bus and returned, never raised.
    The transport is any object with ``async invoke(command, **arguments)``.
    """

    def __init__(self, transport, events: Optional[EventBus] = None):
        self.transport = transport
        self.events = events or EventBus()

    async def _call(
        self,
        command: str,
        failure_id: Optional[str] = None,
        failure_title: str = "",
        failure_message: Optional[str] = None,
        parse: Optional[Callable[[Any], Any]] = None,
        **arguments: Any,
    ) -> CommandResult:
        try:
            value = await self.transport.invoke(command, **arguments)
            if parse is not None:
                try:
                    value = parse(value)
                except (AttributeError, KeyError, TypeError, ValueError) as e:
                    raise TransportFailure(
                        command, f"{command}: malformed response ({e})"
                    ) from e
        except CommandError as e:
            logger.info("%s failed: %s", command, e)
            self.events.notify(
                failure_id or f"cannot_{command}",
                failure_message or e.message,
                title=failure_title,
            )
            return CommandResult(ok=False, error=e)
        logger.debug("%s -> %r", command, value)
        return CommandResult(ok=True, value=value)

    def _success(self, id: str, message: str) -> None:
        self.events.notify(id, message, level="success")

    # Project

    async def get_directory(self) -> CommandResult:
        return await self._call(
            "get_directory",
            failure_message="Cannot get the directory",
            parse=_parse_str,
        )

    async def set_directory(self, directory: str) -> CommandResult:
        return await self._call(
            "set_directory",
            failure_id="directory_not_set",
            failure_title="Directory not found",
            failure_message="The specified directory was not found",
            directory=directory,
        )

    async def get_editor(self) -> CommandResult:
        return await self._call("get_editor", parse=_parse_str)

    async def set_editor(self, editor: str) -> CommandResult:
        return await self._call("set_editor", editor=editor)

    async def get_language(self) -> CommandResult:
        return await self._call("get_language", parse=_parse_str)

    async def set_language(self, language: str) -> CommandResult:
        result = await self._call("set_language", language=language)
        if result:
            self._success("language_set", f"language set to {language}")
        return result

    # Filter

    async def get_contest_type(self) -> CommandResult:
        return await self._call("get_contest_type", parse=_parse_str)

    async def set_contest_type(self, contest_type: str) -> CommandResult:
        result = await self._call("set_contest_type", contestType=contest_type)
        if result:
            self._success("contest_set", f"contest type set to {contest_type}")
        return result

    async def get_problem_type(self) -> CommandResult:
        return await self._call("get_problem_type", parse=lambda v: list(v or []))

    async def set_problem_type(self, problem_types: List[str]) -> CommandResult:
        result = await self._call("set_problem_type", problemTypes=list(problem_types))
        if result:
            self._success(
                "problem_set", "problem types set to " + ", ".join(problem_types)
            )
        return result

    async def get_show_solved(self) -> CommandResult:
        return await self._call("get_show_solved", parse=bool)

    async def set_show_solved(self, show_solved: bool) -> CommandResult:
        return await self._call("set_show_solved", showSolved=show_solved)

    # Navigation

    async def next(self) -> CommandResult:
        return await self._call("next")

    async def previous(self) -> CommandResult:
        return await self._call("previous")

    async def get_problem(self) -> CommandResult:
        """value is a Problem, or None when the backend has nothing to show."""
        return await self._call(
            "get_problem", parse=lambda v: None if v is None else Problem.from_dict(v)
        )

    async def update_problems_list(self) -> CommandResult:
        return await self._call("update_problems_list")

    # Judging

    async def run(self) -> CommandResult:
        return await self._call("run", parse=_parse_verdicts)

    async def submit(self) -> CommandResult:
        return await self._call("submit", parse=_parse_verdicts)

    # Files and lifecycle

    async def create_file(self) -> CommandResult:
        result = await self._call("create_file")
        if result:
            self._success("file_created", "file created")
        return result

    async def open_file(self) -> CommandResult:
        return await self._call("open_file")

    async def save_state(self) -> CommandResult:
        return await self._call("save_state")


def _parse_verdicts(value: Any):
    return tuple(Verdict.from_dict(v) for v in (value or []))


def _parse_str(value: Any) -> str:
    # null means unset
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value
