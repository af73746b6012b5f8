"""Current problem tracking and filter changes."""

import logging
from typing import Awaitable, Callable, List, Optional, Union

from ..client.gateway import CommandGateway, CommandResult
from ..client.models import (
    ContestType,
    Problem,
    ProblemFilter,
    SessionViewState,
    select_problem_ids,
)


logger = logging.getLogger(__name__)


class ProblemNavigator:
    """
    Keeps the displayed problem in step with the backend's problem cursor.

    The backend is the only authority on which problem is current, so every
    filter setter re-fetches the problem after persisting, whether or not
    the backend accepted the new value.
    """

    def __init__(self, gateway: CommandGateway, view: SessionViewState):
        self.gateway = gateway
        self.view = view
        self.filter = ProblemFilter()
        self.problem: Optional[Problem] = None

    async def restore(self) -> Optional[Problem]:
        """Load the persisted filter, then fetch the current problem."""
        result = await self.gateway.get_contest_type()
        if result and result.value:
            try:
                self.filter.contest_type = ContestType.parse(result.value)
            except ValueError:
                logger.warning("ignoring stored contest type %r", result.value)

        result = await self.gateway.get_problem_type()
        if result:
            self.filter.problem_ids = select_problem_ids(
                [str(x).upper() for x in result.value]
            )

        result = await self.gateway.get_show_solved()
        if result:
            self.filter.show_solved = result.value

        return await self.refresh_current_problem()

    async def refresh_current_problem(self) -> Optional[Problem]:
        """
        Fetch the backend's current problem.
        Returns None, leaving problem and view state as they were, when the
        fetch failed or the backend has no problem to offer.
        """
        result = await self.gateway.get_problem()
        if not result:
            return None
        if result.value is None:
            logger.info("backend has no current problem")
            return None
        self.problem = result.value
        self.view.reset()
        return self.problem

    async def advance(self) -> bool:
        return await self._move(self.gateway.next())

    async def retreat(self) -> bool:
        return await self._move(self.gateway.previous())

    async def _move(self, step: Awaitable[CommandResult]) -> bool:
        moved = bool(await step)
        await self.refresh_current_problem()
        return moved

    async def _persist_then_refresh(
        self, persist: Awaitable[CommandResult], apply: Callable[[], None]
    ) -> bool:
        ok = bool(await persist)
        if ok:
            apply()
        await self.refresh_current_problem()
        return ok

    async def set_contest_type(self, contest_type: Union[ContestType, str]) -> bool:
        try:
            parsed = ContestType.parse(contest_type)
        except ValueError as e:
            # Unknown names still go to the backend, which owns validation
            logger.debug("%s", e)
            return await self._persist_then_refresh(
                self.gateway.set_contest_type(str(contest_type)), lambda: None
            )

        def apply():
            self.filter.contest_type = parsed

        return await self._persist_then_refresh(
            self.gateway.set_contest_type(parsed.value), apply
        )

    async def set_problem_type_filter(self, ids: List[str]) -> bool:
        selected = select_problem_ids(ids)
        if len(selected) < len(ids):
            logger.info("problem type selection trimmed to %s", ", ".join(selected))

        def apply():
            self.filter.problem_ids = selected

        return await self._persist_then_refresh(
            self.gateway.set_problem_type(list(selected)), apply
        )

    async def set_show_solved(self, show_solved: bool) -> bool:
        def apply():
            self.filter.show_solved = show_solved

        return await self._persist_then_refresh(
            self.gateway.set_show_solved(show_solved), apply
        )

    async def set_hide_solved(self, hide_solved: bool) -> bool:
        return await self.set_show_solved(not hide_solved)

    async def update_problems_list(self) -> bool:
        return bool(await self.gateway.update_problems_list())
