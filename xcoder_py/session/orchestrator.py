"""Run/submit execution under the testing lock."""

import logging
from typing import Awaitable, Callable, Optional, Sequence, Tuple

from ..client.gateway import CommandGateway, CommandResult
from ..client.models import SessionViewState, Tab, Verdict
from .view import aggregate_for, clamp_case_index


logger = logging.getLogger(__name__)


class RunSubmitOrchestrator:
    """
    Runs or submits the current solution, one call at a time.

    A call made while another is in flight is dropped, not queued. The lock
    is a plain flag on the view state; nothing here can cancel a call that
    has already passed the check.
    """

    def __init__(self, gateway: CommandGateway, view: SessionViewState):
        self.gateway = gateway
        self.view = view

    @property
    def testing(self) -> bool:
        return self.view.testing

    async def run(self) -> Optional[Tuple[Verdict, ...]]:
        """Judge against the sample cases."""
        return await self._execute("run", self.gateway.run)

    async def submit(self) -> Optional[Tuple[Verdict, ...]]:
        """Judge against the full test set."""
        return await self._execute("submit", self.gateway.submit)

    async def _execute(
        self, name: str, call: Callable[[], Awaitable[CommandResult]]
    ) -> Optional[Tuple[Verdict, ...]]:
        if self.view.testing:
            logger.debug("%s ignored: testing in progress", name)
            return None

        self.view.testing = True
        try:
            result = await call()
        finally:
            self.view.testing = False

        if not result:
            return None
        self.apply_verdicts(result.value)
        return result.value

    def apply_verdicts(self, verdicts: Sequence[Verdict]) -> None:
        """Show a fresh verdict sequence; an empty one leaves the view alone."""
        aggregate = aggregate_for(verdicts)
        if aggregate is None:
            return
        self.view.aggregate_verdict = aggregate
        self.view.verdicts = tuple(verdicts)
        self.view.result_tab_enabled = True
        self.view.current_tab = Tab.RESULT
        self.view.selected_case_index = clamp_case_index(
            self.view.selected_case_index, len(self.view.verdicts)
        )
