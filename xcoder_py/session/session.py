"""One working session against the backend."""

import logging
from typing import Optional

from ..client.gateway import CommandGateway
from ..client.models import SessionViewState
from ..events import EventBus
from .navigator import ProblemNavigator
from .orchestrator import RunSubmitOrchestrator
from .store import SessionStore
from .view import ViewStateController


logger = logging.getLogger(__name__)


class Session:
    """
    Explicit owner of all session state.
    The store, navigator, orchestrator and view controller share one
    SessionViewState and one gateway; nothing is kept in module globals.
    """

    def __init__(self, transport, events: Optional[EventBus] = None):
        self.events = events or EventBus()
        self.gateway = CommandGateway(transport, self.events)
        self.view_state = SessionViewState()
        self.store = SessionStore(self.gateway)
        self.navigator = ProblemNavigator(self.gateway, self.view_state)
        self.orchestrator = RunSubmitOrchestrator(self.gateway, self.view_state)
        self.view = ViewStateController(self.view_state)

    @property
    def problem(self):
        return self.navigator.problem

    @property
    def filter(self):
        return self.navigator.filter

    async def start(self) -> None:
        """Restore persisted settings and fetch the current problem."""
        await self.store.restore()
        if not self.store.project_open:
            logger.info("no project directory; waiting for one to be opened")
            return
        await self.navigator.restore()

    async def open_project(self, directory: str) -> bool:
        """Set the project directory and load its problem view."""
        if not await self.store.set_directory(directory):
            return False
        await self.navigator.restore()
        return True

    async def close_project(self) -> bool:
        """Unset the project directory and drop the problem shown for it."""
        if not await self.store.close_project():
            return False
        self.navigator.problem = None
        self.view_state.reset()
        return True

    async def create_file(self) -> bool:
        """Scaffold the solution file for the current problem and language."""
        return bool(await self.gateway.create_file())

    async def open_file(self) -> bool:
        """Open the solution file in the configured editor."""
        if not self.store.editor:
            self.events.notify("editor_not_set", "Set an editor first")
            return False
        return bool(await self.gateway.open_file())

    async def close(self) -> bool:
        """Ask the backend to persist its state; called when the host closes."""
        return bool(await self.gateway.save_state())
