"""Project directory, editor and language settings."""

import logging

from ..client.gateway import CommandGateway
from ..client.models import DEFAULT_LANGUAGE, find_language
from ..events import LANDING_WINDOW, PROJECT_WINDOW


logger = logging.getLogger(__name__)


class SessionStore:
    """
    Holds the project settings and persists every change through the gateway.
    Local values only change after the backend accepted them.
    """

    def __init__(self, gateway: CommandGateway):
        self.gateway = gateway
        self.directory = ""
        self.editor = ""
        self.language = DEFAULT_LANGUAGE

    @property
    def project_open(self) -> bool:
        return self.directory != ""

    def _assign_directory(self, directory: str) -> None:
        # Only opening or closing a project resizes the host window
        was_open = self.project_open
        self.directory = directory
        if was_open != self.project_open:
            self.gateway.events.emit(PROJECT_WINDOW if self.project_open else LANDING_WINDOW)

    async def restore(self) -> None:
        """Load persisted settings, falling back to defaults on failure."""
        result = await self.gateway.get_directory()
        self._assign_directory((result.value or "") if result else "")

        result = await self.gateway.get_editor()
        self.editor = (result.value or "") if result else ""

        result = await self.gateway.get_language()
        language = find_language(result.value or "") if result else None
        self.language = language.id if language else DEFAULT_LANGUAGE

    async def set_directory(self, path: str) -> bool:
        if not await self.gateway.set_directory(path):
            return False
        self._assign_directory(path)
        logger.info("directory set to %r", path)
        return True

    async def close_project(self) -> bool:
        return await self.set_directory("")

    async def set_editor(self, path: str) -> bool:
        path = path.replace("\\", "/")
        if not await self.gateway.set_editor(path):
            return False
        self.editor = path
        return True

    async def set_language(self, language_id: str) -> bool:
        language = find_language(language_id)
        if language is None:
            self.gateway.events.notify(
                "cannot_set_language", f"unsupported language: {language_id}"
            )
            return False
        if not await self.gateway.set_language(language.id):
            return False
        self.language = language.id
        return True
