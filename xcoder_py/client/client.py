"""HTTP transport for the contest assistant backend."""

import asyncio
import logging
from typing import Any, Optional

import requests

from .errors import TransportFailure, ValidationFailure
from ..config.global_config import GlobalConfig


logger = logging.getLogger(__name__)


class BackendClient:
    """
    Invokes named commands on the backend service.
    Each command is a POST to /invoke/<command> carrying a JSON object of
    arguments and answering with {"value": ...}.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client."""
        if base_url is None:
            config = GlobalConfig.load()
            base_url = config.backend_url
            timeout = config.request_timeout if timeout is None else timeout
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _post(self, command: str, arguments: dict) -> Any:
        """Make the POST request and unwrap the value."""
        url = f"{self.base_url}/invoke/{command}"
        logger.debug("POST %s %s", url, arguments)
        try:
            response = self.session.post(url, json=arguments, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportFailure(command, f"{command}: {e}") from e

        # 4xx: the backend understood and refused
        if 400 <= response.status_code < 500:
            raise ValidationFailure(command, self._error_message(response))
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise TransportFailure(command, self._error_message(response)) from e

        if not response.content:
            return None
        try:
            body = response.json()
        except ValueError as e:
            raise TransportFailure(command, f"{command}: malformed response") from e
        if not isinstance(body, dict):
            raise TransportFailure(command, f"{command}: malformed response")
        return body.get("value")

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract the backend's error text."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return response.text.strip() or f"HTTP {response.status_code}"

    async def invoke(self, command: str, **arguments: Any) -> Any:
        """Run a command without blocking the event loop."""
        return await asyncio.to_thread(self._post, command, arguments)

    def close(self) -> None:
        self.session.close()
