"""Client module for backend interaction."""

from .client import BackendClient
from .errors import CommandError, TransportFailure, ValidationFailure
from .gateway import CommandGateway, CommandResult
from .models import (
    ContestType,
    Language,
    Problem,
    ProblemFilter,
    SessionViewState,
    Tab,
    Verdict,
)

__all__ = [
    "BackendClient",
    "CommandError",
    "TransportFailure",
    "ValidationFailure",
    "CommandGateway",
    "CommandResult",
    "ContestType",
    "Language",
    "Problem",
    "ProblemFilter",
    "SessionViewState",
    "Tab",
    "Verdict",
]
