"""Session core: settings, navigation, judging and view state."""

from .navigator import ProblemNavigator
from .orchestrator import RunSubmitOrchestrator
from .session import Session
from .store import SessionStore
from .view import ViewStateController

__all__ = [
    "ProblemNavigator",
    "RunSubmitOrchestrator",
    "Session",
    "SessionStore",
    "ViewStateController",
]
