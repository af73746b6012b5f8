"""Errors raised by the backend transport."""


class CommandError(Exception):
    """A backend command did not complete."""

    def __init__(self, command: str, message: str):
        super().__init__(message)
        self.command = command
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationFailure(CommandError):
    """The backend rejected the command's input (bad path, invalid value...)."""


class TransportFailure(CommandError):
    """The command channel itself failed."""
