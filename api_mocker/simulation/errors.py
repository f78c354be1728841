"""Failure modes of a simulated call, each mapped to an HTTP-like status."""

from api_mocker.domain.constants import MSG_METHOD_NOT_SUPPORTED, MSG_NOT_INITIALIZED


class SimulatorError(Exception):
    """Base class; carries the status and the message sent back to the caller."""

    status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict[str, str]:
        return {'error': self.message}


class NotInitialized(SimulatorError):
    """No documentation or live document has been loaded."""
    status = 503

    def __init__(self, message: str = MSG_NOT_INITIALIZED) -> None:
        super().__init__(message)


class BadRequest(SimulatorError):
    status = 400


class NotFound(SimulatorError):
    status = 404


class MethodNotSupported(SimulatorError):
    status = 405

    def __init__(self, message: str = MSG_METHOD_NOT_SUPPORTED) -> None:
        super().__init__(message)
