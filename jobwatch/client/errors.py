class ClientError(Exception):
    """Base class for everything a backend round trip can fail with."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TransportError(ClientError):
    """The request never reached the backend or no usable response came back."""


class BackendError(TransportError):
    """The backend answered with a non-2xx status and reported why."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(ClientError):
    """The response body did not have the expected shape."""
