"""Error taxonomy shared by services and the HTTP layer."""


class PhotoShareError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClientError(PhotoShareError):
    """The request cannot be served as asked (reported as 400)."""


class InvalidIdError(ClientError):
    """An identifier is not a well-formed record id."""

    def __init__(self, raw_id: str) -> None:
        super().__init__(f"Invalid id {raw_id}")
        self.raw_id = raw_id


class NotFoundError(ClientError):
    """No record matched the request."""


class UnknownParameterError(ClientError):
    """A route parameter has an unrecognized value."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Bad param {value}")
        self.value = value


class StoreError(PhotoShareError):
    """The document store failed or holds inconsistent data (reported as 500)."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause

    def to_dict(self) -> dict[str, object]:
        """Serialize the error and its underlying cause."""
        source = self.cause if self.cause is not None else self
        return {
            "detail": self.message,
            "error": {"type": type(source).__name__, "message": str(source)},
        }


class MissingRecordError(StoreError):
    """A record the application requires is absent from the store."""
