"""Error types raised while fetching releases."""

from typing import Any, Dict, List, Optional, Sequence


class ReleaseFetchError(Exception):
    """Base class for all release fetching errors."""


class ServiceError(ReleaseFetchError):
    """Raised when the GraphQL service responded with errors instead of data."""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        messages = [e.get('message', str(e)) if isinstance(e, dict) else str(e) for e in errors]
        super().__init__(f"GraphQL errors: {'; '.join(messages)}")


class MissingFieldError(ReleaseFetchError):
    """Raised when a response payload lacks an expected nested field."""

    def __init__(self, path: Sequence[str], payload: Any):
        self.path = list(path)
        self.payload = payload
        super().__init__(
            f"No response entry for nested keys {','.join(self.path)}: {payload!r}"
        )


class TransportError(ReleaseFetchError):
    """Raised when the request never produced a usable GraphQL response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class SchemaError(ReleaseFetchError):
    """Raised when a query document does not validate against the cached schema."""

    def __init__(self, messages: List[str]):
        self.messages = messages
        super().__init__(f"Query does not match the schema: {'; '.join(messages)}")
