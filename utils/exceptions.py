"""
Error taxonomy shared by the services and the API layer.

Every error carries the public message returned to the caller and the
HTTP status the API layer answers with. Internal details stay in the logs.
"""


class GatewayError(Exception):
    """Base class for errors translated into a JSON ``{"error": ...}`` body."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(GatewayError):
    """Malformed or missing request fields. Nothing was mutated."""

    status_code = 400


class NotFound(GatewayError):
    """Unknown identifier."""

    status_code = 404


class UpstreamUnavailable(GatewayError):
    """Completion provider, summarizer, mail or scoring service failed or timed out."""

    status_code = 502


class StorageUnavailable(UpstreamUnavailable):
    """Blob or relational store failure."""

    status_code = 500
