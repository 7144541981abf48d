"""Error taxonomy for the lookup service.

Every error carries a fixed public message; the internal detail stays in
``message`` and only ever reaches the logs.
"""


class LookupServiceError(RuntimeError):
    status_code: int = 500
    public_message: str = "Internal Server Error"

    def __init__(self, provider: str, message: str):  # noqa: D401
        super().__init__(f"[{provider}] {message}")
        self.provider = provider
        self.message = message


class ValidationError(LookupServiceError):
    status_code = 400

    def __init__(self, field: str):
        super().__init__("request", f"invalid or missing query parameter {field!r}")
        self.field = field
        self.public_message = f"Malformed or missing {field}"


class NotFoundError(LookupServiceError):
    status_code = 404

    def __init__(self, provider: str, entity: str, message: str = "no match upstream"):
        super().__init__(provider, message)
        self.entity = entity
        self.public_message = f"{entity} not found"


class UpstreamError(LookupServiceError):
    status_code = 502

    def __init__(self, provider: str, upstream: str, message: str):
        super().__init__(provider, message)
        self.upstream = upstream
        self.public_message = f"Failed to fetch data from {upstream}"


__all__ = ["LookupServiceError", "ValidationError", "NotFoundError", "UpstreamError"]
