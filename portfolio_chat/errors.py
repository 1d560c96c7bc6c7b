"""Error taxonomy for the chat endpoint.

Each error carries the HTTP status and the fixed message shown to the caller.
Upstream bodies and exception details stay in the server log.
"""


class ChatProxyError(Exception):
    """Base error mapped to an ``{"error": message}`` response."""

    status_code = 500
    message = "Something went wrong"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidMethod(ChatProxyError):
    status_code = 405
    message = "Method not allowed"


class MissingConfiguration(ChatProxyError):
    status_code = 500
    message = "API key not configured"


class InvalidInput(ChatProxyError):
    status_code = 400
    message = "Message is required"


class UpstreamFailure(ChatProxyError):
    """Provider answered with a non-success status."""

    status_code = 500
    message = "AI service unavailable"

    TRANSIENT_STATUSES = {408, 429}

    def __init__(self, upstream_status: int, upstream_body: str = ""):
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body
        super().__init__()

    @property
    def transient(self) -> bool:
        return self.upstream_status in self.TRANSIENT_STATUSES or self.upstream_status >= 500


class UnexpectedFailure(ChatProxyError):
    status_code = 500
    message = "Something went wrong"
