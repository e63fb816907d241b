# src/jamfusage/http/errors.py
class FetchError(Exception):
    """Anything that went wrong while pulling data from the server."""


class HttpError(FetchError):
    def __init__(self, status: int, url: str, message: str = "", body_snippet: str = ""):
        super().__init__(message or f"HTTP {status} for {url}")
        self.status = status
        self.url = url
        self.body_snippet = body_snippet

class UnauthorizedError(HttpError): pass           # 401
class ForbiddenError(HttpError): pass              # 403
class NotFoundError(HttpError): pass               # 404
class ServerError(HttpError): pass                 # 5xx
class NetworkError(HttpError): pass                # request/timeout


class ParseError(FetchError):
    def __init__(self, url: str, message: str = ""):
        super().__init__(message or f"Invalid JSON from {url}")
        self.url = url


class PaginationError(FetchError):
    def __init__(self, url: str, received: int, total: int):
        super().__init__(f"Empty page from {url} after {received} of {total} records")
        self.url = url
        self.received = received
        self.total = total
