"""Error kinds raised while retrieving a page.

Only the loader raises these. Every error keeps the technical message as its
`str()` and carries a short `user_message` plus the HTTP status an API layer
should answer with, so presentation code never has to parse the message.
"""


class FetchError(Exception):
    kind = "UnexpectedFetchFailure"
    user_message = "An error occurred while analyzing the URL. Please try again."
    http_status = 500

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url

    def to_dict(self) -> dict:
        return {"message": str(self), "kind": self.kind, "userMessage": self.user_message}


class InvalidUrlError(FetchError):
    kind = "InvalidUrl"
    user_message = "Please enter a valid website URL (e.g., example.com or https://example.com)"
    http_status = 400


class BlockedError(FetchError):
    kind = "Blocked"
    user_message = "This website blocks external requests. Please try a different URL."
    http_status = 400


class NotFoundError(FetchError):
    kind = "NotFound"
    user_message = "The page could not be found. Please check the URL and try again."
    http_status = 400


class ConnectionFailedError(FetchError):
    kind = "ConnectionError"
    user_message = "Could not connect to the website. Please check the URL and try again."
    http_status = 400


class FetchTimeoutError(FetchError):
    kind = "Timeout"
    user_message = "The website took too long to respond. Please try again later."
    http_status = 408


class EmptyResponseError(FetchError):
    kind = "EmptyResponse"
    user_message = "The website returned an empty response. Please try another URL."
    http_status = 400


class UnexpectedFetchError(FetchError):
    pass
