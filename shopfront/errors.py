# shopfront/errors.py


class ShopfrontError(Exception):
    """Base class for every failure a workflow can hit, local or remote."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NetworkError(ShopfrontError):
    # the request did not complete (DNS, refused connection, timeout, undecodable body)
    kind = "network"


class HTTPStatusError(ShopfrontError):
    kind = "http_status"

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(ShopfrontError):
    # local precondition failure, never reaches the network
    kind = "validation"
