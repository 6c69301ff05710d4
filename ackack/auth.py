from abc import ABC, abstractmethod

from httpx import Request


class AuthStrategy(ABC):
    """Abstract base class for authentication strategies"""

    @abstractmethod
    def authenticate(self, request: Request):
        """Apply authentication to the request"""
        pass


class HeaderAuth(AuthStrategy):
    """Sets a secret on a single request header, optionally behind a scheme prefix"""
    header_name: str = "Authorization"
    header_prefix: str = None

    def __init__(self, secret: str, header_name: str = None, header_prefix: str = None):
        if header_name is not None:
            self.header_name = header_name
        if header_prefix is not None:
            self.header_prefix = header_prefix
        self.__secret = secret

    def __repr__(self):
        # Never expose the secret
        return f"{type(self).__name__}(header_name={self.header_name!r})"

    def authenticate(self, request: Request):
        if self.header_prefix:
            request.headers[self.header_name] = f"{self.header_prefix} {self.__secret}"
        else:
            request.headers[self.header_name] = self.__secret


class BearerTokenAuth(HeaderAuth):
    """Bearer token authentication strategy, as used by the ackack.io API"""
    header_prefix = "Bearer"

    def __init__(self, token: str):
        super().__init__(secret=token)
