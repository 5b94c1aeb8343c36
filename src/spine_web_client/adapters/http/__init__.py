from .transport import HttpxResponse, HttpxTransport

__all__ = ["HttpxResponse", "HttpxTransport"]
