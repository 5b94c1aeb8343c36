from .logging_transport import LoggingTransport

__all__ = ["LoggingTransport"]
