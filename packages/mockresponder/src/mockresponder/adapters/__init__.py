"""Interface adapters: httpx transports, logging and port protocols."""

from mockresponder.adapters.ports import DispatcherPort, DispatchFunc, LoggingPort
from mockresponder.adapters.logging_adapter import StdlibLoggingAdapter
from mockresponder.adapters.httpx_transport import AsyncMockTransport, MockTransport

__all__ = [
    "DispatcherPort",
    "DispatchFunc",
    "LoggingPort",
    "StdlibLoggingAdapter",
    "MockTransport",
    "AsyncMockTransport",
]
