from ._network_router import (
    Completion,
    NetworkRouter,
    StatusInfo,
    TaskHandle,
    Transport,
)
from .router import Router

__all__ = [
    "Completion",
    "NetworkRouter",
    "Router",
    "StatusInfo",
    "TaskHandle",
    "Transport",
]
