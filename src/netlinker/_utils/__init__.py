from ._logs import setup_logging
from ._parameters import as_parameters, require_parameters

__all__ = [
    "as_parameters",
    "require_parameters",
    "setup_logging",
]
