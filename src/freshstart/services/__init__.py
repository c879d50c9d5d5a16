from .base import BaseService
from .errors import (
    ExternalCommandFailedError,
    IoFailedError,
    ServiceFailure,
    ValidationFailedError,
)

__all__ = [
    "BaseService",
    "ExternalCommandFailedError",
    "IoFailedError",
    "ServiceFailure",
    "ValidationFailedError",
]
