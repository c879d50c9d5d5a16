"""Common call contract for freshstart services.

A service is a callable object: ``service(request)`` runs ``_run`` and
returns its outcome. Expected problems (missing manifest, failed install
under the ``abort`` policy) surface as ``ServiceFailure``; anything else
propagates untouched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .errors import ServiceFailure

RequestT = TypeVar("RequestT")
OutcomeT = TypeVar("OutcomeT")


class BaseService(ABC, Generic[RequestT, OutcomeT]):
    def __call__(self, request: RequestT) -> OutcomeT:
        try:
            return self._run(request)
        except ServiceFailure as failure:
            return self._handle_failure(failure)

    @abstractmethod
    def _run(self, request: RequestT) -> OutcomeT: ...

    def _handle_failure(self, error: ServiceFailure) -> OutcomeT:
        """Turn ``error`` into an outcome, or re-raise it (the default).

        ``commands.run`` relies on the re-raise to print the failure and
        exit with status 1.
        """
        raise error
