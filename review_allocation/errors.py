"""Exceptions raised while allocating a review team."""

from typing import Optional


class AllocationError(Exception):
    """
    Base error for a failed allocation run.

    Attributes:
        stage: Pipeline stage that failed, set by the runner
    """

    def __init__(self, message: str, stage: Optional[str] = None) -> None:
        super().__init__(message)
        self.stage = stage


class ConfigurationError(AllocationError):
    """Required configuration or trigger context is missing."""


class SelectionError(AllocationError):
    """No team can be selected (no candidates or zero total weight)."""


class CollaboratorError(AllocationError):
    """A GitHub API call failed."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        stage: Optional[str] = None,
    ) -> None:
        super().__init__(message, stage=stage)
        self.status_code = status_code
