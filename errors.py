"""Error taxonomy shared by every pipeline stage."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Closed set of ways a pipeline run can fail."""

    FETCH_FAILURE = "fetch_failure"
    ABSTRACT_NOT_FOUND = "abstract_not_found"
    SELECTOR_PARSE_FAILURE = "selector_parse_failure"
    SUMMARY_NOT_FOUND = "summary_not_found"
    IO_FAILURE = "io_failure"


class GistError(Exception):
    """Terminal pipeline failure.

    A single exception type tagged with an ErrorKind. The wrapped
    lower-level exception (if any) is kept on ``cause`` for diagnostics,
    and ``detail`` carries a free-form message for kinds without one.
    """

    def __init__(
        self,
        kind: ErrorKind,
        cause: BaseException | None = None,
        detail: str | None = None,
    ) -> None:
        self.kind = kind
        self.cause = cause
        self.detail = detail
        super().__init__(self._message())

    def _message(self) -> str:
        if self.kind is ErrorKind.FETCH_FAILURE:
            return f"Failed to fetch abstract: {self.cause}"
        if self.kind is ErrorKind.ABSTRACT_NOT_FOUND:
            return "Abstract not found"
        if self.kind is ErrorKind.SELECTOR_PARSE_FAILURE:
            return f"Failed to parse HTML: {self.detail}"
        if self.kind is ErrorKind.SUMMARY_NOT_FOUND:
            return "Summary not found in response"
        return f"IO error: {self.cause}"
