"""Fetch -> extract -> normalize -> (optional) summarize."""

from __future__ import annotations

import logging
from typing import Any, Callable

from errors import ErrorKind, GistError
from extractor import extract_abstract
from fetcher import fetch_page
from models import FULL_ABSTRACT_LABEL, SUMMARY_LABEL, PipelineOutput
from normalizer import normalize_abstract
from summarizer import summarize_abstract

LOGGER = logging.getLogger(__name__)

STAGE_FETCH = "fetch"
STAGE_EXTRACT = "extract"
STAGE_NORMALIZE = "normalize"
STAGE_SUMMARIZE = "summarize"


class StageObserver:
    """Receives stage lifecycle events from run_pipeline. Methods are no-ops."""

    def stage_started(self, stage: str, **details: Any) -> None:
        pass

    def stage_succeeded(self, stage: str, **details: Any) -> None:
        pass

    def stage_failed(self, stage: str, error: GistError) -> None:
        pass


class LoggingObserver(StageObserver):
    """Observer that reports stage events through the logging module."""

    # Expected "not found" outcomes are warnings; transport and parse problems are errors.
    _WARNING_KINDS = frozenset({ErrorKind.ABSTRACT_NOT_FOUND, ErrorKind.SUMMARY_NOT_FOUND})

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or LOGGER

    def stage_started(self, stage: str, **details: Any) -> None:
        self.logger.debug("Stage %s started %s", stage, _format_details(details))

    def stage_succeeded(self, stage: str, **details: Any) -> None:
        level = logging.INFO if stage in (STAGE_FETCH, STAGE_SUMMARIZE) else logging.DEBUG
        self.logger.log(level, "Stage %s succeeded %s", stage, _format_details(details))

    def stage_failed(self, stage: str, error: GistError) -> None:
        level = logging.WARNING if error.kind in self._WARNING_KINDS else logging.ERROR
        self.logger.log(level, "Stage %s failed: %s", stage, error)


def _format_details(details: dict[str, Any]) -> str:
    return " ".join(f"{key}={value}" for key, value in details.items())


def run_pipeline(
    url: str,
    short: bool = False,
    observer: StageObserver | None = None,
) -> PipelineOutput:
    """Run one pipeline pass for ``url``.

    Returns the normalized abstract under the "Full Abstract:" label, or,
    when ``short`` is set, the remote summary under "Summary:". The first
    GistError raised by any stage propagates unchanged.
    """
    observer = observer or LoggingObserver()

    html = _run_stage(observer, STAGE_FETCH, fetch_page, url, url=url)
    raw = _run_stage(observer, STAGE_EXTRACT, extract_abstract, html, chars=len(html))
    abstract = _run_stage(observer, STAGE_NORMALIZE, normalize_abstract, raw, chars=len(raw))

    if not short:
        return PipelineOutput(label=FULL_ABSTRACT_LABEL, text=abstract)

    summary = _run_stage(
        observer, STAGE_SUMMARIZE, summarize_abstract, abstract, chars=len(abstract)
    )
    return PipelineOutput(label=SUMMARY_LABEL, text=summary)


def _run_stage(
    observer: StageObserver,
    stage: str,
    func: Callable[[str], str],
    arg: str,
    **details: Any,
) -> str:
    observer.stage_started(stage, **details)
    try:
        result = func(arg)
    except GistError as exc:
        observer.stage_failed(stage, exc)
        raise
    observer.stage_succeeded(stage, chars=len(result))
    return result
