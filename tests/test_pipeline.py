"""Tests for pipeline.run_pipeline and its observers."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from errors import ErrorKind, GistError
from models import FULL_ABSTRACT_LABEL, SUMMARY_LABEL
from pipeline import LoggingObserver, StageObserver, run_pipeline

_URL = "https://example.org/paper"
_HTML = '<html><body><div class="abstract">Abstract\n  Cell   signaling via PPAR.</div></body></html>'


class _RecordingObserver(StageObserver):
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def stage_started(self, stage, **details) -> None:
        self.events.append(("started", stage))

    def stage_succeeded(self, stage, **details) -> None:
        self.events.append(("succeeded", stage))

    def stage_failed(self, stage, error) -> None:
        self.events.append(("failed", stage))


def test_full_mode_returns_normalized_abstract() -> None:
    with patch("pipeline.fetch_page", return_value=_HTML), \
         patch("pipeline.summarize_abstract") as mock_summarize:
        output = run_pipeline(_URL)

    assert output.label == FULL_ABSTRACT_LABEL
    assert output.text == "Cell signaling via PPAR."
    assert output.render() == "Full Abstract:\nCell signaling via PPAR.\n"
    mock_summarize.assert_not_called()


def test_short_mode_summarizes_normalized_text() -> None:
    with patch("pipeline.fetch_page", return_value=_HTML), \
         patch("pipeline.summarize_abstract", return_value="PPAR signals.") as mock_summarize:
        output = run_pipeline(_URL, short=True)

    mock_summarize.assert_called_once_with("Cell signaling via PPAR.")
    assert output.label == SUMMARY_LABEL
    assert output.text == "PPAR signals."


def test_fetch_failure_stops_before_extraction() -> None:
    error = GistError(ErrorKind.FETCH_FAILURE, cause=OSError("dns"))
    with patch("pipeline.fetch_page", side_effect=error), \
         patch("pipeline.extract_abstract") as mock_extract:
        with pytest.raises(GistError) as excinfo:
            run_pipeline(_URL, short=True)

    assert excinfo.value is error
    mock_extract.assert_not_called()


def test_missing_abstract_skips_summarization() -> None:
    with patch("pipeline.fetch_page", return_value="<html><p>404</p></html>"), \
         patch("pipeline.summarize_abstract") as mock_summarize:
        with pytest.raises(GistError) as excinfo:
            run_pipeline(_URL, short=True)

    assert excinfo.value.kind is ErrorKind.ABSTRACT_NOT_FOUND
    mock_summarize.assert_not_called()


def test_summary_not_found_propagates() -> None:
    with patch("pipeline.fetch_page", return_value=_HTML), \
         patch("pipeline.summarize_abstract", side_effect=GistError(ErrorKind.SUMMARY_NOT_FOUND)):
        with pytest.raises(GistError) as excinfo:
            run_pipeline(_URL, short=True)

    assert excinfo.value.kind is ErrorKind.SUMMARY_NOT_FOUND


def test_observer_sees_stages_in_order() -> None:
    observer = _RecordingObserver()
    with patch("pipeline.fetch_page", return_value=_HTML), \
         patch("pipeline.summarize_abstract", return_value="s"):
        run_pipeline(_URL, short=True, observer=observer)

    assert observer.events == [
        ("started", "fetch"),
        ("succeeded", "fetch"),
        ("started", "extract"),
        ("succeeded", "extract"),
        ("started", "normalize"),
        ("succeeded", "normalize"),
        ("started", "summarize"),
        ("succeeded", "summarize"),
    ]


def test_observer_notified_of_failure() -> None:
    observer = _RecordingObserver()
    with patch("pipeline.fetch_page", return_value="<p>nothing</p>"):
        with pytest.raises(GistError):
            run_pipeline(_URL, observer=observer)

    assert observer.events[-1] == ("failed", "extract")
    assert ("started", "normalize") not in observer.events


def test_logging_observer_levels(caplog: pytest.LogCaptureFixture) -> None:
    observer = LoggingObserver(logging.getLogger("gist.test"))
    with caplog.at_level(logging.DEBUG, logger="gist.test"):
        observer.stage_succeeded("fetch", chars=10)
        observer.stage_failed("extract", GistError(ErrorKind.ABSTRACT_NOT_FOUND))
        observer.stage_failed("fetch", GistError(ErrorKind.FETCH_FAILURE, cause=OSError("boom")))

    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.INFO, logging.WARNING, logging.ERROR]
    assert "chars=10" in caplog.records[0].getMessage()
    assert "Abstract not found" in caplog.records[1].getMessage()
