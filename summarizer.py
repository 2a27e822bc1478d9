"""Client for the remote abstract summarization endpoint."""

from __future__ import annotations

from typing import Any

import requests

from errors import ErrorKind, GistError
from fetcher import request_timeout

SUMMARY_API_URL = "https://aeronjl-gist.web.val.run"


def summarize_abstract(text: str) -> str:
    """Send ``text`` to the summarization endpoint and return its summary.

    The request body is ``{"text": text}``; the response must be a JSON
    object with a string ``summary`` field, returned verbatim.
    """
    try:
        response = requests.post(
            SUMMARY_API_URL,
            json={"text": text},
            timeout=request_timeout(),
        )
        body = response.json()
    except (requests.RequestException, ValueError) as exc:
        # requests raises its own JSONDecodeError, older versions a bare ValueError.
        raise GistError(ErrorKind.FETCH_FAILURE, cause=exc) from exc

    return _parse_summary(body)


def _parse_summary(body: Any) -> str:
    summary = body.get("summary") if isinstance(body, dict) else None
    if not isinstance(summary, str):
        raise GistError(ErrorKind.SUMMARY_NOT_FOUND)
    return summary
