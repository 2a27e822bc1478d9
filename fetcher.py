"""Source page download."""

from __future__ import annotations

import logging
import os

import requests

from errors import ErrorKind, GistError

LOGGER = logging.getLogger(__name__)


def request_timeout() -> float | None:
    """Return the HTTP timeout from GIST_REQUEST_TIMEOUT, or None for no timeout.

    Blank or unset means no timeout. Unparseable or non-positive values are
    ignored with a warning rather than failing the run.
    """
    raw = os.getenv("GIST_REQUEST_TIMEOUT", "").strip()
    if not raw:
        return None

    try:
        seconds = float(raw)
    except ValueError:
        LOGGER.warning("Ignoring non-numeric GIST_REQUEST_TIMEOUT=%r", raw)
        return None

    if seconds <= 0:
        LOGGER.warning("Ignoring non-positive GIST_REQUEST_TIMEOUT=%r", raw)
        return None
    return seconds


def fetch_page(url: str) -> str:
    """GET ``url`` and return the response body as text.

    The status code is not inspected: an error page is returned like any
    other body and left for the extractor to reject. A body served without a
    charset is decoded as UTF-8 rather than requests' ISO-8859-1 default.
    """
    try:
        response = requests.get(url, timeout=request_timeout())
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response.text
    except requests.RequestException as exc:
        raise GistError(ErrorKind.FETCH_FAILURE, cause=exc) from exc
