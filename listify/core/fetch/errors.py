# listify/core/fetch/errors.py
"""
Typed errors + utilities for fetching and parsing search-result HTML.

Exports
-------
- HtmlFetcherError, OfflineRequiredError, NetworkError, InvalidHtmlError,
  CaptchaBlockedError
- FETCHER_ERRORS
- classify_fetcher_error(exc)
- fetcher_error_guard()
- _CAPTCHA_WAF_PATTERN   (shared regex for WAF/CAPTCHA detection)
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from contextlib import contextmanager

import requests

# =========================
# Exception types
# =========================


class HtmlFetcherError(RuntimeError):
    """Base class for fetch/parse failures surfaced to callers."""


class OfflineRequiredError(HtmlFetcherError):
    """A fetch was requested but policy forbids network access."""


class NetworkError(HtmlFetcherError):
    """HTTP/transport failure while attempting to fetch a resource."""


class InvalidHtmlError(HtmlFetcherError):
    """Input could not be parsed into a DOM; the pipeline cannot continue."""


class CaptchaBlockedError(HtmlFetcherError):
    """A CAPTCHA or WAF (Akamai/Cloudflare/eBay splash) blocked access."""


# Selector tuple for grouped exception handling
FETCHER_ERRORS = (
    OfflineRequiredError,
    NetworkError,
    InvalidHtmlError,
    CaptchaBlockedError,
)

# Common WAF/CAPTCHA markers found in bodies/messages
_CAPTCHA_WAF_PATTERN = re.compile(
    r"(captcha|cf-chl|cloudflare|hcaptcha|recaptcha|akamai|incapsula|robot\s*check|access\s*denied|pardon\s+our\s+interruption)",
    re.IGNORECASE,
)

# =========================
# Classification helpers
# =========================


def classify_fetcher_error(exc: Exception) -> HtmlFetcherError:
    """
    Map arbitrary exceptions to a typed HtmlFetcherError subclass.

    Heuristics:
      - Any HtmlFetcherError subclass → passed through
      - requests.* errors → NetworkError
      - Messages hinting at CAPTCHA/WAF blocks → CaptchaBlockedError
      - Fallback → HtmlFetcherError
    """
    if isinstance(exc, HtmlFetcherError):
        return exc

    if isinstance(exc, requests.RequestException):
        return NetworkError(str(exc))

    msg = f"{type(exc).__name__}: {exc}"

    if _CAPTCHA_WAF_PATTERN.search(msg):
        return CaptchaBlockedError(msg)

    return HtmlFetcherError(msg)


@contextmanager
def fetcher_error_guard() -> Iterator[None]:
    """Context manager to normalize unexpected exceptions raised inside the block."""
    try:
        yield
    except FETCHER_ERRORS:
        raise
    except Exception as exc:  # noqa: BLE001
        raise classify_fetcher_error(exc) from exc


__all__ = [
    "HtmlFetcherError",
    "OfflineRequiredError",
    "NetworkError",
    "InvalidHtmlError",
    "CaptchaBlockedError",
    "FETCHER_ERRORS",
    "classify_fetcher_error",
    "fetcher_error_guard",
    "_CAPTCHA_WAF_PATTERN",
]
