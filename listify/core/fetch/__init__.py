# listify/core/fetch/__init__.py
from .errors import (
    FETCHER_ERRORS,
    CaptchaBlockedError,
    HtmlFetcherError,
    InvalidHtmlError,
    NetworkError,
    OfflineRequiredError,
    classify_fetcher_error,
    fetcher_error_guard,
)
from .html_fetcher import build_headers, fetch_html, resolve_proxy_url

__all__ = [
    "HtmlFetcherError",
    "OfflineRequiredError",
    "NetworkError",
    "InvalidHtmlError",
    "CaptchaBlockedError",
    "FETCHER_ERRORS",
    "classify_fetcher_error",
    "fetcher_error_guard",
    "build_headers",
    "resolve_proxy_url",
    "fetch_html",
]
