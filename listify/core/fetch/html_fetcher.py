# listify/core/fetch/html_fetcher.py
"""
Single-shot HTML fetcher for search-result pages.

Sends one GET with a rotated browser User-Agent, an Accept-Language header and
an optional proxy. There are no retries; callers decide whether to try again.
"""

from __future__ import annotations

import random
from urllib.parse import quote, urlsplit, urlunsplit

import requests

from listify.core.log import get_logger
from listify.schemas.models import FetchPolicy

from .errors import (
    _CAPTCHA_WAF_PATTERN as _CAPTCHA_PAT,
    CaptchaBlockedError,
    NetworkError,
    OfflineRequiredError,
    fetcher_error_guard,
)

logger = get_logger(__name__)

_PLACEHOLDER_PROXY_HOSTS = ("example.com",)

# Statuses eBay/CDNs return when a bot wall is up
_BLOCKED_STATUSES = (401, 403, 429, 451, 503)

# -------------------------
# Internal helpers
# -------------------------


def pick_user_agent(policy: FetchPolicy, rng: random.Random | None = None) -> str:
    if policy.user_agent:
        return policy.user_agent
    chooser = rng or random
    return chooser.choice(policy.user_agents)


def build_headers(policy: FetchPolicy, rng: random.Random | None = None) -> dict[str, str]:
    return {
        "User-Agent": pick_user_agent(policy, rng),
        "Accept-Language": policy.accept_language,
    }


def resolve_proxy_url(policy: FetchPolicy) -> str | None:
    """
    Return the proxy URL (credentials applied) or None.

    Placeholder hosts (``*.example.com``) and unparseable URLs are skipped with a
    warning rather than failing the fetch.
    """
    if not policy.proxy_url:
        return None
    try:
        parts = urlsplit(policy.proxy_url)
        host = parts.hostname
        port = parts.port
    except ValueError as exc:
        logger.warning("Invalid proxy URL provided, skipping proxy configuration: %s (%s)", policy.proxy_url, exc)
        return None
    if not parts.scheme or not host:
        logger.warning("Invalid proxy URL provided, skipping proxy configuration: %s", policy.proxy_url)
        return None
    if any(host == h or host.endswith(f".{h}") for h in _PLACEHOLDER_PROXY_HOSTS):
        logger.debug("Placeholder proxy host %s ignored", host)
        return None

    if policy.proxy_user and policy.proxy_pass:
        netloc = f"{quote(policy.proxy_user, safe='')}:{quote(policy.proxy_pass, safe='')}@{host}"
        if port:
            netloc = f"{netloc}:{port}"
        return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))
    return policy.proxy_url


def _http_get(url: str, headers: dict[str, str], timeout: float, proxies: dict[str, str] | None) -> requests.Response:
    try:
        return requests.get(url, headers=headers, timeout=timeout, proxies=proxies)
    except requests.RequestException as e:
        raise NetworkError(str(e)) from e


def looks_blocked(status: int, body: str) -> bool:
    return status in _BLOCKED_STATUSES or bool(_CAPTCHA_PAT.search(body))


# -------------------------
# Public API
# -------------------------


def fetch_html(url: str, *, policy: FetchPolicy | None = None) -> str:
    """
    Fetch `url` and return the decoded body.

    Raises:
      OfflineRequiredError  policy.allow_network is False
      NetworkError          transport failure, or HTTP >= 400 unless allow_non_200
      CaptchaBlockedError   WAF/CAPTCHA markers and captcha_mode == "strict"
    """
    pol = policy or FetchPolicy()
    if not pol.allow_network:
        raise OfflineRequiredError(f"Networking is disabled by policy; refusing to fetch {url}")

    proxy = resolve_proxy_url(pol)
    proxies = {"http": proxy, "https": proxy} if proxy else None
    headers = build_headers(pol)

    with fetcher_error_guard():
        logger.debug("GET %s (proxy=%s)", url, bool(proxies))
        resp = _http_get(url, headers, pol.timeout_s, proxies)
        status = int(resp.status_code)
        body = resp.text or ""

        if looks_blocked(status, body):
            if pol.captcha_mode == "strict":
                raise CaptchaBlockedError(f"WAF/CAPTCHA suspected for {url} (status={status})")
            if pol.captcha_mode == "soft":
                logger.warning("WAF/CAPTCHA suspected for %s (status=%s); continuing with raw body", url, status)

        if not pol.allow_non_200 and status >= 400:
            raise NetworkError(f"HTTP {status} for {url}")

        logger.debug("Fetched %s: status=%s bytes=%d", url, status, len(body))
        return body
