"""
URL Validators

A URL is well formed when it has a scheme, an authority with a valid host,
an optional numeric port, and no whitespace or control characters anywhere.
"""

import ipaddress
import re
from typing import Any, Optional
from urllib.parse import SplitResult, urlsplit

from ..config.options import CheckOptions
from .base import Kind, Outcome, Rule, as_text

SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
LABEL_PATTERN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?")
FORBIDDEN_CHARS = re.compile(r"[\s\x00-\x1f\x7f<>\"{}|\\^`]")

MAX_HOSTNAME_LENGTH = 253


def is_valid_hostname(host: str) -> bool:
    """Check a host as either an IP address or a dotted sequence of DNS labels"""
    try:
        ipaddress.ip_address(host)
        return True
    except ValueError:
        pass

    if len(host) > MAX_HOSTNAME_LENGTH:
        return False

    labels = host[:-1].split(".") if host.endswith(".") else host.split(".")
    return all(LABEL_PATTERN.fullmatch(label) for label in labels)


def _split(url: str) -> Optional[SplitResult]:
    try:
        parsed = urlsplit(url)
        # Accessing port validates it; out-of-range or non-numeric ports raise
        parsed.port
    except ValueError:
        return None
    return parsed


def validate_url_format(url: str) -> bool:
    """
    Validate URL format.

    Args:
        url: URL string to validate

    Returns:
        True if valid, False if invalid
    """
    if not url or FORBIDDEN_CHARS.search(url):
        return False

    if "://" not in url:
        return False

    parsed = _split(url)
    if parsed is None:
        return False

    if not SCHEME_PATTERN.fullmatch(parsed.scheme):
        return False

    if not parsed.hostname:
        return False

    # IPv6 literals must be bracketed in the authority
    if ":" in parsed.hostname and "[" not in parsed.netloc:
        return False

    return is_valid_hostname(parsed.hostname)


class URLRule(Rule):
    """Absolute URL with a host"""

    kind = Kind.URL

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        text = as_text(value)
        if text is not None and validate_url_format(text):
            outcome.valid = True
            outcome.length = len(text)
