"""Small string helpers shared by services."""

import random
import string

LETTERS = string.ascii_letters


def rand_string(n: int) -> str:
    """Generate a random string of ``n`` ASCII letters."""
    return "".join(random.choice(LETTERS) for _ in range(max(n, 0)))


def default_if_empty(origin: str, default: str) -> str:
    """Return ``default`` if ``origin`` is empty."""
    if not origin:
        return default
    return origin


def _split_basic_auth(basic_auth: str):
    tokens = basic_auth.split(":")
    if len(tokens) != 2:
        return None
    return tokens


def get_username_from_basic_auth(basic_auth: str) -> str:
    """Extract username from basic auth formed as ``<username>:<password>``."""
    tokens = _split_basic_auth(basic_auth)
    return tokens[0] if tokens else ""


def get_password_from_basic_auth(basic_auth: str) -> str:
    """Extract password from basic auth formed as ``<username>:<password>``."""
    tokens = _split_basic_auth(basic_auth)
    return tokens[1] if tokens else ""


def extract_scheme_from_url(url: str) -> str:
    """Return ``http`` or ``https`` for matching URLs, empty string otherwise."""
    if url.startswith("http://"):
        return "http"
    if url.startswith("https://"):
        return "https"
    return ""
