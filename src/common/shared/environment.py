"""Environment, locale and host lookups.

Services are deployed per locale formed as ``<realm>::<region>::<az>::<domain>``,
read from the ``REALM``, ``REGION``, ``AZ`` and ``DOMAIN`` environment
variables. Unset variables are represented by the wildcard ``*``.

A config may carry entries for several locales and keep only the ones that
match the running process:

.. code-block:: yaml

    db:
      - name: redis-default
        locale: "*::*::*::*"
        addr: "192.0.0.1:6379"
      - name: redis-in-prod
        locale: "*::*::*::prod"
        addr: "176.0.0.1:6379"
"""

import ipaddress
import os
import socket
from typing import List

WILDCARD = "*"
LOCALE_SEPARATOR = "::"
LOCALE_ENV_KEYS = ("REALM", "REGION", "AZ", "DOMAIN")
LOCALHOST = "localhost"


def get_env_value_or_default(key: str, default: str) -> str:
    """Return ``default`` if the environment variable is empty or missing."""
    value = os.getenv(key, "")
    if not value:
        return default
    return value


def _locale_from_env() -> List[str]:
    return [get_env_value_or_default(key, WILDCARD) for key in LOCALE_ENV_KEYS]


def get_locale() -> str:
    """Return the locale of the running process, e.g. ``*::us-east::*::prod``."""
    return LOCALE_SEPARATOR.join(_locale_from_env())


def match_locale_with_env(locale: str) -> bool:
    """
    Check whether ``locale`` matches the locale of the running process.

    Each of the four tokens matches when it is the wildcard or equals the
    corresponding environment value.

    Args:
        locale: Locale string ``<realm>::<region>::<az>::<domain>``.

    Returns:
        False for empty or malformed locales, otherwise whether every token matches.
    """
    if not locale:
        return False

    tokens = locale.split(LOCALE_SEPARATOR)
    if len(tokens) != len(LOCALE_ENV_KEYS):
        return False

    return all(
        token == WILDCARD or token == from_env
        for token, from_env in zip(tokens, _locale_from_env())
    )


def get_local_ip() -> str:
    """
    Return the first non-loopback IPv4 address of this host.

    Resolution failures never raise; ``localhost`` is returned instead.
    """
    candidates: List[str] = []

    # Connecting a UDP socket sends nothing but selects the outbound interface
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("10.255.255.255", 1))
            candidates.append(sock.getsockname()[0])
    except OSError:
        pass

    try:
        candidates.extend(
            info[4][0]
            for info in socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
        )
    except OSError:
        pass

    for candidate in candidates:
        try:
            address = ipaddress.IPv4Address(candidate)
        except ValueError:
            continue
        if not address.is_loopback and not address.is_unspecified:
            return candidate

    return LOCALHOST


def get_local_hostname() -> str:
    """Return the hostname, or empty string if it can't be resolved."""
    try:
        return socket.gethostname() or ""
    except OSError:
        return ""
