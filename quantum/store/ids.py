"""Identifier generation for workspace entities."""

import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase
_SUFFIX_LENGTH = 7


def new_id(prefix: str) -> str:
    """
    Create a fresh identifier scoped by an entity-kind prefix.

    The identifier combines the current time in milliseconds with a random
    base36 suffix, e.g. ``page-1735689600000-k3v9q2a``.

    Args:
        prefix: Entity kind, such as "page" or "block"

    Returns:
        A new identifier string
    """
    suffix = ''.join(secrets.choice(_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return f"{prefix}-{int(time.time() * 1000)}-{suffix}"
