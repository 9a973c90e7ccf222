"""Identifier generation for components that coordinate through HTML ids.

Tokens derive from :func:`uuid.uuid4`, which draws from the operating
system's randomness and is safe to call from concurrent render threads.
"""

from __future__ import annotations

import hashlib
import re
import uuid

from ._constants import GROUP_ID_PREFIX, GROUP_ID_TOKEN_LENGTH

PREFIX_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


def truncated_hash(value: str, length: int = GROUP_ID_TOKEN_LENGTH) -> str:
    """Return the first ``length`` hex characters of a BLAKE2s digest of ``value``."""
    digest = hashlib.blake2s(value.encode("utf-8")).hexdigest()
    return digest[:length]


def make_token(length: int = GROUP_ID_TOKEN_LENGTH) -> str:
    """Return a fresh identifier-safe token."""
    return truncated_hash(str(uuid.uuid4()), length)


def make_group_id(prefix: str = GROUP_ID_PREFIX) -> str:
    """Return a new group identity such as ``accordion3f9c0a1b2d4e5f60``.

    Parameters
    ----------
    prefix : str, optional
        Literal placed before the token so the result is a valid HTML id.
        Must start with a letter.

    Raises
    ------
    ValueError
        If ``prefix`` would not produce a valid id.
    """
    if not PREFIX_PATTERN.match(prefix):
        msg = f"Group id prefix {prefix!r} must start with a letter."
        raise ValueError(msg)
    return f"{prefix}{make_token()}"


__all__ = ["make_group_id", "make_token", "truncated_hash"]
