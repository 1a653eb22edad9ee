"""Hash a single listed file, applying the recovery policy on failure."""

from __future__ import annotations

import asyncio
import hashlib
import logging
from md5state.hashing.models import HashAbortError, HashRecord
from md5state.policy import Omit, Policy, Substitute, classify_os_error

logger = logging.getLogger(__name__)


def compute_digest(content: bytes) -> str:
    """MD5 hash of *content* as lower-case hex."""
    return hashlib.md5(content, usedforsecurity=False).hexdigest()


def _read_content(path: str) -> bytes:
    """Read *path* as UTF-8 text and return the text re-encoded.

    Undecodable bytes become U+FFFD, so the digest is taken over the text
    as decoded rather than over the raw bytes. The path is opened exactly
    as given, without normalization.
    """
    with open(path, "rb") as f:
        raw = f.read()
    text = raw.decode("utf-8", errors="replace")
    return text.encode("utf-8")


async def hash_file(path: str, policy: Policy) -> HashRecord | None:
    """Hash one file.

    Returns a HashRecord (with a real digest or a substitute), or None when
    the failure is configured to be omitted. Raises HashAbortError for
    aborting and unclassified failures.
    """
    try:
        content = await asyncio.to_thread(_read_content, path)
    except OSError as e:
        return _recover(path, policy, e)
    except ValueError as e:
        # Paths the OS cannot represent, such as ones with a NUL byte
        raise HashAbortError(path, e) from e
    return HashRecord(path=path, digest=compute_digest(content))


def _recover(path: str, policy: Policy, error: OSError) -> HashRecord | None:
    failure = classify_os_error(error)
    if failure is None:
        raise HashAbortError(path, error) from error

    disposition = policy.disposition_for(failure)
    if isinstance(disposition, Substitute):
        logger.debug("Substituting %r for %s (%s)", disposition.text, path, failure.value)
        return HashRecord(path=path, digest=disposition.text)
    if isinstance(disposition, Omit):
        logger.debug("Omitting %s (%s)", path, failure.value)
        return None
    raise HashAbortError(path, error, failure) from error
