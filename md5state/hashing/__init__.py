"""Per-file hashing and report aggregation."""

from md5state.hashing.aggregator import format_report, generate_report, hash_files
from md5state.hashing.hasher import compute_digest, hash_file
from md5state.hashing.models import HashAbortError, HashRecord

__all__ = [
    "HashAbortError",
    "HashRecord",
    "compute_digest",
    "format_report",
    "generate_report",
    "hash_file",
    "hash_files",
]
