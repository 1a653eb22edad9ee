"""md5state: checksum reports for file lists, with per-failure recovery policies."""

__version__ = "0.1.0"
