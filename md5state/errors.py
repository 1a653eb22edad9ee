"""Base exception for errors that end a run."""


class Md5StateError(Exception):
    """Raised for any failure that must abort the whole report."""
