"""Command-line directive parsing.

Directives are applied left to right onto the settings derived from the
config file, so a later directive for the same failure class (or the same
list source) replaces an earlier one.
"""

from __future__ import annotations

import logging

from md5state.errors import Md5StateError
from md5state.filelist import FileListSource, FileSource, InlineSource, StdinSource
from md5state.policy import Abort, FailureClass, Omit, Substitute

from .models import Md5StateConfig
from .settings import Settings

logger = logging.getLogger(__name__)

USAGE = """\
Usage:
    md5state [options] [--] [arguments]

Options:
    --
        treat subsequent arguments as files
    -
        read filelist from stdin
    -i path
        read filelist from file specified by path
    -h algorithm
        checksum algorithm name (accepted; md5 is always used)
    -n string
        use string as the pseudo-checksum for nonexistent files (default: "[nonexistent]")
    -N
        fail if a file doesn't exist
    -n-
        omit nonexistent files from output
    -d string
        use string as the pseudo-checksum for filelist entries that are directories
    -D
        fail if an item is a directory
    -d-
        omit directories from output (default)
    -u string
        use string as the pseudo-checksum for existing but unreadable filelist entries
    -U
        fail on unreadable files (default)
    -u-
        omit unreadable filelist entries from output"""

_SUBSTITUTE_DIRECTIVES = {
    "-n": FailureClass.NONEXISTENT,
    "-d": FailureClass.DIRECTORY,
    "-u": FailureClass.UNREADABLE,
}

_FIXED_DIRECTIVES = {
    "-N": (FailureClass.NONEXISTENT, Abort()),
    "-n-": (FailureClass.NONEXISTENT, Omit()),
    "-D": (FailureClass.DIRECTORY, Abort()),
    "-d-": (FailureClass.DIRECTORY, Omit()),
    "-U": (FailureClass.UNREADABLE, Abort()),
    "-u-": (FailureClass.UNREADABLE, Omit()),
}


class UsageError(Md5StateError):
    """The command line could not be parsed."""


def _take_value(tokens: list[str], flag: str) -> str:
    if not tokens:
        raise UsageError(f"option '{flag}' requires a value")
    return tokens.pop(0)


def parse_command_line(argv: list[str], config: Md5StateConfig | None = None) -> Settings:
    """Build Settings from the config defaults plus the directives in *argv*.

    Raises UsageError on an unrecognized option or a missing option value.
    """
    config = config or Md5StateConfig()
    algorithm = config.algorithm
    policy = config.policy.to_policy()
    source: FileListSource = InlineSource()
    positional: list[str] = []

    tokens = list(argv)
    while tokens:
        token = tokens.pop(0)

        if token == "--":
            positional.extend(tokens)
            source = InlineSource()
            break
        elif token == "-":
            source = StdinSource()
        elif token == "-i":
            source = FileSource(_take_value(tokens, token))
        elif token == "-h":
            algorithm = _take_value(tokens, token)
        elif token in _SUBSTITUTE_DIRECTIVES:
            value = _take_value(tokens, token)
            policy = policy.with_disposition(_SUBSTITUTE_DIRECTIVES[token], Substitute(value))
        elif token in _FIXED_DIRECTIVES:
            failure, disposition = _FIXED_DIRECTIVES[token]
            policy = policy.with_disposition(failure, disposition)
        elif token.startswith("-"):
            raise UsageError(f"unrecognized option '{token}'")
        else:
            positional.append(token)

    if isinstance(source, InlineSource):
        source = InlineSource(tuple(positional))
    elif positional:
        logger.warning(
            "Ignoring %d path argument(s): the file list is read from %s",
            len(positional),
            "standard input" if isinstance(source, StdinSource) else source.path,
        )

    if algorithm != "md5":
        logger.debug("Algorithm %r requested; digests are md5", algorithm)

    return Settings(algorithm=algorithm, policy=policy, source=source)
