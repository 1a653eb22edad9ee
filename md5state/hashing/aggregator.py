"""Fan out hashing over the whole list and assemble the report."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from md5state.hashing.hasher import hash_file
from md5state.hashing.models import HashRecord
from md5state.policy import Policy

logger = logging.getLogger(__name__)


async def hash_files(paths: Sequence[str], policy: Policy) -> list[HashRecord]:
    """Hash every path concurrently and return records in input order.

    Omitted entries are dropped. If any entry fails, the failure with the
    lowest input index is raised. Pending tasks after that index are
    cancelled as soon as a failure is seen; earlier ones still run, since
    one of them could fail too and would then take precedence.
    """
    tasks = [asyncio.create_task(hash_file(path, policy)) for path in paths]
    index = {task: i for i, task in enumerate(tasks)}
    failed_at: int | None = None
    pending = set(tasks)

    try:
        while pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            for task in done:
                if task.cancelled() or task.exception() is None:
                    continue
                if failed_at is None or index[task] < failed_at:
                    failed_at = index[task]
            if failed_at is not None:
                for task in pending:
                    if index[task] > failed_at:
                        task.cancel()
    finally:
        for task in pending:
            task.cancel()

    if failed_at is not None:
        error = tasks[failed_at].exception()
        logger.debug("Run aborted at entry %d: %s", failed_at, error)
        raise error

    return [record for record in (task.result() for task in tasks) if record is not None]


def format_report(records: Sequence[HashRecord]) -> str:
    """Render one ``<digest>  <path>`` line per record, plus a trailing blank line."""
    return "\n".join(record.render() for record in records) + "\n"


async def generate_report(paths: Sequence[str], policy: Policy) -> str:
    """Hash *paths* under *policy* and return the formatted report."""
    return format_report(await hash_files(paths, policy))
