"""
Data-parallel helpers for per-row and per-line work.

Work is split into disjoint partitions of an axis. Every task reads from
shared input and writes only to the output region of its own partition, so
no locking is needed: the helpers only wait for all tasks to finish.
Exceptions raised by a task propagate to the caller.
"""

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor


def partition(length: int, size: int) -> list[slice]:
    """
    Split `range(length)` into consecutive slices of at most `size` items.

    :param length: Number of items to partition.
    :param size: Maximum number of items per slice, must be positive.
    :returns: List of slices covering `range(length)` without overlap.
    """
    if size <= 0:
        raise ValueError(f"Partition size must be positive, got {size}")
    return [slice(start, min(start + size, length)) for start in range(0, length, size)]


def run_partitioned(
    task: Callable[[slice], None], partitions: Sequence[slice], max_workers: int
) -> None:
    """
    Run `task` once for every partition and wait for all of them.

    With a single worker (or a single partition) the tasks run inline.
    """
    if max_workers <= 1 or len(partitions) <= 1:
        for part in partitions:
            task(part)
        return
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(task, part) for part in partitions]
        for future in futures:
            future.result()
