"""
Static partitioning of the global index range across workers.
"""

from typing import List, NamedTuple

from pdf_bruteforce.utils.exceptions import ConfigError


class Chunk(NamedTuple):
    """Contiguous index range ``[start, end)`` owned by one worker"""
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start


def partition(total: int, worker_count: int) -> List[Chunk]:
    """Split ``[0, total)`` into at most ``worker_count`` balanced chunks

    The first ``total % worker_count`` chunks get one extra index. Workers
    beyond ``total`` receive no chunk.
    """
    if worker_count < 1:
        raise ConfigError(f"Worker count must be at least 1 (got {worker_count})")
    if total < 0:
        raise ValueError(f"Total must not be negative: {total}")

    count = min(worker_count, total)
    if count == 0:
        return []

    size, extra = divmod(total, count)
    chunks = []
    start = 0
    for i in range(count):
        end = start + size + (1 if i < extra else 0)
        chunks.append(Chunk(start, end))
        start = end
    return chunks
