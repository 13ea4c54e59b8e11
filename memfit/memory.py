"""Contiguous memory allocation with first-, best- and worst-fit placement."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass


class Strategy(enum.Enum):
    """How a hole is chosen for a new program."""

    FIRST = "first"
    BEST = "best"
    WORST = "worst"


@dataclass(frozen=True)
class Block:
    """A contiguous region of memory; ``pid`` is ``None`` for a free hole."""

    pid: str | None
    size: int
    start: int

    @property
    def end(self) -> int:
        return self.start + self.size

    @property
    def is_free(self) -> bool:
        return self.pid is None

    def __str__(self) -> str:
        label = "FREE" if self.is_free else f"PID: {self.pid}"
        return f"[{label}, Size: {self.size}, Start: {self.start}, End: {self.end}]"


class AllocationError(Exception):
    """Base class for memory management failures."""


class NotEnoughSpace(AllocationError):
    def __init__(self, message: str = "Not enough space!") -> None:
        super().__init__(message)


class CompactionNeeded(AllocationError):
    def __init__(self, message: str = "Need to do Compaction!") -> None:
        super().__init__(message)


class UnknownProgram(AllocationError):
    def __init__(self, message: str = "No such Program exists!") -> None:
        super().__init__(message)


class MemoryFull(AllocationError):
    def __init__(self, message: str = "Memory is full!") -> None:
        super().__init__(message)


class Memory:
    """An ordered list of allocated blocks and free holes covering the capacity."""

    def __init__(self, capacity: int = 500) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._blocks: list[Block] = [Block(None, capacity, 0)]
        self._free = capacity

    @property
    def blocks(self) -> tuple[Block, ...]:
        return tuple(self._blocks)

    @property
    def free_size(self) -> int:
        return self._free

    def __iter__(self) -> Iterator[Block]:
        return iter(tuple(self._blocks))

    def allocate(self, pid: str, size: int, strategy: Strategy = Strategy.FIRST) -> Block:
        """Place a program of ``size`` units in a hole chosen by ``strategy``."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size > self._free:
            raise NotEnoughSpace()
        candidates = [
            (index, block)
            for index, block in enumerate(self._blocks)
            if block.is_free and block.size >= size
        ]
        if not candidates:
            raise CompactionNeeded()

        if strategy is Strategy.FIRST:
            index, hole = candidates[0]
        elif strategy is Strategy.BEST:
            index, hole = min(candidates, key=lambda item: item[1].size)
        elif strategy is Strategy.WORST:
            index, hole = max(candidates, key=lambda item: item[1].size)
        else:
            raise ValueError(f"unknown strategy: {strategy!r}")

        placed = Block(pid, size, hole.start)
        replacement = [placed]
        remaining = hole.size - size
        if remaining:
            replacement.append(Block(None, remaining, placed.end))
        self._blocks[index : index + 1] = replacement
        self._free -= size
        return placed

    def deallocate(self, pid: str) -> Block:
        """Free the first block owned by ``pid`` and merge it with free neighbours."""
        index = next(
            (i for i, block in enumerate(self._blocks) if not block.is_free and block.pid == pid),
            None,
        )
        if index is None:
            raise UnknownProgram()

        block = self._blocks[index]
        self._free += block.size
        low, high = index, index + 1
        start, size = block.start, block.size

        if high < len(self._blocks) and self._blocks[high].is_free:
            size += self._blocks[high].size
            high += 1
        if low > 0 and self._blocks[low - 1].is_free:
            start = self._blocks[low - 1].start
            size += self._blocks[low - 1].size
            low -= 1

        merged = Block(None, size, start)
        self._blocks[low:high] = [merged]
        return merged

    def compact(self) -> None:
        """Move all programs to the bottom of memory and gather free space at the top."""
        if self._free == 0:
            raise MemoryFull()
        compacted: list[Block] = []
        position = 0
        for block in self._blocks:
            if block.is_free:
                continue
            compacted.append(Block(block.pid, block.size, position))
            position += block.size
        compacted.append(Block(None, self._free, position))
        self._blocks = compacted

    def render(self) -> str:
        """The memory map as a chain of blocks ending in NULL."""
        return " -> ".join([*(str(block) for block in self._blocks), "NULL"])