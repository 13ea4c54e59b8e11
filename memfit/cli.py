"""Interactive menu for placing programs in a simulated memory."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from memfit.memory import AllocationError, Memory, Strategy

CAPACITY = 500
RULE = "-------------------------------------------"

_LABELS = {
    Strategy.FIRST: "First fit",
    Strategy.BEST: "Best fit",
    Strategy.WORST: "Worst fit",
}


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _show(memory: Memory, out: TextIO) -> None:
    out.write(f"\n{memory.render()}\n\n")


def run(strategy: Strategy | str, lines: Iterable[str], out: TextIO) -> Memory:
    """Drive the menu from ``lines`` of input, writing to ``out``; return the final memory."""
    strategy = Strategy(strategy)
    memory = Memory(CAPACITY)
    tokens = _tokens(lines)
    menu = (
        f"1) {_LABELS[strategy]} \n2) Deallocate Memory \n3) Compaction \n"
        "4) Display Memory \n5) Exit\n"
    )

    out.write(f"{RULE}\nMax Size: {memory.capacity}\n")
    while True:
        out.write(f"{RULE}\nWhat do you want to do?\n{menu}Enter your choice: ")
        choice = next(tokens, None)
        if choice is None or choice == "5":
            break

        try:
            if choice == "1":
                out.write("Enter Program ID: ")
                pid = next(tokens, None)
                if pid is None:
                    break
                out.write("Enter size: ")
                raw_size = next(tokens, None)
                if raw_size is None:
                    break
                try:
                    size = int(raw_size)
                    if size < 0:
                        raise ValueError(raw_size)
                except ValueError:
                    out.write("Invalid Input!\n")
                    continue
                memory.allocate(pid, size, strategy)
                _show(memory, out)
                out.write(f"Memory allocated to PID: {pid} successfully!\n")
            elif choice == "2":
                out.write("Enter Program ID: ")
                pid = next(tokens, None)
                if pid is None:
                    break
                memory.deallocate(pid)
                _show(memory, out)
                out.write("Memory deallocated successfully!\n")
            elif choice == "3":
                memory.compact()
                _show(memory, out)
                out.write("Compaction done successfully!\n")
            elif choice == "4":
                _show(memory, out)
            else:
                out.write("Invalid Input!\n")
        except AllocationError as error:
            out.write(f"{error}\n")

    out.write(RULE)
    return memory


def main(argv: list[str] | None = None) -> int:
    """Start the interactive allocator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="memfit", description="Simulate contiguous memory allocation."
    )
    parser.add_argument(
        "strategy",
        nargs="?",
        default=Strategy.FIRST.value,
        choices=[s.value for s in Strategy],
        help="placement strategy (default: first)",
    )
    args = parser.parse_args(argv)
    run(Strategy(args.strategy), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())