"""Interactive menu for editing a singly linked list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import IO, TextIO

from structkit.singly import SinglyLinkedList

MENU = (
    "1: Insert at tail\n"
    "2: Print linked list\n"
    "3: Insert at any position\n"
    "4: Insert at head\n"
    "5: Delete at position\n"
    "6: Delete head\n"
    "7: Terminate\n"
)


class _EndOfInput(Exception):
    pass


def _tokens(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run_session(stream: IO[str], out: TextIO) -> SinglyLinkedList:
    """Run menu commands read from stream, writing prompts and results to out.

    The session ends on option 7 or at the end of input; the list as it
    stands then is returned.
    """
    items = SinglyLinkedList()
    tokens = _tokens(stream)

    def read_int(prompt: str = "") -> int:
        out.write(prompt)
        try:
            token = next(tokens)
        except StopIteration:
            raise _EndOfInput from None
        return int(token)

    def delete_head() -> None:
        try:
            items.delete_head()
        except IndexError:
            out.write("head is not available\n")
        else:
            out.write("deleted the head\n")

    try:
        while True:
            out.write(MENU)
            option = read_int()
            if option == 1:
                value = read_int("Enter value: ")
                was_empty = items.head is None
                items.append(value)
                out.write("inserted at head\n" if was_empty else "inserted at tail\n")
            elif option == 2:
                out.write("your linked list: " + " ".join(map(str, items)) + "\n")
            elif option == 3:
                position = read_int("Enter position: ")
                value = read_int("Enter value: ")
                try:
                    items.insert(position, value)
                except IndexError:
                    out.write("invalid index\n")
                else:
                    if position == 0:
                        out.write("inserted at head\n")
                    else:
                        out.write(f"inserted at position {position}\n")
            elif option == 4:
                items.prepend(read_int("Enter value for head: "))
                out.write("inserted at head\n")
            elif option == 5:
                position = read_int("Enter position: ")
                if position == 0:
                    delete_head()
                else:
                    try:
                        items.delete_at(position)
                    except IndexError:
                        out.write("invalid index\n")
                    else:
                        out.write(f"deleted the position {position}\n")
            elif option == 6:
                delete_head()
            elif option == 7:
                break
            else:
                out.write("Invalid option! Try again.\n")
    except _EndOfInput:
        pass
    return items


def main(argv: list[str] | None = None) -> int:
    """Run the linked-list menu on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Edit a singly linked list through a numbered menu."
    )
    parser.parse_args(argv)
    run_session(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())