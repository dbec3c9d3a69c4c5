"""Fixed-capacity list of integers and an interactive menu for it."""

import sys
from typing import Iterator, List, Optional, Sequence

from treebench.errors import StructureError


class ArrayList:
    """A list that holds at most ``capacity`` integers."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def insert(self, value: int) -> None:
        """Append ``value``; raise StructureError when the list is full."""
        if len(self._items) == self.capacity:
            raise StructureError("List is full. Can't insert")
        self._items.append(value)

    def remove(self, index: int) -> None:
        """Remove the element at ``index``, shifting later ones down."""
        if not 0 <= index < len(self._items):
            raise IndexError("Index is out of bounds")
        del self._items[index]

    def search(self, value: int) -> Optional[int]:
        """Index of the first occurrence of ``value``, or None."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        return None

    def display(self) -> str:
        """The elements in order, each followed by a space."""
        return "".join(f"{item} " for item in self._items)


_MENU = (
    "\nArray Implementation of Lists :)\n"
    "1. Insert\n"
    "2. Remove\n"
    "3. Search\n"
    "4. Display\n"
    "5. Exit\n"
)


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the menu, reading whitespace-separated integers from standard input."""
    array = ArrayList(10)
    tokens = _tokens()

    def read_int(prompt: str = "") -> Optional[int]:
        if prompt:
            print(prompt, end="")
        token = next(tokens, None)
        if token is None:
            return None
        try:
            return int(token)
        except ValueError:
            return -1 if not prompt else None

    while True:
        print(_MENU)
        token = next(tokens, None)
        if token is None:
            return 0
        try:
            choice = int(token)
        except ValueError:
            choice = 0
        if choice == 1:
            data = read_int("What value do you want to insert:  ")
            if data is None:
                print("Invalid value")
                continue
            try:
                array.insert(data)
            except StructureError as error:
                print(error)
        elif choice == 2:
            index = read_int("Which index do you want to remove:  ")
            if index is None:
                print("Invalid value")
                continue
            try:
                array.remove(index)
            except IndexError as error:
                print(error)
        elif choice == 3:
            data = read_int("Which value do you want to search:  ")
            if data is None:
                print("Invalid value")
                continue
            found = array.search(data)
            print(f"Found at:  {found if found is not None else -1}")
        elif choice == 4:
            print(array.display())
        elif choice == 5:
            print("See you")
            return 0
        else:
            print("Invalid choice")


if __name__ == "__main__":
    sys.exit(main())