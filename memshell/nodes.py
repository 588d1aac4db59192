"""Nodes of the in-memory file system: directories, files and their metadata."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass


def _now() -> int:
    return int(time.time())


@dataclass
class Metadata:
    """Timestamps (seconds since the epoch) and recorded size of a node."""

    creation_time: int
    modification_time: int
    size: int = 0


class Node(ABC):
    """A named entry in the tree, optionally attached to a parent directory."""

    def __init__(self, name: str, parent: Directory | None = None) -> None:
        self.name = name
        self.parent = parent
        now = _now()
        self.metadata = Metadata(creation_time=now, modification_time=now)

    @abstractmethod
    def is_directory(self) -> bool:
        """Return True when the node is a directory."""

    def size(self) -> int:
        """Size of the node's content in bytes."""
        return 0

    def _mark_modified(self) -> None:
        self.metadata.modification_time = _now()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Directory(Node):
    """A node holding uniquely named children, listed in name order."""

    def __init__(self, name: str, parent: Directory | None = None) -> None:
        super().__init__(name, parent)
        self._children: dict[str, Node] = {}

    def is_directory(self) -> bool:
        return True

    def size(self) -> int:
        """Total size of everything below this directory."""
        return sum(child.size() for child in self._children.values())

    def add_child(self, node: Node) -> None:
        """Attach ``node`` to this directory.

        Raises FileExistsError if a child of that name is already present.
        """
        if node.name in self._children:
            raise FileExistsError(f"'{node.name}' already exists")
        node.parent = self
        self._children[node.name] = node
        self._mark_modified()

    def remove_child(self, name: str) -> None:
        """Detach the child called ``name``.

        Raises FileNotFoundError if there is no such child.
        """
        try:
            del self._children[name]
        except KeyError:
            raise FileNotFoundError(f"'{name}' not found") from None
        self._mark_modified()

    def get_child(self, name: str) -> Node | None:
        """Return the child called ``name``, or None."""
        return self._children.get(name)

    def list_children(self) -> list[str]:
        """Names of the children in sorted order."""
        return sorted(self._children)


class File(Node):
    """A node holding text content."""

    def __init__(self, name: str, parent: Directory | None = None) -> None:
        super().__init__(name, parent)
        self._content = ""

    def is_directory(self) -> bool:
        return False

    def size(self) -> int:
        return len(self._content.encode("utf-8"))

    def read(self) -> str:
        """Return the file's content."""
        return self._content

    def write(self, data: str) -> None:
        """Replace the content with ``data``."""
        self._content = data
        self._changed()

    def append(self, data: str) -> None:
        """Add ``data`` to the end of the content."""
        self._content += data
        self._changed()

    def empty(self) -> None:
        """Clear the content."""
        self._content = ""
        self._changed()

    def _changed(self) -> None:
        self._mark_modified()
        self.metadata.size = self.size()