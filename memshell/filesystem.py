"""An in-memory hierarchical file system with a current working directory."""

from __future__ import annotations

import time

from memshell.nodes import Directory, File, Node

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def split_path(path: str) -> list[str]:
    """Split a slash-separated path into its non-empty components."""
    return [part for part in path.split("/") if part]


def join_path(parts: list[str]) -> str:
    """Join components into an absolute path; an empty list gives ''."""
    return "".join("/" + part for part in parts)


class FileSystem:
    """A tree of directories and files rooted at '/'."""

    def __init__(self) -> None:
        self.root = Directory("")
        self._cwd: Directory = self.root

    @property
    def current_directory(self) -> Directory:
        return self._cwd

    def resolve(self, path: str) -> Node | None:
        """Return the node at ``path``, or None if it does not exist.

        An empty path is the current directory; a leading '/' starts at
        the root. '.' is skipped and '..' moves up, stopping at the top.
        """
        if not path:
            return self._cwd
        node: Node = self.root if path.startswith("/") else self._cwd
        for part in split_path(path):
            if part == ".":
                continue
            if part == "..":
                if node.parent is not None:
                    node = node.parent
                continue
            if not isinstance(node, Directory):
                return None
            child = node.get_child(part)
            if child is None:
                return None
            node = child
        return node

    def current_path(self) -> str:
        """Absolute path of the current directory."""
        names = []
        node: Node | None = self._cwd
        while node is not None and node is not self.root:
            names.append(node.name)
            node = node.parent
        if not names:
            return "/"
        return join_path(list(reversed(names)))

    def _parent_and_name(self, path: str) -> tuple[Directory, str]:
        parts = split_path(path)
        if not parts:
            raise ValueError("empty path")
        name = parts.pop()
        parent = self.resolve(join_path(parts))
        if parent is None:
            raise FileNotFoundError(f"no such directory: '{join_path(parts)}'")
        if not isinstance(parent, Directory):
            raise NotADirectoryError(f"not a directory: '{join_path(parts)}'")
        return parent, name

    def _file(self, path: str) -> File:
        node = self.resolve(path)
        if node is None:
            raise FileNotFoundError(f"no such file: '{path}'")
        if not isinstance(node, File):
            raise IsADirectoryError(f"is a directory: '{path}'")
        return node

    def mkdir(self, path: str) -> None:
        """Create a directory at ``path``."""
        parent, name = self._parent_and_name(path)
        parent.add_child(Directory(name, parent))

    def touch(self, path: str) -> None:
        """Create an empty file at ``path``."""
        parent, name = self._parent_and_name(path)
        parent.add_child(File(name, parent))

    def ls(self, path: str = "") -> list[str]:
        """List a directory's entries, or a file's own name.

        A path that does not exist gives an empty list.
        """
        node = self.resolve(path)
        if node is None:
            return []
        if isinstance(node, Directory):
            return node.list_children()
        return [node.name]

    def cat(self, path: str) -> str:
        """Content of the file at ``path``; '' if it is missing or a directory."""
        node = self.resolve(path)
        if isinstance(node, File):
            return node.read()
        return ""

    def empty(self, path: str) -> None:
        """Clear the content of the file at ``path``."""
        self._file(path).empty()

    def append(self, path: str, content: str) -> None:
        """Append ``content`` to the file at ``path``."""
        self._file(path).append(content)

    def rm(self, path: str) -> None:
        """Remove the entry at ``path``, whatever its kind."""
        parent, name = self._parent_and_name(path)
        parent.remove_child(name)

    def rmdir(self, path: str) -> None:
        """Remove the empty directory at ``path``."""
        node = self.resolve(path)
        if node is None:
            raise FileNotFoundError(f"no such directory: '{path}'")
        if not isinstance(node, Directory):
            raise NotADirectoryError(f"not a directory: '{path}'")
        if node.list_children():
            raise OSError(f"directory not empty: '{path}'")
        if node.parent is None:
            raise PermissionError("cannot remove the root directory")
        node.parent.remove_child(node.name)

    def cd(self, path: str) -> None:
        """Make the directory at ``path`` the current directory."""
        target = self.resolve(path)
        if target is None:
            raise FileNotFoundError(f"no such directory: '{path}'")
        if not isinstance(target, Directory):
            raise NotADirectoryError(f"not a directory: '{path}'")
        self._cwd = target

    def metadata_report(self, path: str) -> str:
        """Describe the node at ``path``: name, type, size and timestamps."""
        node = self.resolve(path)
        if node is None:
            raise FileNotFoundError("File or directory not found")
        created = time.strftime(_TIME_FORMAT, time.localtime(node.metadata.creation_time))
        modified = time.strftime(
            _TIME_FORMAT, time.localtime(node.metadata.modification_time)
        )
        return "\n".join(
            [
                f"Name: {node.name}",
                f"Type: {'Directory' if node.is_directory() else 'File'}",
                f"Size: {node.size()} bytes",
                f"Created: {created}",
                f"Modified: {modified}",
            ]
        )