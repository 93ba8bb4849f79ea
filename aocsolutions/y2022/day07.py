"""No space left on device: rebuild a directory tree from a terminal session."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

_LIMIT = 100_000
_TOTAL_SPACE = 70_000_000
_NEEDED_SPACE = 30_000_000


@dataclass(frozen=True)
class File:
    """A file listed by ``ls``."""

    name: str
    size: int


@dataclass
class Dir:
    """A directory holding files and subdirectories."""

    name: str
    files: list[File] = field(default_factory=list)
    directories: list[Dir] = field(default_factory=list)
    parent: Dir | None = field(default=None, repr=False, compare=False)

    def size(self) -> int:
        """Total size of all files in this directory and below."""
        return sum(f.size for f in self.files) + sum(
            d.size() for d in self.directories
        )

    def walk(self) -> Iterator[Dir]:
        """Yield this directory and every directory below it, breadth first."""
        queue = deque([self])
        while queue:
            current = queue.popleft()
            yield current
            queue.extend(current.directories)


@dataclass(frozen=True)
class Cd:
    """Change directory; ``/`` is the root and ``..`` the parent."""

    target: str


@dataclass(frozen=True)
class Ls:
    """List directory, holding the lines it printed."""

    output: tuple[str, ...]


def _parse_command(chunk: str) -> Cd | Ls:
    if chunk.startswith("cd"):
        parts = chunk.split(" ")
        if len(parts) < 2:
            raise ValueError(f"cd without a target: {chunk!r}")
        return Cd(parts[1])
    if chunk.startswith("ls"):
        return Ls(tuple(chunk.splitlines()[1:]))
    raise ValueError(f"unknown command: {chunk!r}")


def parse_commands(text: str) -> list[Cd | Ls]:
    """Split a terminal session into its commands."""
    return [_parse_command(chunk.strip()) for chunk in text.split("$")[1:]]


def _parse_file(line: str) -> File:
    parts = line.split(" ")
    if len(parts) < 2:
        raise ValueError(f"invalid file entry: {line!r}")
    return File(name=parts[1], size=int(parts[0]))


def _parse_dir(line: str) -> Dir:
    parts = line.split(" ")
    if len(parts) < 2:
        raise ValueError(f"invalid directory entry: {line!r}")
    return Dir(parts[1])


def build_tree(commands: Iterable[Cd | Ls]) -> Dir:
    """Replay the commands (the first is taken to be ``cd /``) into a tree."""
    root = Dir("/")
    current = root
    remaining = iter(commands)
    next(remaining, None)

    for command in remaining:
        if isinstance(command, Cd):
            if command.target == "/":
                current = root
            elif command.target == "..":
                if current.parent is None:
                    raise ValueError(f"directory {current.name!r} has no parent")
                current = current.parent
            else:
                found = next(
                    (d for d in current.directories if d.name == command.target),
                    None,
                )
                current = found if found is not None else Dir(command.target)
        else:
            for line in command.output:
                if line.startswith("dir"):
                    directory = _parse_dir(line)
                    directory.parent = current
                    current.directories.append(directory)
                else:
                    current.files.append(_parse_file(line))
    return root


def parse(text: str) -> Dir:
    """Build the directory tree described by a terminal session."""
    return build_tree(parse_commands(text))


class Day07:
    def solve_a(self, text: str) -> int:
        """Sum of the sizes of directories no larger than 100000."""
        sizes = (d.size() for d in parse(text).walk())
        return sum(size for size in sizes if size <= _LIMIT)

    def solve_b(self, text: str) -> int:
        """Size of the smallest directory whose deletion frees enough space."""
        root = parse(text)
        used = root.size()
        if used > _TOTAL_SPACE:
            raise ValueError("used space exceeds the disk size")
        unused = _TOTAL_SPACE - used
        sizes = (d.size() for d in root.walk())
        return min(size for size in sizes if size + unused >= _NEEDED_SPACE)