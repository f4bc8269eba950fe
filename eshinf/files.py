"""Candidate files handed to the ESH-INF check"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class CandidateFile:
    """A file path together with its already-read text."""

    path: Path
    text: str

    @classmethod
    def from_path(cls, path: Path, charset: str = "utf-8") -> "CandidateFile":
        return cls(Path(path), Path(path).read_text(encoding=charset))

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return self.path.suffix[1:]

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()

    @property
    def parent_directory_name(self) -> str:
        return self.path.parent.name

    @property
    def grandparent_directory_name(self) -> str:
        return self.path.parent.parent.name

    @property
    def is_empty(self) -> bool:
        """True when the file has no lines or only blank ones."""
        return all(not line.strip() for line in self.lines)


def has_extension(path: Path, extensions: Iterable[str]) -> bool:
    """Check a file name extension, without the dot and case-sensitively."""
    return Path(path).suffix[1:] in set(extensions)


def iter_candidate_files(root: Path, extensions: Iterable[str]) -> Iterator[Path]:
    """Yield the files below ``root`` carrying one of ``extensions``, sorted.

    ``root`` may also be a single file, which is yielded if it matches.
    """
    root = Path(root)
    extensions = set(extensions)

    if root.is_file():
        if has_extension(root, extensions):
            yield root
        return

    for path in sorted(root.rglob("*")):
        if path.is_file() and has_extension(path, extensions):
            yield path
