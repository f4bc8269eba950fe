"""Findings reported while checking ESH-INF descriptors."""

from dataclasses import dataclass, field

# Origin of a diagnostic
SOURCE_STRUCTURE = "structure"
SOURCE_CONTENT = "content"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single finding anchored at a line of a file."""

    line: int
    message: str
    path: str
    source: str = SOURCE_STRUCTURE

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "line": self.line,
            "message": self.message,
            "source": self.source,
        }


@dataclass(slots=True)
class DiagnosticCollector:
    """In-memory diagnostics sink."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(
        self, line: int, message: str, path: str, source: str = SOURCE_STRUCTURE
    ) -> None:
        self.diagnostics.append(Diagnostic(line, message, str(path), source))

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self):
        yield from self.diagnostics
