from enum import Enum
from pydantic import BaseModel, Field
from .review import Side


class ChangeKind(str, Enum):
    CONTEXT = "context"
    ADDITION = "addition"
    DELETION = "deletion"


class Change(BaseModel):
    kind: ChangeKind
    content: str
    # target line for context/addition, source line for deletion
    line_number: int

    @property
    def side(self) -> Side:
        return Side.LEFT if self.kind == ChangeKind.DELETION else Side.RIGHT


class Chunk(BaseModel):
    changes: list[Change] = Field(default_factory=list)


class DiffFile(BaseModel):
    path: str
    chunks: list[Chunk] = Field(default_factory=list)

    @property
    def changes(self) -> list[Change]:
        return [change for chunk in self.chunks for change in chunk.changes]

    def has_line(self, line: int, side: Side) -> bool:
        """Check whether a comment anchored at (line, side) lands inside the diff."""
        return any(
            change.line_number == line and change.side == side
            for change in self.changes
        )
