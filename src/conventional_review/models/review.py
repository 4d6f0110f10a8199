from dataclasses import dataclass
from enum import Enum
from pydantic import BaseModel, Field


class Side(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class ReviewComment(BaseModel):
    body: str = Field(min_length=1)
    path: str
    line: int = Field(gt=0)
    side: Side


class PartialComment(BaseModel):
    """Comment recovered from a tool call with one or more fields missing."""
    path: str
    body: str | None = None
    line: int | None = None
    side: Side | None = None

    @property
    def missing_fields(self) -> list[str]:
        return [name for name in ("line", "body", "side") if getattr(self, name) is None]


@dataclass(frozen=True)
class RawToolCall:
    name: str
    arguments: str
