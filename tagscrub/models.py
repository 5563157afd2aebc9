"""Data models for tagscrub."""

from typing import Dict, Any, List
from pydantic import BaseModel, Field


class CleanedField(BaseModel):
    """A single metadata value before and after cleaning."""

    field: str = "common"  # 'album', 'track', 'artists' or 'common'
    original: str
    cleaned: List[str] = Field(default_factory=list)

    def __str__(self) -> str:
        """String representation of the cleaned value(s)."""
        return "; ".join(self.cleaned)

    @property
    def changed(self) -> bool:
        """Whether cleaning altered the original value."""
        return self.cleaned != [self.original]

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to a JSON-friendly dictionary."""
        return {
            "field": self.field,
            "original": self.original,
            "cleaned": list(self.cleaned),
        }
