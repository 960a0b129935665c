"""Data models for name frequency tables."""

from pydantic import BaseModel, ConfigDict, Field


class NameEntry(BaseModel):
    """One parsed dataset line: a name and its observed frequency."""

    model_config = ConfigDict(frozen=True)

    name: str
    count: int = Field(ge=0)

    def __str__(self) -> str:
        return self.name


class WeightedEntry(NameEntry):
    """A NameEntry paired with the probability from a computed distribution."""

    probability: float = Field(ge=0.0, le=1.0)
