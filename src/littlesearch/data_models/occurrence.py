from pydantic import BaseModel, ConfigDict, Field


class Occurrence(BaseModel):
    """How many times one keyword appears in one document."""

    model_config = ConfigDict(frozen=True)

    doc_id: str = Field(min_length=1)
    frequency: int = Field(ge=1)
