from pydantic import BaseModel, ConfigDict


class Doc(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: str
    text: str  # whitespace-delimited raw tokens
