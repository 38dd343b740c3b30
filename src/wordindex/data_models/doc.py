from pydantic import BaseModel, ConfigDict


class Doc(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: str
    text: str  # plain text, one or more lines
    title: str | None = None
