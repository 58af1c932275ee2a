from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator

from reflections_api.services.documents import load_document

# Stored as JSON text, returned as the decoded JSON value.
Document = Annotated[Any, BeforeValidator(load_document)]


class CreatedResponse(BaseModel):
    id: int


class MessageResponse(BaseModel):
    message: str
