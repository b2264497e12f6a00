"""
Shared pydantic base for request and response bodies.
"""
from pydantic import BaseModel


class ApiModel(BaseModel):
    """Fields are snake_case in Python and camelCase on the wire."""

    class Config:
        populate_by_name = True
        use_enum_values = True


class MessageResponse(ApiModel):
    message: str
