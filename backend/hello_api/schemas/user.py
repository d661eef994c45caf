"""User Schemas — Pydantic models for the /users and /hello endpoints.

Invariants:
    - UserPayload fields default to "" so absent and empty keys look the same
    - Object keys match field names case-insensitively; a later key wins
    - A JSON null body decodes to an empty record
    - Wrongly typed fields fail decoding (no int→str coercion)
    - Unknown keys are ignored

Design Decisions:
    - Emptiness is not a schema rule: it must answer "Name and Email are required",
      while schema failures answer "Invalid JSON format"
    - Bodies are decoded from raw bytes whatever the Content-Type header says
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from hello_api.core.errors import InvalidJSONError


class UserPayload(BaseModel):
    """Incoming user record for create/modify."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {
                k.lower() if isinstance(k, str) else k: v
                for k, v in data.items()
            }
        return data


def decode_user(raw: bytes) -> UserPayload:
    """Decode a request body into a UserPayload or raise InvalidJSONError."""
    try:
        return UserPayload.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidJSONError() from e


class MessageResponse(BaseModel):
    message: str


class UserCreatedResponse(BaseModel):
    message: str
    id: str


class ErrorResponse(BaseModel):
    """Error body shared by every 4xx/5xx response."""
    error: str
