"""Shared schema configuration and field types."""
from __future__ import annotations
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr, StringConstraints
from pydantic.alias_generators import to_camel

from todo_api.database import as_utc


def _strip(value):
    return value.strip() if isinstance(value, str) else value


# Emails are compared case-insensitively, so they are stored lowercased.
NormalizedEmail = Annotated[EmailStr, BeforeValidator(_strip), AfterValidator(str.lower)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
# Instants are held and returned as aware UTC whatever offset the client sent.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Envelope(CamelModel):
    success: bool = True


class MessageResponse(Envelope):
    message: str

