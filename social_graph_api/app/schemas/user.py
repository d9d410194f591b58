"""
Pydantic models for user data.

Missing request fields and explicit ``null`` values fall back to zero
values (empty string, ``0``, empty list), as clients of the first API
version expect, while values of the wrong JSON type are rejected as a
malformed body.
"""

from typing import Any, List

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationInfo, field_validator


class ZeroDefaultModel(BaseModel):
    """Base model reading ``null`` as the field's default value."""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class User(ZeroDefaultModel):
    """A user record as stored and returned by the API."""

    name: StrictStr = Field("", examples=["Иван"])
    age: StrictInt = Field(0, examples=[30])
    friends: List[StrictStr] = Field(default_factory=list, examples=[["2", "3"]])

    @field_validator("friends", mode="before")
    @classmethod
    def null_friend_ids_as_empty(cls, value: Any) -> Any:
        if isinstance(value, list):
            return ["" if item is None else item for item in value]
        return value


class UserCreate(User):
    """Body of ``POST /create``.

    ``friends`` is stored verbatim; the IDs are not checked and the
    referenced users are not linked back.
    """


class FriendshipCreate(ZeroDefaultModel):
    """Body of ``POST /make_friends``."""

    source_id: StrictStr = Field("", examples=["1"])
    target_id: StrictStr = Field("", examples=["2"])


class UserDelete(ZeroDefaultModel):
    """Body of ``DELETE /user``."""

    target_id: StrictStr = Field("", examples=["2"])


class AgeUpdate(ZeroDefaultModel):
    """Body of ``PUT /user_age/{user_id}``."""

    new_age: StrictInt = Field(0, examples=[31])
