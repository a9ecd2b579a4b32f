"""Shared Pydantic models for the student registration backend."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserBase(BaseModel):
    """Registration payload. Every field is free-form and optional.

    JSON numbers sent for text fields (a numeric ``mobileNumber``, say) are
    kept as their string form.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str | None = None
    email: str | None = None
    course: str | None = None
    studentClass: str | None = None
    percentage: float | None = None
    branch: str | None = None
    mobileNumber: str | None = None


class User(UserBase):
    id: int
