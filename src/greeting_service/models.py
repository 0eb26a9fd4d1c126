from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HelloResponse(BaseModel):
    message: str
    status: str


class MvengResponse(BaseModel):
    # ``from`` is a keyword, so the attribute carries a trailing underscore
    model_config = ConfigDict(populate_by_name=True)

    greeting: str
    wisdom: str
    from_: str = Field(..., alias="from")
