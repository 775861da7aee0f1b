"""schemas/shared.py — Reusable building blocks shared across schema modules."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for response models: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationMeta(BaseModel):
    model_config = ConfigDict(from_attributes=False)

    total: int
    page: int
    limit: int
    pages: int
