"""Shared schema configuration - camelCase on the wire, snake_case in Python."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every wire schema.

    Accepts both alias and attribute names on input; FastAPI serializes
    response models by alias, so responses are always camelCase.
    """
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )
