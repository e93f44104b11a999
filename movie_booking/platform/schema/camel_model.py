from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Id columns are String(36), the width of a canonical UUID
ID_MAX_LENGTH = 36

EntityId = Annotated[str, Field(min_length=1, max_length=ID_MAX_LENGTH)]


class CamelModel(BaseModel):
    """Wire models: camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
