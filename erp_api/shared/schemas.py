from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel
from typing import Annotated

# Largest value an INTEGER column holds
MAX_ID = 2**63 - 1

# Decimal amounts go on the wire as exact decimal strings ("21.30")
Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: format(v, "f"), return_type=str, when_used="json")
]


class ERPBaseModel(BaseModel):
    """
    Base for request/response schemas: camelCase on the wire,
    snake_case in Python, readable straight from ORM objects.
    """
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        json_encoders={
            datetime: lambda v: v.isoformat(),
        }
    )
