from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BracketModel(BaseModel):
    """Frozen base for snapshot models.

    Parsed from the dashboard's camelCase JSON; snake_case names are also
    accepted so snapshots can be built directly in Python.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
