from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class RecordModel(BaseModel):
    """A pydantic model for records of a GTFS table.

    Attributes:
        model_config (ConfigDict): Configuration dictionary for the model.
        table_name (ClassVar[str]): name of the GTFS table the record belongs to.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        arbitrary_types_allowed=True,
        protected_namespaces=(),
    )
    table_name: ClassVar[str] = ""
