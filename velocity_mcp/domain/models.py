"""Base model for payloads exchanged with the Velocity service."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits the service's camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_payload(self) -> dict:
        """Serialize for a GraphQL variables mapping, dropping unset values."""
        return self.model_dump(by_alias=True, exclude_none=True)
