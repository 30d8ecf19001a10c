"""Shared pydantic base model."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Model serialized with camelCase keys, populated by either name."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_response(self, **kwargs) -> dict:
        """Dump with wire (camelCase) field names."""
        return self.model_dump(by_alias=True, **kwargs)
