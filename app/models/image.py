"""Image generation data models."""
from enum import Enum
from typing import Optional
from pydantic import BaseModel
from .base import CamelModel

class GenerationMode(str, Enum):
    """Image generation modes."""
    GENERATE = "generate"
    ENHANCE = "enhance"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "GenerationMode":
        """Anything other than "enhance" means plain generation."""
        if value == cls.ENHANCE.value:
            return cls.ENHANCE
        return cls.GENERATE

class DecodedImage(BaseModel):
    """Binary image payload with its declared MIME type."""
    mime_type: str
    data: bytes

class GeneratedImage(CamelModel):
    """Generated header image."""
    image_prompt: str
    image_data: str
    width: int
    height: int
