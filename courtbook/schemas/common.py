"""Shared schema building blocks."""
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema exposing camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every JSON response."""

    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @model_serializer(mode="wrap")
    def _drop_empty(self, handler) -> Dict[str, Any]:
        body = handler(self)
        return {key: value for key, value in body.items() if value is not None}
