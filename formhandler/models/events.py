"""Inbound event and outbound response models"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, Optional, Union


class InboundEvent(BaseModel):
    """HTTP-style event delivered by the serverless host"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    headers: Dict[str, str] = Field(default_factory=dict)
    body: Optional[Union[str, Dict[str, Any]]] = None
    is_base64_encoded: bool = Field(False, alias="isBase64Encoded")
    path: Optional[str] = None

    @field_validator("headers", mode="before")
    @classmethod
    def _normalize_headers(cls, value):
        if not value:
            return {}
        return {str(key): str(item) for key, item in value.items() if item is not None}

    @field_validator("is_base64_encoded", mode="before")
    @classmethod
    def _normalize_flag(cls, value):
        return bool(value)


class RequestPayload(BaseModel):
    """Decoded request body. `opaque` holds bodies that carry no named fields."""
    model_config = ConfigDict(frozen=True)

    fields: Dict[str, Any] = {}
    opaque: Optional[Any] = None

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def __contains__(self, name: str) -> bool:
        return name in self.fields


class ResponseOutcome(BaseModel):
    """Response returned to the serverless host"""
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode")
    headers: Dict[str, str] = {}
    body: str = ""

    def to_event(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
