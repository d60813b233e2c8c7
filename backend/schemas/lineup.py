"""Pydantic schemas for lineups and their channels."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from config import (
    DEFAULT_DEVICE_AUTH,
    DEFAULT_DEVICE_ID,
    DEFAULT_DISCOVERY_ADDRESS,
    DEFAULT_FIRMWARE_NAME,
    DEFAULT_FIRMWARE_VERSION,
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_MANUFACTURER,
    DEFAULT_MODEL_NAME,
    DEFAULT_MODEL_NUMBER,
    DEFAULT_PORT,
    DEFAULT_TUNERS,
)


def validate_label(value: str) -> str:
    """Strip surrounding whitespace and reject blank strings."""
    value = value.strip()
    if not value:
        raise ValueError("Value must not be blank")
    if len(value) > 255:
        raise ValueError("Value must be at most 255 characters long")
    return value


class ChannelSchema(BaseModel):
    """A channel as returned by the channel store."""

    id: int
    lineup_id: int
    title: str
    channel_number: float
    stream_url: str
    active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class LineupCreate(BaseModel):
    """Fields accepted when creating a lineup.

    Everything except `name` falls back to the stock HDHomeRun values
    from config, and `device_uuid` gets a fresh UUID.
    """

    name: str
    ssdp: bool = True
    listen_address: str = DEFAULT_LISTEN_ADDRESS
    discovery_address: str = DEFAULT_DISCOVERY_ADDRESS
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    tuners: int = Field(default=DEFAULT_TUNERS, ge=1)
    manufacturer: str = DEFAULT_MANUFACTURER
    model_name: str = DEFAULT_MODEL_NAME
    model_number: str = DEFAULT_MODEL_NUMBER
    firmware_name: str = DEFAULT_FIRMWARE_NAME
    firmware_version: str = DEFAULT_FIRMWARE_VERSION
    device_id: str = DEFAULT_DEVICE_ID
    device_auth: str = DEFAULT_DEVICE_AUTH
    device_uuid: str = Field(default_factory=lambda: str(uuid.uuid4()))

    class Config:
        extra = "forbid"
        protected_namespaces = ()

    @field_validator("name", "listen_address", "discovery_address", "device_uuid")
    @classmethod
    def validate_required_label(cls, v: str) -> str:
        return validate_label(v)


class LineupUpdate(BaseModel):
    """Partial update; fields left out (or sent as null) keep their stored value."""

    name: Optional[str] = None
    ssdp: Optional[bool] = None
    listen_address: Optional[str] = None
    discovery_address: Optional[str] = None
    port: Optional[int] = Field(default=None, ge=1, le=65535)
    tuners: Optional[int] = Field(default=None, ge=1)
    manufacturer: Optional[str] = None
    model_name: Optional[str] = None
    model_number: Optional[str] = None
    firmware_name: Optional[str] = None
    firmware_version: Optional[str] = None
    device_id: Optional[str] = None
    device_auth: Optional[str] = None
    device_uuid: Optional[str] = None

    class Config:
        extra = "forbid"
        protected_namespaces = ()

    @field_validator("name", "listen_address", "discovery_address", "device_uuid")
    @classmethod
    def validate_optional_label(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return validate_label(v)

    def changes(self) -> dict:
        """Only the fields the caller actually supplied with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class LineupSchema(BaseModel):
    """A stored lineup.

    `channels` is None unless the caller asked for hydration, in which
    case it holds the complete active channel list.
    """

    id: int
    name: str
    ssdp: bool
    listen_address: str
    discovery_address: str
    port: int
    tuners: int
    manufacturer: str
    model_name: str
    model_number: str
    firmware_name: str
    firmware_version: str
    device_id: str
    device_auth: str
    device_uuid: str
    created_at: datetime
    channels: Optional[list[ChannelSchema]] = None

    class Config:
        from_attributes = True
        protected_namespaces = ()
