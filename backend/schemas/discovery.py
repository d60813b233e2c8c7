"""Discovery payloads derived from a lineup. Never persisted."""

from pydantic import BaseModel

MEDIA_SERVER_DEVICE_TYPE = "urn:schemas-upnp-org:device:MediaServer:1"


class DiscoveryDescriptor(BaseModel):
    """Flattened view of a lineup plus its computed URLs."""

    friendly_name: str
    manufacturer: str
    model_name: str
    model_number: str
    firmware_name: str
    firmware_version: str
    tuner_count: int
    device_id: str
    device_auth: str
    device_uuid: str
    base_url: str
    lineup_url: str

    class Config:
        frozen = True
        protected_namespaces = ()


class SpecVersion(BaseModel):
    major: int = 1
    minor: int = 0

    class Config:
        frozen = True


class DiscoveryDevice(BaseModel):
    device_type: str = MEDIA_SERVER_DEVICE_TYPE
    friendly_name: str
    manufacturer: str
    model_name: str
    model_number: str
    model_description: str
    serial_number: str
    udn: str
    presentation_url: str = "/"

    class Config:
        frozen = True
        protected_namespaces = ()


class DiscoveryDocument(BaseModel):
    """UPnP root device description served as device.xml."""

    spec_version: SpecVersion = SpecVersion()
    url_base: str
    device: DiscoveryDevice

    class Config:
        frozen = True
