"""Discovery payloads for a lineup.

Everything here is a pure function of its input: no I/O and no caching,
so the payloads always reflect the lineup's current address and port.
Clients cache discovery results, so output must be stable for identical
input.
"""

import xml.etree.ElementTree as ET
from typing import Iterable

from schemas.discovery import DiscoveryDescriptor, DiscoveryDevice, DiscoveryDocument
from schemas.lineup import ChannelSchema, LineupSchema

UPNP_DEVICE_NAMESPACE = "urn:schemas-upnp-org:device-1-0"


def to_descriptor(lineup: LineupSchema) -> DiscoveryDescriptor:
    """Flatten a lineup into the values advertised to clients."""
    base_url = f"http://{lineup.discovery_address}:{lineup.port}"
    return DiscoveryDescriptor(
        friendly_name=lineup.name,
        manufacturer=lineup.manufacturer,
        model_name=lineup.model_name,
        model_number=lineup.model_number,
        firmware_name=lineup.firmware_name,
        firmware_version=lineup.firmware_version,
        tuner_count=lineup.tuners,
        device_id=lineup.device_id,
        device_auth=lineup.device_auth,
        device_uuid=lineup.device_uuid,
        base_url=base_url,
        lineup_url=f"{base_url}/lineup.json",
    )


def to_discovery_document(descriptor: DiscoveryDescriptor) -> DiscoveryDocument:
    """Build the UPnP root device description."""
    return DiscoveryDocument(
        url_base=descriptor.base_url,
        device=DiscoveryDevice(
            friendly_name=descriptor.friendly_name,
            manufacturer=descriptor.manufacturer,
            model_name=descriptor.model_name,
            model_number=descriptor.model_number,
            model_description=f"{descriptor.model_number} {descriptor.model_name}",
            serial_number=descriptor.device_id,
            udn=descriptor.device_uuid,
        ),
    )


def render_device_xml(document: DiscoveryDocument) -> bytes:
    """Serialize the discovery document as UPnP device.xml."""
    root = ET.Element("root", {"xmlns": UPNP_DEVICE_NAMESPACE})

    spec = ET.SubElement(root, "specVersion")
    ET.SubElement(spec, "major").text = str(document.spec_version.major)
    ET.SubElement(spec, "minor").text = str(document.spec_version.minor)

    ET.SubElement(root, "URLBase").text = document.url_base

    device = ET.SubElement(root, "device")
    for tag, value in (
        ("deviceType", document.device.device_type),
        ("friendlyName", document.device.friendly_name),
        ("manufacturer", document.device.manufacturer),
        ("modelName", document.device.model_name),
        ("modelNumber", document.device.model_number),
        ("modelDescription", document.device.model_description),
        ("serialNumber", document.device.serial_number),
        ("UDN", document.device.udn),
        ("presentationURL", document.device.presentation_url),
    ):
        ET.SubElement(device, tag).text = value

    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def to_discover_json(descriptor: DiscoveryDescriptor) -> dict:
    """HDHomeRun discover.json payload (what Plex polls)."""
    return {
        "FriendlyName": descriptor.friendly_name,
        "Manufacturer": descriptor.manufacturer,
        "ModelNumber": descriptor.model_number,
        "FirmwareName": descriptor.firmware_name,
        "TunerCount": descriptor.tuner_count,
        "FirmwareVersion": descriptor.firmware_version,
        "DeviceID": descriptor.device_id,
        "DeviceAuth": descriptor.device_auth,
        "BaseURL": descriptor.base_url,
        "LineupURL": descriptor.lineup_url,
    }


def format_guide_number(channel_number: float) -> str:
    """Render 5.0 as "5" and keep subchannels such as "5.1"."""
    if channel_number == int(channel_number):
        return str(int(channel_number))
    return str(channel_number)


def to_lineup_json(channels: Iterable[ChannelSchema]) -> list[dict]:
    """HDHomeRun lineup.json entries, in the order given."""
    return [
        {
            "GuideNumber": format_guide_number(ch.channel_number),
            "GuideName": ch.title,
            "URL": ch.stream_url,
        }
        for ch in channels
    ]


def lineup_status() -> dict:
    """Static lineup_status.json; channel scanning is not supported."""
    return {
        "ScanInProgress": 0,
        "ScanPossible": 1,
        "Source": "Cable",
        "SourceList": ["Cable"],
    }
