"""HDHomeRun emulation endpoints.

Each lineup advertises `http://{discovery_address}:{port}` as its base URL,
so `advertised_router` serves the endpoints at the root and picks the lineup
from the request's host and port. `router` serves the same documents by id.
"""

from fastapi import APIRouter, Depends, Request, Response

from schemas.lineup import LineupSchema
from services.collection import APICollection, get_collection
from services.discovery import (
    lineup_status,
    render_device_xml,
    to_descriptor,
    to_discover_json,
    to_discovery_document,
    to_lineup_json,
)


router = APIRouter()
advertised_router = APIRouter()


def _lineup_at(request: Request, collection: APICollection, with_channels: bool = False) -> LineupSchema:
    url = request.url
    port = url.port or (443 if url.scheme == "https" else 80)
    return collection.lineups.get_by_address(url.hostname, port, with_channels=with_channels)


def _device_xml_response(lineup: LineupSchema) -> Response:
    document = to_discovery_document(to_descriptor(lineup))
    return Response(content=render_device_xml(document), media_type="application/xml")


# ---- by id ----

@router.get("/{lineup_id}/discover.json")
def discover(lineup_id: int, collection: APICollection = Depends(get_collection)):
    """Device information polled by Plex and friends."""
    lineup = collection.lineups.get_by_id(lineup_id)
    return to_discover_json(to_descriptor(lineup))


@router.get("/{lineup_id}/lineup.json")
def lineup_channels(lineup_id: int, collection: APICollection = Depends(get_collection)):
    """Active channels of the lineup in HDHomeRun format."""
    lineup = collection.lineups.get_by_id(lineup_id, with_channels=True)
    return to_lineup_json(lineup.channels)


@router.get("/{lineup_id}/lineup_status.json")
def get_lineup_status(lineup_id: int, collection: APICollection = Depends(get_collection)):
    # 404 for unknown lineups like the other endpoints
    collection.lineups.get_by_id(lineup_id)
    return lineup_status()


@router.get("/{lineup_id}/device.xml")
def device_xml(lineup_id: int, collection: APICollection = Depends(get_collection)):
    """UPnP device description referenced by the SSDP LOCATION header."""
    return _device_xml_response(collection.lineups.get_by_id(lineup_id))


# ---- by advertised address ----

@advertised_router.get("/discover.json")
def advertised_discover(request: Request, collection: APICollection = Depends(get_collection)):
    return to_discover_json(to_descriptor(_lineup_at(request, collection)))


@advertised_router.get("/lineup.json")
def advertised_lineup_channels(request: Request, collection: APICollection = Depends(get_collection)):
    """Target of the advertised LineupURL."""
    lineup = _lineup_at(request, collection, with_channels=True)
    return to_lineup_json(lineup.channels)


@advertised_router.get("/lineup_status.json")
def advertised_lineup_status(request: Request, collection: APICollection = Depends(get_collection)):
    _lineup_at(request, collection)
    return lineup_status()


@advertised_router.get("/device.xml")
def advertised_device_xml(request: Request, collection: APICollection = Depends(get_collection)):
    return _device_xml_response(_lineup_at(request, collection))
