"""Lineup management endpoints."""

from fastapi import APIRouter, Depends, status

from schemas.lineup import LineupCreate, LineupSchema, LineupUpdate
from services.collection import APICollection, get_collection


router = APIRouter()


@router.get("", response_model=list[LineupSchema])
def list_lineups(
    with_channels: bool = False,
    collection: APICollection = Depends(get_collection),
):
    """List every lineup, enabled or not."""
    return collection.lineups.get_all(with_channels=with_channels)


@router.get("/enabled", response_model=list[LineupSchema])
def list_enabled_lineups(
    with_channels: bool = False,
    collection: APICollection = Depends(get_collection),
):
    """List lineups that are advertised over SSDP."""
    return collection.lineups.get_enabled(with_channels=with_channels)


@router.post("", response_model=LineupSchema, status_code=status.HTTP_201_CREATED)
def create_lineup(
    payload: LineupCreate,
    collection: APICollection = Depends(get_collection),
):
    """Create a lineup. Omitted fields get stock HDHomeRun values."""
    return collection.lineups.insert(payload)


@router.get("/{lineup_id}", response_model=LineupSchema)
def get_lineup(
    lineup_id: int,
    with_channels: bool = False,
    collection: APICollection = Depends(get_collection),
):
    return collection.lineups.get_by_id(lineup_id, with_channels=with_channels)


@router.patch("/{lineup_id}", response_model=LineupSchema)
def update_lineup(
    lineup_id: int,
    payload: LineupUpdate,
    collection: APICollection = Depends(get_collection),
):
    """Update only the fields present in the body."""
    return collection.lineups.update(lineup_id, payload)


@router.delete("/{lineup_id}", response_model=LineupSchema)
def delete_lineup(
    lineup_id: int,
    collection: APICollection = Depends(get_collection),
):
    """Delete a lineup and return the record as it was before removal.

    The SSDP responder uses the returned record to stop advertising it.
    """
    return collection.lineups.delete(lineup_id)
