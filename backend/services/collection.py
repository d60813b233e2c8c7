"""Request-scoped wiring of the stores."""

from fastapi import Depends
from sqlalchemy.orm import Session

from database import get_db
from services.channel_store import ChannelStore
from services.lineup_store import LineupStore


class APICollection:
    """Holds every store bound to one database session.

    The lineup store only sees the channel store through its
    `get_channels_for_lineup` method, never this container.
    """

    def __init__(self, db: Session):
        self.db = db
        self.channels = ChannelStore(db)
        self.lineups = LineupStore(db, channels=self.channels)


def get_collection(db: Session = Depends(get_db)) -> APICollection:
    """Dependency providing the stores for a FastAPI route."""
    return APICollection(db)
