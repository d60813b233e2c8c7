"""Channel store: the channel side of lineup hydration."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.channel import LineupChannel
from schemas.lineup import ChannelSchema
from services.errors import StorageError


logger = logging.getLogger(__name__)


class ChannelStore:
    """Reads and writes `lineup_channel` rows."""

    def __init__(self, db: Session):
        self.db = db

    def get_channels_for_lineup(self, lineup_id: int, active_only: bool) -> list[ChannelSchema]:
        """Return the lineup's channels ordered by channel number."""
        query = self.db.query(LineupChannel).filter(LineupChannel.lineup_id == lineup_id)
        if active_only:
            query = query.filter(LineupChannel.active.is_(True))

        try:
            rows = query.order_by(LineupChannel.channel_number, LineupChannel.id).all()
        except SQLAlchemyError as e:
            raise StorageError(
                f"get_channels_for_lineup failed for lineup {lineup_id}: {e}",
                operation="get_channels_for_lineup",
                lineup_id=lineup_id,
            ) from e

        return [ChannelSchema.model_validate(row) for row in rows]

    def add_channel(
        self,
        lineup_id: int,
        *,
        title: str,
        channel_number: float,
        stream_url: str,
        active: bool = True,
    ) -> ChannelSchema:
        """Attach a channel to a lineup and commit."""
        row = LineupChannel(
            lineup_id=lineup_id,
            title=title,
            channel_number=channel_number,
            stream_url=stream_url,
            active=active,
        )
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(
                f"add_channel failed for lineup {lineup_id}: {e}",
                operation="add_channel",
                lineup_id=lineup_id,
            ) from e

        logger.debug("Added channel %s (%s) to lineup %s", row.id, row.title, lineup_id)
        return ChannelSchema.model_validate(row)
