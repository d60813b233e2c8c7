"""Channels exposed through a lineup's lineup.json."""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, func

from database import Base


class LineupChannel(Base):
    """A tunable channel belonging to one lineup.

    Rows are removed with their lineup by the `ON DELETE CASCADE` foreign key.
    """

    __tablename__ = "lineup_channel"

    id = Column(Integer, primary_key=True, index=True)
    lineup_id = Column(
        Integer,
        ForeignKey("lineup.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    channel_number = Column(Float, nullable=False)
    stream_url = Column(String(2048), nullable=False)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
