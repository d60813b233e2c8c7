"""Lineup: a virtual HDHomeRun tuner advertised to media clients."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from database import Base


class Lineup(Base):
    """One emulated tuner device and the settings it advertises.

    Channels live in `lineup_channel` and are never loaded with the row;
    callers ask the channel store for them explicitly.
    """

    __tablename__ = "lineup"
    # ids are never reused, including on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    ssdp = Column(Boolean, nullable=False, default=True, index=True)
    listen_address = Column(String(255), nullable=False)
    discovery_address = Column(String(255), nullable=False)
    port = Column(Integer, nullable=False)
    tuners = Column(Integer, nullable=False)
    manufacturer = Column(String(255), nullable=False)
    model_name = Column(String(255), nullable=False)
    model_number = Column(String(255), nullable=False)
    firmware_name = Column(String(255), nullable=False)
    firmware_version = Column(String(255), nullable=False)
    device_id = Column(String(255), nullable=False)
    device_auth = Column(String(255), nullable=False)
    # UDN in the discovery document; two lineups sharing one confuses clients
    device_uuid = Column(String(255), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
