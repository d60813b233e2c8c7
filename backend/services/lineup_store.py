"""Lineup store: CRUD over the `lineup` table with optional channel hydration."""

import logging
from typing import Optional, Protocol, Union

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.lineup import Lineup
from schemas.lineup import ChannelSchema, LineupCreate, LineupSchema, LineupUpdate
from services.errors import (
    CollaboratorError,
    LineupNotFoundError,
    LineupValidationError,
    StorageError,
)


logger = logging.getLogger(__name__)


class ChannelProvider(Protocol):
    """What the store needs from the channel side."""

    def get_channels_for_lineup(self, lineup_id: int, active_only: bool) -> list[ChannelSchema]:
        ...


class LineupStore:
    """Persistence for lineups.

    Every method is a single attempt and commits its own work. Failures
    are raised as `LineupError` subclasses with the original exception
    chained; nothing is retried and nothing partial is returned.
    """

    def __init__(self, db: Session, channels: ChannelProvider):
        self.db = db
        self.channels = channels

    # ---- reads ----

    def get_by_id(self, lineup_id: int, with_channels: bool = False) -> LineupSchema:
        """Get a single lineup, optionally with its active channels."""
        row = self._get_row(lineup_id, operation="get_by_id")
        lineup = self._to_schema(row, operation="get_by_id")
        if with_channels:
            lineup = self._hydrate(lineup, operation="get_by_id")
        return lineup

    def get_by_address(self, address: str, port: int, with_channels: bool = False) -> LineupSchema:
        """Get the lineup advertised at `http://{address}:{port}`.

        Lineups sharing an address and port resolve to the lowest id.
        """
        operation = "get_by_address"
        try:
            row = (
                self.db.query(Lineup)
                .filter(Lineup.discovery_address == address, Lineup.port == port)
                .order_by(Lineup.id)
                .first()
            )
        except SQLAlchemyError as e:
            raise self._storage_error(operation, None, e) from e

        if row is None:
            logger.debug("%s: no lineup at %s:%s", operation, address, port)
            raise LineupNotFoundError(
                None, operation=operation, message=f"No lineup advertised at {address}:{port}"
            )

        lineup = self._to_schema(row, operation=operation)
        if with_channels:
            lineup = self._hydrate(lineup, operation=operation)
        return lineup

    def get_enabled(self, with_channels: bool = False) -> list[LineupSchema]:
        """Get every lineup flagged for SSDP advertisement, ordered by id."""
        query = self.db.query(Lineup).filter(Lineup.ssdp.is_(True))
        return self._list(query, with_channels=with_channels, operation="get_enabled")

    def get_all(self, with_channels: bool = False) -> list[LineupSchema]:
        """Get every lineup, enabled or not, ordered by id."""
        return self._list(self.db.query(Lineup), with_channels=with_channels, operation="get_all")

    # ---- writes ----

    def insert(self, lineup: Union[LineupCreate, dict]) -> LineupSchema:
        """Create a lineup and return it as stored.

        The row is re-read after commit so that database-side defaults
        (`id`, `created_at`) are part of the result.
        """
        payload = self._validate(LineupCreate, lineup, operation="insert")
        row = Lineup(**payload.model_dump())

        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._storage_error("insert", None, e) from e

        logger.info("Created lineup %s (%s)", row.id, row.name)
        return self._to_schema(row, operation="insert")

    def update(self, lineup_id: int, fields: Union[LineupUpdate, dict]) -> LineupSchema:
        """Apply a partial update; unspecified fields keep their value."""
        changes = self._validate(LineupUpdate, fields, operation="update", lineup_id=lineup_id).changes()
        row = self._get_row(lineup_id, operation="update")

        for key, value in changes.items():
            setattr(row, key, value)

        try:
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._storage_error("update", lineup_id, e) from e

        logger.info("Updated lineup %s fields=%s", lineup_id, sorted(changes))
        return self._to_schema(row, operation="update")

    def delete(self, lineup_id: int) -> LineupSchema:
        """Hard-delete a lineup and return the record as it was just before."""
        row = self._get_row(lineup_id, operation="delete")
        snapshot = self._to_schema(row, operation="delete")

        try:
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._storage_error("delete", lineup_id, e) from e

        logger.info("Deleted lineup %s (%s)", lineup_id, snapshot.name)
        return snapshot

    # ---- helpers ----

    def _get_row(self, lineup_id: int, *, operation: str) -> Lineup:
        try:
            row = self.db.get(Lineup, lineup_id)
        except SQLAlchemyError as e:
            raise self._storage_error(operation, lineup_id, e) from e

        if row is None:
            logger.debug("%s: lineup %s not found", operation, lineup_id)
            raise LineupNotFoundError(lineup_id, operation=operation)
        return row

    def _list(self, query, *, with_channels: bool, operation: str) -> list[LineupSchema]:
        try:
            rows = query.order_by(Lineup.id).all()
        except SQLAlchemyError as e:
            raise self._storage_error(operation, None, e) from e

        lineups = [self._to_schema(row, operation=operation) for row in rows]
        if with_channels:
            # Any single failure aborts the whole listing
            lineups = [self._hydrate(lineup, operation=operation) for lineup in lineups]
        return lineups

    def _hydrate(self, lineup: LineupSchema, *, operation: str) -> LineupSchema:
        try:
            channels = self.channels.get_channels_for_lineup(lineup.id, active_only=True)
        except Exception as e:
            logger.warning(
                "%s: channel lookup failed for lineup %s: %s",
                operation,
                lineup.id,
                e,
                extra={"operation": operation, "lineup_id": lineup.id},
            )
            raise CollaboratorError(
                f"{operation} failed loading channels for lineup {lineup.id}: {e}",
                operation=operation,
                lineup_id=lineup.id,
            ) from e

        return lineup.model_copy(update={"channels": list(channels)})

    def _to_schema(self, row: Lineup, *, operation: str) -> LineupSchema:
        # A row that breaks the read model (e.g. NULL created_at) is a storage fault
        try:
            return LineupSchema.model_validate(row)
        except ValidationError as e:
            raise self._storage_error(operation, row.id, e) from e

    @staticmethod
    def _validate(schema, data, *, operation: str, lineup_id: Optional[int] = None):
        if isinstance(data, schema):
            return data
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise LineupValidationError(
                f"{operation}: invalid lineup fields: {e}",
                operation=operation,
                lineup_id=lineup_id,
                errors=e.errors(),
            ) from e

    @staticmethod
    def _storage_error(operation: str, lineup_id: Optional[int], exc: Exception) -> StorageError:
        target = f" for lineup {lineup_id}" if lineup_id is not None else ""
        logger.error("%s failed%s: %s", operation, target, exc, extra={"operation": operation})
        return StorageError(
            f"{operation} failed{target}: {exc}",
            operation=operation,
            lineup_id=lineup_id,
        )
