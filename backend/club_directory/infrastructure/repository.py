"""Generic Repository — table-agnostic async CRUD with field projection.

Invariants:
    - Every operation returns a StoreResult and never raises to the caller
    - Any SQLAlchemy fault or driver socket error (asyncpg raises bare OSError
      when the server is unreachable) rolls the session back and becomes STORE_ERROR
    - Unknown column names in a query, payload, patch or projection become STORE_ERROR
    - Columns listed in sensitive_fields never leave this class unless a caller
      names them explicitly in `fields`
    - update/delete require a non-empty locator and touch at most one row
    - Primary key columns cannot be patched

Design Decisions:
    - One subclass per entity sets `model` and `sensitive_fields`: the
      projection rule is enforced here, in one place
    - Queries are equality filters given as dicts ({"secret": token})
    - Rows leave as plain dicts, detached from the session
"""

import logging
from typing import Any, Mapping, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from club_directory.core.repository_protocols import Row
from club_directory.core.store_result import StoreResult
from club_directory.db.base import Base

logger = logging.getLogger(__name__)

STORE_FAULTS = (SQLAlchemyError, OSError)


class SqlRepository:
    """CRUD primitives over one ORM entity."""

    model: type[Base]
    sensitive_fields: frozenset[str] = frozenset()

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def entity(self) -> str:
        return self.model.__tablename__

    @property
    def column_names(self) -> list[str]:
        return [c.key for c in self.model.__table__.columns]

    @property
    def default_fields(self) -> list[str]:
        return [c for c in self.column_names if c not in self.sensitive_fields]

    # ─── Primitives ──────────────────────────────────────────────

    async def find_many(
        self,
        query: Mapping[str, Any] | None = None,
        fields: Sequence[str] | None = None,
    ) -> StoreResult[list[Row]]:
        query = query or {}
        fields = list(fields) if fields else self.default_fields
        error = self._check_names(query, fields)
        if error:
            return self._failed("find_many", error, value=[])
        try:
            result = await self.db.execute(
                select(*self._columns(fields)).where(*self._where(query)),
            )
            return StoreResult.found([dict(r) for r in result.mappings().all()])
        except STORE_FAULTS as e:
            await self._rollback()
            return self._failed("find_many", str(e), value=[])

    async def find_one(
        self,
        query: Mapping[str, Any],
        fields: Sequence[str] | None = None,
    ) -> StoreResult[Row]:
        fields = list(fields) if fields else self.default_fields
        error = self._check_names(query, fields)
        if error:
            return self._failed("find_one", error)
        try:
            result = await self.db.execute(
                select(*self._columns(fields))
                .where(*self._where(query))
                .limit(1),
            )
            row = result.mappings().first()
        except STORE_FAULTS as e:
            await self._rollback()
            return self._failed("find_one", str(e))
        if row is None:
            return StoreResult.not_found()
        return StoreResult.found(dict(row))

    async def create(
        self,
        payload: Mapping[str, Any],
        fields: Sequence[str] | None = None,
    ) -> StoreResult[Row]:
        fields = list(fields) if fields else self.default_fields
        error = self._check_names(payload, fields)
        if error:
            return self._failed("create", error)
        try:
            obj = self.model(**payload)
            self.db.add(obj)
            await self.db.commit()
            await self.db.refresh(obj)
        except STORE_FAULTS as e:
            await self._rollback()
            return self._failed("create", str(e))
        logger.debug(f"Created {self.entity} row")
        return StoreResult.found(self._to_row(obj, fields))

    async def update(
        self,
        locator: Mapping[str, Any],
        patch: Mapping[str, Any],
        fields: Sequence[str] | None = None,
    ) -> StoreResult[Row]:
        fields = list(fields) if fields else self.default_fields
        error = (
            self._check_locator(locator)
            or self._check_names(patch, fields)
            or self._check_patch(patch)
        )
        if error:
            return self._failed("update", error)
        try:
            obj = await self._first(locator)
            if obj is None:
                return StoreResult.not_found()
            for key, value in patch.items():
                setattr(obj, key, value)
            await self.db.commit()
            await self.db.refresh(obj)
        except STORE_FAULTS as e:
            await self._rollback()
            return self._failed("update", str(e))
        return StoreResult.found(self._to_row(obj, fields))

    async def delete(
        self,
        locator: Mapping[str, Any],
        fields: Sequence[str] | None = None,
    ) -> StoreResult[Row]:
        fields = list(fields) if fields else self.default_fields
        error = self._check_locator(locator)
        if error:
            return self._failed("delete", error)
        try:
            obj = await self._first(locator)
            if obj is None:
                return StoreResult.not_found()
            row = self._to_row(obj, fields)
            await self.db.delete(obj)
            await self.db.commit()
        except STORE_FAULTS as e:
            await self._rollback()
            return self._failed("delete", str(e))
        return StoreResult.found(row)

    # ─── Helpers ─────────────────────────────────────────────────

    def _columns(self, fields: Sequence[str]) -> list:
        return [getattr(self.model, f) for f in fields]

    def _where(self, query: Mapping[str, Any]) -> list:
        return [getattr(self.model, key) == value for key, value in query.items()]

    async def _first(self, locator: Mapping[str, Any]):
        result = await self.db.execute(
            select(self.model).where(*self._where(locator)).limit(1),
        )
        return result.scalars().first()

    def _to_row(self, obj: Base, fields: Sequence[str]) -> Row:
        return {f: getattr(obj, f) for f in fields}

    def _check_names(
        self, data: Mapping[str, Any], fields: Sequence[str],
    ) -> str | None:
        known = set(self.column_names)
        unknown = sorted((set(data) | set(fields)) - known)
        if unknown:
            return f"unknown column(s) on {self.entity}: {', '.join(unknown)}"
        return None

    def _check_locator(self, locator: Mapping[str, Any]) -> str | None:
        if not locator:
            return "locator must not be empty"
        return self._check_names(locator, [])

    def _check_patch(self, patch: Mapping[str, Any]) -> str | None:
        keys = {c.key for c in self.model.__table__.primary_key.columns}
        touched = sorted(keys & set(patch))
        if touched:
            return f"primary key column(s) cannot be patched: {', '.join(touched)}"
        return None

    async def _rollback(self) -> None:
        try:
            await self.db.rollback()
        except STORE_FAULTS as e:
            logger.error(f"Rollback failed on {self.entity}: {e}")

    def _failed(
        self, operation: str, error: str, value: Any = None,
    ) -> StoreResult:
        logger.error(
            f"{self.entity}.{operation} failed: {error}",
            extra={"entity": self.entity},
        )
        return StoreResult.failed(error, value)
