"""Data access for ``Address`` rows.

``AddressRepository`` is the only code that reads or writes the ``addresses``
table. Every mutating method commits, so callers never manage transactions.
"""

from __future__ import annotations

from typing import Iterable
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from ..core.errors import AddressNotFoundError
from ..models.address import Address


def _normalize_id(address_id: UUID | str) -> str | None:
    try:
        return str(UUID(str(address_id)))
    except ValueError:
        return None


class AddressRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, address: Address) -> Address:
        """Insert or update ``address`` and return it with its id populated."""

        # Read before commit: after a rollback the instance is expired and
        # touching its attributes would reload a row that may be gone.
        address_id = address.id
        self.db.add(address)
        try:
            self.db.commit()
        except StaleDataError as exc:
            # The UPDATE matched no row: someone deleted it after we loaded it.
            self.db.rollback()
            raise AddressNotFoundError(address_id) from exc
        self.db.refresh(address)
        return address

    def save_all(self, addresses: Iterable[Address]) -> list[Address]:
        items = list(addresses)
        self.db.add_all(items)
        self.db.commit()
        for item in items:
            self.db.refresh(item)
        return items

    def find_by_id(self, address_id: UUID | str) -> Address | None:
        key = _normalize_id(address_id)
        if key is None:
            return None
        return self.db.get(Address, key)

    def find_all(self) -> list[Address]:
        return list(self.db.execute(select(Address)).scalars().all())

    def find_by_street_name_ignore_case(self, street_name: str) -> list[Address]:
        stmt = select(Address).where(func.lower(Address.street_name) == func.lower(street_name))
        return list(self.db.execute(stmt).scalars().all())

    def delete(self, address: Address) -> None:
        self.db.delete(address)
        self.db.commit()

    def delete_by_id(self, address_id: UUID | str) -> int:
        """Delete by id in one statement; a missing row is not an error."""

        key = _normalize_id(address_id)
        if key is None:
            return 0
        result = self.db.execute(delete(Address).where(Address.id == key))
        self.db.commit()
        return result.rowcount or 0

    def delete_all(self) -> int:
        result = self.db.execute(delete(Address))
        self.db.commit()
        return result.rowcount or 0


__all__ = ["AddressRepository"]
