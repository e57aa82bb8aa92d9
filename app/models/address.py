"""SQLAlchemy model for the single persisted entity: a postal address."""

from __future__ import annotations

from uuid import uuid4

from sqlalchemy import Column, Float, String, Text

from ..db.session import Base


def _new_id() -> str:
    return str(uuid4())


class Address(Base):
    """A postal address with optional geocoordinates."""

    __tablename__ = "addresses"

    # Assigned when the object is built, never rewritten.
    id = Column(String(36), primary_key=True, default=_new_id)
    street_name = Column(Text, nullable=False)
    number = Column(Text, nullable=False)
    complement = Column(Text, nullable=True)
    neighbourhood = Column(Text, nullable=False)
    city = Column(Text, nullable=False)
    state = Column(Text, nullable=False)
    country = Column(Text, nullable=False)
    zipcode = Column(Text, nullable=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    def __init__(self, **kwargs) -> None:
        if kwargs.get("id") is None:
            kwargs["id"] = _new_id()
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Address id={self.id!r} street_name={self.street_name!r} number={self.number!r}>"


__all__ = ["Address"]
