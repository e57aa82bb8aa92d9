"""Pydantic schemas that describe address payloads for the API.

JSON uses camelCase (``streetName``); Python code uses snake_case. Requests
accept either spelling.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AddressBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    street_name: str
    number: str
    complement: Optional[str] = None
    neighbourhood: str
    city: str
    state: str
    country: str
    zipcode: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class AddressRequest(AddressBase):
    pass


class AddressResponse(AddressBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: UUID
