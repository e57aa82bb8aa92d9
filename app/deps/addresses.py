from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from ..crud.addresses import AddressRepository
from ..db.session import get_db
from ..mappers.address import AddressMapper
from ..services.addresses import AddressService
from ..services.geocoding import Geocoder, get_geocoder

_MAPPER = AddressMapper()


def get_address_repository(db: Session = Depends(get_db)) -> AddressRepository:
    return AddressRepository(db)


def get_address_service(
    repository: AddressRepository = Depends(get_address_repository),
    geocoder: Geocoder = Depends(get_geocoder),
) -> AddressService:
    return AddressService(repository, geocoder)


def get_address_mapper() -> AddressMapper:
    return _MAPPER
