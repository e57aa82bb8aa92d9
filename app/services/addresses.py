"""Business logic for addresses: coordinate defaulting plus repository calls."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from ..crud.addresses import AddressRepository
from ..models.address import Address
from .geocoding import Geocoder

logger = logging.getLogger(__name__)


class AddressService:
    def __init__(self, repository: AddressRepository, geocoder: Geocoder) -> None:
        self.repository = repository
        self.geocoder = geocoder

    def _fill_coordinates(self, address: Address) -> None:
        # Latitude and longitude are stored together or not at all; a half
        # pair is re-derived as a whole.
        if address.latitude is not None and address.longitude is not None:
            return
        address.latitude, address.longitude = self.geocoder.locate(address)

    def create_address(self, address: Address) -> Address:
        self._fill_coordinates(address)
        saved = self.repository.save(address)
        logger.info("address.created", extra={"extra_data": {"address_id": saved.id}})
        return saved

    def update_address(self, address: Address) -> Address:
        """Persist changes to an address the caller has already loaded."""

        self._fill_coordinates(address)
        saved = self.repository.save(address)
        logger.info("address.updated", extra={"extra_data": {"address_id": saved.id}})
        return saved

    def delete_address(self, address: Address) -> None:
        address_id = address.id
        removed = self.repository.delete_by_id(address_id)
        logger.info("address.deleted", extra={"extra_data": {"address_id": address_id, "removed": removed}})

    def find_address_by_id(self, address_id: UUID | str) -> Optional[Address]:
        return self.repository.find_by_id(address_id)

    def find_all_addresses(self) -> list[Address]:
        return self.repository.find_all()

    def find_addresses_by_street_name(self, street_name: str) -> list[Address]:
        return self.repository.find_by_street_name_ignore_case(street_name)


__all__ = ["AddressService"]
