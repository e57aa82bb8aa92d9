"""Conversions between the address DTOs and the ``Address`` entity."""

from __future__ import annotations

from typing import Iterable

from ..models.address import Address
from ..schemas.address import AddressRequest, AddressResponse

# Fields a client may set. ``id`` is never copied from a request body.
MUTABLE_FIELDS: tuple[str, ...] = tuple(name for name in AddressRequest.model_fields)


class AddressMapper:
    """Stateless, total mapping in both directions."""

    def to_entity(self, request: AddressRequest) -> Address:
        return Address(**{name: getattr(request, name) for name in MUTABLE_FIELDS})

    def update_entity(self, address: Address, request: AddressRequest) -> Address:
        """Overwrite every mutable field of ``address`` in place."""

        for name in MUTABLE_FIELDS:
            setattr(address, name, getattr(request, name))
        return address

    def to_response(self, address: Address) -> AddressResponse:
        return AddressResponse.model_validate(address, from_attributes=True)

    def to_responses(self, addresses: Iterable[Address]) -> list[AddressResponse]:
        return [self.to_response(address) for address in addresses]


__all__ = ["AddressMapper", "MUTABLE_FIELDS"]
