"""HTTP surface for the address resource.

Lookups that miss answer ``404`` with no body. Successful mutations answer with
no body either; clients follow the ``Location`` header after a create.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status

from ..core.errors import AddressNotFoundError
from ..deps import get_address_mapper, get_address_service
from ..mappers.address import AddressMapper
from ..schemas.address import AddressRequest, AddressResponse
from ..services.addresses import AddressService

router = APIRouter(prefix="/addresses-api/v1/addresses", tags=["addresses"])


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
@router.post("/", status_code=status.HTTP_201_CREATED, response_class=Response, include_in_schema=False)
def create_address(
    payload: AddressRequest,
    request: Request,
    service: AddressService = Depends(get_address_service),
    mapper: AddressMapper = Depends(get_address_mapper),
):
    address = service.create_address(mapper.to_entity(payload))
    location = request.url_for("find_address_by_id", address_id=str(address.id))
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": str(location)})


@router.get("", response_model=list[AddressResponse])
@router.get("/", response_model=list[AddressResponse], include_in_schema=False)
def find_all_addresses(
    service: AddressService = Depends(get_address_service),
    mapper: AddressMapper = Depends(get_address_mapper),
):
    return mapper.to_responses(service.find_all_addresses())


# Declared before "/{address_id}" so "search" is never parsed as an id.
@router.get("/search", response_model=list[AddressResponse])
def find_addresses_by_street_name(
    street_name: str = Query(..., alias="streetName"),
    service: AddressService = Depends(get_address_service),
    mapper: AddressMapper = Depends(get_address_mapper),
):
    return mapper.to_responses(service.find_addresses_by_street_name(street_name))


@router.get(
    "/{address_id}",
    response_model=AddressResponse,
    responses={404: {"description": "Address not found (empty body)"}},
)
def find_address_by_id(
    address_id: UUID,
    service: AddressService = Depends(get_address_service),
    mapper: AddressMapper = Depends(get_address_mapper),
):
    address = service.find_address_by_id(address_id)
    if address is None:
        return _not_found()
    return mapper.to_response(address)


@router.put("/{address_id}", response_class=Response, responses={404: {"description": "Address not found"}})
def update_address(
    address_id: UUID,
    payload: AddressRequest,
    service: AddressService = Depends(get_address_service),
    mapper: AddressMapper = Depends(get_address_mapper),
):
    address = service.find_address_by_id(address_id)
    if address is None:
        return _not_found()
    try:
        service.update_address(mapper.update_entity(address, payload))
    except AddressNotFoundError:
        return _not_found()
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{address_id}", response_class=Response, responses={404: {"description": "Address not found"}})
def delete_address(
    address_id: UUID,
    service: AddressService = Depends(get_address_service),
):
    address = service.find_address_by_id(address_id)
    if address is None:
        return _not_found()
    service.delete_address(address)
    return Response(status_code=status.HTTP_200_OK)
