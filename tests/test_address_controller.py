"""Controller tests with the service mocked out: status codes and calls only."""

from unittest.mock import call, create_autospec
from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import OperationalError

from app.core.errors import AddressNotFoundError
from app.deps import get_address_service
from app.models.address import Address
from app.services.addresses import AddressService

from conftest import new_address, new_address_payload

URL = "/addresses-api/v1/addresses"


@pytest.fixture()
def service(app):
    mocked = create_autospec(AddressService, instance=True)
    app.dependency_overrides[get_address_service] = lambda: mocked
    return mocked


def _stored(**overrides) -> Address:
    return new_address(id=str(uuid4()), **overrides)


def assert_equal_properties(expected: Address, actual: dict) -> None:
    assert actual["streetName"] == expected.street_name
    assert actual["number"] == expected.number
    assert actual["complement"] == expected.complement
    assert actual["neighbourhood"] == expected.neighbourhood
    assert actual["city"] == expected.city
    assert actual["state"] == expected.state
    assert actual["country"] == expected.country
    assert actual["zipcode"] == expected.zipcode
    assert actual["latitude"] == expected.latitude
    assert actual["longitude"] == expected.longitude


def test_create_returns_201_with_location_and_no_body(client, service):
    stored = _stored()
    service.create_address.return_value = stored

    response = client.post(URL, json=new_address_payload())

    assert response.status_code == 201
    assert response.content == b""
    assert response.headers["location"] == f"http://testserver{URL}/{stored.id}"
    service.create_address.assert_called_once()
    assert service.method_calls == [call.create_address(service.create_address.call_args.args[0])]


def test_create_without_coordinates_still_reaches_service(client, service):
    service.create_address.return_value = _stored()

    response = client.post(URL, json=new_address_payload(latitude=None, longitude=None))

    assert response.status_code == 201
    sent = service.create_address.call_args.args[0]
    assert sent.latitude is None and sent.longitude is None


def test_update_loads_then_updates_the_same_entity(client, service):
    stored = _stored()
    service.find_address_by_id.return_value = stored
    service.update_address.return_value = stored
    address_id = uuid4()

    response = client.put(f"{URL}/{address_id}", json=new_address_payload(streetName="Rua Augusta"))

    assert response.status_code == 200
    assert response.content == b""
    assert service.method_calls == [call.find_address_by_id(address_id), call.update_address(stored)]
    assert stored.street_name == "Rua Augusta"


def test_update_unknown_id_returns_404(client, service):
    service.find_address_by_id.return_value = None

    response = client.put(f"{URL}/{uuid4()}", json=new_address_payload())

    assert response.status_code == 404
    assert response.content == b""
    service.update_address.assert_not_called()


def test_update_of_concurrently_deleted_address_returns_404(client, service):
    stored = _stored()
    service.find_address_by_id.return_value = stored
    service.update_address.side_effect = AddressNotFoundError(stored.id)

    response = client.put(f"{URL}/{stored.id}", json=new_address_payload())

    assert response.status_code == 404
    assert response.content == b""


def test_delete_loads_then_deletes(client, service):
    stored = _stored()
    service.find_address_by_id.return_value = stored
    address_id = uuid4()

    response = client.delete(f"{URL}/{address_id}")

    assert response.status_code == 200
    assert response.content == b""
    assert service.method_calls == [call.find_address_by_id(address_id), call.delete_address(stored)]


def test_delete_unknown_id_returns_404(client, service):
    service.find_address_by_id.return_value = None

    response = client.delete(f"{URL}/{uuid4()}")

    assert response.status_code == 404
    service.delete_address.assert_not_called()


def test_find_by_id_returns_body(client, service):
    stored = _stored()
    service.find_address_by_id.return_value = stored

    response = client.get(f"{URL}/{stored.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == stored.id
    assert_equal_properties(stored, body)
    service.find_address_by_id.assert_called_once_with(UUID(stored.id))


def test_find_by_id_miss_returns_empty_404(client, service):
    service.find_address_by_id.return_value = None

    response = client.get(f"{URL}/{uuid4()}")

    assert response.status_code == 404
    assert response.content == b""


def test_find_all_returns_every_address(client, service):
    addresses = [_stored(), _stored(number="22")]
    service.find_all_addresses.return_value = addresses

    response = client.get(URL)

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 2
    assert_equal_properties(addresses[0], body[0])
    assert_equal_properties(addresses[1], body[1])
    assert service.method_calls == [call.find_all_addresses()]


def test_search_passes_street_name_through(client, service):
    addresses = [_stored(), _stored()]
    service.find_addresses_by_street_name.return_value = addresses

    response = client.get(f"{URL}/search", params={"streetName": "Avenida Paulista"})

    assert response.status_code == 200
    assert len(response.json()) == 2
    assert service.method_calls == [call.find_addresses_by_street_name("Avenida Paulista")]


def test_persistence_failure_surfaces_as_500(client, service):
    service.find_all_addresses.side_effect = OperationalError("SELECT", {}, Exception("database is locked"))

    response = client.get(URL)

    assert response.status_code == 500
    assert response.json()["code"] == "persistence_error"
