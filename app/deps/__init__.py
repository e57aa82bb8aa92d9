"""FastAPI dependency providers that wire the address layers together.

Routers ask for ``Depends(get_address_service)`` / ``Depends(get_address_mapper)``
and never construct repositories or geocoders themselves. Tests swap any layer
through ``app.dependency_overrides``.
"""

from .addresses import get_address_mapper, get_address_repository, get_address_service

__all__ = ["get_address_mapper", "get_address_repository", "get_address_service"]
