# peerloom/resources/base_client.py
"""Defines the generic base class for all PeeringDB resource clients.

A resource client binds one namespace to one model and exposes the three
accessors every PeeringDB collection supports: ``search``, ``all`` and
``get``. Concrete clients only declare ``_namespace`` and ``_entity_model``.
"""

from typing import TYPE_CHECKING, Generic

from ..log_config import logger
from ..models.base import EntityT
from ..types import SearchParams

if TYPE_CHECKING:
    from ..client import PeerloomClient


class BaseResourceClient(Generic[EntityT]):
    """Base class for all resource clients.

    Attributes:
        _api_client: The `PeerloomClient` used to make requests.
        _namespace: The PeeringDB namespace of the collection (e.g. "net").
        _entity_model: The Pydantic model each result is decoded into.
    """

    _namespace: str
    _entity_model: type[EntityT]

    def __init__(self, api_client: "PeerloomClient"):
        """
        Initialize the base resource client.

        Args:
            api_client: An instance of PeerloomClient.
        """
        self._api_client = api_client
        logger.trace(f"{self.__class__.__name__} initialized for {self._namespace}")

    async def search(
        self, search: SearchParams | None = None, *, timeout: float | None = None
    ) -> list[EntityT]:
        """Returns all objects of this collection matching the search parameters.

        Args:
            search: Search parameters, e.g. ``{"name__contains": "Example"}``.
            timeout: Optional deadline in seconds for this call.

        Returns:
            The matching objects, possibly an empty list.
        """
        return await self._api_client.fetch(
            self._entity_model, self._namespace, search, timeout=timeout
        )

    async def all(self, *, timeout: float | None = None) -> list[EntityT]:
        """Returns every object of this collection."""
        return await self.search(None, timeout=timeout)

    async def get(
        self, entity_id: int, *, timeout: float | None = None
    ) -> EntityT | None:
        """Returns the object with the given ID, or None if it does not exist.

        Raises:
            InvalidIDError: If ``entity_id`` is not a positive integer.
        """
        return await self._api_client.fetch_by_id(
            self._entity_model, self._namespace, entity_id, timeout=timeout
        )
