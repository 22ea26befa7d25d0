"""Base class for resource updaters."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from callsdk.clients.rest_client import RestClient

T = TypeVar("T")


class Updater(ABC, Generic[T]):
    """Collects update parameters for one resource and applies them.

    Updaters are short-lived builders: configure, execute once, discard.
    Instances are mutable and must not be shared between threads.
    """

    @abstractmethod
    def execute(self, client: "RestClient") -> T:
        """Send the update and return the resource's new representation."""
        pass
