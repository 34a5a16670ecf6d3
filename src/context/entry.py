"""Entry interface implemented by bootable service components."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Dict, Optional

if TYPE_CHECKING:
    from .app_context import AppContext


class Entry(ABC):
    """
    A bootable component of a service (an HTTP server, a DB client...).

    Entries are built by registration functions from the boot config and
    stored in the ``AppContext``.
    """

    @abstractmethod
    def bootstrap(self, ctx: "AppContext") -> None:
        """Start the entry."""

    @abstractmethod
    def wait_for_shutdown_sig(self, timeout: Optional[float] = None) -> None:
        """Block until a shutdown signal arrives, for entries started without a bootstrapper."""

    @abstractmethod
    def shutdown(self, ctx: "AppContext") -> None:
        """Stop the entry."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name of the entry."""

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Kind of entry, e.g. ``http-server``."""

    def __str__(self) -> str:
        return json.dumps({"name": self.name, "type": self.type_name})


# Builds entries from a boot config file path
EntryRegFunc = Callable[[str, "AppContext"], Dict[str, Entry]]
