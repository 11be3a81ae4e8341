"""
Adapter base — the protocol contract between the core and the host.

The core only talks to the package manager and to the operating
system through these interfaces, never directly to external tools.
Swapping in the mock adapters gives a fully offline run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from winadmin.core.models.action import PackageVerb, Receipt


class PackageManagerUnavailable(Exception):
    """Raised when the package manager is missing and cannot be bootstrapped."""


class PackageManager(ABC):
    """Abstract base class for package-manager adapters.

    To create a new adapter:
        1. Subclass PackageManager
        2. Implement name, is_available, list_installed, run_action, bootstrap
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'choco')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the package manager's CLI can be found.

        Should be fast and never raise.
        """

    @abstractmethod
    def list_installed(self) -> list[str]:
        """Identifiers of every locally installed package.

        An empty list means nothing is installed (or nothing could be
        read); it is not an error.
        """

    @abstractmethod
    def run_action(
        self,
        verb: PackageVerb,
        package_id: str,
        auto_confirm: bool = True,
    ) -> int:
        """Run install/uninstall for one package and return its exit status."""

    @abstractmethod
    def bootstrap(self) -> None:
        """Install the package manager itself.

        Raises:
            PackageManagerUnavailable: If installation fails.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class HostController(ABC):
    """Abstract base class for host operations.

    Host adapters NEVER raise — failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'windows')."""

    @abstractmethod
    def rename(self, new_name: str) -> Receipt:
        """Rename the computer (takes effect after restart)."""

    @abstractmethod
    def install_updates(self) -> Receipt:
        """Scan for and install pending OS updates."""

    @abstractmethod
    def restart(self) -> Receipt:
        """Restart the computer."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
