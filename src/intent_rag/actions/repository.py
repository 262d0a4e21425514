"""Data access interface for the demo user and device actions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class User:
    """A user account."""
    username: str
    points: int
    avatar: str
    motto: str
    email: str | None = None
    join_date: date | None = None
    last_active: datetime | None = None


@dataclass(frozen=True)
class Device:
    """A device bound to the user."""
    name: str
    online: bool
    device_type: str | None = None
    last_seen: datetime | None = None
    ip_address: str | None = None


class DeviceRepository(ABC):
    """Storage for the current user and their devices."""

    @abstractmethod
    async def get_user(self) -> User:
        """Return the current user."""

    @abstractmethod
    async def list_devices(self) -> list[Device]:
        """Return all devices in registration order."""

    @abstractmethod
    async def get_device(self, name: str) -> Device | None:
        """Find a device by name, case-insensitively."""

    @abstractmethod
    async def add_device(self, device: Device) -> None:
        """Register a device.

        Raises:
            ActionError: If a device with the same name exists
        """

    @abstractmethod
    async def remove_device(self, name: str) -> Device | None:
        """Unregister a device by exact (case-insensitive) name.

        Returns:
            The removed device, or None if it did not exist
        """
