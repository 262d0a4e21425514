"""In-memory DeviceRepository seeded with the UserSphere demo data."""

from datetime import date, datetime, timedelta

from intent_rag.actions.repository import Device, DeviceRepository, User
from intent_rag.exceptions import ActionError


def default_user() -> User:
    return User(
        username="test_user_01",
        points=1280,
        avatar="https://example.com/avatar.png",
        motto="Keep it simple.",
        email="test_user_01@example.com",
        join_date=date(2023, 1, 15),
        last_active=datetime.now(),
    )


def default_devices() -> list[Device]:
    now = datetime.now()
    return [
        Device("MacBook-Pro", True, "laptop", now, "192.168.1.100"),
        Device("iPhone-15", True, "mobile", now, "192.168.1.101"),
        Device("iPad-Air", False, "tablet", now - timedelta(hours=2), "192.168.1.102"),
        Device("iMac-2021", True, "desktop", now, "192.168.1.103"),
    ]


class InMemoryDeviceRepository(DeviceRepository):
    """DeviceRepository keeping its state in process memory."""

    def __init__(self, user: User | None = None, devices: list[Device] | None = None):
        """Initialize the repository.

        Args:
            user: Current user (demo user if None)
            devices: Initial devices (demo devices if None)
        """
        self.user = user or default_user()
        self.devices: list[Device] = list(default_devices() if devices is None else devices)

    async def get_user(self) -> User:
        return self.user

    async def list_devices(self) -> list[Device]:
        return list(self.devices)

    async def get_device(self, name: str) -> Device | None:
        lowered = name.lower()
        return next((d for d in self.devices if d.name.lower() == lowered), None)

    async def add_device(self, device: Device) -> None:
        if await self.get_device(device.name) is not None:
            raise ActionError(f"Device {device.name} already exists")
        self.devices.append(device)

    async def remove_device(self, name: str) -> Device | None:
        device = await self.get_device(name)
        if device is not None:
            self.devices.remove(device)
        return device

    def clear(self) -> None:
        """Restore the demo data (for test isolation)."""
        self.user = default_user()
        self.devices = default_devices()
