"""Action dispatch for intent_rag."""

from intent_rag.actions.dispatcher import ActionDispatcher
from intent_rag.actions.handlers import UserSphereActions
from intent_rag.actions.memory import InMemoryDeviceRepository
from intent_rag.actions.registry import (
    ActionHandler,
    ActionRegistry,
    ActionSpec,
    build_default_registry,
)
from intent_rag.actions.repository import Device, DeviceRepository, User

__all__ = [
    "ActionDispatcher",
    "ActionHandler",
    "ActionRegistry",
    "ActionSpec",
    "Device",
    "DeviceRepository",
    "InMemoryDeviceRepository",
    "User",
    "UserSphereActions",
    "build_default_registry",
]
