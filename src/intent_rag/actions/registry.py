"""Action registry: the fixed mapping from action names to handlers."""

from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from intent_rag.actions.handlers import UserSphereActions
from intent_rag.actions.repository import DeviceRepository

ActionHandler = Callable[..., Awaitable[str]]


@dataclass(frozen=True)
class ActionSpec:
    """How to invoke one action.

    Attributes:
        handler: Coroutine function returning the response text
        parameters: Names of parameters extracted from the input (at most one)
        pass_raw_text: Call the handler with the whole input instead of
            extracted parameters
    """
    handler: ActionHandler
    parameters: tuple[str, ...] = ()
    pass_raw_text: bool = False

    def __post_init__(self):
        """Validate the parameter list."""
        if len(self.parameters) > 1:
            raise ValueError("Actions accept at most one extracted parameter")


class ActionRegistry(Mapping[str, ActionSpec]):
    """Read-only name to ActionSpec mapping."""

    def __init__(self, specs: Mapping[str, ActionSpec]):
        self._specs = MappingProxyType(dict(specs))

    def __getitem__(self, name: str) -> ActionSpec:
        return self._specs[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"ActionRegistry({sorted(self._specs)})"


def build_default_registry(repository: DeviceRepository) -> ActionRegistry:
    """Wire the built-in UserSphere handlers to a repository.

    Args:
        repository: Storage for the user and devices

    Returns:
        Registry covering every action in the default catalog
    """
    actions = UserSphereActions(repository)
    return ActionRegistry({
        "getUserPoints": ActionSpec(actions.get_user_points),
        "getUsername": ActionSpec(actions.get_username),
        "getUserAvatar": ActionSpec(actions.get_user_avatar),
        "getUserMotto": ActionSpec(actions.get_user_motto),
        "getUserProfile": ActionSpec(actions.get_user_profile),
        "listDevices": ActionSpec(actions.list_devices),
        "listOnlineDevices": ActionSpec(actions.list_online_devices),
        "checkDeviceStatus": ActionSpec(
            actions.check_device_status, parameters=("deviceName",), pass_raw_text=True
        ),
        "addDevice": ActionSpec(actions.add_device, parameters=("deviceName",)),
        "removeDevice": ActionSpec(actions.remove_device, parameters=("deviceName",)),
        "getHelp": ActionSpec(actions.get_help),
        "getSystemInfo": ActionSpec(actions.get_system_info),
        "exitProgram": ActionSpec(actions.exit_program),
    })
