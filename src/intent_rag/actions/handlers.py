"""Demo user and device action handlers."""

import logging
import re
from datetime import datetime

from intent_rag.actions.repository import Device, DeviceRepository

logger = logging.getLogger(__name__)

_DEVICE_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\u4e00-\u9fa5\-_\s]+$")

HELP_TEXT = """UserSphere CLI 可用功能:

用户信息:
  • 查询积分 - 显示当前积分余额
  • 查询用户名 - 显示用户名信息
  • 查询头像 - 显示头像链接
  • 查询座右铭 - 显示个人座右铭
  • 查询资料 - 显示完整用户档案

设备管理:
  • 列出设备 - 显示所有绑定设备
  • 在线设备 - 显示当前在线设备
  • 设备状态 [设备名] - 查询特定设备状态
  • 添加设备 [设备名] - 绑定新设备
  • 删除设备 [设备名] - 解绑设备

系统:
  • 帮助 - 显示此帮助信息
  • 退出 - 退出程序

提示: 您可以使用自然语言描述您的需求，系统会智能匹配相应功能。"""


def _format_time(value: datetime) -> str:
    return value.strftime("%Y/%m/%d %H:%M:%S")


def _status(device: Device) -> str:
    return "在线" if device.online else "离线"


def _type_suffix(device: Device) -> str:
    return f" ({device.device_type})" if device.device_type else ""


class UserSphereActions:
    """Handlers for the built-in UserSphere actions.

    Every handler is a coroutine returning the text shown to the user.
    """

    def __init__(self, repository: DeviceRepository):
        self.repository = repository

    # User information

    async def get_user_points(self) -> str:
        user = await self.repository.get_user()
        return f"您的积分是 {user.points} 分"

    async def get_username(self) -> str:
        user = await self.repository.get_user()
        return f"您的用户名是 {user.username}"

    async def get_user_avatar(self) -> str:
        user = await self.repository.get_user()
        return f"头像 URL: {user.avatar}"

    async def get_user_motto(self) -> str:
        user = await self.repository.get_user()
        return f"座右铭: {user.motto}"

    async def get_user_profile(self) -> str:
        user = await self.repository.get_user()
        lines = [
            "用户档案:",
            f"  用户名: {user.username}",
            f"  积分: {user.points} 分",
            f"  座右铭: {user.motto}",
        ]
        if user.email:
            lines.append(f"  邮箱: {user.email}")
        if user.join_date:
            lines.append(f"  加入时间: {user.join_date.strftime('%Y/%m/%d')}")
        if user.last_active:
            lines.append(f"  最后活跃: {_format_time(user.last_active)}")
        return "\n".join(lines)

    # Device management

    async def list_devices(self) -> str:
        devices = await self.repository.list_devices()
        if not devices:
            return "您还没有绑定任何设备。"

        lines = [f"  • {d.name}{_type_suffix(d)} - {_status(d)}" for d in devices]
        return f"当前绑定的设备 ({len(devices)} 个):\n" + "\n".join(lines)

    async def list_online_devices(self) -> str:
        online = [d for d in await self.repository.list_devices() if d.online]
        if not online:
            return "当前没有在线设备。"

        lines = [f"  • {d.name}{_type_suffix(d)}" for d in online]
        return f"在线设备 ({len(online)} 个):\n" + "\n".join(lines)

    async def check_device_status(self, user_input: str) -> str:
        """Report the status of devices mentioned anywhere in the input."""
        if not user_input.strip():
            return "请指定要查询的设备名称。"

        devices = await self.repository.list_devices()
        text = user_input.lower()

        found = []
        for device in devices:
            name = device.name.lower()
            loose = ".*".join(re.escape(part) for part in re.split(r"[-\s]", name))
            if name in text or text in name or re.search(loose, text):
                found.append(device)

        if not found:
            words = [w for w in text.split() if len(w) > 2]
            partial = [d for d in devices if any(w in d.name.lower() for w in words)]
            if partial:
                lines = []
                for device in partial:
                    last_seen = ""
                    if not device.online and device.last_seen:
                        last_seen = f" (最后在线: {_format_time(device.last_seen)})"
                    lines.append(f"  • {device.name} - {_status(device)}{last_seen}")
                return "找到相似设备:\n" + "\n".join(lines)

            names = ", ".join(d.name for d in devices)
            return f"未找到匹配的设备。可用设备: {names}"

        lines = []
        for device in found:
            last_seen = ""
            if not device.online and device.last_seen:
                last_seen = f" - 最后在线: {_format_time(device.last_seen)}"
            ip = f" - IP: {device.ip_address}" if device.online and device.ip_address else ""
            lines.append(f"  • {device.name}{_type_suffix(device)} - {_status(device)}{last_seen}{ip}")
        return "设备状态:\n" + "\n".join(lines)

    async def add_device(self, device_name: str, online: bool = True, device_type: str | None = None) -> str:
        name = device_name.strip()
        if not name:
            return "请提供有效的设备名称。"

        if await self.repository.get_device(name) is not None:
            return f'设备 "{name}" 已存在。'

        if not _DEVICE_NAME_PATTERN.match(name):
            return "设备名称只能包含字母、数字、中文、连字符和下划线。"

        existing = await self.repository.list_devices()
        device = Device(
            name=name,
            online=online,
            device_type=device_type or "unknown",
            last_seen=datetime.now(),
            ip_address=f"192.168.1.{100 + len(existing) + 1}" if online else None,
        )
        await self.repository.add_device(device)
        logger.info("Device added: %s", name)

        return f'设备 "{name}" 已成功添加 (状态: {_status(device)})。'

    async def remove_device(self, device_name: str) -> str:
        name = device_name.strip()
        if not name:
            return "请提供要删除的设备名称。"

        removed = await self.repository.remove_device(name)
        if removed is not None:
            logger.info("Device removed: %s", removed.name)
            return f'设备 "{removed.name}" 已成功解绑。'

        devices = await self.repository.list_devices()
        lowered = name.lower()
        for device in devices:
            candidate = device.name.lower()
            if lowered in candidate or candidate in lowered:
                return f'未找到完全匹配的设备 "{name}"。您是否想删除 "{device.name}"？请使用完整设备名称。'

        names = ", ".join(d.name for d in devices)
        return f'设备 "{name}" 不存在。可用设备: {names}'

    # Utility

    async def get_help(self) -> str:
        return HELP_TEXT

    async def get_system_info(self) -> str:
        user = await self.repository.get_user()
        devices = await self.repository.list_devices()
        online = sum(1 for d in devices if d.online)
        return "\n".join([
            "系统信息:",
            f"  • 用户: {user.username} (积分: {user.points})",
            f"  • 设备总数: {len(devices)}",
            f"  • 在线设备: {online}",
            f"  • 离线设备: {len(devices) - online}",
            "  • 系统状态: 正常运行",
        ])

    async def exit_program(self) -> str:
        return "感谢使用 UserSphere CLI，再见！"
