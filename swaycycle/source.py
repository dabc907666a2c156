from typing import Protocol

from swaycycle.core import SwayIPCConnection
from swaycycle.data_types.command import CommandResult
from swaycycle.data_types.tree import Node
from swaycycle.swaymsg import SwaymsgConnection


class TreeSource(Protocol):
    """What the window cycling needs from sway, regardless of how it is asked."""

    async def __aenter__(self) -> "TreeSource": ...

    async def __aexit__(self, *exc_info) -> None: ...

    async def get_tree(self) -> Node: ...

    async def run_command(self, command: str) -> list[CommandResult]: ...

    async def close(self) -> None: ...


def open_source(
    socket_path: str | None = None, use_swaymsg: bool = False
) -> TreeSource:
    if use_swaymsg:
        return SwaymsgConnection(socket_path=socket_path)
    return SwayIPCConnection(socket_path)
