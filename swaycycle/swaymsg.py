import asyncio
import logging

from swaycycle.data_types.command import CommandResult, decode_results
from swaycycle.data_types.tree import Node, decode_tree
from swaycycle.errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

# swaymsg exits with 2 when sway ran the command and reported it as failed
command_failed = 2


class SwaymsgConnection:
    """Gets the same answers as SwayIPCConnection by running swaymsg."""

    def __init__(self, executable: str = "swaymsg", socket_path: str | None = None):
        self.executable = executable
        self.socket_path = socket_path

    async def __aenter__(self) -> "SwaymsgConnection":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _run(self, *args: str) -> tuple[int, bytes, bytes]:
        argv = [self.executable]
        if self.socket_path:
            argv += ["-s", self.socket_path]
        argv += args
        logger.debug("executing %s", " ".join(argv))

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise TransportError(f"Failed to execute {self.executable}: {e}") from e

        out, err = await proc.communicate()
        return proc.returncode, out, err

    def _failed(self, returncode: int, out: bytes, err: bytes) -> TransportError:
        logger.debug("%s output: %r", self.executable, out)
        return TransportError(
            f"{self.executable} exited with {returncode}: "
            f"{err.decode(errors='replace').strip()}"
        )

    async def get_tree(self) -> Node:
        returncode, out, err = await self._run("-t", "get_tree", "-r")
        if returncode != 0 or err:
            raise self._failed(returncode, out, err)
        return decode_tree(out)

    async def run_command(self, command: str) -> list[CommandResult]:
        returncode, out, err = await self._run("-r", "--", command)
        if returncode == 0 and not err:
            return decode_results(out)
        if returncode == command_failed and not err:
            try:
                return decode_results(out)
            except DecodeError as e:
                raise self._failed(returncode, out, err) from e
        raise self._failed(returncode, out, err)

    async def close(self):
        # nothing is held open between two swaymsg runs
        pass
