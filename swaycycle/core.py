import asyncio
import logging
import os
from enum import IntEnum

from swaycycle.data_types.command import CommandResult, decode_results
from swaycycle.data_types.tree import Node, decode_tree
from swaycycle.errors import (
    ConfigError,
    ConnectFailed,
    ProtocolError,
    ReadError,
    WriteError,
)

logger = logging.getLogger(__name__)

magic_string = "i3-ipc"
magic_len = len(magic_string)
magic_enc = magic_string.encode()
payload_len_len = 4  # length of payload length
payload_type_len = 4  # length of payload type
header_len = magic_len + payload_len_len + payload_type_len
byteorder = "little"

socket_variables = ["SWAYSOCK", "I3SOCK"]


class MessageType(IntEnum):
    RUN_COMMAND = 0
    GET_TREE = 4


def socket_path_from_env() -> str:
    socket_path = next(
        (path for var in socket_variables if (path := os.environ.get(var))), None
    )
    if not socket_path:
        raise ConfigError(f"Could not find the socket, set one of {socket_variables}")
    return socket_path


def encode_frame(payload_type: int, payload: bytes = b"") -> bytes:
    data = magic_enc
    data += len(payload).to_bytes(payload_len_len, byteorder)
    data += payload_type.to_bytes(payload_type_len, byteorder)
    data += payload
    return data


def decode_header(header: bytes) -> tuple[int, int]:
    """Returns (payload length, payload type) of a frame header"""
    if len(header) != header_len or header[:magic_len] != magic_enc:
        raise ProtocolError(f"Invalid magic in response header: {header[:magic_len]!r}")

    payload_length_bytes = header[magic_len : magic_len + payload_len_len]
    payload_length = int.from_bytes(payload_length_bytes, byteorder)
    if payload_length == 0:
        raise ProtocolError("Response header announces an empty payload")

    payload_type = int.from_bytes(header[magic_len + payload_len_len :], byteorder)
    return payload_length, payload_type


class SwayIPCSocket:
    def __init__(self, socket_path: str | None = None):
        self.socket_path = socket_path
        self.reader: asyncio.StreamReader = None  # pyright: ignore
        self.writer: asyncio.StreamWriter = None  # pyright: ignore

    async def connect(self):
        if not self.socket_path:
            self.socket_path = socket_path_from_env()
        try:
            self.reader, self.writer = await asyncio.open_unix_connection(
                path=self.socket_path
            )
        except OSError as e:
            raise ConnectFailed(f"Could not connect to {self.socket_path}: {e}") from e
        logger.debug("connected to %s", self.socket_path)

    async def send(self, payload_type: int, payload: bytes = b""):
        if not self.writer:
            raise WriteError(f"Not connected to {self.socket_path}")

        try:
            self.writer.write(encode_frame(payload_type, payload))
            await self.writer.drain()
        except OSError as e:
            raise WriteError(f"Failed to write to {self.socket_path}: {e}") from e

    async def receive(self) -> tuple[int, bytes]:
        """
        Reads one complete frame. readexactly keeps reading until the declared
        length arrived, a connection closed early is a ReadError.
        """
        try:
            header = await self.reader.readexactly(header_len)
            payload_length, payload_type = decode_header(header)
            payload = await self.reader.readexactly(payload_length)
        except asyncio.IncompleteReadError as e:
            raise ReadError(
                f"Short read from {self.socket_path}: "
                f"got {len(e.partial)} of {e.expected} bytes"
            ) from e
        except OSError as e:
            raise ReadError(f"Failed to read from {self.socket_path}: {e}") from e

        return payload_type, payload

    async def send_receive(self, payload_type: int, payload: bytes = b"") -> bytes:
        await self.send(payload_type, payload)
        response_type, response = await self.receive()
        if response_type != payload_type:
            raise ProtocolError(
                f"Sent message type {payload_type}, got reply type {response_type}"
            )
        return response

    async def close(self):
        if self.writer and not self.writer.is_closing():
            self.writer.close()
            try:
                await self.writer.wait_closed()
            except OSError as e:
                logger.debug("error while closing %s: %s", self.socket_path, e)


class SwayIPCConnection:
    """Talks the i3-ipc binary protocol directly over the sway socket."""

    def __init__(self, socket_path: str | None = None) -> None:
        self.socket = SwayIPCSocket(socket_path)

    async def __aenter__(self) -> "SwayIPCConnection":
        await self.socket.connect()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def get_tree(self) -> Node:
        logger.debug("requesting tree from %s", self.socket.socket_path)
        return decode_tree(await self.socket.send_receive(MessageType.GET_TREE))

    async def run_command(self, command: str) -> list[CommandResult]:
        logger.debug("executing command %r", command)
        payload = await self.socket.send_receive(
            MessageType.RUN_COMMAND, command.encode()
        )
        return decode_results(payload)

    async def close(self):
        await self.socket.close()
