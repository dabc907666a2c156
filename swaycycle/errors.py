class SwayCycleError(Exception):
    """Base class for everything swaycycle raises on purpose."""


class ConfigError(SwayCycleError, EnvironmentError):
    pass


class TransportError(SwayCycleError, ConnectionError):
    pass


class ConnectFailed(TransportError):
    pass


class WriteError(TransportError):
    pass


class ReadError(TransportError):
    pass


class ProtocolError(SwayCycleError):
    """The peer sent a frame that is not an i3-ipc frame."""


class DecodeError(SwayCycleError, ValueError):
    pass


class InvalidTreeError(SwayCycleError, ValueError):
    pass


class CommandRejected(SwayCycleError):
    def __init__(self, command: str, error: str):
        super().__init__(f"sway rejected '{command}': {error}")
        self.command = command
        self.error = error
