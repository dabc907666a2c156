from typing import NotRequired, TypedDict

import orjson

from swaycycle.errors import DecodeError


class CommandResult(TypedDict):
    success: bool
    parse_error: NotRequired[bool]
    error: NotRequired[str]


def decode_results(payload: bytes) -> list[CommandResult]:
    """
    A run_command reply holds one result object per command separated by `;`
    """
    try:
        results = orjson.loads(payload)
    except orjson.JSONDecodeError as e:
        raise DecodeError(f"Failed to decode command result: {e}") from e

    if not isinstance(results, list) or not all(isinstance(r, dict) for r in results):
        raise DecodeError(f"Expected a list of command results, got {results!r}")

    return results
