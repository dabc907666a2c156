from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, NotRequired, Optional, TypedDict

import orjson

from swaycycle.errors import DecodeError

RawNodeType = (
    Literal["root"]
    | Literal["output"]
    | Literal["workspace"]
    | Literal["con"]
    | Literal["floating_con"]
    | Literal["dockarea"]
)


class RawNode(TypedDict):
    """The subset of a get_tree node that swaycycle reads."""

    id: int
    type: RawNodeType
    name: Optional[str]
    nodes: list["RawNode"]
    floating_nodes: list["RawNode"]
    focused: bool
    window: NotRequired[Optional[int]]
    app_id: NotRequired[Optional[str]]
    current_workspace: NotRequired[Optional[str]]


class NodeType(Enum):
    ROOT = "root"
    OUTPUT = "output"
    WORKSPACE = "workspace"
    CON = "con"
    FLOATING_CON = "floating_con"
    # only found in i3 trees, holds bars
    DOCKAREA = "dockarea"


@dataclass(slots=True)
class Node:
    id: int
    type: NodeType
    name: str = ""
    nodes: list["Node"] = field(default_factory=list)
    floating_nodes: list["Node"] = field(default_factory=list)
    focused: bool = False
    window: int = 0
    app_id: str = ""
    current_workspace: str = ""

    @property
    def children(self) -> list["Node"]:
        """Tiling children followed by floating children."""
        return [*self.nodes, *self.floating_nodes]

    @property
    def is_window(self) -> bool:
        match self.type:
            case NodeType.CON | NodeType.FLOATING_CON:
                return self.window > 0 or self.app_id != ""
            case NodeType.ROOT | NodeType.OUTPUT | NodeType.WORKSPACE:
                return False
            case NodeType.DOCKAREA:
                return False

    @classmethod
    def from_raw(cls, raw: RawNode) -> "Node":
        if not isinstance(raw, dict):
            raise DecodeError(f"Expected a node object, got {type(raw).__name__}")

        try:
            node_id = raw["id"]
            node_type = NodeType(raw["type"])
        except KeyError as e:
            raise DecodeError(f"Node is missing the {e} field") from e
        except ValueError as e:
            raise DecodeError(f"Unknown node type {raw['type']!r}") from e

        if not isinstance(node_id, int):
            raise DecodeError(f"Node id must be an integer, got {node_id!r}")

        window = raw.get("window") or 0
        if not isinstance(window, int) or isinstance(window, bool):
            raise DecodeError(f"Node window must be an integer, got {window!r}")

        return cls(
            id=node_id,
            type=node_type,
            name=raw.get("name") or "",
            nodes=[cls.from_raw(n) for n in raw.get("nodes") or []],
            floating_nodes=[cls.from_raw(n) for n in raw.get("floating_nodes") or []],
            focused=bool(raw.get("focused")),
            window=window,
            app_id=raw.get("app_id") or "",
            current_workspace=raw.get("current_workspace") or "",
        )


def decode_tree(payload: bytes) -> Node:
    try:
        raw = orjson.loads(payload)
    except orjson.JSONDecodeError as e:
        raise DecodeError(f"Failed to decode tree: {e}") from e

    return Node.from_raw(raw)
