import logging
from typing import NamedTuple

from swaycycle.data_types.tree import Node, NodeType
from swaycycle.errors import InvalidTreeError

logger = logging.getLogger(__name__)


class Window(NamedTuple):
    id: int
    focused: bool


def rec_parse_tree(nodes: list[Node], current_workspace: str) -> list[Window]:
    """
    Collects the windows below `nodes` depth first. Workspaces are the first
    layer below an output, so a window seen here is already known to live on
    the current workspace.
    """
    windows: list[Window] = []
    for node in nodes:
        if node.type == NodeType.WORKSPACE:
            if node.name == current_workspace:
                # only one workspace per output is current
                windows.extend(rec_parse_tree(node.children, current_workspace))
                return windows
            continue

        if node.is_window:
            windows.append(Window(node.id, node.focused))
        else:
            windows.extend(rec_parse_tree(node.children, current_workspace))

    return windows


def visible_windows(tree: Node) -> list[Window]:
    """
    Returns the windows of the workspace that is current on its output, in
    the order sway lists them: tiling before floating, depth first.
    """
    if tree.type != NodeType.ROOT and not tree.nodes:
        raise InvalidTreeError("Invalid or empty tree structure")

    windows: list[Window] = []
    for output in tree.nodes:
        if output.current_workspace:
            logger.debug("current workspace is %s", output.current_workspace)
            windows = rec_parse_tree(output.children, output.current_workspace)
            break

    logger.debug("visible windows: %s", windows)
    return windows
