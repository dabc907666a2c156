import logging

import orjson

from swaycycle.errors import CommandRejected
from swaycycle.selector import find_next, find_prev
from swaycycle.source import TreeSource
from swaycycle.visibility import visible_windows

logger = logging.getLogger(__name__)


async def find_target(
    source: TreeSource, backward: bool = False, dump_tree: bool = False
) -> int:
    """
    Returns the con_id of the window to focus next, or 0 if there is nothing
    to cycle to.
    """
    tree = await source.get_tree()
    if dump_tree:
        dump = orjson.dumps(tree, option=orjson.OPT_INDENT_2).decode()
        logger.debug("processed sway tree:\n%s", dump)

    windows = visible_windows(tree)
    if not windows:
        return 0

    return find_prev(windows) if backward else find_next(windows)


async def switch_focus(source: TreeSource, con_id: int) -> None:
    command = f"[con_id={con_id}] focus"
    results = await source.run_command(command)

    if not results:
        raise CommandRejected(command, "no result returned")
    if not results[0].get("success"):
        raise CommandRejected(command, results[0].get("error", "unknown error"))

    logger.info("switched focus to con_id %d", con_id)


async def cycle(
    source: TreeSource,
    backward: bool = False,
    switch: bool = True,
    dump_tree: bool = False,
) -> int:
    async with source:
        con_id = await find_target(source, backward, dump_tree)
        if con_id and switch:
            await switch_focus(source, con_id)
        elif con_id:
            logger.info("would switch focus to con_id %d", con_id)
        else:
            logger.debug("nothing to switch to")
    return con_id
