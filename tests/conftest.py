import logging

import orjson
import pytest
import pytest_asyncio

from tests.fakes import FakeSway


@pytest_asyncio.fixture
async def fake_sway(tmp_path):
    sway = FakeSway(str(tmp_path / "sway.sock"))
    await sway.start()
    yield sway
    await sway.stop()


@pytest.fixture
def tree_payload():
    def dump(tree: dict) -> bytes:
        return orjson.dumps(tree)

    return dump


@pytest.fixture(autouse=True)
def reset_swaycycle_logger():
    yield
    logger = logging.getLogger("swaycycle")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
