from unittest.mock import AsyncMock, Mock, patch

import orjson
import pytest

from swaycycle.cycle import switch_focus
from swaycycle.errors import CommandRejected, DecodeError, TransportError
from swaycycle.swaymsg import SwaymsgConnection
from tests.trees import scenario_a


def fake_process(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0):
    proc = Mock(returncode=returncode)
    proc.communicate = AsyncMock(return_value=(stdout, stderr))
    return proc


@pytest.mark.asyncio
async def test_get_tree_runs_swaymsg():
    proc = fake_process(orjson.dumps(scenario_a()))
    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)) as exe:
        async with SwaymsgConnection() as ipc:
            tree = await ipc.get_tree()

    assert exe.call_args.args == ("swaymsg", "-t", "get_tree", "-r")
    assert tree.nodes[1].current_workspace == "1"


@pytest.mark.asyncio
async def test_run_command_passes_socket():
    proc = fake_process(b'[{"success": true}]')
    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)) as exe:
        ipc = SwaymsgConnection(socket_path="/run/user/1000/sway-ipc.sock")
        results = await ipc.run_command("[con_id=12] focus")

    assert exe.call_args.args == (
        "swaymsg",
        "-s",
        "/run/user/1000/sway-ipc.sock",
        "-r",
        "--",
        "[con_id=12] focus",
    )
    assert results == [{"success": True}]


@pytest.mark.asyncio
async def test_stderr_output_is_an_error():
    proc = fake_process(b"", b"Unable to retrieve socket path")
    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(TransportError, match="Unable to retrieve socket path"):
            await SwaymsgConnection().get_tree()


@pytest.mark.asyncio
async def test_failed_command_is_rejected_with_sways_error():
    proc = fake_process(
        b'[{"success": false, "parse_error": false, "error": "No matching node"}]',
        returncode=2,
    )
    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(CommandRejected, match="No matching node"):
            await switch_focus(SwaymsgConnection(), 99)


@pytest.mark.asyncio
async def test_ipc_failure_exit_is_an_error():
    proc = fake_process(b"", returncode=1)
    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(TransportError, match="exited with 1"):
            await SwaymsgConnection().run_command("[con_id=1] focus")


@pytest.mark.asyncio
async def test_failed_command_with_garbage_output_is_an_error():
    proc = fake_process(b"Error: no matching node", returncode=2)
    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(TransportError, match="exited with 2"):
            await SwaymsgConnection().run_command("[con_id=1] focus")


@pytest.mark.asyncio
async def test_failed_command_with_stderr_is_an_error():
    proc = fake_process(b'[{"success": false}]', b"sway is gone", returncode=2)
    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(TransportError, match="sway is gone"):
            await SwaymsgConnection().run_command("[con_id=1] focus")


@pytest.mark.asyncio
async def test_get_tree_exit_2_is_an_error():
    proc = fake_process(b"{}", returncode=2)
    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(TransportError, match="exited with 2"):
            await SwaymsgConnection().get_tree()


@pytest.mark.asyncio
async def test_missing_executable():
    exe = AsyncMock(side_effect=FileNotFoundError(2, "No such file or directory"))
    with patch("asyncio.create_subprocess_exec", exe):
        with pytest.raises(TransportError, match="Failed to execute swaymsg"):
            await SwaymsgConnection().get_tree()


@pytest.mark.asyncio
async def test_garbage_output():
    proc = fake_process(b"this is not json")
    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
        with pytest.raises(DecodeError):
            await SwaymsgConnection().get_tree()
