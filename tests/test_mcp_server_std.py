"""
Tests for letta_mcp/mcp_server_std.py - transport binding and entry point.
"""

import pytest
from mcp.server import Server

from conftest import make_ctx
from letta_mcp import SERVER_NAME
import letta_mcp.mcp_server_std as mcp_server_std


class TestCreateServer:

    def test_builds_named_server(self):
        server = mcp_server_std.create_server(make_ctx())
        assert isinstance(server, Server)
        assert server.name == SERVER_NAME


class TestMain:

    def test_fatal_startup_error_exits_nonzero(self, monkeypatch):
        async def broken_serve(settings=None):
            raise OSError("stdin closed unexpectedly")

        monkeypatch.setattr(mcp_server_std, "serve", broken_serve)

        with pytest.raises(SystemExit) as excinfo:
            mcp_server_std.main()
        assert excinfo.value.code == 1

    def test_clean_shutdown(self, monkeypatch):
        async def quiet_serve(settings=None):
            return None

        monkeypatch.setattr(mcp_server_std, "serve", quiet_serve)
        mcp_server_std.main()
