"""
Tests for the application lifespan: database open/close and container reset.
"""
from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient

from sports_community.di import container as container_module
from sports_community.main import app


def test_shutdown_closes_database_and_drops_container(container):
    close_database = MagicMock()

    with patch.object(container_module, "_container", container), patch(
        "sports_community.main.connect_database", new=AsyncMock(return_value=True)
    ), patch("sports_community.main.close_database", new=close_database):
        with TestClient(app):
            assert container_module.get_container() is container

        close_database.assert_called_once()
        # the next lookup builds a container over a fresh client
        assert container_module._container is None


def test_unreachable_database_does_not_block_startup(container):
    with patch.object(container_module, "_container", container), patch(
        "sports_community.main.connect_database", new=AsyncMock(side_effect=RuntimeError("no servers"))
    ), patch("sports_community.main.close_database", new=MagicMock()):
        with TestClient(app) as client:
            assert client.get("/api/users").json() == []
