# tests for client lifecycle and configuration

from unittest.mock import patch

from dropout_client.config import Settings
from dropout_client.main import DropoutClient, open_client
from tests.conftest import PASSWORD, STUDENT_TOKEN


class TestLifecycle:

    async def test_start_and_shutdown(self, tmp_path, transport):
        client = DropoutClient(storage_path=str(tmp_path / "app.db"), transport=transport)
        await client.start()
        assert client.storage.conn is not None
        assert client.gateway.api is not None

        await client.shutdown()
        assert client.storage.conn is None
        assert client.gateway.api is None

    async def test_start_is_idempotent(self, tmp_path, transport):
        client = DropoutClient(storage_path=str(tmp_path / "app.db"), transport=transport)
        await client.start()
        conn = client.storage.conn
        await client.start()
        assert client.storage.conn is conn
        await client.shutdown()

    async def test_logging_configured_on_start_not_import(self, tmp_path, transport):
        client = DropoutClient(storage_path=str(tmp_path / "app.db"), transport=transport)
        with patch("dropout_client.main.setup_logging") as setup:
            setup.assert_not_called()
            await client.start()
        setup.assert_called_once_with()
        await client.shutdown()

    async def test_session_survives_restart(self, tmp_path, transport):
        kwargs = dict(
            storage_path=str(tmp_path / "app.db"),
            api_base_url="http://api.test",
            transport=transport,
        )
        async with open_client(**kwargs) as first:
            await first.auth.sign_in("sarah@student.com", PASSWORD)

        async with open_client(**kwargs) as second:
            assert await second.session.load_token() == STUDENT_TOKEN


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("API_BASE_URL", raising=False)
        s = Settings()
        assert s.REQUEST_TIMEOUT_SECONDS > 0
        assert s.STORAGE_PATH

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CHATBOT_API_BASE_URL", "http://chat.example")
        assert Settings().CHATBOT_API_BASE_URL == "http://chat.example"
