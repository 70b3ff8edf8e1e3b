"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify the package and its settings can be imported."""
    from sports_community.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert hasattr(settings, "port")


def test_settings_read_environment(mock_env):
    from sports_community.core.config import Settings

    settings = Settings()
    assert settings.mongo_database_name == "test_sports_community"
    assert settings.port == 3100
    assert settings.log_level == "DEBUG"
