import pytest

from dependent_filters.config import Environment, Settings, get_settings


def test_assemble_list():
    assert Settings.assemble_list("http://localhost:8000") == ["http://localhost:8000"]
    assert Settings.assemble_list(["http://localhost:8000"]) == ["http://localhost:8000"]
    assert Settings.assemble_list("app.resources, app.lenses") == ["app.resources", "app.lenses"]
    assert Settings.assemble_list("") == []
    with pytest.raises(ValueError):
        Settings.assemble_list(123)


def test_get_settings_caching():
    assert get_settings() is get_settings()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    monkeypatch.setenv("RESOURCE_MODULES", '["app.resources"]')
    monkeypatch.setenv("URL_PREFIX", "/admin")

    settings = Settings()

    assert settings.ENV == Environment.prod
    assert settings.RESOURCE_MODULES == ["app.resources"]
    assert settings.URL_PREFIX == "/admin"


def test_settings_paths_configuration():
    settings = get_settings()
    assert settings.PATHS.BASE_DIR == settings.PATHS.ROOT_DIR / "dependent_filters"
    assert settings.PATHS.BASE_DIR.is_dir()
