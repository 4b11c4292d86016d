from pathlib import Path

from config import Settings

ENV_KEYS = ("PORTFOLIO_DB_DIR", "PORTFOLIO_DB_NAME", "PORT", "PAGE_MODE", "RESUME_DISPOSITION", "CORS_ORIGINS", "LOG_LEVEL")


def _clear(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults(monkeypatch):
    _clear(monkeypatch)
    settings = Settings.from_env()

    assert settings.port == 3000
    assert settings.page_mode == "negotiate"
    assert settings.resume_disposition == "inline"
    assert settings.cors_origins == ["*"]
    assert settings.db_path.name == "portfolio.db"
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch, tmp_path):
    _clear(monkeypatch)
    monkeypatch.setenv("PORTFOLIO_DB_DIR", str(tmp_path))
    monkeypatch.setenv("PORTFOLIO_DB_NAME", "site")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("PAGE_MODE", "Static")
    monkeypatch.setenv("RESUME_DISPOSITION", "attachment")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    settings = Settings.from_env()

    assert settings.db_path == Path(tmp_path) / "site.db"
    assert settings.port == 8080
    assert settings.page_mode == "static"
    assert settings.resume_disposition == "attachment"
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_bad_values_fall_back(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.setenv("PAGE_MODE", "mixed")
    monkeypatch.setenv("RESUME_DISPOSITION", "download")
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    settings = Settings.from_env()

    assert settings.port == 3000
    assert settings.page_mode == "negotiate"
    assert settings.resume_disposition == "inline"
    assert settings.log_level == "INFO"


def test_log_level_is_normalised(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings.from_env().log_level == "DEBUG"


def test_app_starts_with_unknown_log_level(monkeypatch, tmp_path):
    from main import create_app

    _clear(monkeypatch)
    monkeypatch.setenv("PORTFOLIO_DB_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    app = create_app()

    assert app.state.settings.log_level == "INFO"


def test_module_app_database_lives_outside_source_tree():
    import main
    from config import BASE_DIR

    db_path = main.app.state.settings.db_path.resolve()
    assert BASE_DIR.resolve() not in db_path.parents
