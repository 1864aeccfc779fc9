from study_planner.config import Settings, get_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    assert get_settings() == Settings()


def test_dotenv_file_is_loaded(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    (tmp_path / ".env").write_text("PORT=8123\nLOG_LEVEL=debug\n")

    settings = get_settings()

    assert settings.port == 8123
    assert settings.log_level == "DEBUG"


def test_environment_wins_over_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("PORT=8123\n")
    monkeypatch.setenv("PORT", "9000")

    assert get_settings().port == 9000
