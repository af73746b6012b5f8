from xcoder_py.config.global_config import (
    BACKEND_URL_ENV,
    DEFAULT_BACKEND_URL,
    GlobalConfig,
)


def test_missing_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(BACKEND_URL_ENV, raising=False)
    config = GlobalConfig.load(tmp_path / "absent.json")
    assert config.backend_url == DEFAULT_BACKEND_URL
    assert config.request_timeout is None


def test_save_then_load(tmp_path, monkeypatch):
    monkeypatch.delenv(BACKEND_URL_ENV, raising=False)
    path = tmp_path / "config.json"
    GlobalConfig(backend_url="http://judge:9000", request_timeout=5.0).save(path)

    config = GlobalConfig.load(path)

    assert config.backend_url == "http://judge:9000"
    assert config.request_timeout == 5.0


def test_corrupt_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(BACKEND_URL_ENV, raising=False)
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert GlobalConfig.load(path).backend_url == DEFAULT_BACKEND_URL


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    GlobalConfig(backend_url="http://judge:9000").save(path)
    monkeypatch.setenv(BACKEND_URL_ENV, "http://override:1")

    assert GlobalConfig.load(path).backend_url == "http://override:1"
