from goldrush_mcp.config import (
    GoldRushConfig,
    _load_max_aggregate_items,
    _load_port,
    _load_timeout,
    load_api_key,
)


def test_load_timeout_invalid_env(monkeypatch):
    monkeypatch.setenv("GOLDRUSH_HTTP_TIMEOUT", "not-a-number")
    assert _load_timeout() == 30.0  # falls back to default on parse error


def test_load_timeout_valid_env(monkeypatch):
    monkeypatch.setenv("GOLDRUSH_HTTP_TIMEOUT", "5.5")
    assert _load_timeout() == 5.5


def test_max_aggregate_items(monkeypatch):
    monkeypatch.delenv("GOLDRUSH_MAX_AGGREGATE_ITEMS", raising=False)
    assert _load_max_aggregate_items() is None
    monkeypatch.setenv("GOLDRUSH_MAX_AGGREGATE_ITEMS", "500")
    assert _load_max_aggregate_items() == 500
    for raw in ("0", "-3", "lots"):
        monkeypatch.setenv("GOLDRUSH_MAX_AGGREGATE_ITEMS", raw)
        assert _load_max_aggregate_items() is None


def test_load_port(monkeypatch):
    monkeypatch.setenv("GOLDRUSH_MCP_PORT", "9100")
    assert _load_port() == 9100
    monkeypatch.setenv("GOLDRUSH_MCP_PORT", "http")
    assert _load_port() == 8000


def test_load_api_key_env_over_file(monkeypatch, tmp_path):
    key_file = tmp_path / "apikey.txt"
    key_file.write_text("file-key", encoding="utf-8")
    monkeypatch.setenv("GOLDRUSH_API_KEY", "  env-key \n")
    monkeypatch.setenv("GOLDRUSH_API_KEY_FILE", str(key_file))
    assert load_api_key() == "env-key"


def test_load_api_key_from_file(monkeypatch, tmp_path):
    key_file = tmp_path / "apikey.txt"
    key_file.write_text("file-key\n", encoding="utf-8")
    monkeypatch.delenv("GOLDRUSH_API_KEY", raising=False)
    monkeypatch.setenv("GOLDRUSH_API_KEY_FILE", str(key_file))
    assert load_api_key() == "file-key"


def test_load_api_key_absent(monkeypatch, tmp_path):
    monkeypatch.setenv("GOLDRUSH_API_KEY", "   ")
    monkeypatch.setenv("GOLDRUSH_API_KEY_FILE", str(tmp_path / "missing.txt"))
    assert load_api_key() is None


def test_config_defaults():
    cfg = GoldRushConfig(api_key="k")
    assert cfg.api_key == "k"
    assert cfg.base_url.startswith("https://")
    assert cfg.timeout > 0
