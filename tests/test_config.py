"""Config loading from the environment."""
import pytest
from photo_describer.config import Config


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr("photo_describer.config.load_dotenv", lambda **_: None)
    for name in (
        "OPENAI_BASE_URL",
        "VISION_MODEL",
        "VISION_TIMEOUT",
        "VISION_MAX_TOKENS",
        "TEMP_DIR",
        "ENDPOINT_PATH",
        "HOST",
        "PORT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_config_from_env_success(monkeypatch):
    """Happy-path: the API key is the only required variable."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test123")

    config = Config.from_env()

    assert config.openai_api_key == "sk-test123"


def test_config_missing_api_key_fails(monkeypatch):
    """Missing OPENAI_API_KEY must raise."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        Config.from_env()


def test_config_blank_api_key_fails(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "")

    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        Config.from_env()


def test_config_defaults(monkeypatch):
    """Optional fields reproduce the original service's fixed values."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    config = Config.from_env()

    assert config.openai_base_url is None
    assert config.vision_model == "gpt-4o"
    assert config.vision_timeout == 30.0
    assert config.vision_max_tokens == 500
    assert config.temp_dir is None
    assert config.endpoint_path == "/"
    assert config.port == 8000
    assert config.log_level == "INFO"


def test_config_overrides_from_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_BASE_URL", "https://proxy.example/v1")
    monkeypatch.setenv("VISION_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("VISION_TIMEOUT", "12.5")
    monkeypatch.setenv("VISION_MAX_TOKENS", "100")
    monkeypatch.setenv("TEMP_DIR", "/var/tmp/photos")
    monkeypatch.setenv("ENDPOINT_PATH", "/photo2")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")

    config = Config.from_env()

    assert config.openai_base_url == "https://proxy.example/v1"
    assert config.vision_model == "gpt-4o-mini"
    assert config.vision_timeout == 12.5
    assert config.vision_max_tokens == 100
    assert config.temp_dir == "/var/tmp/photos"
    assert config.endpoint_path == "/photo2"
    assert config.host == "127.0.0.1"
    assert config.port == 9000


def test_config_blank_optionals_become_defaults(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_BASE_URL", "")
    monkeypatch.setenv("TEMP_DIR", "")
    monkeypatch.setenv("ENDPOINT_PATH", "")

    config = Config.from_env()

    assert config.openai_base_url is None
    assert config.temp_dir is None
    assert config.endpoint_path == "/"


def test_config_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("VISION_TIMEOUT", "0")

    with pytest.raises(ValueError, match="VISION_TIMEOUT"):
        Config.from_env()


def test_config_rejects_relative_endpoint_path(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("ENDPOINT_PATH", "describe")

    with pytest.raises(ValueError, match="ENDPOINT_PATH"):
        Config.from_env()


def test_config_immutable():
    """Frozen dataclass: attribute assignment must fail."""
    config = Config(openai_api_key="sk-test")

    with pytest.raises(Exception):
        config.openai_api_key = "other"
