"""Tests for configuration loading."""

from pathlib import Path

from whisper_gateway.config import load_config

_ENV_VARS = [
    "WHISPER_DIR",
    "WHISPER_DEFAULT_MODEL",
    "WHISPER_TRANSCRIPTION_MODEL",
    "WHISPER_TIMEOUT_SECONDS",
    "SCRATCH_DIR",
    "API_HOST",
    "API_PORT",
]


def test_defaults(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.whisper.whisper_dir == Path("~/whisper.cpp").expanduser()
    assert config.whisper.binary_path == config.whisper.whisper_dir / "main"
    assert config.whisper.default_model == "medium"
    assert config.whisper.transcription_model == "medium"
    assert config.whisper.timeout_seconds is None
    assert config.server.port == 6660


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("WHISPER_DIR", str(tmp_path))
    monkeypatch.setenv("WHISPER_TRANSCRIPTION_MODEL", "tiny")
    monkeypatch.setenv("WHISPER_TIMEOUT_SECONDS", "90")
    monkeypatch.setenv("SCRATCH_DIR", str(tmp_path / "scratch"))
    monkeypatch.setenv("API_PORT", "8080")

    config = load_config()

    assert config.whisper.models_dir == tmp_path / "models"
    assert config.whisper.download_script == (
        tmp_path / "models" / "download-ggml-model.sh"
    )
    assert config.whisper.transcription_model == "tiny"
    assert config.whisper.timeout_seconds == 90.0
    assert config.scratch.directory == tmp_path / "scratch"
    assert config.server.port == 8080
