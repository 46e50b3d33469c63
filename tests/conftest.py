"""Shared fixtures: a tmp_path whisper install and fake process backends."""

from pathlib import Path

import pytest
from fastapi.requests import HTTPConnection
from fastapi.testclient import TestClient

from whisper_gateway.config import AppConfig, ScratchConfig, ServerConfig, WhisperConfig
from whisper_gateway.dependencies import (
    get_access_policy,
    get_config,
    get_downloader,
    get_runner,
    get_scratch,
)
from whisper_gateway.domain import TranscriptionMode
from whisper_gateway.exceptions import ModelInstallError, TranscriptionError
from whisper_gateway.infrastructure import LocalScratchStorage
from whisper_gateway.interfaces import AccessPolicy, ModelDownloader, TranscriptionRunner
from whisper_gateway.main import app


class FakeRunner(TranscriptionRunner):
    """Echoes the staged audio back as text; audio equal to b"bad" fails.

    `crash` makes it raise an error outside the transcription taxonomy.
    """

    def __init__(self):
        self.calls: list[tuple[Path, TranscriptionMode, bytes]] = []
        self.fail = False
        self.crash = False

    def run(self, audio_path: Path, mode: TranscriptionMode) -> str:
        content = audio_path.read_bytes()
        self.calls.append((audio_path, mode, content))
        if self.fail or content == b"bad":
            raise TranscriptionError(audio_path.name)
        if self.crash:
            raise RuntimeError("runner crashed")
        return f"{mode.value}: {content.decode()}"


class FakeDownloader(ModelDownloader):
    def __init__(self):
        self.calls: list[str] = []
        self.fail = False

    def download(self, model: str) -> None:
        self.calls.append(model)
        if self.fail:
            raise ModelInstallError(model)


class DenyAllPolicy(AccessPolicy):
    def authorize(self, connection: HTTPConnection) -> bool:
        return False


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    whisper_dir = tmp_path / "whisper.cpp"
    (whisper_dir / "models").mkdir(parents=True)
    return AppConfig(
        whisper=WhisperConfig(whisper_dir=whisper_dir),
        scratch=ScratchConfig(directory=tmp_path / "scratch"),
        server=ServerConfig(),
    )


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def downloader() -> FakeDownloader:
    return FakeDownloader()


@pytest.fixture
def client(app_config, runner, downloader):
    scratch = LocalScratchStorage(app_config.scratch.directory)
    app.dependency_overrides[get_config] = lambda: app_config
    app.dependency_overrides[get_runner] = lambda: runner
    app.dependency_overrides[get_downloader] = lambda: downloader
    app.dependency_overrides[get_scratch] = lambda: scratch
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def deny_access():
    app.dependency_overrides[get_access_policy] = lambda: DenyAllPolicy()
    yield
    app.dependency_overrides.pop(get_access_policy, None)
