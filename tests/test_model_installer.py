"""Tests for ModelInstaller."""

from unittest.mock import Mock

import pytest

from whisper_gateway.domain import ModelInstaller
from whisper_gateway.exceptions import InvalidModelNameError, ModelInstallError
from whisper_gateway.interfaces import ModelDownloader


@pytest.fixture
def downloader():
    return Mock(spec=ModelDownloader)


def test_model_path_follows_ggml_naming(tmp_path, downloader):
    installer = ModelInstaller(tmp_path, downloader)

    assert installer.model_path("large-v3") == tmp_path / "ggml-large-v3.bin"


def test_present_model_skips_download(tmp_path, downloader):
    (tmp_path / "ggml-tiny.bin").write_bytes(b"weights")
    installer = ModelInstaller(tmp_path, downloader)

    result = installer.ensure("tiny")

    assert result.already_installed
    downloader.download.assert_not_called()


def test_absent_model_is_downloaded(tmp_path, downloader):
    installer = ModelInstaller(tmp_path, downloader)

    result = installer.ensure("small")

    assert not result.already_installed
    assert result.model == "small"
    downloader.download.assert_called_once_with("small")


def test_download_error_propagates(tmp_path, downloader):
    downloader.download.side_effect = ModelInstallError("small")
    installer = ModelInstaller(tmp_path, downloader)

    with pytest.raises(ModelInstallError):
        installer.ensure("small")


@pytest.mark.parametrize("model", ["", "..", "../tiny", "tiny/x", ".tiny", "tiny\n"])
def test_invalid_names_never_touch_disk(tmp_path, downloader, model):
    installer = ModelInstaller(tmp_path, downloader)

    with pytest.raises(InvalidModelNameError):
        installer.ensure(model)
    downloader.download.assert_not_called()
