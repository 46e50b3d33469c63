"""Local filesystem implementation of the ScratchStorage interface."""

import re
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from whisper_gateway.exceptions import ScratchFileError
from whisper_gateway.interfaces import ScratchStorage
from whisper_gateway.logging import setup_logging

logger = setup_logging()

_SAFE_SUFFIX = re.compile(r"^\.[A-Za-z0-9]{1,10}$")
_DEFAULT_SUFFIX = ".wav"


class LocalScratchStorage(ScratchStorage):
    """
    Stages audio in uniquely named files inside one directory.

    Client file names never become paths: only a validated suffix is kept so
    the binary can still sniff the container format.
    """

    def __init__(self, directory: Path):
        self._directory = directory

    @contextmanager
    def hold(self, data: BinaryIO, original_name: str) -> Iterator[Path]:
        path = self._write(data, original_name)
        try:
            yield path
        finally:
            path.unlink(missing_ok=True)
            logger.info("Scratch file removed", extra={"scratch_path": str(path)})

    def _write(self, data: BinaryIO, original_name: str) -> Path:
        path: Path | None = None
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=self._directory,
                prefix="whisper-",
                suffix=_suffix_for(original_name),
                delete=False,
            ) as scratch:
                path = Path(scratch.name)
                shutil.copyfileobj(data, scratch)
        except OSError as e:
            if path is not None:
                path.unlink(missing_ok=True)
            logger.exception(
                "Scratch file write failed",
                extra={"directory": str(self._directory)},
            )
            raise ScratchFileError(str(self._directory), e) from e

        logger.info(
            "Audio staged",
            extra={"original_name": original_name, "scratch_path": str(path)},
        )
        return path


def _suffix_for(original_name: str) -> str:
    suffix = Path(original_name).suffix
    if _SAFE_SUFFIX.match(suffix):
        return suffix.lower()
    return _DEFAULT_SUFFIX
