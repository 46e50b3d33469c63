"""Abstract interface for fetching model files."""

from abc import ABC, abstractmethod


class ModelDownloader(ABC):
    """Abstract base class for model download procedures."""

    @abstractmethod
    def download(self, model: str) -> None:
        """
        Downloads the named model into the models directory.

        Args:
            model: Short model name, e.g. "medium".

        Raises:
            ModelInstallError: If the download fails.
        """
