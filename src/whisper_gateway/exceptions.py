"""Custom exceptions for the whisper gateway."""


class TranscriptionError(Exception):
    """Raised when the whisper binary fails to produce a transcript."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")


class ModelInstallError(Exception):
    """Raised when the model download procedure fails."""

    def __init__(self, model: str, cause: Exception | None = None):
        self.model = model
        self.cause = cause
        super().__init__(f"Failed to install model '{model}'")


class InvalidModelNameError(Exception):
    """Raised when a model name cannot be mapped to a model file."""

    def __init__(self, model: str):
        self.model = model
        super().__init__(f"Invalid model name '{model}'")


class ScratchFileError(Exception):
    """Raised when audio cannot be staged in the scratch directory."""

    def __init__(self, directory: str, cause: Exception | None = None):
        self.directory = directory
        self.cause = cause
        super().__init__(f"Failed to write scratch file in '{directory}'")
