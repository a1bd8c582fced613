"""Exceptions for TCX Power Scaler."""


class ScalerError(Exception):
    """Base exception for scaler errors."""
    pass


class ConfigurationError(ScalerError):
    """No usable scale factor or folder; the run cannot start."""
    pass


class FileOperationError(ScalerError):
    """File-level I/O failure."""

    def __init__(self, path, message):
        self.path = path
        super().__init__(f"{path}: {message}")


class BackupError(FileOperationError):
    """The original file could not be backed up."""
    pass


class WriteError(FileOperationError):
    """The scaled document could not be written back."""
    pass
