from importlib.metadata import PackageNotFoundError, version

from .config import DEFAULT_CONFIG_FILENAME, Config
from .exceptions import (
    ConfigError,
    FileCreationError,
    FormatterError,
    GenerationError,
    LoaderError,
    ModdocsError,
    WriteError,
)

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("moddocs")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    "DEFAULT_CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "FileCreationError",
    "FormatterError",
    "GenerationError",
    "LoaderError",
    "ModdocsError",
    "WriteError",
]
