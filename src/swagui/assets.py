"""Asset stores — where the Swagger UI CSS, JS and images come from.

The dispatcher only needs ``open(name)``. Three stores are provided:

- ``DirectoryAssets`` serves files from a directory on disk
- ``MemoryAssets`` serves bytes held in a mapping
- ``bundled_assets()`` serves the Swagger UI dist shipped by the
  ``swagger-ui-bundle`` distribution (``pip install swagui[bundle]``)
"""

import io
from collections.abc import Mapping
from pathlib import Path
from typing import BinaryIO, Protocol

from swagui.errors import ConfigurationError


class AssetStore(Protocol):
    """Anything that can open a named asset for binary reading.

    ``open`` raises ``OSError`` (usually ``FileNotFoundError``) when the
    asset cannot be opened.
    """

    def open(self, name: str) -> BinaryIO: ...


class DirectoryAssets:
    """Asset store backed by a directory.

    Security: resolves symlinks and verifies the final path is within
    the configured directory to prevent path traversal.
    """

    __slots__ = ("_directory",)

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory).resolve()

    @property
    def directory(self) -> Path:
        return self._directory

    def open(self, name: str) -> BinaryIO:
        file_path = (self._directory / name.lstrip("/")).resolve()
        if not file_path.is_relative_to(self._directory):
            msg = f"{name!r} is outside {self._directory}"
            raise PermissionError(msg)
        return file_path.open("rb")

    def __repr__(self) -> str:
        return f"DirectoryAssets({str(self._directory)!r})"


class MemoryAssets:
    """Asset store backed by an in-memory mapping of name to bytes."""

    __slots__ = ("_files",)

    def __init__(self, files: Mapping[str, bytes]) -> None:
        self._files = dict(files)

    def open(self, name: str) -> BinaryIO:
        try:
            data = self._files[name.lstrip("/")]
        except KeyError:
            raise FileNotFoundError(name) from None
        return io.BytesIO(data)


def bundled_assets() -> DirectoryAssets:
    """Asset store over the Swagger UI dist from ``swagger-ui-bundle``.

    Raises:
        ConfigurationError: If ``swagger-ui-bundle`` is not installed.
    """
    try:
        from swagger_ui_bundle import swagger_ui_path
    except ImportError:
        msg = (
            "The bundled Swagger UI assets require the 'swagger-ui-bundle' package. "
            "Install it with: pip install swagui[bundle]"
        )
        raise ConfigurationError(msg) from None
    return DirectoryAssets(swagger_ui_path)
