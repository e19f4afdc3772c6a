"""Document registry — instance name to API description document.

The documentation generator registers its output here once, at import
or startup; the handler looks documents up by name on every
``doc.json`` request. Several documents can coexist under different
instance names.

Free-threading safety:
    - The name → document dict is only touched under ``threading.Lock``
    - Provider documents are evaluated outside the lock
"""

import json
import logging
import threading
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from swagui.config import DEFAULT_INSTANCE
from swagui.errors import ConfigurationError, DocumentNotRegistered

logger = logging.getLogger("swagui.registry")


@runtime_checkable
class DocProvider(Protocol):
    """A document produced on demand, e.g. by a generator that can be re-run."""

    def read_doc(self) -> str | bytes: ...


type Document = str | bytes | Mapping[str, Any] | DocProvider


def _to_bytes(doc: Document) -> bytes:
    if isinstance(doc, DocProvider):
        doc = doc.read_doc()
    if isinstance(doc, bytes):
        return doc
    if isinstance(doc, str):
        return doc.encode("utf-8")
    return json.dumps(doc).encode("utf-8")


class DocumentRegistry:
    """Thread-safe mapping of instance names to API documents."""

    __slots__ = ("_docs", "_lock")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._docs: dict[str, Document] = {}

    def register(self, name: str, doc: Document, *, replace: bool = False) -> None:
        """Register *doc* under *name*.

        Raises:
            ConfigurationError: If *name* is already registered and
                *replace* is false.
        """
        if not isinstance(doc, (str, bytes, Mapping, DocProvider)):
            msg = f"cannot register {type(doc).__name__} as an API document"
            raise ConfigurationError(msg)
        with self._lock:
            if name in self._docs and not replace:
                msg = f"a document is already registered as {name!r}"
                raise ConfigurationError(msg)
            self._docs[name] = doc
        logger.debug("registered document %r", name)

    def unregister(self, name: str) -> None:
        """Remove *name*; unknown names are ignored."""
        with self._lock:
            removed = self._docs.pop(name, None)
        if removed is not None:
            logger.debug("unregistered document %r", name)

    def read_doc(self, name: str = DEFAULT_INSTANCE) -> bytes:
        """Return the document registered as *name*, encoded as bytes.

        Raises:
            DocumentNotRegistered: If nothing is registered under *name*.
        """
        with self._lock:
            doc = self._docs.get(name)
        if doc is None:
            raise DocumentNotRegistered(name)
        return _to_bytes(doc)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._docs)

    def clear(self) -> None:
        with self._lock:
            self._docs.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._docs

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)


# Process-wide registry used when a handler is not given its own.
default_registry = DocumentRegistry()


def register(name: str, doc: Document, *, replace: bool = False) -> None:
    """Register *doc* in the process-wide registry."""
    default_registry.register(name, doc, replace=replace)


def unregister(name: str) -> None:
    default_registry.unregister(name)


def read_doc(name: str = DEFAULT_INSTANCE) -> bytes:
    """Read a document from the process-wide registry."""
    return default_registry.read_doc(name)
