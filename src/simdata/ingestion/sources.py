"""
Raw document sources.

A source only knows how to produce the untyped JSON document of one
domain; validation is the loader's job.
"""

import copy
import json
from importlib import resources
from pathlib import Path
from typing import Any, Protocol

from simdata.config.settings import SimdataConfig
from simdata.errors import SourceError
from simdata.schemas.registry import Domain
from simdata.utils.logging import get_logger

log = get_logger(__name__)

PACKAGED_FILES: dict[Domain, str] = {
    Domain.TARIFFS: "tariffs.json",
    Domain.EMISSIONS: "emissions.json",
    Domain.SIMULATION_PARAMS: "simulation_params.json",
}


class DocumentSource(Protocol):
    """Anything that can produce a raw document."""

    def read(self) -> Any:
        """Return the untyped document. Raises SourceError on failure."""
        ...

    def describe(self) -> str:
        """Human-readable origin, used in logs and error messages."""
        ...


def _parse_json(text: str, origin: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SourceError(origin, f"malformed JSON: {e}") from e


class JsonFileDocument:
    """JSON document stored on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read(self) -> Any:
        log.debug("Reading document", path=str(self.path))
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise SourceError(self.describe(), "file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise SourceError(self.describe(), f"{type(e).__name__}: {e}") from e
        return _parse_json(text, self.describe())

    def describe(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"JsonFileDocument({str(self.path)!r})"


class PackagedDocument:
    """JSON fixture shipped inside the ``simdata.data`` directory."""

    def __init__(self, filename: str) -> None:
        self.filename = filename

    def read(self) -> Any:
        resource = resources.files("simdata") / "data" / self.filename
        try:
            text = resource.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise SourceError(self.describe(), "packaged fixture missing") from e
        return _parse_json(text, self.describe())

    def describe(self) -> str:
        return f"package:simdata/data/{self.filename}"

    def __repr__(self) -> str:
        return f"PackagedDocument({self.filename!r})"


class InMemoryDocument:
    """
    Document held in process, mainly for tests and embedding applications.

    Each read returns a deep copy, so a caller mutating one result
    cannot change what the next load sees.
    """

    def __init__(self, document: Any, name: str = "memory") -> None:
        self._document = document
        self.name = name

    def read(self) -> Any:
        return copy.deepcopy(self._document)

    def describe(self) -> str:
        return f"<{self.name}>"

    def __repr__(self) -> str:
        return f"InMemoryDocument(name={self.name!r})"


def packaged_source(domain: Domain) -> PackagedDocument:
    """Default source of a domain: its bundled fixture."""
    return PackagedDocument(PACKAGED_FILES[domain])


def source_for(domain: Domain, config: SimdataConfig | None = None) -> DocumentSource:
    """
    Build the document source for a domain.

    Args:
        domain: Domain to build the source for.
        config: Optional configuration with file overrides.

    Returns:
        A file source when the domain has an override, else the packaged fixture.
    """
    if config is not None:
        path = config.sources.resolve(domain)
        if path is not None:
            return JsonFileDocument(path)
    return packaged_source(domain)
