"""
EPSG code registry.

The registry reads a flat ``<code>;<definition>`` database once, resolves
codes to pyproj CRS objects on demand and caches both the resolved CRS
definitions and the projectors built between pairs of them. Entries are
never evicted.

Definitions are either WKT or a PROJ string prefixed with a quoted name:

    28992;"Amersfoort / RD New" +proj=sterea +lat_0=52.156... +units=m +no_defs
"""

import logging
import threading
from importlib import resources
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Tuple

from pyproj import CRS
from pyproj.exceptions import CRSError

from geoconvert.core.config import settings
from geoconvert.core.crs.projector import PyprojProjector
from geoconvert.core.errors import EpsgDatabaseError, UnsupportedCRSError
from geoconvert.models.crs import CrsDefinition, EpsgRegistryEntry, extract_crs_name
from geoconvert.utils.logging import log_performance

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = ";"

WKT_CRS_KEYWORDS = (
    "GEOGCS",
    "PROJCS",
    "GEOCCS",
    "COMPD_CS",
    "GEOGCRS",
    "GEODCRS",
    "PROJCRS",
    "COMPOUNDCRS",
    "BOUNDCRS",
)


@log_performance(log_level=logging.DEBUG)
def parse_database(lines) -> Dict[int, str]:
    """
    Parse database records.

    Lines with an unparsable code, a missing separator or a blank definition
    are skipped. Comment lines fall out because their code does not parse.

    Args:
        lines: Iterable of text lines

    Returns:
        Mapping of EPSG code to definition text
    """
    database: Dict[int, str] = {}
    skipped = 0

    for line in lines:
        line = line.strip()
        if not line:
            continue

        separator = line.find(RECORD_SEPARATOR)
        if separator <= 0:
            skipped += 1
            continue

        try:
            code = int(line[:separator])
        except ValueError:
            skipped += 1
            continue

        definition = line[separator + 1 :].strip()
        if not definition:
            skipped += 1
            continue

        database[code] = definition

    if skipped:
        logger.debug(f"Skipped {skipped} malformed EPSG database records")

    return database


def build_crs(definition: str) -> CRS:
    """
    Construct a pyproj CRS from definition text.

    Args:
        definition: WKT, or a PROJ string optionally prefixed with a quoted name

    Returns:
        pyproj CRS

    Raises:
        CRSError: If pyproj rejects the definition
    """
    text = definition.strip()
    if text.upper().startswith(WKT_CRS_KEYWORDS):
        return CRS.from_wkt(text)

    if text.startswith('"'):
        closing = text.find('"', 1)
        if closing > 0:
            text = text[closing + 1 :].strip()

    return CRS.from_proj4(text)


class CRSRegistry:
    """
    Thread-safe registry of EPSG definitions.

    A single lock guards the one-time database load and every cache insert.
    Cache hits are plain dict reads and take no lock.
    """

    def __init__(self, database_path: Optional[Path] = None):
        """
        Initialize the registry without loading anything.

        Args:
            database_path: EPSG database file; the bundled resource when None
        """
        self.database_path = database_path
        self._lock = threading.Lock()
        self._loaded = False
        self._database: Dict[int, str] = {}
        self._definitions: Dict[int, CrsDefinition] = {}
        self._projectors: Dict[Tuple[int, int], PyprojProjector] = {}

    def _read_lines(self) -> List[str]:
        try:
            if self.database_path is not None:
                return Path(self.database_path).read_text(encoding="utf-8").splitlines()
            resource = resources.files("geoconvert.data") / "epsg.csv"
            return resource.read_text(encoding="utf-8").splitlines()
        except (OSError, ModuleNotFoundError) as e:
            location = str(self.database_path) if self.database_path else "geoconvert/data/epsg.csv"
            raise EpsgDatabaseError(
                f"EPSG database could not be read: {e}",
                path=location,
            )

    def load_once(self) -> None:
        """
        Load the EPSG database if it has not been loaded yet.

        Raises:
            EpsgDatabaseError: If the database resource is missing or unreadable
        """
        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return

            self._database = parse_database(self._read_lines())
            self._loaded = True

        logger.info(f"Loaded {len(self._database)} EPSG definitions")

    def resolve(self, code: int) -> CrsDefinition:
        """
        Resolve an EPSG code to its CRS definition.

        Args:
            code: EPSG code

        Returns:
            Cached or newly constructed definition

        Raises:
            UnsupportedCRSError: If the code is absent or its definition is unusable
        """
        cached = self._definitions.get(code)
        if cached is not None:
            return cached

        self.load_once()

        definition = self._database.get(code)
        if definition is None:
            raise UnsupportedCRSError(code)

        with self._lock:
            cached = self._definitions.get(code)
            if cached is not None:
                return cached

            try:
                crs = build_crs(definition)
            except CRSError as e:
                logger.warning(f"EPSG:{code} definition rejected by pyproj: {e}")
                raise UnsupportedCRSError(
                    code,
                    reason="Its projection definition could not be constructed.",
                    details={"error": str(e)},
                )

            resolved = CrsDefinition(
                epsg=code,
                name=extract_crs_name(definition),
                definition=definition,
                crs=crs,
            )
            self._definitions[code] = resolved

        return resolved

    def get_transform(self, source: int, target: int) -> PyprojProjector:
        """
        Get the projector between two EPSG codes.

        Args:
            source: Source EPSG code
            target: Target EPSG code

        Returns:
            Cached or newly built projector

        Raises:
            UnsupportedCRSError: If either code cannot be resolved
            TransformationError: If no pipeline exists between the two CRS
        """
        key = (source, target)
        cached = self._projectors.get(key)
        if cached is not None:
            return cached

        source_definition = self.resolve(source)
        target_definition = self.resolve(target)

        with self._lock:
            cached = self._projectors.get(key)
            if cached is not None:
                return cached

            projector = PyprojProjector(source_definition, target_definition)
            self._projectors[key] = projector

        return projector

    def get_entry(self, code: int) -> EpsgRegistryEntry:
        """
        Get the raw database record for a code.

        Raises:
            UnsupportedCRSError: If the code is absent
        """
        self.load_once()
        definition = self._database.get(code)
        if definition is None:
            raise UnsupportedCRSError(code)
        return EpsgRegistryEntry(code=code, definition=definition)

    def is_valid(self, code: int) -> bool:
        """Check whether the database holds a definition for the code."""
        self.load_once()
        return code in self._database

    def count(self) -> int:
        """Number of codes in the database."""
        self.load_once()
        return len(self._database)

    def list_codes(self) -> FrozenSet[int]:
        """All codes in the database."""
        self.load_once()
        return frozenset(self._database)

    def list_codes_with_names(self) -> List[Tuple[int, str]]:
        """
        List every code with its display name.

        Returns:
            (code, name) pairs sorted by code; the name is the first quoted
            substring of the definition, or "Unknown"
        """
        self.load_once()
        return [
            (code, extract_crs_name(definition))
            for code, definition in sorted(self._database.items())
        ]


_default_registry: Optional[CRSRegistry] = None
_default_registry_lock = threading.Lock()


def get_registry() -> CRSRegistry:
    """
    Get the process-wide registry.

    Uses ``settings.epsg_database_path`` when set, otherwise the bundled
    database. The registry is created lazily but its database is only read
    on first use.
    """
    global _default_registry

    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = CRSRegistry(settings.epsg_database_path)

    return _default_registry


def is_valid_epsg_code(code: int) -> bool:
    """Check whether an EPSG code is supported by the default registry."""
    return get_registry().is_valid(code)


def supported_epsg_count() -> int:
    """Number of EPSG codes supported by the default registry."""
    return get_registry().count()


def supported_epsg_codes() -> FrozenSet[int]:
    """EPSG codes supported by the default registry."""
    return get_registry().list_codes()


def supported_epsg_codes_with_names() -> List[Tuple[int, str]]:
    """(code, name) pairs of the default registry, sorted by code."""
    return get_registry().list_codes_with_names()
