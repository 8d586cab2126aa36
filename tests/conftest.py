"""
Shared fixtures.
"""

from pathlib import Path

import pytest

from geoconvert.core.crs.registry import CRSRegistry

SAMPLE_DATABASE = """\
# code;definition
4326;"WGS 84" +proj=longlat +datum=WGS84 +no_defs
3857;"WGS 84 / Pseudo-Mercator" +proj=merc +a=6378137 +b=6378137 +lat_ts=0.0 +lon_0=0.0 +x_0=0.0 +y_0=0 +k=1.0 +units=m +nadgrids=@null +wktext +no_defs
32631;"WGS 84 / UTM zone 31N" +proj=utm +zone=31 +datum=WGS84 +units=m +no_defs
9000;+proj=longlat +ellps=GRS80 +no_defs
9001;"Broken" +proj=does_not_exist +no_defs
abc;"Not a code" +proj=longlat +datum=WGS84 +no_defs
;"Missing code" +proj=longlat +datum=WGS84 +no_defs
9002;
no separator here
"""


@pytest.fixture
def sample_database(tmp_path: Path) -> Path:
    """Write a small EPSG database with a mix of good and malformed records."""
    path = tmp_path / "epsg.csv"
    path.write_text(SAMPLE_DATABASE, encoding="utf-8")
    return path


@pytest.fixture
def sample_registry(sample_database: Path) -> CRSRegistry:
    """Registry backed by the sample database."""
    return CRSRegistry(sample_database)
