"""
Coordinate projection capability.

A projector maps x/y coordinates from one CRS into another. The geometry
transform only depends on the ``Projector`` call signature; the pyproj-backed
implementation below is what the registry hands out.
"""

import logging
from typing import Callable, Tuple, Union

import numpy as np
from pyproj import Transformer
from pyproj.exceptions import ProjError

from geoconvert.core.errors import TransformationError
from geoconvert.models.crs import CrsDefinition

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray]

# (x, y) -> (x', y'); accepts scalars or equally sized numpy arrays
Projector = Callable[[ArrayLike, ArrayLike], Tuple[ArrayLike, ArrayLike]]


class PyprojProjector:
    """
    Projector backed by a pyproj Transformer.

    Axis order is always x/longitude first, matching GeoJSON and WKT. The
    underlying Transformer is safe to share between threads.
    """

    def __init__(self, source: CrsDefinition, target: CrsDefinition):
        """
        Build the transformation pipeline.

        Args:
            source: Source CRS
            target: Target CRS

        Raises:
            TransformationError: If pyproj cannot build a pipeline between them
        """
        self.source = source
        self.target = target

        try:
            self._transformer = Transformer.from_crs(
                source.crs,
                target.crs,
                always_xy=True,
            )
        except ProjError as e:
            raise TransformationError(
                f"No transformation available from EPSG:{source.epsg} to EPSG:{target.epsg}",
                source_epsg=source.epsg,
                target_epsg=target.epsg,
                details={"error": str(e)},
            )

        logger.debug(
            f"Created projector EPSG:{source.epsg} -> EPSG:{target.epsg}: "
            f"{self._transformer.description}"
        )

    def __call__(self, x: ArrayLike, y: ArrayLike) -> Tuple[ArrayLike, ArrayLike]:
        """
        Project coordinates.

        Args:
            x: X coordinate(s) (or longitude)
            y: Y coordinate(s) (or latitude)

        Returns:
            Projected (x, y), same shape as the input

        Raises:
            TransformationError: If PROJ rejects the coordinates
        """
        try:
            return self._transformer.transform(x, y)
        except ProjError as e:
            raise TransformationError(
                f"Projection from EPSG:{self.source.epsg} to EPSG:{self.target.epsg} failed: {e}",
                source_epsg=self.source.epsg,
                target_epsg=self.target.epsg,
            )

    def __repr__(self) -> str:
        return f"PyprojProjector(EPSG:{self.source.epsg} -> EPSG:{self.target.epsg})"
