"""Thread-safe planar geometry operations over WKT and GeoJSON input."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import shapely.wkt
from shapely.errors import ShapelyError
from shapely.geometry.base import BaseGeometry

_WKT_TYPES = (
    "POINT",
    "LINESTRING",
    "POLYGON",
    "MULTIPOINT",
    "MULTILINESTRING",
    "MULTIPOLYGON",
    "GEOMETRYCOLLECTION",
)

_BUFFER_QUADRANT_SEGMENTS = 8


class GeometryError(Exception):
    """Raised when geometry input is malformed or an operation fails."""


class ServiceClosedError(GeometryError):
    """Raised when a closed service is asked to do work."""

    def __init__(self) -> None:
        super().__init__("geometry context is not initialized")


@dataclass
class GeometryInput:
    """Geometry given either as a WKT string or as a GeoJSON mapping."""

    wkt: str = ""
    geojson: Mapping[str, Any] | None = None
    srid: int = 0


@dataclass(frozen=True, eq=False)
class Geometry:
    """A parsed geometry produced by a :class:`Service`."""

    shape: BaseGeometry


def _xy(coord: Any) -> tuple[float, float] | None:
    if not isinstance(coord, (list, tuple)) or len(coord) < 2:
        return None
    x, y = coord[0], coord[1]
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (x, y)):
        return None
    return float(x), float(y)


def _coordinate_text(coords: Sequence[Any]) -> str:
    parts = []
    for index, coord in enumerate(coords):
        xy = _xy(coord)
        if xy is None:
            continue
        separator = ", " if index > 0 else ""
        parts.append(f"{separator}{xy[0]:f} {xy[1]:f}")
    return "".join(parts)


def geojson_to_wkt(geo_type: str, coords: Any) -> str:
    """Convert GeoJSON Point, LineString or Polygon coordinates to WKT."""
    if geo_type == "Point":
        xy = _xy(coords)
        if xy is None:
            raise GeometryError("invalid Point coordinates")
        return f"POINT({xy[0]:f} {xy[1]:f})"

    if geo_type == "Polygon":
        if isinstance(coords, (list, tuple)) and coords:
            ring = coords[0]
            if isinstance(ring, (list, tuple)) and len(ring) >= 4:
                return f"POLYGON(({_coordinate_text(ring)}))"
        raise GeometryError("invalid Polygon coordinates")

    if geo_type == "LineString":
        if isinstance(coords, (list, tuple)) and len(coords) >= 2:
            return f"LINESTRING({_coordinate_text(coords)})"
        raise GeometryError("invalid LineString coordinates")

    raise GeometryError(f"unsupported GeoJSON type: {geo_type}")


def _require(*geoms: Any) -> None:
    if any(not isinstance(g, Geometry) for g in geoms):
        raise GeometryError("invalid geometry")


class Service:
    """Parses geometries and runs spatial predicates and operations on them."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the service; safe to call more than once."""
        with self._lock:
            self._closed = True

    def __enter__(self) -> Service:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def _session(self) -> Iterator[None]:
        with self._lock:
            if self._closed:
                raise ServiceClosedError()
            yield

    def parse_geometry(self, data: GeometryInput) -> Geometry:
        """Parse WKT or GeoJSON input into a valid geometry."""
        with self._session():
            if data.wkt:
                wkt = data.wkt
            elif data.geojson is not None:
                geo_type = data.geojson.get("type")
                if not isinstance(geo_type, str):
                    raise GeometryError("invalid GeoJSON: missing type")
                if "coordinates" not in data.geojson:
                    raise GeometryError("invalid GeoJSON: missing coordinates")
                try:
                    wkt = geojson_to_wkt(geo_type, data.geojson["coordinates"])
                except GeometryError as err:
                    raise GeometryError(f"failed to convert GeoJSON to WKT: {err}") from err
            else:
                raise GeometryError(
                    "no geometry provided: either WKT or GeoJSON is required"
                )

            if not wkt:
                raise GeometryError("empty WKT string")

            try:
                shape = shapely.wkt.loads(wkt)
            except (ShapelyError, ValueError) as err:
                raise GeometryError(f"failed to parse WKT geometry: {wkt}") from err

            if not shape.is_valid:
                raise GeometryError(f"invalid geometry: {wkt}")
            return Geometry(shape)

    def to_wkt(self, geom: Geometry) -> str:
        """Return the WKT text of a geometry."""
        _require(geom)
        with self._session():
            try:
                return geom.shape.wkt
            except (ShapelyError, ValueError) as err:
                raise GeometryError("failed to convert geometry to WKT") from err

    def within(self, a: Geometry, b: Geometry) -> bool:
        """Whether ``a`` lies entirely within ``b``."""
        _require(a, b)
        with self._session():
            try:
                return bool(a.shape.within(b.shape))
            except ShapelyError as err:
                raise GeometryError("within operation failed") from err

    def intersects(self, a: Geometry, b: Geometry) -> bool:
        """Whether ``a`` and ``b`` share any point."""
        _require(a, b)
        with self._session():
            try:
                return bool(a.shape.intersects(b.shape))
            except ShapelyError as err:
                raise GeometryError("intersects operation failed") from err

    def distance(self, a: Geometry, b: Geometry) -> float:
        """Minimum Euclidean distance between two geometries."""
        _require(a, b)
        with self._session():
            try:
                return float(a.shape.distance(b.shape))
            except ShapelyError as err:
                raise GeometryError("failed to calculate distance") from err

    def buffer(self, geom: Geometry, radius: float) -> Geometry:
        """Area within ``radius`` of ``geom``; negative radii shrink it."""
        _require(geom)
        with self._session():
            try:
                shape = geom.shape.buffer(radius, quad_segs=_BUFFER_QUADRANT_SEGMENTS)
            except ShapelyError as err:
                raise GeometryError("failed to create buffer") from err
            return Geometry(shape)

    def simplify(self, geom: Geometry, tolerance: float) -> Geometry:
        """Douglas-Peucker simplification of ``geom``."""
        _require(geom)
        with self._session():
            try:
                shape = geom.shape.simplify(tolerance, preserve_topology=False)
            except ShapelyError as err:
                raise GeometryError("failed to simplify geometry") from err
            return Geometry(shape)

    def union(self, geometries: Sequence[Geometry | None]) -> Geometry:
        """Union of all geometries; a single one is returned unchanged."""
        if not geometries:
            raise GeometryError("no geometries provided")
        if len(geometries) == 1:
            return geometries[0]
        _require(geometries[0])
        with self._session():
            result = geometries[0]
            for geom in geometries[1:]:
                if geom is None:
                    continue
                _require(geom)
                try:
                    result = Geometry(result.shape.union(geom.shape))
                except ShapelyError as err:
                    raise GeometryError("failed to create union") from err
            return result

    def difference(self, a: Geometry, b: Geometry) -> Geometry:
        """The part of ``a`` not covered by ``b``."""
        _require(a, b)
        with self._session():
            try:
                return Geometry(a.shape.difference(b.shape))
            except ShapelyError as err:
                raise GeometryError("failed to create difference") from err

    def validate_geometry(self, data: GeometryInput) -> None:
        """Check the outline of the input without parsing it fully."""
        if not data.wkt and data.geojson is None:
            raise GeometryError("no geometry provided: either WKT or GeoJSON is required")

        if data.wkt and not data.wkt.startswith(_WKT_TYPES):
            raise GeometryError("invalid WKT: must start with a valid geometry type")

        if data.geojson is not None:
            if "type" not in data.geojson:
                raise GeometryError("invalid GeoJSON: missing type field")
            if "coordinates" not in data.geojson:
                raise GeometryError("invalid GeoJSON: missing coordinates field")