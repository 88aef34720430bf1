# geoservice

Planar geometry operations through a small, thread-safe service object. Geometries
can be given as WKT strings or as GeoJSON mappings (`Point`, `LineString`,
`Polygon`). Every parsed geometry is checked for validity. The geometry work is
done by Shapely (2.0 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Everything lives in `geoservice.service`.

```python
from geoservice.service import GeometryInput, Service

with Service() as service:
    point = service.parse_geometry(GeometryInput(wkt="POINT(1.0 1.0)"))
    square = service.parse_geometry(
        GeometryInput(wkt="POLYGON((0 0, 2 0, 2 2, 0 2, 0 0))")
    )

    print(service.within(point, square))          # True
    print(service.distance(
        service.parse_geometry(GeometryInput(wkt="POINT(0 0)")),
        service.parse_geometry(GeometryInput(wkt="POINT(3 4)")),
    ))                                            # 5.0

    ring = service.buffer(point, 0.5)
    print(service.to_wkt(ring))
```

GeoJSON input works the same way:

```python
from geoservice.service import GeometryInput, Service

with Service() as service:
    geom = service.parse_geometry(
        GeometryInput(geojson={"type": "Point", "coordinates": [1.5, 1.5]})
    )
    print(service.to_wkt(geom))
```

### Types

- `GeometryInput(wkt="", geojson=None, srid=0)`: the input to parse. A
  non-empty `wkt` takes precedence over `geojson`. `srid` is carried along but
  not used.
- `Geometry`: a parsed geometry; its `shape` attribute is the underlying
  Shapely geometry.
- `Service`: does the work. It is a context manager; leaving the `with` block
  calls `close()`. The `closed` property tells whether it has been closed.

### Operations

All of these are methods of `Service`:

- `parse_geometry(data)`: parse a `GeometryInput` into a `Geometry`; invalid
  geometries (for example self-intersecting polygons) are rejected
- `validate_geometry(data)`: a light format check that does not parse; WKT must
  start with an upper-case geometry type name, GeoJSON must have `type` and
  `coordinates` keys
- `to_wkt(geom)`: serialise a geometry as WKT
- `within(a, b)`, `intersects(a, b)`: spatial predicates
- `distance(a, b)`: minimum distance between two geometries
- `buffer(geom, radius)`: buffer zone with 8 segments per quarter circle; a
  negative radius shrinks
- `simplify(geom, tolerance)`: Douglas–Peucker simplification
- `union(geometries)`: union of a sequence of geometries; a single geometry is
  returned as is, and `None` entries after the first are skipped
- `difference(a, b)`: the part of `a` not in `b`

Bad input or a failed operation raises `GeometryError`. Using a service after
`close()` raises `ServiceClosedError`, a subclass of `GeometryError`. `close()`
may be called more than once.

The function `geojson_to_wkt(geo_type, coords)` turns GeoJSON coordinates into
a WKT string on its own. Only `Point`, `LineString` and `Polygon` are
supported; for a polygon only the outer ring is used, and coordinates that are
not pairs of numbers are skipped.

## Example programs

Two runnable demonstrations are installed as commands:

```
geoservice-basic
geoservice-advanced
```

The first covers point-in-polygon, distance, buffer, line intersection,
GeoJSON input and simplification. The second covers multi-polygon union,
difference, buffers of several sizes, input validation, GeoJSON polygons and
lines, and simplification at several tolerances. Both print their results to
standard output and exit with status 1 if a geometry operation fails.

## Limitations

There is no handling of coordinate reference systems or reprojection: all
geometry is planar, and `srid` is ignored. GeoJSON multi-geometries, geometry
collections, features and polygon holes are not read.