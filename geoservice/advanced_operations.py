"""Walk through unions, differences, buffers, validation and simplification."""

from __future__ import annotations

import argparse
import sys

from geoservice.service import GeometryError, GeometryInput, Service

BUFFER_SIZES = (0.5, 1.0, 2.0)
TOLERANCES = (0.01, 0.05, 0.1, 0.2)

VALID_INPUTS = (
    GeometryInput(wkt="POINT(1 2)"),
    GeometryInput(wkt="LINESTRING(0 0, 1 1)"),
    GeometryInput(wkt="POLYGON((0 0, 1 0, 1 1, 0 1, 0 0))"),
)

INVALID_INPUTS = (
    GeometryInput(wkt="POINT(1)"),
    GeometryInput(wkt="LINESTRING(0 0)"),
    GeometryInput(wkt="POLYGON((0 0, 1 0, 1 1))"),
    GeometryInput(wkt="INVALID_GEOMETRY"),
)


def _report_validation(service: Service, inputs: tuple[GeometryInput, ...]) -> None:
    for number, data in enumerate(inputs, start=1):
        try:
            service.validate_geometry(data)
        except GeometryError as err:
            print(f"  {number}. {data.wkt} - INVALID: {err}")
        else:
            print(f"  {number}. {data.wkt} - VALID")


def _run(service: Service) -> None:
    print("=== Union of Multiple Polygons ===")
    polygons = [
        service.parse_geometry(GeometryInput(wkt=wkt))
        for wkt in (
            "POLYGON((0 0, 2 0, 2 2, 0 2, 0 0))",
            "POLYGON((1 1, 3 1, 3 3, 1 3, 1 1))",
            "POLYGON((2 2, 4 2, 4 4, 2 4, 2 2))",
        )
    ]
    union = service.union(polygons)
    print(f"Union of 3 polygons: {service.to_wkt(union)}")

    print("\n=== Difference Operation ===")
    large = service.parse_geometry(
        GeometryInput(wkt="POLYGON((0 0, 10 0, 10 10, 0 10, 0 0))")
    )
    small = service.parse_geometry(GeometryInput(wkt="POLYGON((2 2, 8 2, 8 8, 2 8, 2 2))"))
    difference = service.difference(large, small)
    print(f"Difference (large - small): {service.to_wkt(difference)}")

    print("\n=== Complex Buffer Operations ===")
    line = service.parse_geometry(GeometryInput(wkt="LINESTRING(0 0, 5 0, 5 5, 10 5)"))
    for size in BUFFER_SIZES:
        buffered = service.buffer(line, size)
        print(f"Buffer size {size:.1f}: {service.to_wkt(buffered)}")

    print("\n=== Geometry Validation ===")
    print("Valid geometries:")
    _report_validation(service, VALID_INPUTS)
    print("Invalid geometries:")
    _report_validation(service, INVALID_INPUTS)

    print("\n=== Complex GeoJSON Operations ===")
    geojson_polygon = service.parse_geometry(
        GeometryInput(
            geojson={
                "type": "Polygon",
                "coordinates": [[[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]]],
            }
        )
    )
    geojson_line = service.parse_geometry(
        GeometryInput(
            geojson={
                "type": "LineString",
                "coordinates": [[1, 1], [2, 2], [3, 1], [4, 2]],
            }
        )
    )
    crosses = str(service.intersects(geojson_line, geojson_polygon)).lower()
    print(f"GeoJSON line intersects polygon: {crosses}")
    gap = service.distance(geojson_line, geojson_polygon)
    print(f"Distance from line to polygon: {gap:.6f}")

    print("\n=== Simplification with Different Tolerances ===")
    detailed = service.parse_geometry(
        GeometryInput(
            wkt=(
                "LINESTRING(0 0, 0.1 0.1, 0.2 0.05, 0.3 0.15, 0.4 0.08, 0.5 0.12, "
                "0.6 0.06, 0.7 0.14, 0.8 0.09, 0.9 0.11, 1.0 0.1)"
            )
        )
    )
    for tolerance in TOLERANCES:
        simplified = service.simplify(detailed, tolerance)
        print(f"Tolerance {tolerance:.2f}: {service.to_wkt(simplified)}")

    print("\n=== All advanced examples completed successfully! ===")


def main(argv: list[str] | None = None) -> int:
    """Run the advanced examples; return a process exit status."""
    parser = argparse.ArgumentParser(
        prog="geoservice-advanced",
        description="Demonstrate advanced geometry operations.",
    )
    parser.parse_args(argv)
    try:
        with Service() as service:
            _run(service)
    except GeometryError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())