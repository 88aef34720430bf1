"""Walk through the basic geometry operations and print the results."""

from __future__ import annotations

import argparse
import sys

from geoservice.service import GeometryError, GeometryInput, Service


def _run(service: Service) -> None:
    print("=== Point in Polygon Test ===")
    point = service.parse_geometry(GeometryInput(wkt="POINT(1.0 1.0)"))
    polygon = service.parse_geometry(
        GeometryInput(wkt="POLYGON((0 0, 2 0, 2 2, 0 2, 0 0))")
    )
    within = str(service.within(point, polygon)).lower()
    print(f"Point (1,1) is within polygon: {within}")

    print("\n=== Distance Calculation ===")
    origin = service.parse_geometry(GeometryInput(wkt="POINT(0 0)"))
    target = service.parse_geometry(GeometryInput(wkt="POINT(3 4)"))
    distance = service.distance(origin, target)
    print(f"Distance between (0,0) and (3,4): {distance:.2f}")

    print("\n=== Buffer Operation ===")
    centre = service.parse_geometry(GeometryInput(wkt="POINT(0 0)"))
    buffered = service.buffer(centre, 1.0)
    print(f"Buffered point (radius 1.0): {service.to_wkt(buffered)}")

    print("\n=== Line Intersection ===")
    line1 = service.parse_geometry(GeometryInput(wkt="LINESTRING(0 0, 2 2)"))
    line2 = service.parse_geometry(GeometryInput(wkt="LINESTRING(0 2, 2 0)"))
    crosses = str(service.intersects(line1, line2)).lower()
    print(f"Lines intersect: {crosses}")

    print("\n=== GeoJSON Example ===")
    geojson_point = service.parse_geometry(
        GeometryInput(geojson={"type": "Point", "coordinates": [1.5, 1.5]})
    )
    inside = str(service.within(geojson_point, polygon)).lower()
    print(f"GeoJSON point (1.5,1.5) is within polygon: {inside}")
    print(f"GeoJSON point as WKT: {service.to_wkt(geojson_point)}")

    print("\n=== Geometry Simplification ===")
    complex_line = service.parse_geometry(
        GeometryInput(
            wkt="LINESTRING(0 0, 0.5 0.1, 1.0 0.2, 1.5 0.1, 2.0 0.0, 2.5 0.1, 3.0 0.0)"
        )
    )
    simplified = service.simplify(complex_line, 0.5)
    print(f"Simplified line: {service.to_wkt(simplified)}")

    print("\n=== All examples completed successfully! ===")


def main(argv: list[str] | None = None) -> int:
    """Run the basic examples; return a process exit status."""
    parser = argparse.ArgumentParser(
        prog="geoservice-basic",
        description="Demonstrate basic spatial predicates and operations.",
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