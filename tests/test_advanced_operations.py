import pytest
import shapely.wkt
from shapely.geometry import LineString, Point

from geoservice.advanced_operations import main


@pytest.fixture
def output(capsys):
    status = main([])
    captured = capsys.readouterr()
    assert status == 0
    return captured.out


def _values(out, prefix):
    return [line[len(prefix):] for line in out.splitlines() if line.startswith(prefix)]


def _value(out, prefix):
    matches = _values(out, prefix)
    assert len(matches) == 1
    return matches[0]


def test_union_covers_every_polygon(output):
    union = shapely.wkt.loads(_value(output, "Union of 3 polygons: "))
    for wkt in (
        "POLYGON((0 0, 2 0, 2 2, 0 2, 0 0))",
        "POLYGON((1 1, 3 1, 3 3, 1 3, 1 1))",
        "POLYGON((2 2, 4 2, 4 4, 2 4, 2 2))",
    ):
        assert union.covers(shapely.wkt.loads(wkt))


def test_difference_has_hole(output):
    diff = shapely.wkt.loads(_value(output, "Difference (large - small): "))
    assert diff.contains(Point(1, 1))
    assert not diff.intersects(Point(5, 5))
    assert diff.area < shapely.wkt.loads("POLYGON((0 0, 10 0, 10 10, 0 10, 0 0))").area


def test_buffers_grow_with_size(output):
    line = LineString([(0, 0), (5, 0), (5, 5), (10, 5)])
    shapes = [
        shapely.wkt.loads(_value(output, f"Buffer size {size}: "))
        for size in ("0.5", "1.0", "2.0")
    ]
    for shape in shapes:
        assert shape.covers(line)
    areas = [shape.area for shape in shapes]
    assert areas == sorted(areas)
    assert len(set(areas)) == 3


def test_validation_report(output):
    lines = output.splitlines()
    valid_start = lines.index("Valid geometries:")
    invalid_start = lines.index("Invalid geometries:")
    assert lines[valid_start + 1 : invalid_start] == [
        "  1. POINT(1 2) - VALID",
        "  2. LINESTRING(0 0, 1 1) - VALID",
        "  3. POLYGON((0 0, 1 0, 1 1, 0 1, 0 0)) - VALID",
    ]
    assert lines[invalid_start + 1 : invalid_start + 5] == [
        "  1. POINT(1) - VALID",
        "  2. LINESTRING(0 0) - VALID",
        "  3. POLYGON((0 0, 1 0, 1 1)) - VALID",
        "  4. INVALID_GEOMETRY - INVALID: invalid WKT: must start with a valid geometry type",
    ]


def test_geojson_operations(output):
    assert _value(output, "GeoJSON line intersects polygon: ") == "true"
    assert float(_value(output, "Distance from line to polygon: ")) == pytest.approx(0.0)


def test_simplification_reduces_vertices(output):
    shapes = [
        shapely.wkt.loads(_value(output, f"Tolerance {tol}: "))
        for tol in ("0.01", "0.05", "0.10", "0.20")
    ]
    counts = [len(shape.coords) for shape in shapes]
    assert counts == sorted(counts, reverse=True)
    assert counts[0] <= 11
    for shape in shapes:
        coords = list(shape.coords)
        assert coords[0] == (0.0, 0.0)
        assert coords[-1] == (1.0, 0.1)


def test_completion_message(output):
    assert output.rstrip().endswith("=== All advanced examples completed successfully! ===")


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2