"""End-to-end tests for region workflows.

Tests cover:
- The polygon and batch commands of the CLI
- Report files written by batch runs
- Area identities of boolean operations on region trees
"""

import json
import math
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sphgeom import __version__
from sphgeom.cli.app import app
from sphgeom.core import GreatArcPath, GreatCircle, RegionBSPTree2S
from sphgeom.domain import Point2S, RegionLocation, Transform2S

PI = math.pi

runner = CliRunner()


@pytest.fixture
def region_path(tmp_path: Path) -> Path:
    """A degree region file with one valid and one broken region."""
    path = tmp_path / "regions.json"
    path.write_text(
        json.dumps(
            {
                "angle_unit": "degrees",
                "regions": [
                    {
                        "name": "ring",
                        "vertices": [[0, 60], [90, 60], [180, 60], [270, 60]],
                        "holes": [[[0, 30], [90, 30], [180, 30], [270, 30]]],
                        "probes": [[45, 45], [0, 0]],
                    },
                    {"name": "broken", "vertices": [[0, 90], [180, 90], [90, 0]]},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def octant(precision) -> RegionBSPTree2S:
    """The positive octant as a region tree."""
    return GreatArcPath.from_vertex_loop(
        [Point2S.PLUS_I, Point2S.PLUS_J, Point2S.PLUS_K], precision
    ).to_tree()


@pytest.fixture
def turned_octant(octant) -> RegionBSPTree2S:
    """The octant turned an eighth of a turn about +z."""
    tree = octant.copy()
    tree.transform(Transform2S.create_rotation(Point2S.PLUS_K, 0.25 * PI))
    return tree


class TestCli:
    """Tests for the command line interface."""

    def test_version(self) -> None:
        """--version prints the package version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_polygon(self) -> None:
        """A single polygon is measured and its probes classified."""
        result = runner.invoke(
            app, ["polygon", "--degrees", "--quiet", "-p", "45,45", "-p", "0,120", "0,90", "90,90", "0,0"]
        )
        assert result.exit_code == 0, result.output
        assert "1.570796" in result.output
        assert "INSIDE" in result.output
        assert "OUTSIDE" in result.output

    def test_polygon_antipodal_edge(self) -> None:
        """Polygons with antipodal consecutive vertices fail."""
        result = runner.invoke(app, ["polygon", "--degrees", "0,90", "180,90", "90,0"])
        assert result.exit_code == 1

    def test_polygon_bad_pair(self) -> None:
        """Malformed vertices fail before processing."""
        result = runner.invoke(app, ["polygon", "0,90", "90", "0,0"])
        assert result.exit_code == 1

    def test_batch_writes_report(self, region_path: Path) -> None:
        """Failing regions are reported and give exit code 2."""
        result = runner.invoke(app, ["batch", "--write-report", "--degrees", str(region_path)])
        assert result.exit_code == 2, result.output

        report_path = region_path.with_name("regions-report.json")
        data = json.loads(report_path.read_text(encoding="utf-8"))
        assert data["angle_unit"] == "degrees"
        assert [region["name"] for region in data["regions"]] == ["ring"]
        assert [probe["location"] for probe in data["regions"][0]["probes"]] == ["INSIDE", "OUTSIDE"]
        assert data["regions"][0]["path_count"] == 2
        assert "broken" in data["errors"]

    def test_batch_quiet_report_path(self, region_path: Path, tmp_path: Path) -> None:
        """--report writes to an explicit path."""
        report_path = tmp_path / "reports" / "out.json"
        result = runner.invoke(
            app, ["batch", "--quiet", "--report", str(report_path), str(region_path)]
        )
        assert result.exit_code == 2
        assert report_path.exists()

    def test_batch_missing_file(self, tmp_path: Path) -> None:
        """Missing input files exit with code 1."""
        result = runner.invoke(app, ["batch", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_batch_invalid_file(self, tmp_path: Path) -> None:
        """Invalid region files exit with code 1."""
        path = tmp_path / "bad.json"
        path.write_text('{"regions": [{"name": "x", "vertices": []}]}', encoding="utf-8")
        result = runner.invoke(app, ["batch", str(path)])
        assert result.exit_code == 1


class TestRegionIdentities:
    """Area identities of region trees."""

    def test_union_and_intersection(self, octant, turned_octant) -> None:
        """|A u B| + |A n B| = |A| + |B|."""
        union = RegionBSPTree2S.empty()
        union.union(octant, turned_octant)
        intersection = RegionBSPTree2S.empty()
        intersection.intersection(octant, turned_octant)

        assert intersection.size == pytest.approx(0.25 * PI)
        assert union.size == pytest.approx(0.75 * PI)
        assert union.size + intersection.size == pytest.approx(octant.size + turned_octant.size)

    def test_xor(self, octant, turned_octant) -> None:
        """The symmetric difference is the union minus the intersection."""
        xor = RegionBSPTree2S.empty()
        xor.xor(octant, turned_octant)
        assert xor.size == pytest.approx(0.5 * PI)
        assert xor.classify(Point2S.of(PI / 3, 0.25 * PI)) == RegionLocation.OUTSIDE
        assert xor.classify(Point2S.of(PI / 8, 0.25 * PI)) == RegionLocation.INSIDE

    def test_difference_is_intersection_with_complement(self, octant, turned_octant) -> None:
        """A - B = A n not B."""
        difference = RegionBSPTree2S.empty()
        difference.difference(octant, turned_octant)

        outside_turned = RegionBSPTree2S.empty()
        outside_turned.complement(turned_octant)
        expected = octant.copy()
        expected.intersection(outside_turned)

        assert difference.size == pytest.approx(expected.size)
        assert difference.size == pytest.approx(0.25 * PI)

    def test_operands_are_unchanged(self, octant, turned_octant) -> None:
        """Boolean operations do not modify their inputs."""
        result = RegionBSPTree2S.empty()
        result.union(octant, turned_octant)
        result.complement()
        assert octant.size == pytest.approx(0.5 * PI)
        assert turned_octant.size == pytest.approx(0.5 * PI)

    def test_complement_involution(self, octant) -> None:
        """Complementing twice restores the region."""
        tree = octant.copy()
        tree.complement()
        assert tree.size == pytest.approx(3.5 * PI)
        assert tree.classify(Point2S.MINUS_K) == RegionLocation.INSIDE

        tree.complement()
        assert tree.size == pytest.approx(octant.size)
        for point in (Point2S.from_vector([1.0, 1.0, 1.0]), Point2S.MINUS_K, Point2S.PLUS_I):
            assert tree.classify(point) == octant.classify(point)

    def test_split_sizes_add_up(self, octant, precision) -> None:
        """Both sides of a split add up to the whole region."""
        meridian = GreatCircle.from_points(Point2S.of(0.25 * PI, 0.5 * PI), Point2S.PLUS_K, precision)
        split = octant.split(meridian)
        assert split.minus.size + split.plus.size == pytest.approx(octant.size)
