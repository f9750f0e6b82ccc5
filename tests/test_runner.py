import pandas as pd
import pytest

from spatial_linkage.__main__ import main
from spatial_linkage.pipeline import LinkageConfig
from spatial_linkage.runner import load_points, solve_file
from spatial_linkage.structures import Point

SAMPLE = """\
162,817,812
57,618,57
906,360,560
592,479,940
352,342,300
466,668,158
542,29,236
431,825,988
739,650,466
52,470,668
216,146,977
819,987,18
117,168,530
805,96,715
346,949,466
970,615,88
941,993,340
862,61,35
984,92,344
425,690,689
"""


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "junctions.txt"
    path.write_text(SAMPLE)
    return path


def test_load_points_parses_triples(sample_file):
    points = load_points(sample_file)
    assert len(points) == 20
    assert points[0] == Point(162, 817, 812)


def test_load_points_rejects_bad_rows(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1,2,3\n4,5\n")
    with pytest.raises(ValueError):
        load_points(path)
    path.write_text("1,2,3\n4,5,6.5\n")
    with pytest.raises(ValueError):
        load_points(path)


def test_solve_file_sample_answers(sample_file, tmp_path):
    output = tmp_path / "clusters.csv"
    report = solve_file(sample_file, LinkageConfig(connections=10, verbose=False), output)
    assert report.largest_product == 40
    assert report.bridge_product == 25272
    assert {report.bridge.u, report.bridge.v} == {Point(216, 146, 977), Point(117, 168, 530)}
    frame = pd.read_csv(output)
    assert len(frame) == 20
    assert frame["cluster_size"].max() == 5


def test_solve_file_missing_input(tmp_path, capsys):
    assert solve_file(tmp_path / "missing.txt", LinkageConfig(verbose=False)) is None
    assert "ERROR" in capsys.readouterr().out


def test_solve_file_overflow_is_reported(tmp_path, capsys):
    path = tmp_path / "wide.txt"
    path.write_text("0,0,0\n9999999999,0,0\n")
    assert solve_file(path, LinkageConfig(verbose=False)) is None
    assert "ERROR" in capsys.readouterr().out


def test_cli_prints_answers(sample_file, capsys):
    assert main([str(sample_file), "--connections", "10", "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "Part 1: 40" in out
    assert "Part 2: 25272" in out


def test_cli_reports_failure(tmp_path):
    assert main([str(tmp_path / "missing.txt"), "--quiet"]) == 1


def test_cli_rejects_unsupported_output_format(sample_file, tmp_path, capsys):
    output = tmp_path / "out.json"
    assert main([str(sample_file), "--quiet", "--output", str(output)]) == 1
    assert "Unsupported output file format" in capsys.readouterr().out
    assert not output.exists()


def test_cli_rejects_negative_largest(sample_file, capsys):
    assert main([str(sample_file), "--quiet", "--largest", "-1"]) == 1
    out = capsys.readouterr().out
    assert "ERROR" in out
    assert "Part 1" not in out


def test_load_points_reports_file_line_numbers(tmp_path):
    path = tmp_path / "gaps.txt"
    path.write_text("1,2,3\n\n\n4,5,x\n")
    with pytest.raises(ValueError, match="line 4"):
        load_points(path)
    path.write_text("1,2,3\n\n4,5\n")
    with pytest.raises(ValueError, match="line 3"):
        load_points(path)


def test_load_points_skips_blank_lines(tmp_path):
    path = tmp_path / "gaps.txt"
    path.write_text("1,2,3\n\n4,5,6\n")
    assert load_points(path) == [Point(1, 2, 3), Point(4, 5, 6)]
