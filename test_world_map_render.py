"""Tests for the SVG/HTML writer and the matplotlib drawer."""
from draw_world_map import bezier_points, draw_world_map
from force_layout import ForceDirectedGraph
from connections import Connection
from vector2 import Vector2
from world_data import Area, Room
from world_map_svg import curve_paths, label_font_size, render_html, render_svg, save_html


def settled_layout(bidirectional=None, names=("Town", "Forest")):
    areas = [Area(names[0], [Room("a1"), Room("a2")]), Area(names[1], [Room("b1")])]
    start = {names[0]: Vector2(300, 400), names[1]: Vector2(500, 400)}
    graph = ForceDirectedGraph(areas, [Connection(names[0], names[1], "east")], 1000, 800, positions=start)
    return graph.layout_result(bidirectional=bidirectional)


def test_label_font_size_capped():
    assert label_font_size(30) == 7.5
    assert label_font_size(60) == 14
    assert label_font_size(100) == 14


def test_curve_paths_bow_to_opposite_sides():
    layout = settled_layout()
    forward, reverse = curve_paths(layout.edges[0])
    # midpoint (400, 400), normal for a west->east edge points +y
    assert forward == "M 300.00 400.00 Q 400.00 450.00 500.00 400.00"
    assert reverse == "M 500.00 400.00 Q 400.00 350.00 300.00 400.00"


def test_curve_paths_skip_coincident_endpoints():
    layout = settled_layout()
    edge = layout.edges[0]
    edge.target.position = edge.source.position
    assert curve_paths(edge) is None
    assert bezier_points(edge) is None


def test_render_svg_one_way():
    svg = render_svg(settled_layout())
    assert svg.startswith("<svg")
    assert svg.rstrip().endswith("</svg>")
    assert 'viewBox="0 0 1000 800"' in svg
    assert svg.count("<circle") == 2
    assert svg.count("<path") == 1
    assert ">Town</text>" in svg and ">Forest</text>" in svg


def test_render_svg_bidirectional_draws_second_arrow():
    svg = render_svg(settled_layout(bidirectional={("Town", "Forest")}))
    assert svg.count("<path") == 2


def test_labels_are_escaped():
    svg = render_svg(settled_layout(names=("<Keep>", "Moat & Bailey")))
    assert "&lt;Keep&gt;" in svg
    assert "Moat &amp; Bailey" in svg
    assert "<Keep>" not in svg


def test_render_html_page(tmp_path):
    layout = settled_layout()
    page = render_html(layout, title="Realm")
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>Realm</title>" in page
    assert page.count("<svg") == 1

    out = tmp_path / "world-map.html"
    save_html(layout, str(out), title="Realm")
    assert out.read_text(encoding="utf-8") == page


def test_bezier_points_follow_curve():
    pts = bezier_points(settled_layout().edges[0], samples=5)
    assert pts.shape == (5, 2)
    assert tuple(pts[0]) == (300.0, 400.0)
    assert tuple(pts[-1]) == (500.0, 400.0)
    # quadratic midpoint sits halfway to the control point
    assert tuple(pts[2]) == (400.0, 425.0)


def test_draw_world_map_writes_png_and_pdf(tmp_path):
    png = tmp_path / "map.png"
    pdf = tmp_path / "map.pdf"
    draw_world_map(settled_layout(bidirectional={("Town", "Forest")}), str(png), out_pdf=str(pdf), title="Realm")
    assert png.stat().st_size > 0
    assert pdf.stat().st_size > 0
    assert png.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
