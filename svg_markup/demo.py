"""
Sample document: a thick polyline between two labelled dots.
"""

from svg_markup.models import Circle, Document, Point, Polyline, Rgb, Text

DEMO_POINTS = (Point(50, 50), Point(250, 250))
DEMO_LABELS = ("C", "C++")


def build_demo_document() -> Document:
    """Build the sample document used by the command line tool."""
    document = Document()

    line = (
        Polyline()
        .set_stroke_color(Rgb(255, 198, 63))
        .set_stroke_width(16)
        .set_stroke_line_cap("round")
    )
    for point in DEMO_POINTS:
        line.add_point(point)
    document.add(line)

    for point in DEMO_POINTS:
        document.add(
            Circle()
            .set_fill_color("white")
            .set_radius(6)
            .set_center(point)
        )

    for point, label in zip(DEMO_POINTS, DEMO_LABELS):
        document.add(
            Text()
            .set_point(point)
            .set_offset((10, -10))
            .set_font_size(20)
            .set_font_family("Verdana")
            .set_fill_color("black")
            .set_data(label)
        )

    return document
