"""Tests for layout elements, cells, the name table, geometry, and validation.

Uses the sample layout fixture as the primary test case.
"""

from __future__ import annotations

import unittest

from layoutkit.layout import (
    ExtensionScheme, Rectangle, Polygon, Path, Placement, Text, Circle,
    Cell, NameTable, LayoutDocument, LayoutError,
    absolute_points, element_shape, element_bounds, cell_bounds,
    validate_document,
)
from tests.sample_layout import make_sample_document, TRIANGLE, PENTAGON


class TestElements(unittest.TestCase):

    def test_polygon_keeps_closing_point(self):
        poly = Polygon(layer=2, datatype=0, x=3000, y=0, points=list(TRIANGLE))
        self.assertEqual(poly.points, [(0, 0), (1000, 0), (500, 1000), (0, 0)])
        self.assertTrue(poly.is_closed)

    def test_open_polygon(self):
        poly = Polygon(layer=2, datatype=0, x=0, y=0, points=[(0, 0), (10, 0), (0, 10)])
        self.assertFalse(poly.is_closed)
        self.assertEqual(len(poly.points), 3)

    def test_list_offsets_normalized(self):
        poly = Polygon(layer=1, datatype=0, x=0, y=0, points=[[0, 0], [10, 0], [0, 10]])
        path = Path(layer=1, datatype=0, x=0, y=0, half_width=1,
                    extension_scheme=ExtensionScheme.FLUSH, points=[[0, 0], [5, 0]])
        self.assertEqual(poly.points, [(0, 0), (10, 0), (0, 10)])
        self.assertEqual(path.points, [(0, 0), (5, 0)])

    def test_path_total_width(self):
        path = Path(layer=4, datatype=0, x=0, y=0, half_width=50,
                    extension_scheme=ExtensionScheme.HALF_WIDTH,
                    points=[(0, 0), (100, 0)])
        self.assertEqual(path.total_width, 100)
        self.assertIs(path.extension_scheme, ExtensionScheme.HALF_WIDTH)

    def test_path_extensions_per_scheme(self):
        def mk(scheme):
            return Path(layer=1, datatype=0, x=0, y=0, half_width=10,
                        extension_scheme=scheme, points=[(0, 0), (1, 0)],
                        start_extension=3, end_extension=4)
        self.assertEqual(mk(ExtensionScheme.FLUSH).extensions, (0, 0))
        self.assertEqual(mk(ExtensionScheme.HALF_WIDTH).extensions, (10, 10))
        self.assertEqual(mk(ExtensionScheme.EXPLICIT).extensions, (3, 4))

    def test_negative_half_width_rejected(self):
        with self.assertRaises(LayoutError) as ctx:
            Path(layer=1, datatype=0, x=0, y=0, half_width=-1,
                 extension_scheme=ExtensionScheme.FLUSH, points=[(0, 0), (1, 0)])
        self.assertEqual(ctx.exception.field_name, "half_width")

    def test_extension_scheme_must_be_enum(self):
        with self.assertRaises(LayoutError):
            Path(layer=1, datatype=0, x=0, y=0, half_width=1,
                 extension_scheme="flush", points=[(0, 0), (1, 0)])

    def test_negative_sizes_rejected(self):
        with self.assertRaises(LayoutError):
            Rectangle(layer=1, datatype=0, x=0, y=0, width=-5, height=5)
        with self.assertRaises(LayoutError):
            Circle(layer=1, datatype=0, x=0, y=0, radius=-1)

    def test_placement_defaults(self):
        p = Placement(cell_name="VIA", x=1, y=2)
        self.assertFalse(p.mirror)
        self.assertIsNone(p.repetition)
        self.assertEqual(p.properties, [])

    def test_repetition_passes_through(self):
        rep = {"kind": "grid", "columns": 3, "rows": 2, "dx": 10, "dy": 20}
        r = Rectangle(layer=1, datatype=0, x=0, y=0, width=1, height=1, repetition=rep)
        self.assertIs(r.repetition, rep)


class TestContainers(unittest.TestCase):

    def test_cell_preserves_order(self):
        doc = make_sample_document()
        top = doc.cell("TOP")
        kinds = [type(e).__name__ for e in top.elements]
        self.assertEqual(kinds, ["Rectangle", "Polygon", "Polygon", "Path",
                                 "Rectangle", "Placement", "Placement"])
        self.assertEqual([p.x for p in top.placements()], [100, 1900])

    def test_cell_add_rejects_non_elements(self):
        with self.assertRaises(TypeError):
            Cell(name="X").add("not an element")

    def test_name_table_register(self):
        names = NameTable()
        self.assertEqual(names.register("A"), 0)
        self.assertEqual(names.register("B"), 1)
        self.assertEqual(names.register("A"), 0)
        self.assertEqual(names.lookup(1), "B")
        self.assertIsNone(names.lookup(5))

    def test_name_table_sparse_indices(self):
        names = NameTable(cell_names={7: "X"})
        self.assertEqual(names.register("Y"), 8)

    def test_names_not_synced_with_cells(self):
        doc = LayoutDocument()
        doc.cells.append(Cell(name="LONE"))
        self.assertNotIn("LONE", doc.names)
        self.assertEqual(doc.cell_names(), ["LONE"])

    def test_document_defaults(self):
        doc = LayoutDocument()
        self.assertEqual(doc.version, "1.0")
        self.assertEqual(doc.cells, [])
        self.assertIsNone(doc.cell("TOP"))


class TestGeometry(unittest.TestCase):

    def test_absolute_points(self):
        poly = Polygon(layer=3, datatype=0, x=5000, y=500, points=list(PENTAGON))
        self.assertEqual(absolute_points(poly)[1], (5400, 200))

    def test_rectangle_bounds(self):
        r = Rectangle(layer=1, datatype=0, x=1000, y=4000, width=2000, height=500)
        self.assertEqual(element_bounds(r), (1000.0, 4000.0, 3000.0, 4500.0))

    def test_triangle_area(self):
        poly = Polygon(layer=2, datatype=0, x=3000, y=0, points=list(TRIANGLE))
        self.assertAlmostEqual(element_shape(poly).area, 500000.0)
        self.assertEqual(element_bounds(poly), (3000.0, 0.0, 4000.0, 1000.0))

    def _straight(self, scheme, **kw):
        return Path(layer=1, datatype=0, x=0, y=0, half_width=10,
                    extension_scheme=scheme, points=[(0, 0), (100, 0)], **kw)

    def test_flush_path(self):
        shape = element_shape(self._straight(ExtensionScheme.FLUSH))
        self.assertAlmostEqual(shape.area, 2000.0)
        for got, want in zip(shape.bounds, (0, -10, 100, 10)):
            self.assertAlmostEqual(got, want)

    def test_half_width_path(self):
        shape = element_shape(self._straight(ExtensionScheme.HALF_WIDTH))
        self.assertAlmostEqual(shape.area, 2400.0)
        for got, want in zip(shape.bounds, (-10, -10, 110, 10)):
            self.assertAlmostEqual(got, want)

    def test_explicit_path(self):
        path = self._straight(ExtensionScheme.EXPLICIT, start_extension=5, end_extension=20)
        for got, want in zip(element_bounds(path), (-5, -10, 120, 10)):
            self.assertAlmostEqual(got, want)

    def test_circle_bounds(self):
        c = Circle(layer=1, datatype=0, x=50, y=50, radius=10)
        for got, want in zip(element_bounds(c), (40, 40, 60, 60)):
            self.assertAlmostEqual(got, want)

    def test_no_shape_for_references_and_text(self):
        self.assertIsNone(element_shape(Placement(cell_name="A", x=0, y=0)))
        self.assertIsNone(element_shape(Text(string="hi", layer=1, texttype=0, x=0, y=0)))

    def test_degenerate_polygon(self):
        poly = Polygon(layer=1, datatype=0, x=0, y=0, points=[(0, 0), (1, 1), (0, 0)])
        self.assertIsNone(element_shape(poly))

    def test_cell_bounds(self):
        cell = Cell(name="C", elements=[
            Rectangle(layer=1, datatype=0, x=0, y=0, width=10, height=10),
            Rectangle(layer=1, datatype=0, x=20, y=-5, width=5, height=5),
            Placement(cell_name="OTHER", x=1000, y=1000),
        ])
        self.assertEqual(cell_bounds(cell), (0.0, -5.0, 25.0, 10.0))
        self.assertIsNone(cell_bounds(Cell(name="EMPTY")))

    def test_unknown_element_type(self):
        with self.assertRaises(TypeError):
            element_shape(object())


class TestValidation(unittest.TestCase):

    def test_sample_is_valid(self):
        self.assertEqual(validate_document(make_sample_document()), [])

    def test_unknown_placement_target(self):
        doc = make_sample_document()
        doc.cell("TOP").add(Placement(cell_name="MISSING", x=0, y=0))
        errors = validate_document(doc)
        self.assertEqual(len(errors), 1)
        self.assertIn("unknown cell 'MISSING'", errors[0])

    def test_unregistered_cell(self):
        doc = make_sample_document()
        doc.cells.append(Cell(name="EXTRA"))
        errors = validate_document(doc)
        self.assertTrue(any("'EXTRA'" in e and "not registered" in e for e in errors))

    def test_duplicate_and_empty_names(self):
        doc = LayoutDocument()
        doc.names.register("A")
        doc.cells.extend([Cell(name="A"), Cell(name="A"), Cell(name="")])
        errors = validate_document(doc)
        self.assertIn("Duplicate cell name 'A'", errors)
        self.assertIn("Cell 2: empty name", errors)

    def test_layer_out_of_range(self):
        doc = make_sample_document()
        doc.cell("VIA").add(Rectangle(layer=-1, datatype=0, x=0, y=0, width=1, height=1))
        errors = validate_document(doc)
        self.assertEqual(len(errors), 1)
        self.assertIn("layer -1 out of range", errors[0])

    def test_list_offsets_validate(self):
        doc = make_sample_document()
        doc.cell("VIA").add(Polygon(layer=1, datatype=0, x=0, y=0, points=[[0, 0], [5, 5]]))
        errors = validate_document(doc)
        self.assertEqual(len(errors), 1)
        self.assertIn("at least 3 distinct points", errors[0])

    def test_point_counts(self):
        doc = make_sample_document()
        via = doc.cell("VIA")
        via.add(Polygon(layer=1, datatype=0, x=0, y=0, points=[(0, 0), (5, 5)]))
        via.add(Path(layer=1, datatype=0, x=0, y=0, half_width=1,
                     extension_scheme=ExtensionScheme.FLUSH, points=[(0, 0)]))
        errors = validate_document(doc)
        self.assertEqual(len(errors), 2)
        self.assertIn("at least 3 distinct points", errors[0])
        self.assertIn("at least 2 points", errors[1])


if __name__ == "__main__":
    unittest.main()
