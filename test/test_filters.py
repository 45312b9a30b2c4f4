"""Tests del filtrado y resaltado de pozos"""

import unittest

from sample_data import make_wells

from backend.models import Well
from services.filters import filter_wells, highlight, highlight_segments, matches_term, results_label


class TestFilterWells(unittest.TestCase):

    def setUp(self):
        self.wells = make_wells()

    def test_no_filters_returns_input_unchanged(self):
        result = filter_wells(self.wells, None, None)
        self.assertEqual(result, self.wells)
        self.assertIsNot(result, self.wells)

    def test_empty_strings_match_everything(self):
        self.assertEqual(filter_wells(self.wells, "", ""), self.wells)

    def test_site_filter_samaria(self):
        wells = [
            Well(id=1, name="Pozo-1", site_id=1, active=True, gateway_code="P01"),
            Well(id=2, name="Pozo-2", site_id=2, active=False),
        ]
        result = filter_wells(wells, "Samaria", None)
        self.assertEqual([w.id for w in result], [1])

    def test_site_filter_is_case_sensitive(self):
        self.assertEqual(filter_wells(self.wells, "samaria", None), [])

    def test_unknown_site_resolves_to_desconocido(self):
        result = filter_wells(self.wells, "Desconocido", None)
        self.assertEqual([w.id for w in result], [5])

    def test_term_matches_name_case_insensitive(self):
        result = filter_wells(self.wells, None, "POZO")
        self.assertEqual([w.id for w in result], [1, 2])

    def test_term_matches_gateway_code(self):
        result = filter_wells(self.wells, None, "sam3")
        self.assertEqual([w.id for w in result], [3])

    def test_term_is_trimmed(self):
        result = filter_wells(self.wells, None, "  p01 ")
        self.assertEqual([w.id for w in result], [1])

    def test_missing_gateway_code_is_treated_as_empty(self):
        well = Well(id=9, name="Sin código", site_id=1)
        self.assertFalse(matches_term(well, "N/A"))
        self.assertTrue(matches_term(well, "código"))

    def test_pattern_characters_are_literal(self):
        self.assertEqual(filter_wells(self.wells, None, "5P.*"), [w for w in self.wells if w.id == 4])
        self.assertEqual(filter_wells(self.wells, None, ".*"), [w for w in self.wells if w.id == 4])
        self.assertEqual(filter_wells(self.wells, None, "("), [])

    def test_site_and_term_combine_with_and(self):
        result = filter_wells(self.wells, "Samaria", "3")
        self.assertEqual([w.id for w in result], [3])

    def test_order_is_preserved(self):
        reordered = list(reversed(self.wells))
        result = filter_wells(reordered, "Samaria", None)
        self.assertEqual([w.id for w in result], [3, 1])


class TestHighlight(unittest.TestCase):

    def test_case_insensitive_preserves_original_casing(self):
        self.assertEqual(highlight("Pozo-1", "pozo"), "<mark>Pozo</mark>-1")

    def test_every_occurrence_is_wrapped(self):
        self.assertEqual(highlight("aXbxc", "x"), "a<mark>X</mark>b<mark>x</mark>c")

    def test_empty_term_returns_text(self):
        self.assertEqual(highlight("Pozo-1", ""), "Pozo-1")
        self.assertEqual(highlight("Pozo-1", None), "Pozo-1")

    def test_special_characters_are_escaped(self):
        self.assertEqual(highlight("a.b (c)", "."), "a<mark>.</mark>b (c)")
        self.assertEqual(highlight("a.b (c)", "(c)"), "a.b <mark>(c)</mark>")
        self.assertEqual(highlight("abc", "a*"), "abc")

    def test_custom_tag(self):
        self.assertEqual(highlight("Pozo", "po", tag="span"), "<span>Po</span>zo")

    def test_segments(self):
        self.assertEqual(
            highlight_segments("Pozo-pozo", "POZO"),
            [("Pozo", True), ("-", False), ("pozo", True)]
        )
        self.assertEqual(highlight_segments("Pozo", ""), [("Pozo", False)])
        self.assertEqual(highlight_segments("", "x"), [])

    def test_term_is_trimmed_like_filter(self):
        wells = make_wells()
        term = " pozo "
        self.assertEqual([w.id for w in filter_wells(wells, None, term)], [1, 2])
        self.assertEqual(highlight_segments("Pozo-1", term), [("Pozo", True), ("-1", False)])
        self.assertEqual(highlight("Pozo-1", term), "<mark>Pozo</mark>-1")
        self.assertEqual(highlight_segments("Pozo-1", "   "), [("Pozo-1", False)])


class TestResultsLabel(unittest.TestCase):

    def test_labels(self):
        self.assertEqual(results_label(5, 5), "5 pozos")
        self.assertEqual(results_label(0, 5), "Sin resultados")
        self.assertEqual(results_label(2, 5), "2 de 5")


if __name__ == "__main__":
    unittest.main()
