"""Tests de agregados para KPIs y gráficas"""

import unittest

from sample_data import make_mtc_records, make_wells

from backend.models import AvailabilityStatus, MTCRecord, Well
from services.aggregation import (
    SiteCounts,
    availability_breakdown,
    count_by_availability,
    count_by_site,
    kpi_summary,
    percentage_of
)


class TestPercentageOf(unittest.TestCase):

    def test_zero_total(self):
        self.assertEqual(percentage_of(0, 0), 0)
        self.assertEqual(percentage_of(5, 0), 0)

    def test_rounds_to_one_decimal(self):
        self.assertEqual(percentage_of(3, 12), 25.0)
        self.assertEqual(percentage_of(1, 3), 33.3)
        self.assertEqual(percentage_of(2, 3), 66.7)


class TestCountByAvailability(unittest.TestCase):

    def test_empty_collection_has_all_buckets_at_zero(self):
        counts = count_by_availability([])
        self.assertEqual(counts, {1: 0, 2: 0, 3: 0, 4: 0, 5: 0})
        self.assertEqual(set(counts), set(AvailabilityStatus))

    def test_counts_by_status(self):
        records = [
            MTCRecord(id=1, availability_status=1),
            MTCRecord(id=2, availability_status=1),
            MTCRecord(id=3, availability_status=2),
        ]
        self.assertEqual(count_by_availability(records), {1: 2, 2: 1, 3: 0, 4: 0, 5: 0})

    def test_unknown_status_is_excluded(self):
        records = [
            MTCRecord(id=1, availability_status=9),
            MTCRecord(id=2, availability_status=None),
            MTCRecord(id=3, availability_status=5),
        ]
        counts = count_by_availability(records)
        self.assertEqual(sum(counts.values()), 1)
        self.assertEqual(counts[AvailabilityStatus.CANCELADO], 1)


class TestCountBySite(unittest.TestCase):

    def test_active_and_inactive_per_site(self):
        counts = count_by_site(make_wells())
        self.assertEqual(counts["Samaria"], SiteCounts(active_count=1, inactive_count=1))
        self.assertEqual(counts["Muspac"], SiteCounts(active_count=0, inactive_count=1))
        self.assertEqual(counts["Bellota"], SiteCounts(active_count=1, inactive_count=0))
        self.assertEqual(counts["Desconocido"], SiteCounts(active_count=1, inactive_count=0))

    def test_sites_without_wells_do_not_appear(self):
        counts = count_by_site(make_wells())
        self.assertNotIn("5P", counts)
        self.assertNotIn("Poza Rica", counts)
        self.assertEqual(count_by_site([]), {})

    def test_site_order_follows_data(self):
        wells = [Well(id=1, name="a", site_id=4), Well(id=2, name="b", site_id=1)]
        self.assertEqual(list(count_by_site(wells)), ["Bellota", "Samaria"])


class TestBreakdownAndKpis(unittest.TestCase):

    def test_breakdown_rows(self):
        rows = availability_breakdown(make_mtc_records())
        self.assertEqual([row.label for row in rows], [
            "Operando", "Disponible", "Cancelado en Programa", "De Baja", "Cancelado"
        ])
        self.assertEqual([row.count for row in rows], [1, 1, 0, 1, 0])
        self.assertEqual(rows[0].percentage, 33.3)
        self.assertEqual(rows[0].color, "#4caf50")

    def test_breakdown_empty(self):
        rows = availability_breakdown([])
        self.assertTrue(all(row.count == 0 and row.percentage == 0 for row in rows))

    def test_kpi_summary(self):
        kpis = kpi_summary(make_wells(), make_mtc_records())
        self.assertEqual(kpis.total_mtc, 3)
        self.assertEqual(kpis.operating, 1)
        self.assertEqual(kpis.available, 1)
        # Samaria, Muspac, Bellota y Desconocido
        self.assertEqual(kpis.sites, 4)


if __name__ == "__main__":
    unittest.main()
