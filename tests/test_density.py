import math
import unittest

from chemlabcalc.density import estimate_density, molecular_volume, scan_elements
from chemlabcalc.errors import ComputationError, DivisionByZero
from chemlabcalc.models import DensityEstimate


class TestReferenceDensity(unittest.TestCase):
    def test_tabulated_compounds(self):
        self.assertEqual(estimate_density("H2O", 18.016), DensityEstimate(1.000, "reference"))
        self.assertEqual(estimate_density("Al2(SO4)3", 342.159), DensityEstimate(2.672, "reference"))

    def test_reference_ignores_molar_mass(self):
        self.assertEqual(estimate_density("NaCl", math.nan).value, 2.165)


class TestEstimatedDensity(unittest.TestCase):
    def test_methane(self):
        # 14.0 + 4 * 1.2 cm3/mol
        self.assertAlmostEqual(molecular_volume("CH4"), 18.8)
        estimate = estimate_density("CH4", 16.043)
        self.assertEqual(estimate.source, "estimated")
        self.assertEqual(estimate.value, 0.853)

    def test_unknown_volume_uses_default(self):
        self.assertAlmostEqual(molecular_volume("Xe"), 15.0)
        self.assertAlmostEqual(molecular_volume("XeF2"), 15.0 + 2 * 13.8)
        self.assertAlmostEqual(molecular_volume("Xe", default_volume=20.0), 20.0)

    def test_injected_tables(self):
        estimate = estimate_density("H2O", 18.0, densities={})
        self.assertEqual(estimate.source, "estimated")
        self.assertEqual(estimate.value, round(18.0 / 16.4, 3))
        self.assertEqual(estimate_density("H2O", 18.0, densities={}, decimals=1).value, 1.1)

    def test_zero_volume(self):
        with self.assertRaises(DivisionByZero):
            estimate_density("H0", 1.0)

    def test_non_finite_molar_mass(self):
        with self.assertRaises(ComputationError):
            estimate_density("CH4", math.inf)

    def test_non_positive_molar_mass(self):
        for molar_mass in [0.0, -5.0]:
            with self.subTest(molar_mass=molar_mass):
                with self.assertRaises(ComputationError):
                    estimate_density("CH4", molar_mass)

    def test_estimate_rounding_to_zero(self):
        with self.assertRaises(ComputationError):
            estimate_density("CH4", 1e-6)

    def test_biomass_estimate(self):
        # C 14.0 + H 1 * 1.2 + O 0 * 14.0 + N 0.2 * 15.6 cm3/mol
        self.assertAlmostEqual(molecular_volume("CH1.8O0.5N0.2"), 18.32)
        estimate = estimate_density("CH1.8O0.5N0.2", 24.627)
        self.assertEqual(estimate, DensityEstimate(1.344, "estimated"))

    def test_unparsable_count(self):
        with self.assertRaises(ComputationError):
            estimate_density("H.", 1.0)


class TestScan(unittest.TestCase):
    def test_group_multiplier_attaches_to_last_element(self):
        self.assertEqual(scan_elements("Ca(OH)2"), [("Ca", 1.0), ("O", 1.0), ("H", 2.0)])

    def test_fractional_counts(self):
        self.assertEqual(
            scan_elements("CH1.8O0.5N0.2"),
            [("C", 1.0), ("H", 1.0), ("O", 0.0), ("N", 0.2)],
        )

    def test_only_the_last_count_keeps_its_decimals(self):
        self.assertEqual(scan_elements("C1.5H2.5"), [("C", 1.0), ("H", 2.5)])
        self.assertEqual(scan_elements("H1.2.3"), [("H", 1.2)])
        with self.assertRaises(ComputationError):
            scan_elements("H.5O")

    def test_empty(self):
        self.assertEqual(scan_elements(""), [])
        self.assertEqual(molecular_volume(""), 0.0)


if __name__ == '__main__':
    unittest.main()
