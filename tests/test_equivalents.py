import math
import unittest

from chemlabcalc.equivalents import equivalent_weight, equivalents, reactive_units
from chemlabcalc.errors import ComputationError, DivisionByZero
from chemlabcalc.models import Acid, Base, Biomass, Oxidation, Salt


class TestEquivalentWeight(unittest.TestCase):
    def test_acid(self):
        self.assertAlmostEqual(equivalent_weight(Acid(hydrogens=2), 98.0), 49.0)

    def test_base_and_salt(self):
        self.assertAlmostEqual(equivalent_weight(Base(valence=2), 74.0), 37.0)
        self.assertAlmostEqual(equivalent_weight(Salt(valence=3), 342.0), 114.0)

    def test_oxidation_prefers_oxidation_count(self):
        self.assertAlmostEqual(equivalent_weight(Oxidation(oxidation=2, valence=3), 60.0), 30.0)
        self.assertAlmostEqual(equivalent_weight(Oxidation(valence=3), 60.0), 20.0)
        self.assertAlmostEqual(equivalent_weight(Oxidation(), 60.0), 60.0)

    def test_biomass_is_one_to_one(self):
        self.assertEqual(equivalent_weight(Biomass(), 24.6), 24.6)

    def test_zero_counts_fall_back_to_molar_mass(self):
        self.assertEqual(equivalent_weight(Acid(hydrogens=0), 36.5), 36.5)
        self.assertEqual(equivalent_weight(Base(valence=0), 40.0), 40.0)
        self.assertEqual(equivalent_weight(Salt(valence=0), 58.4), 58.4)
        self.assertEqual(equivalent_weight(Oxidation(oxidation=0, valence=0), 32.0), 32.0)

    def test_zero_molar_mass_is_a_division_by_zero(self):
        with self.assertRaises(DivisionByZero):
            equivalent_weight(Acid(hydrogens=2), 0.0)

    def test_non_finite_inputs(self):
        with self.assertRaises(ComputationError):
            equivalent_weight(Acid(hydrogens=2), math.nan)
        with self.assertRaises(ComputationError):
            equivalent_weight(Salt(valence=math.inf), 10.0)

    def test_vanishing_divisor_is_not_finite(self):
        with self.assertRaises(ComputationError):
            equivalent_weight(Acid(hydrogens=1e-320), 16.0)
        with self.assertRaises(ComputationError):
            equivalent_weight(Oxidation(oxidation=1e-320), 16.0)

    def test_unsupported_class(self):
        with self.assertRaises(TypeError):
            reactive_units("acid")


class TestEquivalents(unittest.TestCase):
    def test_ratio(self):
        self.assertAlmostEqual(equivalents(98.0, 49.0), 2.0)
        self.assertEqual(equivalents(24.6, 24.6), 1.0)

    def test_zero_weight(self):
        with self.assertRaises(DivisionByZero):
            equivalents(1.0, 0.0)

    def test_non_finite_weight(self):
        with self.assertRaises(ComputationError):
            equivalents(1.0, math.inf)
        with self.assertRaises(ComputationError):
            equivalents(1.0, math.nan)

    def test_non_positive_ratio(self):
        with self.assertRaises(ComputationError):
            equivalents(-1.0, 2.0)

    def test_division_by_zero_is_a_computation_error(self):
        self.assertTrue(issubclass(DivisionByZero, ComputationError))


if __name__ == '__main__':
    unittest.main()
