import unittest

from chemlabcalc.classify import (
    ElementProfile,
    classify,
    classify_profile,
    lookup_compound,
    profile_tokens,
)
from chemlabcalc.errors import ComputationError
from chemlabcalc.formula import tokenize
from chemlabcalc.models import Acid, Base, Biomass, Oxidation, Salt


class TestLookupStage(unittest.TestCase):
    def test_known_compounds(self):
        self.assertEqual(classify("H2SO4"), Acid(hydrogens=2))
        self.assertEqual(classify("Ca(OH)2"), Base(valence=2))
        self.assertEqual(classify("Al2(SO4)3"), Salt(valence=3))
        self.assertEqual(classify("O2"), Oxidation(oxidation=2))
        self.assertEqual(classify("Fe"), Oxidation(valence=3))

    def test_water_is_a_diprotic_acid(self):
        self.assertEqual(classify("H2O"), Acid(hydrogens=2))

    def test_lookup_is_exact_match(self):
        self.assertIsNone(lookup_compound("h2so4"))
        self.assertIsNone(lookup_compound("Ca(OH)2 "))
        self.assertEqual(lookup_compound("NaOH"), Base(valence=1))

    def test_injected_table_overrides(self):
        self.assertEqual(classify("XeF2", known={"XeF2": Oxidation(oxidation=2)}), Oxidation(oxidation=2))
        # Without the table entry a hydroxide falls to the hydrogen rule.
        self.assertEqual(classify("NaOH", known={}), Acid(hydrogens=1))


class TestBiomassStage(unittest.TestCase):
    def test_biomass_wins_over_everything(self):
        self.assertEqual(classify("CH1.8O0.5N0.2"), Biomass())
        self.assertEqual(classify("CH1.8O0.5N0.2").kind, "biomass")


class TestHeuristic(unittest.TestCase):
    def test_hydracid(self):
        self.assertEqual(classify("HBr"), Acid(hydrogens=1))
        self.assertEqual(classify("H2S"), Acid(hydrogens=2))

    def test_oxyacid(self):
        self.assertEqual(classify("H3AsO4"), Acid(hydrogens=3))

    def test_group_multiplier_is_not_applied(self):
        self.assertEqual(classify("Mg(OH)2"), Acid(hydrogens=1))

    def test_metal_with_oxygen_is_a_salt(self):
        self.assertEqual(classify("Na2O"), Salt(valence=1))
        self.assertEqual(classify("ZnSO4"), Salt(valence=2))
        self.assertEqual(classify("Fe2O3"), Salt(valence=3))

    def test_metal_without_oxygen(self):
        self.assertEqual(classify("Mg"), Oxidation(valence=2))
        self.assertEqual(classify("MgCl2"), Oxidation(valence=2))

    def test_non_metal_oxide_uses_oxygen_count(self):
        self.assertEqual(classify("CO2"), Oxidation(oxidation=2))
        self.assertEqual(classify("SO3"), Oxidation(oxidation=3))

    def test_other_non_metals(self):
        self.assertEqual(classify("Cl2"), Oxidation(valence=1))
        self.assertEqual(classify("N2"), Oxidation(valence=3))
        self.assertEqual(classify("CCl4"), Oxidation(valence=4))

    def test_fallback(self):
        self.assertEqual(classify("H0"), Oxidation(valence=1))
        self.assertEqual(classify_profile(ElementProfile()), Oxidation(valence=1))

    def test_unparsable_count(self):
        with self.assertRaises(ComputationError):
            classify("H.")

    def test_oversized_count(self):
        with self.assertRaises(ComputationError):
            classify("(H1" + "0" * 400 + ")0O")


class TestProfile(unittest.TestCase):
    def test_profile_totals(self):
        profile = profile_tokens(tokenize("H2SO4"))
        self.assertEqual(profile.hydrogens, 2.0)
        self.assertEqual(profile.oxygens, 4.0)
        self.assertEqual(profile.non_metals, 5.0)
        self.assertEqual(profile.non_metal_valence, 2)
        self.assertEqual(profile.metals, 0.0)

    def test_unlisted_metal_valence_defaults_to_one(self):
        profile = profile_tokens(tokenize("Ag2O"), valences={})
        self.assertEqual(profile.metal_valence, 1)
        self.assertEqual(profile.non_metal_valence, 2)

    def test_unlisted_non_metal_valence_defaults_to_one(self):
        profile = profile_tokens(tokenize("Xe"))
        self.assertEqual(profile.non_metal_valence, 1)

    def test_oversized_count(self):
        formula = "H1" + "0" * 400
        with self.assertRaises(ComputationError) as ctx:
            profile_tokens(tokenize(formula), formula=formula)
        self.assertEqual(ctx.exception.formula, formula)


if __name__ == '__main__':
    unittest.main()
