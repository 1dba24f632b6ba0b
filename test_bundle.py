import unittest
from core.bundle import Bundle
from core.cable import Cable
from core.conductor import Conductor
from core.conduit import Conduit
from core.errors import ContainmentError
from core.models import CableType, Size
from core.voltage import V208_1PH_3W, V208_3PH_4W


def mc_cable(cable_type=CableType.MC):
    # 12 AWG CU THW, 3 current-carrying conductors
    return Cable(V208_1PH_3W, cable_type)


def bundle_of(count, length=30, **kwargs):
    bundle = Bundle(bundling_length=length, **kwargs)
    cables = [mc_cable() for _ in range(count)]
    for cable in cables:
        bundle.add(cable)
    return bundle, cables


class TestBundle(unittest.TestCase):

    def test_out_of_range_ambient(self):
        with self.assertRaises(ValueError):
            Bundle(ambient_temperature_f=190)

    def test_add_rules(self):
        bundle = Bundle(ambient_temperature_f=100)
        cable = mc_cable()
        bundle.add(cable)
        bundle.add(cable)
        self.assertEqual(bundle.conductor_count(), 1)
        self.assertEqual(cable.ambient_temperature_f, 100)
        self.assertTrue(cable.has_bundle())

        bundle.add(None)
        self.assertTrue(bundle.messages.contains(-150))
        with self.assertRaises(ContainmentError):
            Conduit().add(cable)

    def test_bundling_length_code(self):
        bundle = Bundle(bundling_length=-1)
        self.assertTrue(bundle.messages.contains(-151))
        bundle.bundling_length = 12
        self.assertFalse(bundle.messages.contains(-151))
        bundle.bundling_length = None
        self.assertTrue(bundle.messages.contains(-151))
        self.assertFalse(bundle.complies_with_relaxed_rule_5())

    def test_rule_4_eighteen_ccc(self):
        print("\n--- TEST: 6 MC cables, 18 CCC ---")
        bundle, cables = bundle_of(6)
        self.assertEqual(bundle.current_carrying_count(), 18)
        self.assertTrue(bundle.complies_with_relaxed_rule_4())
        self.assertFalse(bundle.complies_with_relaxed_rule_5())
        self.assertEqual(cables[0].adjustment_factor(), 1.0)
        self.assertEqual(cables[0].corrected_and_adjusted_ampacity(), 25)

    def test_rule_5_twenty_one_ccc(self):
        print("\n--- TEST: 7 MC cables, 21 CCC ---")
        bundle, cables = bundle_of(7)
        self.assertEqual(bundle.current_carrying_count(), 21)
        self.assertFalse(bundle.complies_with_relaxed_rule_4())
        self.assertTrue(bundle.complies_with_relaxed_rule_5())
        # 25 A * 0.60
        self.assertAlmostEqual(cables[0].corrected_and_adjusted_ampacity(), 15.0)

    def test_short_bundle_is_not_adjusted(self):
        bundle, cables = bundle_of(7, length=24)
        self.assertFalse(bundle.complies_with_relaxed_rule_5())
        self.assertEqual(cables[0].adjustment_factor(), 1.0)

    def test_jacketed_cable_loses_relief(self):
        bundle = Bundle(bundling_length=30)
        cables = [mc_cable() for _ in range(7)]
        cables[3].jacketed = True
        for cable in cables:
            bundle.add(cable)
        self.assertFalse(bundle.complies_with_relaxed_rule_5())
        # 21 CCC step function
        self.assertEqual(cables[0].adjustment_factor(), 0.45)

    def test_rule_4_needs_ac_or_mc(self):
        bundle = Bundle(bundling_length=30)
        bundle.add(mc_cable(CableType.NM))
        for _ in range(5):
            bundle.add(mc_cable())
        self.assertFalse(bundle.complies_with_relaxed_rule_4())
        # 18 CCC -> 0.5
        self.assertEqual(bundle.conduitables()[1].adjustment_factor(), 0.5)

    def test_rule_4_needs_12_awg_copper(self):
        bundle, cables = bundle_of(2)
        self.assertTrue(bundle.complies_with_relaxed_rule_4())
        cable = mc_cable()
        cable.phase_conductor_size = Size.AWG_10
        bundle.add(cable)
        self.assertFalse(bundle.complies_with_relaxed_rule_4())

    def test_rule_4_cable_ccc_limit(self):
        bundle = Bundle(bundling_length=30)
        cable = Cable(V208_3PH_4W)
        cable.set_neutral_as_current_carrying()
        bundle.add(cable)
        self.assertFalse(bundle.complies_with_relaxed_rule_4())

    def test_conductors_share_relief(self):
        print("\n--- TEST: 6 bare 12 AWG conductors ---")
        bundle = Bundle(bundling_length=30)
        conductors = [Conductor() for _ in range(6)]
        for conductor in conductors:
            bundle.add(conductor)
        self.assertEqual(bundle.conductors(), conductors)
        self.assertTrue(bundle.complies_with_relaxed_rule_4())
        self.assertEqual(conductors[0].adjustment_factor(), 1.0)

    def test_conductors_rule_5(self):
        bundle = Bundle(bundling_length=30)
        conductors = [Conductor() for _ in range(21)]
        for conductor in conductors:
            bundle.add(conductor)
        self.assertFalse(bundle.complies_with_relaxed_rule_4())
        self.assertTrue(bundle.complies_with_relaxed_rule_5())
        # 25 A * 0.60
        self.assertAlmostEqual(conductors[0].corrected_and_adjusted_ampacity(), 15.0)

    def test_conductors_use_step_function(self):
        bundle = Bundle(bundling_length=30)
        conductors = [Conductor(size=Size.AWG_10) for _ in range(6)]
        for conductor in conductors:
            bundle.add(conductor)
        # Not 12 AWG and only 6 CCC: neither relaxed rule applies
        self.assertFalse(bundle.complies_with_relaxed_rule_4())
        self.assertFalse(bundle.complies_with_relaxed_rule_5())
        self.assertEqual(conductors[0].adjustment_factor(), 0.8)
        bundle.bundling_length = 10
        self.assertEqual(conductors[0].adjustment_factor(), 1.0)

    def test_mixed_bundle(self):
        bundle, cables = bundle_of(5)
        conductor = Conductor()
        bundle.add(conductor)
        # 15 + 1 CCC, every member 12 AWG copper
        self.assertTrue(bundle.complies_with_relaxed_rule_4())
        self.assertEqual(cables[0].adjustment_factor(), 1.0)
        self.assertEqual(conductor.adjustment_factor(), 1.0)


if __name__ == '__main__':
    unittest.main()
