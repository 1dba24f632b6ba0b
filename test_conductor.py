import unittest
from core.conductor import Conductor
from core.conduit import Conduit
from core.errors import ContainmentError
from core.models import ConductiveMetal, Insulation, NECEdition, Role, Size, TemperatureRating
from standards.nec_logic import ReferenceTables


class TestConductor(unittest.TestCase):

    def test_defaults(self):
        conductor = Conductor()
        self.assertEqual(conductor.size, Size.AWG_12)
        self.assertEqual(conductor.metal, ConductiveMetal.COPPER)
        self.assertEqual(conductor.insulation, Insulation.THW)
        self.assertEqual(conductor.ambient_temperature_f, 86)
        self.assertTrue(conductor.is_free())
        self.assertFalse(conductor.has_errors())
        self.assertEqual(conductor.description(), "#12 AWG THW (CU)(HOT)")

    def test_free_air_ampacity(self):
        # 12 AWG THW @75°C = 25 A, no correction at 86°F
        conductor = Conductor()
        self.assertEqual(conductor.temperature_rating(), TemperatureRating.T75)
        self.assertEqual(conductor.table_ampacity(), 25)
        self.assertEqual(conductor.correction_factor(), 1.0)
        self.assertEqual(conductor.adjustment_factor(), 1.0)
        self.assertEqual(conductor.corrected_and_adjusted_ampacity(), 25)
        self.assertEqual(conductor.insulated_area(), 0.0181)
        self.assertEqual(conductor.current_carrying_count(), 1)

    def test_temperature_correction(self):
        print("\n--- TEST: Correction at 100°F ---")
        conductor = Conductor(insulation=Insulation.THHN, ambient_temperature_f=100)
        # 30 A @90°C * 0.91
        self.assertAlmostEqual(conductor.corrected_and_adjusted_ampacity(), 27.3)

    def test_termination_rating(self):
        conductor = Conductor(insulation=Insulation.THHN, ambient_temperature_f=100)
        # Limited to the 75°C column: 25 A * 0.88 (THW correction)
        self.assertAlmostEqual(conductor.corrected_and_adjusted_ampacity(TemperatureRating.T75), 22.0)
        # A termination above the insulation rating does not raise it
        tw = Conductor(insulation=Insulation.TW)
        self.assertEqual(tw.corrected_and_adjusted_ampacity(TemperatureRating.T90), 20)

    def test_compound_factor(self):
        conduit = Conduit(ambient_temperature_f=110)
        conductors = [Conductor(insulation=Insulation.THHN) for _ in range(5)]
        for conductor in conductors:
            conduit.add(conductor)
        conductor = conductors[0]
        self.assertAlmostEqual(conductor.compound_factor(),
                               conductor.correction_factor() * conductor.adjustment_factor())
        # 105-113°F: 0.87 @90°C, 0.82 @75°C (THW); 5 CCC -> 0.8
        self.assertAlmostEqual(conductor.compound_factor(), 0.87 * 0.8)
        self.assertAlmostEqual(conductor.compound_factor(TemperatureRating.T75),
                               conductor.correction_factor(Insulation.THW) * conductor.adjustment_factor())
        self.assertAlmostEqual(conductor.corrected_and_adjusted_ampacity(TemperatureRating.T75), 25 * 0.82 * 0.8)

    def test_rooftop_exemption_follows_termination_insulation(self):
        print("\n--- TEST: XHHW-2 on a rooftop with a 75°C termination ---")
        # 2014: 1 in above the roof -> +40°F
        conduit = Conduit(rooftop_distance=1)
        conductor = Conductor(insulation=Insulation.XHHW_2)
        conduit.add(conductor)
        # XHHW-2 is exempt: 30 A @90°C, no correction at 86°F
        self.assertEqual(conductor.rooftop_adder(), 0)
        self.assertEqual(conductor.corrected_and_adjusted_ampacity(), 30)
        # Read as THW the adder applies: 86 + 40 = 126°F -> 0.67 @75°C
        self.assertEqual(conductor.rooftop_adder(Insulation.THW), 40)
        self.assertAlmostEqual(conductor.correction_factor(Insulation.THW), 0.67)
        self.assertAlmostEqual(conductor.corrected_and_adjusted_ampacity(TemperatureRating.T75), 25 * 0.67)

    def test_invalid_values_blank_results(self):
        conductor = Conductor()
        conductor.size = None
        self.assertTrue(conductor.messages.contains(-50))
        self.assertEqual(conductor.corrected_and_adjusted_ampacity(), 0)
        self.assertEqual(conductor.insulated_area(), 0)
        self.assertEqual(conductor.current_carrying_count(), 0)
        self.assertEqual(conductor.description(), "#? THW (CU)(HOT)")

        conductor.size = Size.AWG_10
        self.assertFalse(conductor.has_errors())
        self.assertEqual(conductor.table_ampacity(), 35)

    def test_setter_codes(self):
        conductor = Conductor()
        conductor.length = 0
        conductor.ambient_temperature_f = 200
        conductor.metal = None
        conductor.insulation = None
        conductor.copper_coated = None
        conductor.role = None
        for code in (-51, -52, -53, -54, -55, -56):
            self.assertTrue(conductor.messages.contains(code), code)
        # Values are stored even when rejected
        self.assertEqual(conductor.ambient_temperature_f, 200)

    def test_roles(self):
        self.assertEqual(Conductor(role=Role.GROUNDING).current_carrying_count(), 0)
        self.assertEqual(Conductor(role=Role.NEUTRAL_NCC).current_carrying_count(), 0)
        self.assertEqual(Conductor(role=Role.NEUTRAL_CC).current_carrying_count(), 1)
        self.assertEqual(Conductor(role=Role.NON_CONCURRENT_HOT).current_carrying_count(), 0)

    def test_dc_resistance(self):
        conductor = Conductor(length=100)
        # 1.93 Ω/kft
        self.assertAlmostEqual(conductor.dc_resistance(), 0.193)
        conductor.copper_coated = True
        self.assertAlmostEqual(conductor.dc_resistance(), 0.201)

    def test_copy_is_free_and_independent(self):
        conduit = Conduit(ambient_temperature_f=100)
        conductor = Conductor(size=Size.AWG_8, insulation=Insulation.THHN)
        conduit.add(conductor)
        duplicate = conductor.copy()
        self.assertIsNot(duplicate, conductor)
        self.assertTrue(duplicate.is_free())
        self.assertEqual(duplicate.size, Size.AWG_8)
        self.assertEqual(duplicate.ambient_temperature_f, 100)
        duplicate.size = Size.AWG_6
        self.assertEqual(conductor.size, Size.AWG_8)

    def test_contained_conductor_refuses_temperature(self):
        conduit = Conduit()
        conductor = Conductor()
        conduit.add(conductor)
        self.assertTrue(conductor.has_conduit())
        self.assertIs(conductor.conduit, conduit)
        with self.assertRaises(ContainmentError):
            conductor.ambient_temperature_f = 100

    def test_uses_container_edition(self):
        conductor = Conductor(tables=ReferenceTables(NECEdition.NEC2014))
        conduit = Conduit(tables=ReferenceTables(NECEdition.NEC2017))
        conduit.add(conductor)
        self.assertEqual(conductor.tables.edition, NECEdition.NEC2017)


if __name__ == '__main__':
    unittest.main()
