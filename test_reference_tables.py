import unittest
from core.errors import TableLookupError
from core.models import (
    ConductiveMetal, Insulation, Location, NECEdition, RacewayMaterial, RacewayType, Size, TemperatureRating, TradeSize,
)
from standards.nec_logic import ReferenceTables


class TestReferenceTables(unittest.TestCase):

    def setUp(self):
        self.nec2014 = ReferenceTables(NECEdition.NEC2014)
        self.nec2017 = ReferenceTables(NECEdition.NEC2017)

    def test_edition_must_be_enum(self):
        with self.assertRaises(TypeError):
            ReferenceTables(2014)
        self.assertEqual(ReferenceTables().edition, NECEdition.NEC2014)

    def test_ampacity(self):
        self.assertEqual(self.nec2014.ampacity(Size.AWG_12, ConductiveMetal.COPPER, TemperatureRating.T75), 25.0)
        self.assertEqual(self.nec2014.ampacity(Size.AWG_1_0, ConductiveMetal.COPPER, TemperatureRating.T90), 170.0)
        # 14 AWG aluminum is not listed
        self.assertEqual(self.nec2014.ampacity(Size.AWG_14, ConductiveMetal.ALUMINUM, TemperatureRating.T60), 0.0)

    def test_min_size_for_current(self):
        # 12 AWG @75°C = 25 A, 10 AWG = 35 A
        self.assertEqual(
            self.nec2014.min_size_for_current(26, ConductiveMetal.COPPER, TemperatureRating.T75), Size.AWG_10
        )
        for metal in ConductiveMetal:
            for rating in TemperatureRating:
                self.assertIsNone(self.nec2014.min_size_for_current(10000, metal, rating))
        with self.assertRaises(TableLookupError):
            self.nec2014.min_size_for_current(0, ConductiveMetal.COPPER, TemperatureRating.T75)

    def test_temperature_rating(self):
        self.assertEqual(self.nec2014.temperature_rating(Insulation.TW), TemperatureRating.T60)
        self.assertEqual(self.nec2014.temperature_rating(Insulation.THHW), TemperatureRating.T90)
        self.assertEqual(self.nec2014.temperature_rating(Insulation.THHW, Location.WET), TemperatureRating.T75)
        self.assertEqual(self.nec2014.temperature_rating(Insulation.THHN, Location.WET), TemperatureRating.T90)
        self.assertEqual(ReferenceTables.insulation_for_rating(TemperatureRating.T75), Insulation.THW)

    def test_correction_factor(self):
        self.assertEqual(self.nec2014.correction_factor(86, TemperatureRating.T75), 1.0)
        # 96-104°F bin
        self.assertEqual(self.nec2014.correction_factor(100, TemperatureRating.T75), 0.88)
        self.assertEqual(self.nec2014.correction_factor(104.5, TemperatureRating.T90), 0.91)
        self.assertEqual(self.nec2014.correction_factor(140, TemperatureRating.T60), 0.0)
        self.assertEqual(self.nec2014.correction_factor(200, TemperatureRating.T90), 0.0)

    def test_adjustment_factor(self):
        self.assertEqual(self.nec2014.adjustment_factor(0), 1.0)
        self.assertEqual(self.nec2014.adjustment_factor(3), 1.0)
        self.assertEqual(self.nec2014.adjustment_factor(4), 0.8)
        self.assertEqual(self.nec2014.adjustment_factor(9), 0.7)
        self.assertEqual(self.nec2014.adjustment_factor(21), 0.45)
        self.assertEqual(self.nec2014.adjustment_factor(41), 0.35)
        with self.assertRaises(TableLookupError):
            self.nec2014.adjustment_factor(-1)

    def test_rooftop_adder_2014(self):
        self.assertEqual(self.nec2014.rooftop_adder(0.5), 60)
        self.assertEqual(self.nec2014.rooftop_adder(1), 40)
        self.assertEqual(self.nec2014.rooftop_adder(10), 30)
        self.assertEqual(self.nec2014.rooftop_adder(36), 25)
        self.assertEqual(self.nec2014.rooftop_adder(37), 0)
        self.assertEqual(self.nec2014.rooftop_adder(0), 0)
        self.assertEqual(self.nec2014.rooftop_adder(-1), 0)
        self.assertEqual(self.nec2014.rooftop_adder(1, Insulation.XHHW_2), 0)

    def test_rooftop_adder_2017(self):
        self.assertEqual(self.nec2017.rooftop_threshold(), 0.875)
        self.assertEqual(self.nec2017.rooftop_adder(0.875), 60)
        self.assertEqual(self.nec2017.rooftop_adder(1), 0)
        self.assertTrue(self.nec2017.is_rooftop_condition(0.5))
        self.assertFalse(self.nec2017.is_rooftop_condition(10))

    def test_max_fill_percent(self):
        self.assertEqual(ReferenceTables.max_fill_percent(1), 53)
        self.assertEqual(ReferenceTables.max_fill_percent(2), 31)
        self.assertEqual(ReferenceTables.max_fill_percent(3), 40)
        self.assertEqual(ReferenceTables.max_fill_percent(3, nipple=True), 60)

    def test_trade_size_for_area(self):
        # PVC-40 starts at 1/2" (0.285 in²)
        self.assertEqual(self.nec2014.trade_size_for_area(0.2, RacewayType.PVC_40), TradeSize.T1_2)
        self.assertEqual(self.nec2014.trade_size_for_area(0.2, RacewayType.PVC_40, TradeSize.T3_4), TradeSize.T3_4)
        self.assertEqual(self.nec2014.trade_size_for_area(0.6, RacewayType.EMT), TradeSize.T1)
        # PVC-EB is only made from 2"
        self.assertEqual(self.nec2014.trade_size_for_area(1.0, RacewayType.PVC_EB), TradeSize.T2)
        self.assertIsNone(self.nec2014.trade_size_for_area(100, RacewayType.PVC_40))
        with self.assertRaises(TableLookupError):
            self.nec2014.trade_size_for_area(-1, RacewayType.PVC_40)

    def test_raceway_area(self):
        self.assertEqual(self.nec2014.raceway_area(RacewayType.EMT, TradeSize.T1_2), 0.304)
        self.assertEqual(self.nec2014.raceway_area(RacewayType.EMT, TradeSize.T3_8), 0.0)

    def test_insulated_areas(self):
        self.assertEqual(self.nec2014.insulated_area(Size.AWG_12, Insulation.THHN), 0.0133)
        self.assertEqual(self.nec2014.insulated_area(Size.AWG_12, Insulation.THW), 0.0181)
        self.assertEqual(self.nec2014.insulated_area(Size.AWG_12, Insulation.MI), 0.0)
        self.assertEqual(self.nec2014.compact_bare_area(Size.AWG_8), 0.0141)
        self.assertEqual(self.nec2014.compact_insulated_area(Size.AWG_14, Insulation.THHN), 0.0)

    def test_conductor_properties(self):
        self.assertEqual(self.nec2014.area_circular_mils(Size.AWG_12), 6530)
        self.assertEqual(self.nec2014.size_for_area(6000), Size.AWG_12)
        self.assertIsNone(self.nec2014.size_for_area(3000000))
        with self.assertRaises(TableLookupError):
            self.nec2014.size_for_area(0)
        self.assertEqual(self.nec2014.dc_resistance(Size.AWG_12, ConductiveMetal.COPPER), 1.93)
        self.assertEqual(self.nec2014.dc_resistance(Size.AWG_12, ConductiveMetal.COPPER, copper_coated=True), 2.01)
        self.assertEqual(self.nec2014.dc_resistance(Size.AWG_12, ConductiveMetal.ALUMINUM), 3.18)

    def test_ac_resistance_and_reactance(self):
        self.assertEqual(
            self.nec2014.ac_resistance(Size.AWG_3_0, ConductiveMetal.COPPER, RacewayMaterial.ALUMINUM), 0.082
        )
        self.assertEqual(self.nec2014.ac_resistance(Size.AWG_3_0, ConductiveMetal.COPPER, RacewayMaterial.STEEL), 0.079)
        self.assertEqual(self.nec2014.reactance(Size.AWG_12, magnetic=False), 0.054)
        self.assertEqual(self.nec2014.reactance(Size.AWG_12, magnetic=True), 0.068)

    def test_egc_size(self):
        print("\n--- TEST: Table 250.122 ---")
        self.assertEqual(self.nec2014.egc_size(15, ConductiveMetal.COPPER), Size.AWG_14)
        self.assertEqual(self.nec2014.egc_size(20, ConductiveMetal.COPPER), Size.AWG_12)
        # 30 A is "not exceeding 60 A"
        self.assertEqual(self.nec2014.egc_size(30, ConductiveMetal.COPPER), Size.AWG_10)
        self.assertEqual(self.nec2014.egc_size(61, ConductiveMetal.COPPER), Size.AWG_8)
        self.assertEqual(self.nec2014.egc_size(400, ConductiveMetal.ALUMINUM), Size.AWG_1)
        with self.assertRaises(TableLookupError):
            self.nec2014.egc_size(10, ConductiveMetal.COPPER)
        with self.assertRaises(TableLookupError):
            self.nec2014.egc_size(7000, ConductiveMetal.COPPER)


class TestSizes(unittest.TestCase):

    def test_ordering(self):
        self.assertTrue(Size.AWG_14 < Size.AWG_12)
        self.assertTrue(Size.KCMIL_250.is_larger_than(Size.AWG_4_0))
        self.assertTrue(Size.AWG_8.is_between(Size.AWG_10, Size.AWG_6))
        self.assertEqual(Size.AWG_4_0.next_size_up(), Size.KCMIL_250)
        self.assertIsNone(Size.KCMIL_2000.next_size_up())
        self.assertTrue(TradeSize.T3_4 > TradeSize.T1_2)

    def test_from_label(self):
        self.assertEqual(Size.from_label("12"), Size.AWG_12)
        self.assertEqual(Size.from_label("#1/0"), Size.AWG_1_0)
        self.assertEqual(Size.from_label("250 kcmil"), Size.KCMIL_250)
        with self.assertRaises(ValueError):
            Size.from_label("13")
        self.assertEqual(TradeSize.from_label('1-1/4"'), TradeSize.T1_1_4)
        self.assertEqual(RacewayType.from_label("emt"), RacewayType.EMT)
        self.assertEqual(NECEdition.from_year("2020"), NECEdition.NEC2020)
        with self.assertRaises(ValueError):
            NECEdition.from_year(2011)


if __name__ == '__main__':
    unittest.main()
