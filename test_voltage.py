import unittest
from core.errors import VoltageSystemError
from core.voltage import (
    V120_1PH_2W, V208_1PH_2W, V208_1PH_2W_HIGH_LEG, V208_3PH_4W, V240_1PH_3W, V480_3PH_3W, VoltageSystemRegistry,
)


class TestVoltageSystem(unittest.TestCase):

    def test_layouts(self):
        self.assertEqual(V120_1PH_2W.hots, 1)
        self.assertTrue(V120_1PH_2W.hot_and_neutral_only)
        self.assertTrue(V120_1PH_2W.neutral_current_carrying)
        self.assertFalse(V208_1PH_2W.has_neutral)
        self.assertTrue(V240_1PH_3W.has_phase_b)
        self.assertFalse(V240_1PH_3W.has_phase_c)
        self.assertTrue(V480_3PH_3W.has_phase_c)
        # 4-wire wye neutral is not counted by default
        self.assertTrue(V208_3PH_4W.has_neutral)
        self.assertFalse(V208_3PH_4W.neutral_current_carrying)
        self.assertEqual(str(V208_3PH_4W), "208v 3Ø 4W")


class TestVoltageSystemRegistry(unittest.TestCase):

    def setUp(self):
        self.registry = VoltageSystemRegistry()

    def test_standard_systems(self):
        self.assertEqual(len(self.registry), 16)
        self.assertIn("480v 3Ø 3W", self.registry)
        self.assertIs(self.registry.get("480v 3Ø 3W"), V480_3PH_3W)
        with self.assertRaises(VoltageSystemError):
            self.registry.get("999v")

    def test_lookup_existing(self):
        self.assertIs(self.registry.lookup_or_add(208, 3, 4), V208_3PH_4W)
        self.assertIs(self.registry.lookup_or_add(120, 1, 2), V120_1PH_2W)
        # 208 V 2-wire defaults to hot-neutral below 277 V
        self.assertIs(self.registry.lookup_or_add(208, 1, 2), V208_1PH_2W_HIGH_LEG)
        self.assertIs(self.registry.lookup_or_add(208, 1, 2, neutral=False), V208_1PH_2W)

    def test_lookup_adds_custom_system(self):
        system = self.registry.lookup_or_add(600, 3, 3)
        self.assertEqual(system.name, "600v 3Ø 3W")
        self.assertEqual(len(self.registry), 17)
        self.assertIs(self.registry.lookup_or_add(600, 3, 3), system)
        self.assertEqual(len(self.registry), 17)

    def test_name_clash_gets_suffix(self):
        hot_hot = self.registry.lookup_or_add(347, 1, 2)
        self.assertFalse(hot_hot.has_neutral)
        self.assertEqual(hot_hot.hots, 2)
        hot_neutral = self.registry.lookup_or_add(347, 1, 2, neutral=True)
        self.assertEqual(hot_neutral.name, "347v 1Ø 2W (hot-neutral)")
        self.assertTrue(hot_neutral.hot_and_neutral_only)

    def test_invalid_parameters(self):
        with self.assertRaises(VoltageSystemError):
            self.registry.lookup_or_add(0, 1, 2)
        with self.assertRaises(VoltageSystemError):
            self.registry.lookup_or_add(240, 2, 3)
        with self.assertRaises(VoltageSystemError):
            self.registry.lookup_or_add(480, 3, 5)
        with self.assertRaises(VoltageSystemError):
            self.registry.lookup_or_add(120, 1, 4)


if __name__ == '__main__':
    unittest.main()
