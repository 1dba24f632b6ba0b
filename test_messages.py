import unittest
from core.messages import ERROR050, ERROR104, ResultMessage, ResultMessages


class TestResultMessages(unittest.TestCase):

    def test_codes_are_unique(self):
        messages = ResultMessages()
        messages.add(ERROR050)
        messages.add(ERROR050)
        self.assertEqual(len(messages), 1)
        self.assertIn(-50, messages)
        self.assertIn(ERROR050, messages)

    def test_check_adds_and_clears(self):
        messages = ResultMessages()
        self.assertTrue(messages.check(True, ERROR104))
        self.assertTrue(messages.has_errors())
        self.assertFalse(messages.check(False, ERROR104))
        self.assertFalse(messages.has_errors())
        self.assertEqual(len(messages), 0)

    def test_errors_and_warnings(self):
        warning = ResultMessage("Neutral assumed non current-carrying.", 10)
        messages = ResultMessages()
        messages.add(warning)
        messages.add(ERROR050)
        self.assertTrue(messages.has_warnings())
        self.assertEqual(messages.errors(), [ERROR050])
        self.assertEqual(messages.warnings(), [warning])
        self.assertIs(messages.get(10), warning)
        messages.remove(10)
        self.assertIsNone(messages.get(10))
        self.assertEqual(str(ERROR050), "[-50] Size parameter cannot be null.")

    def test_messages_is_a_copy(self):
        messages = ResultMessages()
        messages.add(ERROR050)
        messages.messages.clear()
        self.assertTrue(messages.contains(-50))
        messages.clear()
        self.assertFalse(messages.contains(-50))


if __name__ == '__main__':
    unittest.main()
