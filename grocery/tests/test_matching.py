import unittest
from grocery.logic.matching import SubstringNameMatcher, TokenNameMatcher


class TestNameMatchers(unittest.TestCase):

    def test_substring_is_case_insensitive(self):
        m = SubstringNameMatcher()
        self.assertTrue(m.matches("milk", "Whole MILK 1L"))
        self.assertTrue(m.matches("milk", "milk chocolate"))
        self.assertFalse(m.matches("milk", "Oat drink"))
        self.assertFalse(m.matches("", "anything"))

    def test_token_matcher_needs_whole_words(self):
        m = TokenNameMatcher()
        self.assertTrue(m.matches("olive oil", "Extra virgin OLIVE oil"))
        self.assertFalse(m.matches("egg", "Eggs 12 pcs"))
        self.assertFalse(m.matches("  ", "Eggs"))
