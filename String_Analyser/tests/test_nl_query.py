from django.test import SimpleTestCase

from String_Analyser.nl_query import interpret


class InterpretTests(SimpleTestCase):
    def assertParsed(self, query, expected):
        self.assertEqual(interpret(query).as_dict(), expected)

    def test_single_word_palindromes(self):
        self.assertParsed("all single word palindromic strings", {"word_count": 1, "is_palindrome": True})

    def test_longer_than(self):
        self.assertParsed("strings longer than 10 characters", {"min_length": 11})

    def test_shorter_than(self):
        self.assertParsed("strings shorter than 5 characters", {"max_length": 4})

    def test_palindrome_with_letter(self):
        self.assertParsed(
            "palindromic strings that contain the letter z",
            {"is_palindrome": True, "contains_character": "z"},
        )

    def test_first_vowel(self):
        self.assertParsed("strings with the first vowel", {"contains_character": "a"})

    def test_vowel_scan_overrides_explicit_letter(self):
        # "a" is the first of a/e/i/o/u present in the query text
        self.assertParsed("strings that contain the letter z and a vowel", {"contains_character": "a"})

    def test_vowel_scan_reads_query_text(self):
        self.assertParsed("strings with some vowel", {"contains_character": "e"})

    def test_reads_same_phrase(self):
        self.assertParsed("strings that reads same forwards and backwards", {"is_palindrome": True})

    def test_word_count_priority(self):
        self.assertParsed("one word or two words", {"word_count": 1})
        self.assertParsed("2 word strings", {"word_count": 2})
        self.assertParsed("three words", {"word_count": 3})

    def test_exact_length(self):
        self.assertParsed("strings of length 5", {"min_length": 5, "max_length": 5})
        self.assertParsed("strings 4 characters long", {"min_length": 4, "max_length": 4})

    def test_exact_length_overwrites_bounds(self):
        self.assertParsed(
            "strings longer than 2 and shorter than 9 with length of 7",
            {"min_length": 7, "max_length": 7},
        )

    def test_contains_variants(self):
        self.assertParsed("strings containing the character q", {"contains_character": "q"})
        self.assertParsed("contains x", {"contains_character": "x"})

    def test_case_folded(self):
        self.assertParsed("PALINDROMIC Strings Longer Than 3", {"is_palindrome": True, "min_length": 4})

    def test_unparsable_query_is_empty(self):
        self.assertTrue(interpret("show me everything").is_empty())
        self.assertTrue(interpret("").is_empty())

    def test_no_state_between_calls(self):
        interpret("palindromic strings longer than 3")
        self.assertParsed("strings shorter than 5 characters", {"max_length": 4})
