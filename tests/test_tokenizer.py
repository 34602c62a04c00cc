import unittest

from moduletracker.tokenizer import ALL_PREFIXES, PREFIX_TAG, Prefix, tokenize

PSLASH = Prefix("p/")
DASH_T = Prefix("-t")
HAT_Q = Prefix("^Q")


class TestTokenize(unittest.TestCase):
    def assert_preamble_present(self, mm, expected: str) -> None:
        self.assertEqual(mm.preamble, expected)

    def assert_argument_absent(self, mm, prefix: Prefix) -> None:
        self.assertIsNone(mm.get_value(prefix))
        self.assertEqual(mm.get_all_values(prefix), [])

    def test_two_prefixes_without_preamble(self) -> None:
        mm = tokenize("n/CS3219 t/22222222", Prefix("n/"), Prefix("t/"))
        self.assertEqual(mm.preamble, "")
        self.assertEqual(mm.as_dict(), {"n/": ["CS3219"], "t/": ["22222222"]})

    def test_empty_args(self) -> None:
        mm = tokenize("", PSLASH)
        self.assert_preamble_present(mm, "")
        self.assert_argument_absent(mm, PSLASH)

    def test_no_prefixes(self) -> None:
        args = "  some random string /t tag with leading and trailing spaces "
        mm = tokenize(args)
        self.assert_preamble_present(mm, args.strip())

    def test_one_argument(self) -> None:
        mm = tokenize(" Some preamble string p/ Argument value ", PSLASH)
        self.assert_preamble_present(mm, "Some preamble string")
        self.assertEqual(mm.get_value(PSLASH), "Argument value")

        # only argument, no preamble
        mm = tokenize(" p/   Argument value ", PSLASH)
        self.assert_preamble_present(mm, "")
        self.assertEqual(mm.get_value(PSLASH), "Argument value")

    def test_multiple_arguments(self) -> None:
        args = "SomePreambleString -t dashT-Value p/pSlash value"
        mm = tokenize(args, PSLASH, DASH_T, HAT_Q)
        self.assert_preamble_present(mm, "SomePreambleString")
        self.assertEqual(mm.get_value(PSLASH), "pSlash value")
        self.assertEqual(mm.get_value(DASH_T), "dashT-Value")
        self.assert_argument_absent(mm, HAT_Q)

        # empty value for a prefix is kept, and is not the same as absent
        mm = tokenize(args + " ^Q", PSLASH, DASH_T, HAT_Q)
        self.assertEqual(mm.get_value(HAT_Q), "")
        self.assertEqual(mm.get_all_values(HAT_Q), [""])
        self.assertTrue(mm.has(HAT_Q))

    def test_repeated_prefix_accumulates_in_order(self) -> None:
        mm = tokenize("SomePreambleString p/pSlash value -t dashT-Value -t another dashT value p/ another", PSLASH, DASH_T)
        self.assertEqual(mm.get_all_values(PSLASH), ["pSlash value", "another"])
        self.assertEqual(mm.get_all_values(DASH_T), ["dashT-Value", "another dashT value"])
        self.assertEqual(mm.get_value(PSLASH), "another")

    def test_prefix_not_after_whitespace_is_part_of_value(self) -> None:
        mm = tokenize("SomePreambleStringp/ pSlash joined-tjoined -t not joined^Qjoined", PSLASH, DASH_T, HAT_Q)
        self.assert_preamble_present(mm, "SomePreambleStringp/ pSlash joined-tjoined")
        self.assert_argument_absent(mm, PSLASH)
        self.assertEqual(mm.get_value(DASH_T), "not joined^Qjoined")
        self.assert_argument_absent(mm, HAT_Q)

    def test_url_value_is_not_split(self) -> None:
        mm = tokenize(" r/https://example.com/a/b n/CS2103T", *ALL_PREFIXES)
        self.assertEqual(mm.as_dict(), {"r/": ["https://example.com/a/b"], "n/": ["CS2103T"]})

    def test_internal_whitespace_is_kept(self) -> None:
        mm = tokenize(" v/ Block 312,   Amy Street 1  t/x", *ALL_PREFIXES)
        self.assertEqual(mm.as_dict()["v/"], ["Block 312,   Amy Street 1"])

    def test_empty_tag_marks_present_but_empty(self) -> None:
        mm = tokenize("1 t/", *ALL_PREFIXES)
        self.assertEqual(mm.preamble, "1")
        self.assertEqual(mm.get_all_values(PREFIX_TAG), [""])


if __name__ == "__main__":
    unittest.main()
