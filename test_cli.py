import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock

from cli import SearchState, analyze_file, run_search_loop, symbols_main, symbols_session, tokens_main
from errors import InputUnavailable, MalformedSymbolRequest, ReferenceSetUnavailable
from symbol_table import extract_symbols


def scripted(*replies):
    """input() replacement answering from a fixed script, EOFError afterwards"""
    it = iter(replies)

    def read(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


class SearchLoopTest(unittest.TestCase):
    def setUp(self):
        self.table = extract_symbols("x = a + b$")
        self.out = []

    def test_found_then_not_found(self):
        count = run_search_loop(self.table, read=scripted("+", "y", "y", "n"), write=self.out.append)
        self.assertEqual(count, 2)
        self.assertEqual(self.out, ["Symbol found: + at address A3", "Symbol not found."])

    def test_blank_replies_are_skipped(self):
        run_search_loop(self.table, read=scripted("", "  a ", "   ", "n"), write=self.out.append)
        self.assertEqual(self.out, ["Symbol found: a at address A2"])

    def test_end_of_input_at_continue_prompt_ends(self):
        self.assertEqual(run_search_loop(self.table, read=scripted("x"), write=self.out.append), 1)

    def test_no_query_is_malformed(self):
        with self.assertRaises(MalformedSymbolRequest):
            run_search_loop(self.table, read=scripted(), write=self.out.append)

    def test_states(self):
        self.assertEqual([s.name for s in SearchState],
                         ["AWAIT_QUERY", "SEARCHING", "REPORT_RESULT", "AWAIT_CONTINUE", "DONE"])


class SymbolsSessionTest(unittest.TestCase):
    def test_session_prints_table_then_searches(self):
        out = []
        ends = []

        def write(text, end="\n"):
            out.append(text)
            ends.append(end)
        table = symbols_session(stdin=io.StringIO("x = a + b$\n"), read=scripted("b", "n"), write=write)
        self.assertEqual(len(table), 5)
        self.assertEqual((out[0], ends[0]), ("Enter an expression ending with $: ", ""))
        self.assertIn("Symbol Table", out[1])
        self.assertEqual(out[-1], "Symbol found: b at address A4")

    def test_main_exit_code_without_query(self):
        stdout, stderr = io.StringIO(), io.StringIO()
        with mock.patch("sys.stdin", io.StringIO("x = a$")), \
                contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            rc = symbols_main([])
        self.assertEqual(rc, 1)
        self.assertIn("Symbol Table", stdout.getvalue())
        self.assertIn("no symbol given", stderr.getvalue())


class AnalyzeFileTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name
        self.keywords = self.write("key.txt", "if\n")
        self.operators = self.write("oper.txt", "( LPAREN\n) RPAREN\n> GT\n= ASSIGN\n")
        self.source = self.write("prog.c", "if ( x > 0 )\ny = 1 ;\n")

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, text):
        path = os.path.join(self.tmp, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_listing(self):
        out = []
        analyze_file(self.source, self.keywords, self.operators, write=out.append)
        listing = out[0]
        self.assertIn("Line: 1\n\tif\t:\tKeyword\n\t(\t:\tLPAREN", listing)
        self.assertIn("Line: 2\n\ty\t:\tIdentifier\n\t=\t:\tASSIGN\n\t1\t:\tConstant\n\t;\t:\tIdentifier", listing)
        self.assertTrue(listing.endswith("Line: 3"))

    def test_intermediate_file(self):
        out = []
        inter = os.path.join(self.tmp, "inter.txt")
        analyze_file(self.source, self.keywords, self.operators, intermediate=inter, write=out.append)
        with open(inter, encoding="utf-8") as f:
            self.assertEqual(f.read(), "if ( x > 0 ) $\ny = 1 ; $\n")
        plain = []
        analyze_file(self.source, self.keywords, self.operators, write=plain.append)
        self.assertEqual(out, plain)

    def test_missing_source(self):
        with self.assertRaises(InputUnavailable):
            analyze_file(os.path.join(self.tmp, "missing.c"), self.keywords, self.operators)

    def test_missing_reference_set(self):
        out = []
        with self.assertRaises(ReferenceSetUnavailable):
            analyze_file(self.source, self.keywords, os.path.join(self.tmp, "none.txt"), write=out.append)
        self.assertEqual(out, [])

    def test_main_exit_codes(self):
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            ok = tokens_main([self.source, "--keywords", self.keywords, "--operators", self.operators])
            failed = tokens_main([os.path.join(self.tmp, "missing.c"),
                                  "--keywords", self.keywords, "--operators", self.operators])
        self.assertEqual(ok, 0)
        self.assertIn("Lexical Analysis", stdout.getvalue())
        self.assertEqual(failed, 1)
        self.assertIn("missing.c", stderr.getvalue())

    def test_main_undecodable_keywords(self):
        bad = os.path.join(self.tmp, "bad_key.txt")
        with open(bad, "wb") as f:
            f.write(b"if\n\xff\xfe\n")
        stderr = io.StringIO()
        with contextlib.redirect_stdout(io.StringIO()), contextlib.redirect_stderr(stderr):
            rc = tokens_main([self.source, "--keywords", bad, "--operators", self.operators])
        self.assertEqual(rc, 1)
        self.assertIn("bad_key.txt", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
