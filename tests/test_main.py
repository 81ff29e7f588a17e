import io
import unittest
from unittest import mock

import main
from core import RPNEvaluator
from utils import format_number, format_result, format_error
from core.errors import UnassignedVariable


class FormattingTests(unittest.TestCase):

    def test_numbers(self):
        cases = [
            (7.0, "7"),
            (-3.0, "-3"),
            (2.5, "2.5"),
            (0.1 + 0.2, "0.30000000000000004"),
            (-0.0, "0"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (-1e21, "-1e+21"),
            (1e300, "1e+300"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            (float("nan"), "NaN"),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(expected, format_number(value))

    def test_result_and_error(self):
        self.assertEqual("[7]", format_result(7.0))
        self.assertEqual("Error: Unassigned variable: A", format_error(UnassignedVariable("A")))


class LineLoopTests(unittest.TestCase):

    def setUp(self):
        self.evaluator = RPNEvaluator()
        self.out = io.StringIO()
        self.err = io.StringIO()

    def test_run_line(self):
        self.assertTrue(main.run_line(self.evaluator, "3 4 +", self.out, self.err))
        self.assertTrue(main.run_line(self.evaluator, "A 1 =", self.out, self.err))
        self.assertFalse(main.run_line(self.evaluator, "5 0 /", self.out, self.err))
        self.assertEqual("[7]\n", self.out.getvalue())
        self.assertEqual("Error: Division by zero\n", self.err.getvalue())
        self.assertEqual([], self.evaluator.stack)

    def test_repl_with_prompt(self):
        stdin = io.StringIO("A 5 =\nA 2 *\n\nbad\n")
        code = main.repl(self.evaluator, stdin, self.out, self.err, prompt="> ")
        self.assertEqual(0, code)
        self.assertEqual("> > [10]\n> > > \nBye!\n", self.out.getvalue())
        self.assertEqual("Error: Unknown token: bad\n", self.err.getvalue())

    def test_repl_without_prompt(self):
        stdin = io.StringIO("1 2 +\n2 3 ^")
        main.repl(self.evaluator, stdin, self.out, self.err)
        self.assertEqual("[3]\n[8]\n", self.out.getvalue())

    def test_repl_keyboard_interrupt(self):
        stdin = mock.Mock()
        stdin.readline.side_effect = ["1\n", KeyboardInterrupt]
        main.repl(self.evaluator, stdin, self.out, self.err, prompt="> ")
        self.assertEqual("> [1]\n> \nBye!\n", self.out.getvalue())

    def test_run_expressions(self):
        code = main.run_expressions(self.evaluator, ["X 2 =", "X X ^"], self.out, self.err)
        self.assertEqual(0, code)
        self.assertEqual("[4]\n", self.out.getvalue())
        code = main.run_expressions(self.evaluator, ["Y", "1"], self.out, self.err)
        self.assertEqual(1, code)
        self.assertEqual("[4]\n[1]\n", self.out.getvalue())


class CommandLineTests(unittest.TestCase):

    def test_parser_defaults(self):
        args = main.build_parser().parse_args([])
        self.assertEqual([], args.expression)
        self.assertEqual("WARNING", args.log_level)
        self.assertFalse(args.no_prompt)

    def test_expressions_exit_code(self):
        with mock.patch("sys.stdout", new_callable=io.StringIO) as out, \
                mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as cm:
                main.cli(["-e", "A 3 =", "-e", "A 4 *"])
        self.assertEqual(0, cm.exception.code)
        self.assertEqual("[12]\n", out.getvalue())

    def test_failed_expression_exit_code(self):
        with mock.patch("sys.stdout", new_callable=io.StringIO), \
                mock.patch("sys.stderr", new_callable=io.StringIO) as err:
            with self.assertRaises(SystemExit) as cm:
                main.cli(["--expression", "3 +"])
        self.assertEqual(1, cm.exception.code)
        self.assertIn("Error: Stack underflow", err.getvalue())

    def test_piped_stdin(self):
        stdin = io.StringIO("2 2 +\n")
        with mock.patch("sys.stdin", stdin), \
                mock.patch("sys.stdout", new_callable=io.StringIO) as out:
            with self.assertRaises(SystemExit) as cm:
                main.cli([])
        self.assertEqual(0, cm.exception.code)
        self.assertEqual("[4]\n", out.getvalue())


if __name__ == '__main__':
    unittest.main()
