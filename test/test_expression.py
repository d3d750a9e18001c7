import math
from unittest import TestCase


class TestParseFunction(TestCase):
    def test_arithmetic(self):
        from rootfinder.numeric.expression import parse_function

        f = parse_function("x^2 - 4")
        self.assertEqual(f(3.0), 5.0)
        self.assertIsInstance(f(3.0), float)
        self.assertEqual(f.expr, "x^2 - 4")

        # '^' binds like '**', i.e. tighter than unary minus.
        self.assertEqual(parse_function("-x^2")(3.0), -9.0)
        self.assertEqual(parse_function("2^3^2")(0.0), 512.0)
        self.assertEqual(parse_function("x**3 - x - 2")(2.0), 4.0)
        self.assertEqual(parse_function("(x + 1) * (x - 1) / 2")(3.0), 4.0)
        self.assertEqual(parse_function("x % 3")(7.0), 1.0)
        self.assertEqual(parse_function("+x")(2.5), 2.5)
        self.assertEqual(parse_function("3")(1.0), 3.0)

    def test_functions_and_constants(self):
        from rootfinder.numeric.expression import parse_function

        self.assertAlmostEqual(parse_function("cos(x) - x")(0.5),
                               math.cos(0.5) - 0.5)
        self.assertAlmostEqual(parse_function("Math.cos(x) - x")(0.5),
                               math.cos(0.5) - 0.5)
        self.assertAlmostEqual(parse_function("sin(pi * x)")(0.5), 1.0)
        self.assertAlmostEqual(parse_function("Math.PI")(0.0), math.pi)
        self.assertAlmostEqual(parse_function("ln(e)")(0.0), 1.0)
        self.assertAlmostEqual(parse_function("exp(x)")(1.0), math.e)
        self.assertAlmostEqual(parse_function("sqrt(x) + abs(-x)")(4.0),
                               6.0)
        self.assertAlmostEqual(parse_function("pow(x, 3)")(2.0), 8.0)
        self.assertAlmostEqual(parse_function("np.log10(x)")(100.0), 2.0)
        self.assertAlmostEqual(parse_function("cbrt(x)")(-8.0), -2.0)

    def test_other_variable(self):
        from rootfinder.numeric.expression import ExpressionError, \
            parse_function

        g = parse_function("t^2", var='t')
        self.assertEqual(g(3.0), 9.0)
        with self.assertRaises(ExpressionError):
            parse_function("x^2", var='t')

    def test_parse_errors(self):
        from rootfinder.numeric.expression import ExpressionError, \
            parse_function

        bad = ["", "   ", "x^^2", "x +", "y + 1", "foo(x)",
               "__import__('os')", "x.real", "os.system('ls')",
               "[x, 1]", "x if x else 1", "lambda: 1", "'abc'",
               "sin(x, 1)", "pow(x)", "sin(x=1)", "x < 1", "True",
               "x & 1"]
        for expr in bad:
            with self.subTest(expr=expr):
                with self.assertRaises(ExpressionError):
                    parse_function(expr)

        # Also a ValueError.
        with self.assertRaises(ValueError):
            parse_function("x +")

    def test_evaluation_errors(self):
        from rootfinder.numeric.expression import ExpressionError, \
            parse_function

        cases = [("1 / x", 0.0), ("log(x)", -1.0), ("log(x)", 0.0),
                 ("sqrt(x)", -4.0), ("exp(x)", 1000.0), ("x^0.5", -1.0)]
        for expr, x in cases:
            with self.subTest(expr=expr, x=x):
                f = parse_function(expr)
                with self.assertRaises(ExpressionError) as cm:
                    f(x)
                self.assertIsInstance(cm.exception.__cause__,
                                      ArithmeticError)

        # Underflow quietly goes to zero.
        self.assertEqual(parse_function("exp(x)")(-1000.0), 0.0)

    def test_limits(self):
        from rootfinder.numeric.expression import ExpressionError, \
            parse_function

        bad = ['-' * 2000 + 'x', '-' * 200000 + 'x',
               '(' * 500 + 'x' + ')' * 500, '1' + '0' * 400 + ' * x']
        for expr in bad:
            with self.subTest(length=len(expr)):
                with self.assertRaises(ExpressionError):
                    parse_function(expr)

        # Large but representable constants are fine.
        self.assertEqual(parse_function('1' + '0' * 300 + ' * x')(0.0), 0.0)
