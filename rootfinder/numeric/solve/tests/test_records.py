import dataclasses
from unittest import TestCase


# ======================================================================

class TestIterationLog(TestCase):
    def test_add(self):
        from rootfinder.numeric.solve.records import IterationLog

        log = IterationLog('bisection')
        self.assertIsNone(log.last)
        rec1 = log.add(1.5, -0.25, a=1.0, b=2.0, f_a=-1.0, f_b=1.0)
        rec2 = log.add(1.75, 0.3125, a=1.5, b=2.0, f_a=-0.25, f_b=1.0)

        self.assertEqual((rec1.iteration, rec2.iteration), (1, 2))
        self.assertEqual(len(log), 2)
        self.assertIs(log.last, rec2)
        self.assertEqual(list(log), [rec1, rec2])
        self.assertEqual(rec1.display_name, 'Bisection')
        self.assertTrue(rec1.bracketed)

        # Returned tuple is a snapshot, not a live view.
        snapshot = log.records
        log.add(1.625, 0.015625, a=1.5, b=1.75, f_a=-0.25, f_b=0.3125)
        self.assertEqual(len(snapshot), 2)
        self.assertEqual(len(log.records), 3)

    def test_records_frozen(self):
        from rootfinder.numeric.solve.records import IterationLog

        log = IterationLog('newton_raphson')
        rec = log.add(1.5, 0.25)
        self.assertFalse(rec.bracketed)
        self.assertEqual(rec.display_name, 'Newton-Raphson')
        with self.assertRaises(dataclasses.FrozenInstanceError):
            rec.root = 2.0

    def test_unknown_method(self):
        from rootfinder.numeric.solve.records import IterationLog

        with self.assertRaises(ValueError):
            IterationLog('golden_section')

    def test_verbose(self):
        import io
        from contextlib import redirect_stdout

        from rootfinder.numeric.solve.records import IterationLog

        buf = io.StringIO()
        with redirect_stdout(buf):
            log = IterationLog('secant', verbose=True)
            log.add(0.5, 0.1, a=0.0, b=1.0, f_a=1.0, f_b=-0.4)
            log = IterationLog('newton_raphson', verbose=True)
            log.add(0.5, 0.1)
        lines = buf.getvalue().splitlines()
        self.assertEqual(lines[0], "... Iteration 1: x = [0.0, 0.5, 1.0], "
                                   "f = [1.0, 0.1, -0.4]")
        self.assertEqual(lines[1], "... Iteration 1: x = 0.5, f = 0.1")


class TestRunParameters(TestCase):
    def test_defaults(self):
        from rootfinder.numeric.solve.records import RunParameters

        params = RunParameters(a=0.0, b=1.0)
        self.assertEqual(params.tolerance, 1e-6)
        self.assertEqual(params.max_iterations, 20)
        self.assertIsNone(params.initial_guess)

    def test_invalid(self):
        from rootfinder.numeric.solve.records import RunParameters

        with self.assertRaises(ValueError):
            RunParameters(a=0.0, b=1.0, tolerance=-1e-6)
        with self.assertRaises(ValueError):
            RunParameters(a=0.0, b=1.0, tolerance=float('nan'))
        with self.assertRaises(ValueError):
            RunParameters(a=0.0, b=1.0, max_iterations=0)
        with self.assertRaises(TypeError):
            RunParameters(a=0.0, b=1.0, max_iterations=1.5)


class TestRootResult(TestCase):
    def test_converged(self):
        from rootfinder.numeric.solve.exception import Exhausted
        from rootfinder.numeric.solve.records import RootResult

        res = RootResult('secant', 0.5)
        self.assertTrue(res.converged)
        self.assertEqual(res.iterations, 0)

        res = RootResult('secant', None, error=Exhausted("failed"))
        self.assertFalse(res.converged)
        self.assertEqual(res.error.flag, 3)


class TestSolverError(TestCase):
    def test_str(self):
        from rootfinder.numeric.solve.exception import (
            InvalidPrecondition, SolverError)

        err = InvalidPrecondition("Failed:", details="Same sign.", a=1.0,
                                  records=())
        text = str(err)
        self.assertIn("Failed:", text)
        self.assertIn("flag -> 1", text)
        self.assertIn("details -> Same sign.", text)
        self.assertIn("a -> 1.0", text)
        self.assertIn("records -> 0 iteration(s)", text)
        self.assertIsInstance(err, SolverError)
        self.assertIsInstance(err, RuntimeError)

        # Explicit flag overrides the class default.
        self.assertEqual(SolverError("x", flag=7).flag, 7)
        self.assertIsNone(SolverError("x").flag)
