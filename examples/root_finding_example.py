#!/usr/bin/env python3

# Examples of finding the root of an equation entered as text, using each
# of the available methods in turn.

import logging

from rootfinder.numeric.solve import find_root
from rootfinder.util import format_root, format_table

logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

equation = "x^3 - x - 2"
print(f"The given equation is: {equation}\n")

for method in ('bisection', 'falsePosition', 'newtonRaphson', 'secant'):
    result = find_root(method, equation, a=1.0, b=2.0, initial_guess=1.0,
                       tolerance=1e-6)
    print(format_table(result.records))
    print(f"Result: {format_root(result)}\n")

# A bracket with no sign change fails, the reason is logged.
result = find_root('bisection', "x^2 + 1", a=0.0, b=1.0)
print(f"Result: {format_root(result)}")
