"""To be run from project root"""
import time
from typing import Union

import numpy as np

from mathexpr.interpreter import compile_expression, evaluate

BENCHMARKS = {
    "trig": "sin(rad('theta')) * 'len' + cos(rad('theta')) ^ 2",
    "poly": "3 * 'theta' ^ 3 - 2 * 'theta' ^ 2 + 'theta' * 'len' - 7",
    "nested": "exp(sin(rad('theta'))) * log10(abs('theta') + 1) / sqrt('len' + 1)",
}

if __name__ == "__main__":

    def print_line(col1: str, col2: Union[str, float], col3: Union[str, float]):
        col2 = col2 if isinstance(col2, str) else f"{col2:.4f}"
        col3 = col3 if isinstance(col3, str) else f"{col3:.4f}"
        print(f"{col1: ^15} | {col2: ^15} | {col3: ^15}")

    print_line("benchmark", "compiled", "one-shot")

    thetas = np.linspace(0.0, 90.0, 10_001)
    for name, code in BENCHMARKS.items():
        start = time.time()
        expr = compile_expression(code, ["theta", "len"])
        expr.set_value("len", 2.0)
        for theta in thetas:
            expr.set_value("theta", theta)
            expr.evaluate()
        compiled_time = time.time() - start

        start = time.time()
        for theta in thetas:
            evaluate(code, {"theta": theta, "len": 2.0})
        one_shot_time = time.time() - start

        print_line(name, compiled_time, one_shot_time)
