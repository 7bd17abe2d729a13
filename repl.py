import logging
import os

from mathexpr.errors import CalcError
from mathexpr.interpreter import compile_expression

if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("MATHEXPR_LOG_LEVEL", "WARNING").upper(),
        format="[mathexpr] [%(levelname)s] %(message)s",
    )

    while True:
        code = input("> ")

        try:
            expr = compile_expression(code)
        except CalcError as e:
            print(e)
            continue

        try:
            result = expr.evaluate()
        except CalcError as e:
            print(e)
            continue

        print(result)
