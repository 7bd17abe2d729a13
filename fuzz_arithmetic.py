import math
import random
import re
import string
import warnings

from mathexpr.interpreter import evaluate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except ZeroDivisionError:
        return math.nan
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate(code)
    except Exception as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"\d\s+[\d.]|\.\s+\d|\)\s*\(", code):
            continue  # whitespace-joined literals and implicit products mean something else to python

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, float):
            if math.isnan(res_py) and (math.isnan(res_my) or math.isinf(res_my)):
                continue  # python raises on division by zero, we follow IEEE-754
            if math.isclose(res_my, float(res_py), rel_tol=1e-9):
                continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
