from mathexpr.errors import CalcError
from mathexpr.interpreter import compile_expression
from mathexpr.tokenizer import tokenize, untokenize

for code, variables in [
    ("5", {}),
    ("-1", {}),
    ("1 + 1", {}),
    ("-1 + 1", {}),
    ("1 + -1", {}),
    ("4 + 6 * 3", {}),
    ("(4+6) * 3", {}),
    ("7/6/2000", {}),
    ("5^2 % 7", {}),
    ("2 * 'pi'", {}),
    ("sin(rad(12.67)*exp(1.13)) + TAN(COS(RAD(32.1)))*LOG(12)", {}),
    (
        "sin(rad('var2')*exp('var1')) + TAN(COS(RAD('var3')))*LOG('var4')",
        {"var1": 1.13, "var2": 12.67, "var3": 32.1, "var4": 12},
    ),
    ("sqrt(-1)", {}),
    ("sin(2", {}),
    ("foo(2)", {}),
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        units = tokenize(code)
    except CalcError as e:
        print(e)
        continue

    print(f"units: {' '.join(str(u) for u in units)}")
    print(f"normalized: {untokenize(units)}")

    try:
        expr = compile_expression(code, variables)
    except CalcError as e:
        print(e)
        continue
    print(f"rpn: {expr.rpn}")

    for name, value in variables.items():
        expr.set_value(name, value)
    print(f"variables: {dict(expr.variables.items())}")
    print(f"result: {expr.evaluate()}")
