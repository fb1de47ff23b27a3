# testifylint

A library of checkers that look at assertion calls made with the testify
assertion packages in Go test code and report the ones that could be written
better. Most reports carry a suggested fix: text edits that rewrite the call
into its preferred form.

## What it reports

| Checker                   | Finds                                        | Proposes                              |
|---------------------------|----------------------------------------------|---------------------------------------|
| `float-compare`           | `assert.Equal(t, 42.42, a)`                  | `InEpsilon` or `InDelta` (no fix)     |
| `bool-compare`            | `assert.Equal(t, true, ok)`, `True(t, !ok)`  | `assert.True(t, ok)`, `False(t, ok)`  |
| `empty`                   | `assert.Len(t, arr, 0)`                      | `assert.Empty(t, arr)`                |
| `len`                     | `assert.Equal(t, 3, len(arr))`               | `assert.Len(t, arr, 3)`               |
| `compares`                | `assert.True(t, a >= b)`                     | `assert.GreaterOrEqual(t, a, b)`      |
| `error-nil`               | `assert.Nil(t, err)`                         | `assert.NoError(t, err)`              |
| `error-is-as`             | `assert.True(t, errors.Is(err, target))`     | `assert.ErrorIs(t, err, target)`      |
| `require-error`           | `assert.NoError(t, err)`                     | using `require` (no fix)              |
| `expected-actual`         | `assert.Equal(t, result, expected)`          | `assert.Equal(t, expected, result)`   |
| `suite-extra-assert-call` | `s.Assert().Equal(42, v)`                    | `s.Equal(42, v)` (or the reverse)     |
| `suite-dont-use-pkg`      | `assert.Equal(s.T(), 42, v)` inside a suite  | `s.Equal(42, v)`                      |
| `suite-thelper`           | suite helpers without `s.T().Helper()`       | inserting the `Helper()` call         |

All checkers except `suite-thelper` are enabled by default.

## Using it

The checkers work on a small syntax tree (`testifylint.syntax`) and type
information (`testifylint.typesys`). A regular checker's `check(pass_, call)`
takes a `Pass` (holding a `TypesInfo` and optionally the `Package`) and a
`CallMeta` describing one assertion call, and returns a `Diagnostic` or
`None`. `SuiteTHelper.check(pass_, files)` takes a list of `syntax.File`
objects and returns a list of diagnostics.

```python
from testifylint.checker import CallMeta, FnMeta, Pass
from testifylint.length import Len
from testifylint.syntax import BasicLit, CallExpr, Ident, SelectorExpr, Token
from testifylint.typesys import TypesInfo, universe_lookup

len_ident = Ident("len")
len_call = CallExpr(len_ident, [Ident("arr")])
info = TypesInfo(uses={len_ident: universe_lookup("len")})

call = CallMeta(
    selector=SelectorExpr(Ident("assert"), Ident("Equal")),
    selector_x_str="assert",
    fn=FnMeta("Equal"),
    args=[BasicLit(Token.INT, "3"), len_call],
)
diagnostic = Len().check(Pass(info), call)
diagnostic.message  # "len: use assert.Len"
[e.new_text for e in diagnostic.suggested_fixes[0].text_edits]  # [b"Len", b"arr, 3"]
```

`ExpectedActual(pattern)` and `set_exp_var_pattern` change the regular
expression for names of expected values (default
`expected_actual.DEFAULT_EXPECTED_VAR_PATTERN`);
`SuiteExtraAssertCall(mode)` and `set_mode` choose between
`SuiteExtraAssertCallMode.REMOVE` (the default) and `REQUIRE`.

The registry in `testifylint.registry` knows every checker and its priority:

```python
from testifylint import registry

registry.all_checkers()          # every checker name, in priority order
registry.enabled_by_default()    # the default set
registry.is_known("len")         # True
checker = registry.get("len")    # a fresh checker instance, or None
```

`registry.sort_by_priority(names)` sorts a list of checker names in place
into priority order; unknown names sort first.

## Configuration

`testifylint.config.new_default()` builds the default `Config`.
`testifylint.config.bind_to_flags(cfg, parser)` adds these options to an
`argparse` parser, writing parsed values into `cfg`:

- `--enable-all` – enable every checker;
- `--enable` – a comma separated list of known checkers to enable;
- `--expected-actual.pattern` – the regular expression for names of
  expected variables;
- `--suite-extra-assert-call.mode` – `remove` or `require` an explicit
  `Assert()` call.

Invalid values are reported as parser errors. The value types behind them,
`KnownCheckersValue`, `RegexpValue` and `EnumValue`, live in
`testifylint.flag_values` and raise `ValueError` on bad input.

## Test generation helpers

`testifylint.assertion` holds `Assertion` and `AssertionExpander`, which turn
one assertion template into Go source lines (plain and formatted variants,
with the expected diagnostic as a trailing `// want` comment, or in golden
form with the proposed call). `quote_report` escapes and quotes a diagnostic
message for such a comment. `testifylint.checker_name.CheckerName` converts a
checker name such as `suite-extra-assert-call` into package, test and suite
names.

## What it does not do

The package does not read Go source files, type-check them or load packages,
and it has no command-line program. The caller builds the syntax nodes,
`TypesInfo` and `CallMeta` values, runs the checkers, and applies any
suggested text edits itself.