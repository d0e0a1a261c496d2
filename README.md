# observable

Small, dependency-free helpers for writing expressive assertions in tests.

You build conditions as lazily evaluated `Predicate` objects and pass them to
`assert_that` along with a test reporter. When an assertion fails, the reporter's
`error` method records it and the test keeps running. One test can therefore
report several failures.

## Installation

```
pip install observable
```

## Reporters

A reporter is any object that has `helper()` and `error(*args)` methods
(`observable.predicates.TB` describes this shape). The assertions call
`helper()` first. When an assertion fails they also call `error(message)`.

```python
class Reporter:
    def __init__(self):
        self.failures = []

    def helper(self):
        pass

    def error(self, *args):
        self.failures.append(" ".join(map(str, args)))
```

## Assertions

`assert_that(tb, assertion)` accepts any of these:

- a `bool`;
- a callable that takes no arguments, called right away, whose result is taken as a bool;
- a `Predicate`.

It returns the outcome. When the outcome is false, it calls `tb.error(...)`. A
`Predicate` passes its own message. A bool or a callable passes an empty string.
Any other kind of value raises `TypeError`.

`assert_thatf(tb, assertion, format, *args)` works the same way, except that
the failure message is `format % args`, or `format` alone when no `args` are given.

```python
from observable.predicates import assert_that, assert_thatf, equal, is_nil

tb = Reporter()
assert_that(tb, equal(1 + 1, 2))                       # True
assert_thatf(tb, is_nil(1), "expected nothing, got %r", 1)  # False
print(tb.failures)  # ['expected nothing, got 1']
```

## Predicates

All of these helpers are in `observable.predicates`:

| Helper                      | Succeeds when                                                        |
|-----------------------------|----------------------------------------------------------------------|
| `is_nil(value)`             | `value is None`                                                      |
| `error_is(err, target)`     | `err` or an exception in its cause/context chain matches `target`   |
| `errors(func)`              | `func()` raises an exception or returns an exception instance       |
| `errors_with(func, target)` | the exception that `func()` raises or returns matches `target`      |
| `raises(func)`              | calling `func()` raises an exception                                 |
| `zero(value)`               | `value == type(value)()`; false if the type cannot be built empty   |
| `equal(got, want)`          | `got == want`                                                        |
| `returns(func, want)`       | `func() == want`; `func` is called at most once                      |

For `error_is` and `errors_with`, `target` can be an exception class, which
matches by `isinstance`, or an exception instance, which matches by identity
or equality. Two `None`s match each other.

Every `Predicate` has two methods. `ok()` evaluates the condition, and
`message()` returns the failure text, for example `"expected b, got a"` from
`equal("a", "b")`.

## Negation

`negate(x)` flips a condition:

- `negate(True)` gives `False`;
- `negate(predicate)` gives a predicate whose message starts with `"not: "`;
- `negate(func)` gives a wrapper that negates whatever `func` returns, a bool
  or a `Predicate`. Any other return value raises `TypeError` when the wrapper
  is called. This lets you negate predicate factories such as `is_nil` or `equal`.

Passing any other kind of value raises `TypeError`.

```python
from observable.predicates import assert_that, negate, equal, is_nil

assert_that(tb, negate(is_nil(1)))
assert_that(tb, negate(equal)("a", "b"))
assert_that(tb, negate(lambda: 2 + 2 == 5))
```

## Testing a test helper

`observable.testspy.SpyTB` is a reporter that only records that a failure
happened. It can wrap another reporter as `SpyTB(tb)`. In that case its
`helper()` calls through to the wrapped reporter.

- `error`, `errorf` and `fail` set the `spied_on_failure` flag.
- `fail_now`, `fatal` and `fatalf` raise `SpyUnsupportedError`, a subclass of
  `RuntimeError`.

```python
from observable.predicates import assert_that, equal
from observable.testspy import SpyTB

spy = SpyTB()
assert not assert_that(spy, equal("a", "b"))
assert spy.spied_on_failure
```

## What it does not do

The package is a plain library. It does not include a pytest plugin, fixtures or a
command-line tool. Your test code has to provide the reporter that gets passed to
`assert_that`.