r"""
Lexonaut argument cursor: consume the ordered values of a ParserOutput once.

Overview
- Args wraps a ParserOutput and tracks which ordered values were already
  consumed, whichever accessor consumed them.
  • Sequential accessors read forward from `position`:
      single(), single_map(), single_parse(), many()
  • Backward accessors read from the end, from `position_from_end`:
      single_from_end(), many_from_end()
  • Associative accessors scan forward from `position` by predicate, without
    moving it: find_map(), find_parse(), filter_map(), filter_parse()
  • Flags and options are plain lookups on the output:
      flag(), option(), options()

Bookkeeping
- used indices live in a bytearray with one slot per ordered value.
- an index, once used, is never returned again by any accessor.
- `position` only moves forward and only through sequential accessors, always
  to one past the last index they returned. An associative lookup may mark an
  index that the next single()/many() call then skips.
- failed lookups leave every counter as it was.

Predicates
- find_map/filter_map/single_map expect predicates returning a Maybe
  (some(x) / none()); find_parse/filter_parse/single_parse expect a Result
  (ok(x) / err(e)). Anything else raises TypeError.

Quick example:
    >>> args = Args(parse(lex('hello a hello b'), long_strategy()))
    >>> args.filter_map(lambda value: some(value) if value == "hello" else none())
    ['hello', 'hello']
    >>> args.many()
    [Fragment(value='a', trailing=' ', quoted=None), Fragment(value='b', trailing='', quoted=None)]
    >>> args.finished
    True
"""
from typing import NamedTuple

from .parser import ParserOutput
from .results import *
from .utils import *


class Fragment(NamedTuple):
    """
    Lightweight view of a consumed token returned by many()/many_from_end().

    `quoted` holds the raw text when the token was quoted, None otherwise.
    """
    value: str
    trailing: str
    quoted: str | None = None

    def __rich_repr__(self):
        yield "value", self.value
        yield "trailing", self.trailing
        yield "quoted", self.quoted, None


def _fragment(token, /):
    return Fragment(token.value, token.trailing, token.raw if token.quoted else None)


def _sanitize_limit(limit, what, /):
    if limit is None:
        return None
    if not isinstance(limit, int) or isinstance(limit, bool):
        raise TypeError(f"{what}() limit must be an integer")
    elif limit < 0:
        raise ValueError(f"{what}() limit cannot be negative")
    return limit


def _sanitize_names(names, what, /):
    if not names:
        raise TypeError(f"{what}() requires at least one name")
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"{what}() names must be strings")
    return names


def _expect(result, kind, what, /):
    if not isinstance(result, kind):
        raise TypeError(f"{what}() predicate must return a {kind.__name__}, not {type(result).__name__!r}")
    return result


class Args:
    """
    Stateful, consume-once accessor over a ParserOutput's ordered values.

    The wrapped output is never modified; only the cursor's own bookkeeping
    (positions and used indices) changes.
    """
    __slots__ = ("_output", "_ordered", "_used", "_count", "_position", "_position_from_end")

    def __init__(self, output, /):
        if not isinstance(output, ParserOutput):
            raise TypeError("args argument must be a parser output")
        self._output = output
        self._ordered = output.ordered
        self._used = bytearray(len(self._ordered))
        self._count = 0
        self._position = 0
        self._position_from_end = len(self._ordered) - 1

    # ------------------------------------------------------------------ observers

    @property
    def output(self):
        return self._output

    @property
    def length(self):
        return len(self._ordered)

    @property
    def remaining(self):
        return len(self._ordered) - self._count

    @property
    def finished(self):
        return self.remaining == 0

    @property
    def used_indices(self):
        return frozenset(index for index, used in enumerate(self._used) if used)

    @property
    def position(self):
        return self._position

    @property
    def position_from_end(self):
        return self._position_from_end

    # ------------------------------------------------------------------ internals

    def _use(self, index, /):
        self._used[index] = 1
        self._count += 1

    def _forward(self):
        used = self._used
        return (index for index in range(self._position, len(used)) if not used[index])

    def _backward(self):
        used = self._used
        return (index for index in range(self._position_from_end, -1, -1) if not used[index])

    # ------------------------------------------------------------------ sequential

    def single(self):
        """
        Consume the next unused value.

        Returns
        - str: the value; `position` moves to one past its index.
        - None: when no unused value is left at or after `position`.
        """
        for index in self._forward():
            self._use(index)
            self._position = index + 1
            return self._ordered[index].value
        return None

    def single_map(self, predicate, /, use_anyway=False):
        """
        Apply `predicate` to the next unused value.

        The value is consumed when the predicate returns some(x), or always
        when `use_anyway` is true. Returns the predicate's Maybe, or none()
        when no value is left.
        """
        for index in self._forward():
            result = _expect(predicate(self._ordered[index].value), Maybe, "single_map")
            if result.exists or use_anyway:
                self._use(index)
                self._position = index + 1
            return result
        return none()

    def single_parse(self, predicate, /, use_anyway=False):
        """
        Apply `predicate` to the next unused value.

        The value is consumed when the predicate returns ok(x), or always when
        `use_anyway` is true. Returns the predicate's Result, or None when no
        value is left.
        """
        for index in self._forward():
            result = _expect(predicate(self._ordered[index].value), Result, "single_parse")
            if result.success or use_anyway:
                self._use(index)
                self._position = index + 1
            return result
        return None

    def many(self, limit=None):
        """
        Consume a run of unused values.

        Parameters
        - limit: int | None
          maximum number of values; unbounded when None.

        Returns
        - list[Fragment]: one per consumed value, in order. `position` moves to
          one past the last consumed index, or to the end when the scan ran out
          of values.
        """
        limit = _sanitize_limit(limit, "many")
        fragments = []
        for index in self._forward():
            if limit is not None and len(fragments) >= limit:
                break
            self._use(index)
            self._position = index + 1
            fragments.append(_fragment(self._ordered[index]))
        else:
            self._position = len(self._ordered)
        return fragments

    # ------------------------------------------------------------------ backward

    def single_from_end(self):
        """
        Consume the last unused value at or before `position_from_end`.
        """
        for index in self._backward():
            self._use(index)
            self._position_from_end = index - 1
            return self._ordered[index].value
        return None

    def many_from_end(self, limit=None):
        """
        Consume up to `limit` unused values from the end.

        Returns
        - list[Fragment]: in their original (left to right) order.
        """
        limit = _sanitize_limit(limit, "many_from_end")
        fragments = []
        for index in self._backward():
            if limit is not None and len(fragments) >= limit:
                break
            self._use(index)
            self._position_from_end = index - 1
            fragments.append(_fragment(self._ordered[index]))
        else:
            self._position_from_end = -1
        fragments.reverse()
        return fragments

    # ------------------------------------------------------------------ flags and options

    def flag(self, *names):
        """
        Whether any of `names` was given as a flag.
        """
        flags = self._output.flags
        return any(name in flags for name in _sanitize_names(names, "flag"))

    def option(self, *names):
        """
        First value recorded for the first of `names` that has one, else None.
        """
        options = self._output.options
        for name in _sanitize_names(names, "option"):
            if values := options.get(name):
                return values[0]
        return None

    def options(self, *names):
        """
        Every value recorded for `names`, in the order the names are given.

        Returns
        - list[str]: possibly empty when the options were given without values.
        - None: when none of the names was given at all.
        """
        options = self._output.options
        present = [name for name in _sanitize_names(names, "options") if name in options]
        if not present:
            return None
        return [value for name in present for value in options[name]]

    # ------------------------------------------------------------------ associative

    def find_map(self, predicate, /):
        """
        Consume the first unused value from `position` onwards for which
        `predicate` returns some(x), and return that some(x).

        `position` does not move. Returns none() and changes nothing when no
        value matches.
        """
        for index in self._forward():
            result = _expect(predicate(self._ordered[index].value), Maybe, "find_map")
            if result.exists:
                self._use(index)
                return result
        return none()

    def find_parse(self, predicate, /):
        """
        Like find_map() with a Result predicate.

        Returns
        - ok(x) from the first value that parsed (now consumed).
        - err([e1, e2, ...]) with the errors of every value tried, when none parsed.
        """
        errors = []
        for index in self._forward():
            result = _expect(predicate(self._ordered[index].value), Result, "find_parse")
            if result.success:
                self._use(index)
                return result
            errors.append(result.error)
        return err(errors)

    def filter_map(self, predicate, /):
        """
        Consume every unused value from `position` onwards for which
        `predicate` returns some(x), and return the x's in scan order.

        `position` does not move.
        """
        values = []
        for index in self._forward():
            result = _expect(predicate(self._ordered[index].value), Maybe, "filter_map")
            if result.exists:
                self._use(index)
                values.append(result.value)
        return values

    def filter_parse(self, predicate, /):
        """
        Like filter_map() with a Result predicate; errors are dropped.
        """
        values = []
        for index in self._forward():
            result = _expect(predicate(self._ordered[index].value), Result, "filter_parse")
            if result.success:
                self._use(index)
                values.append(result.value)
        return values

    def __rich_repr__(self):
        yield "output", self._output
        yield "position", self._position
        yield "used", sorted(self.used_indices)

    __repr__ = represent


__all__ = (
    "Fragment",
    "Args",
)
