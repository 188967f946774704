r"""
Lexonaut unordered-argument strategies.

A strategy decides what token text counts as a flag, an option or a compact
option. It is a plain value made of three pure callables:

- match_flag(text) -> str | None
    presence-only marker, e.g. "--verbose" -> "verbose"
- match_option(text) -> str | None
    option name whose value is the *next* token, e.g. "--name=" -> "name"
- match_compact_option(text) -> tuple[str, str] | None
    self-contained name and value, e.g. "--name=value" -> ("name", "value")

Built-in strategies
- no_strategy(): nothing matches; every token is ordered.
- long_strategy(): "--flag", "--option= value", "--option=value".
- long_short_strategy(): long_strategy() plus the single-dash forms "-f", "-o= v", "-o=v".
- prefixed_strategy(prefixes, separators): the general form of the two above.
- matching_strategy(flags, options, separators=("=",), casefold=False):
  only the declared words match, e.g. {"verbose": ["--verbose", "-v"]}. Option
  words match bare (value in the next token) and joined to a separator (compact).

Combinators
- merge_strategies(*strategies): first strategy that matches wins, per matcher.
- rename_keys(strategy, keys): rename produced identifiers through a mapping.
- map_keys(strategy, function): rename produced identifiers through a function.

Quick example:
    >>> from lexonaut import long_short_strategy
    >>> strategy = long_short_strategy()
    >>> strategy.match_flag("-v"), strategy.match_compact_option("--out=a.txt")
    ('v', ('out', 'a.txt'))
"""
from collections.abc import Callable, Iterable, Mapping
from typing import NamedTuple

from .utils import *


class UnorderedStrategy(NamedTuple):
    """
    The three matchers the parser consults for every token.

    Strategies are immutable values; build a new one (or combine existing ones
    with merge_strategies/rename_keys/map_keys) rather than mutating.
    """
    match_flag: Callable
    match_option: Callable
    match_compact_option: Callable

    def __rich_repr__(self):
        yield "match_flag", self.match_flag.__name__
        yield "match_option", self.match_option.__name__
        yield "match_compact_option", self.match_compact_option.__name__


def _strings(object, what, /):
    """
    Internal: validate a non-empty collection of non-empty strings, rejecting duplicates.
    """
    if isinstance(object, str) or not isinstance(object, Iterable):
        raise TypeError(f"{what} must be an iterable of strings")

    strings = []
    for string in object:
        if not isinstance(string, str):
            raise TypeError(f"{what} must be strings")
        elif not string:
            raise ValueError(f"{what} cannot be empty-strings")
        elif string in strings:
            raise ValueError(f"{what} cannot contain duplicates")
        strings.append(string)

    if not strings:
        raise ValueError(f"{what} must contain at least one string")
    return tuple(strings)


def no_strategy():
    """
    Strategy that never matches: every token ends up ordered.
    """
    @rename("match_nothing")
    def match(text, /):
        return None

    return UnorderedStrategy(match, match, match)


def prefixed_strategy(prefixes, separators, /):
    """
    Strategy for prefix-marked arguments.

    Parameters
    - prefixes: Iterable[str], e.g. ["--", "-"]. The longest prefix a token
      starts with is the one used; a token made only of a prefix matches nothing.
    - separators: Iterable[str], e.g. ["=", ":"]. Separate an option name from
      its value.

    Matching (for a token "<prefix><body>")
    - flag: body contains no separator -> body.
    - option: body is "<name><separator>" with a name free of separators -> name.
    - compact: body is "<name><separator><value>" split at the earliest
      separator -> (name, value). The value may be empty and may contain
      separators itself.
    """
    prefixes = sorted(_strings(prefixes, "strategy prefixes"), key=len, reverse=True)
    separators = _strings(separators, "strategy separators")

    def body(text):
        for prefix in prefixes:
            if text.startswith(prefix):
                return text[len(prefix):] or None
        return None

    def split(body):
        # earliest separator wins; on a tie the longest separator wins
        found = None
        for separator in separators:
            index = body.find(separator)
            if index > 0 and (found is None or (index, -len(separator)) < (found[0], -len(found[1]))):
                found = index, separator
        return found

    @rename("match_flag")
    def match_flag(text, /):
        if (name := body(text)) is None or any(separator in name for separator in separators):
            return None
        return name

    @rename("match_option")
    def match_option(text, /):
        if (name := body(text)) is None:
            return None
        for separator in separators:
            if name.endswith(separator):
                head = name[:-len(separator)]
                return head if head and not any(other in head for other in separators) else None
        return None

    @rename("match_compact_option")
    def match_compact_option(text, /):
        if (name := body(text)) is None or (found := split(name)) is None:
            return None
        index, separator = found
        return name[:index], name[index + len(separator):]

    return UnorderedStrategy(match_flag, match_option, match_compact_option)


def long_strategy():
    """
    Double-dash strategy: "--flag", "--option= value" and "--option=value".
    """
    return prefixed_strategy(["--"], ["="])


def long_short_strategy():
    """
    Double- and single-dash strategy: long_strategy() plus "-f", "-o= v" and "-o=v".
    """
    return prefixed_strategy(["--", "-"], ["="])


def _lookup(words, what, /, casefold):
    """
    Internal: invert {identifier: words} into {word: identifier}.
    """
    if not isinstance(words, Mapping):
        raise TypeError(f"{what} must be a mapping of identifiers to words")

    table = {}
    for identifier, spellings in words.items():
        if not isinstance(identifier, str):
            raise TypeError(f"{what} identifiers must be strings")
        for word in _strings(spellings, f"{what} words"):
            word = word.casefold() if casefold else word
            if word in table:
                raise ValueError(f"{what} word {word!r} is used more than once")
            table[word] = identifier
    return table


def matching_strategy(flags, options, /, separators=("=",), *, casefold=False):
    """
    Strategy that only recognizes declared words.

    Parameters
    - flags: Mapping[str, Iterable[str]]
      identifier -> exact words, e.g. {"verbose": ["--verbose", "-v"]}.
    - options: Mapping[str, Iterable[str]]
      identifier -> exact words, e.g. {"output": ["--output", "-o"]}.
    - separators: Iterable[str]
      joins an option word to its value in the compact form ("--output=a.txt").
    - casefold: bool
      compare words case-insensitively.

    Raises
    - TypeError / ValueError: malformed tables, empty words, or a word shared by
      two identifiers (including one flag and one option).
    """
    table = _lookup(flags, "strategy flags", casefold=casefold)
    others = _lookup(options, "strategy options", casefold=casefold)
    if clashes := table.keys() & others.keys():
        raise ValueError("strategy word %r cannot be both a flag and an option" % min(clashes))
    separators = _strings(separators, "strategy separators")

    def normalize(text):
        return text.casefold() if casefold else text

    @rename("match_flag")
    def match_flag(text, /):
        return table.get(normalize(text))

    @rename("match_option")
    def match_option(text, /):
        return others.get(normalize(text))

    @rename("match_compact_option")
    def match_compact_option(text, /):
        for separator in separators:
            index = text.find(separator)
            if index > 0 and (identifier := others.get(normalize(text[:index]))) is not None:
                return identifier, text[index + len(separator):]
        return None

    return UnorderedStrategy(match_flag, match_option, match_compact_option)


def merge_strategies(*strategies):
    """
    Combine strategies: for each matcher, the first strategy that matches wins.
    """
    if not strategies:
        raise TypeError("merge_strategies() requires at least one strategy")
    for strategy in strategies:
        if not isinstance(strategy, UnorderedStrategy):
            raise TypeError("merge_strategies() arguments must be strategies")

    def first(attribute):
        @rename(attribute)
        def match(text, /):
            for strategy in strategies:
                if (result := getattr(strategy, attribute)(text)) is not None:
                    return result
            return None
        return match

    return UnorderedStrategy(*map(first, UnorderedStrategy._fields))


def map_keys(strategy, function, /):
    """
    Transform every identifier the strategy produces with `function`.
    """
    if not isinstance(strategy, UnorderedStrategy):
        raise TypeError("map_keys() first argument must be a strategy")
    if not callable(function):
        raise TypeError("map_keys() second argument must be callable")

    @rename("match_flag")
    def match_flag(text, /):
        return None if (identifier := strategy.match_flag(text)) is None else function(identifier)

    @rename("match_option")
    def match_option(text, /):
        return None if (identifier := strategy.match_option(text)) is None else function(identifier)

    @rename("match_compact_option")
    def match_compact_option(text, /):
        if (pair := strategy.match_compact_option(text)) is None:
            return None
        identifier, value = pair
        return function(identifier), value

    return UnorderedStrategy(match_flag, match_option, match_compact_option)


def rename_keys(strategy, keys, /):
    """
    Rename identifiers through a mapping; identifiers missing from it are kept.

        >>> strategy = rename_keys(long_short_strategy(), {"v": "verbose"})
        >>> strategy.match_flag("-v")
        'verbose'
    """
    if not isinstance(keys, Mapping):
        raise TypeError("rename_keys() second argument must be a mapping")
    keys = dict(keys)
    return map_keys(strategy, rename(lambda identifier: keys.get(identifier, identifier), "rename_key"))


__all__ = (
    # Types
    "UnorderedStrategy",

    # Strategies
    "no_strategy",
    "long_strategy",
    "long_short_strategy",
    "prefixed_strategy",
    "matching_strategy",

    # Combinators
    "merge_strategies",
    "rename_keys",
    "map_keys",
)
