"""
Lexonaut parser: classify a token sequence into ordered values, flags and options.

What this module provides
- ParserOutput: the immutable result of one parse session.
  • ordered: tuple[Token, ...]  tokens left in their original relative order.
  • flags: frozenset[str]        flag identifiers (duplicates collapse).
  • options: Mapping[str, tuple[str, ...]]  values per option, in supply order.
- Parser: consumes a token sequence once, under a swappable strategy.
- parse(tokens, strategy): one-shot convenience around Parser.
- empty_output() / merge_outputs(*outputs): build and combine results.

Classification (first match wins, for the token at the current position)
1. flag     strategy.match_flag(value)            -> flags, advance 1.
2. option   strategy.match_option(value)          -> options key (created empty), advance 1;
            the next token becomes its value unless it is itself a flag,
            an option or a compact option under the same strategy.
3. compact  strategy.match_compact_option(value)  -> options[id] += value, advance 1.
4. ordered  nothing matched                       -> ordered, advance 1.

The order is fixed: a strategy may accept "--x" as a flag and "--x=y" as a
compact option, and testing the flag first keeps a bare marker from being
read as an option without value.

Every token lands in exactly one place: ordered, a flag, an option name or
an option value. A compact option supplies a name and a value from one token;
an option step with lookahead covers two tokens, all other steps cover one.
"""
from types import MappingProxyType

from .faults import *
from .tokens import Token
from .unordered import UnorderedStrategy, no_strategy
from .utils import *


class ParserOutput:
    """
    Immutable result of a parse session.

    Outputs compare structurally and render through rich. Build them with
    Parser.parse(), parse(), empty_output() or merge_outputs().
    """
    __slots__ = ("_ordered", "_flags", "_options")

    def __init__(self, ordered=(), flags=(), options=Unset):
        ordered = tuple(ordered)
        if not all(isinstance(token, Token) for token in ordered):
            raise TypeError("parser output 'ordered' must contain tokens")
        self._ordered = ordered
        self._flags = frozenset(flags)
        self._options = MappingProxyType({
            identifier: tuple(values) for identifier, values in coalesce(options, {}).items()
        })

    ordered = view("ordered")
    flags = view("flags")

    @property
    def options(self):
        return self._options

    def __eq__(self, other, /):
        if not isinstance(other, ParserOutput):
            return NotImplemented
        return (
            self._ordered == other._ordered and
            self._flags == other._flags and
            self._options == other._options
        )

    __hash__ = None

    def __rich_repr__(self):
        yield "ordered", list(self._ordered)
        yield "flags", set(self._flags)
        yield "options", {identifier: list(values) for identifier, values in self._options.items()}

    __repr__ = represent


class _Draft:
    """
    Internal accumulator threaded through the parse fold.
    """
    __slots__ = ("ordered", "flags", "options")

    def __init__(self):
        self.ordered = []
        self.flags = set()
        self.options = {}

    def freeze(self):
        return ParserOutput(self.ordered, self.flags, self.options)


def _unordered(strategy, text, /):
    return (
        strategy.match_flag(text) is not None or
        strategy.match_option(text) is not None or
        strategy.match_compact_option(text) is not None
    )


def _step(tokens, position, strategy, draft, /):
    """
    Internal: classify tokens[position] into `draft` and return the next position.
    """
    token = tokens[position]

    if (identifier := strategy.match_flag(token.value)) is not None:
        draft.flags.add(identifier)
        return position + 1

    if (identifier := strategy.match_option(token.value)) is not None:
        values = draft.options.setdefault(identifier, [])
        position += 1
        # the following token is a value only if it is not an unordered argument itself
        if position < len(tokens) and not _unordered(strategy, tokens[position].value):
            values.append(tokens[position].value)
            position += 1
        return position

    if (pair := strategy.match_compact_option(token.value)) is not None:
        identifier, value = pair
        draft.options.setdefault(identifier, []).append(value)
        return position + 1

    draft.ordered.append(token)
    return position + 1


def _sanitize_strategy(strategy, /):
    if not isinstance(strategy, UnorderedStrategy):
        raise TypeError("parser strategy must be an UnorderedStrategy")
    return strategy


class Parser:
    """
    Single-pass classifier over a fixed token sequence.

    The strategy can be replaced at any time, including between the steps of
    an iteration; each step reads the strategy that is current at that moment.

        >>> output = Parser(tokens).set_unordered_strategy(long_strategy()).parse()

    Iterating a Parser yields one ParserOutput per step, holding only what
    that step classified. Iteration always starts from the first token, and
    merge_outputs(*parser) == parser.parse() for a fixed strategy.
    """

    def __init__(self, tokens, /, strategy=Unset):
        tokens = tuple(tokens)
        if not all(isinstance(token, Token) for token in tokens):
            raise TypeError("parser input must be a sequence of tokens")
        self._tokens = tokens
        self._strategy = _sanitize_strategy(coalesce(strategy, no_strategy()))

    tokens = view("tokens")

    @property
    def strategy(self):
        return self._strategy

    def set_unordered_strategy(self, strategy, /):
        """
        Replace the strategy and return the parser (fluent style).
        """
        self._strategy = _sanitize_strategy(strategy)
        return self

    def _advance(self, position, draft, /):
        following = _step(self._tokens, position, self._strategy, draft)
        if following <= position:
            trigger(ParserStateError(
                "token at position %d was not classified" % position,
                title="parser did not advance",
                code=FaultCode.UNREACHABLE_STATE,
                hint="this is a bug in lexonaut, please report it with the input",
                position=position,
                docs=getdoc(FaultCode.UNREACHABLE_STATE)
            ))
        return following

    def __iter__(self):
        position = 0
        while position < len(self._tokens):
            draft = _Draft()
            position = self._advance(position, draft)
            yield draft.freeze()

    def parse(self):
        """
        Classify the whole token sequence.

        Returns
        - ParserOutput: empty when there are no tokens.
        """
        draft = _Draft()
        position = 0
        while position < len(self._tokens):
            position = self._advance(position, draft)
        return draft.freeze()

    def __rich_repr__(self):
        yield "tokens", list(self._tokens)
        yield "strategy", self._strategy

    __repr__ = represent


def parse(tokens, /, strategy=Unset):
    """
    Parse `tokens` under `strategy` (no_strategy() when omitted).
    """
    return Parser(tokens, strategy=strategy).parse()


def empty_output():
    return ParserOutput()


def merge_outputs(*outputs):
    """
    Combine outputs in order: ordered tokens are concatenated, flags are
    united, and option values are appended key by key.
    """
    draft = _Draft()
    for output in outputs:
        if not isinstance(output, ParserOutput):
            raise TypeError("merge_outputs() arguments must be parser outputs")
        draft.ordered.extend(output.ordered)
        draft.flags.update(output.flags)
        for identifier, values in output.options.items():
            draft.options.setdefault(identifier, []).extend(values)
    return draft.freeze()


__all__ = (
    "ParserOutput",
    "Parser",
    "parse",
    "empty_output",
    "merge_outputs",
)
