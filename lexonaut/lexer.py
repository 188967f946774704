r"""
Lexonaut tokenizer: quote-aware lexical scanning that keeps the raw text and
the whitespace around every token.

What this module provides
- Lexer: configured with an input string and an ordered list of quote pairs;
  iterating it yields Tokens lazily, lex() returns them all.
- Lexer.lex_command(match_prefix): split a leading command word off the input
  and defer tokenizing the rest until the caller asks for it.
- lex(input, quotes=()): one-shot convenience around Lexer.

Scanning rules
- At each position, quote pairs are tried in their configured order; the first
  opener found at the position wins. The token runs up to and including the
  matching closer; its value is the text between the delimiters.
  • Delimiters may be multi-character or non-ASCII (e.g. “ ” or <<< >>>).
  • An unterminated quote captures everything to the end of the input. This is
    not an error; an UnterminatedQuoteWarning is triggered.
- Otherwise the token is the run of non-whitespace characters at the position
  (value == raw).
- The whitespace run after a token becomes its trailing text.
- Quote matching is re-attempted right after a closing delimiter, so '"a""b"'
  is two tokens with an empty trailing in between.
- Whitespace before the first token is skipped and kept in Lexer.leading.

Quick example:
    >>> from lexonaut import Lexer
    >>> Lexer('hello "big world"', quotes=[('"', '"')]).lex()
    [Token(value='hello', raw='hello', trailing=' '),
     Token(value='big world', raw='"big world"', trailing='')]
"""
import re
from collections.abc import Iterable

from .faults import *
from .tokens import Token
from .utils import *

_WORD = re.compile(r"\S+")
_SPACE = re.compile(r"\s*")

DEFAULT_QUOTES = (('"', '"'),)


def _sanitize_quotes(quotes, /):
    """
    Internal: validate quote pairs and normalize them into a tuple of 2-tuples.

    Raises
    - TypeError: when quotes is not an iterable of (open, close) string pairs.
    - ValueError: when a delimiter is empty.
    """
    if isinstance(quotes, str) or not isinstance(quotes, Iterable):
        raise TypeError("lexer quotes must be an iterable of (open, close) pairs")

    pairs = []
    for pair in quotes:
        try:
            opener, closer = pair
        except (TypeError, ValueError):
            raise TypeError("lexer quotes must be (open, close) pairs") from None
        if not isinstance(opener, str) or not isinstance(closer, str):
            raise TypeError("lexer quote delimiters must be strings")
        elif not opener or not closer:
            raise ValueError("lexer quote delimiters cannot be empty")
        pairs.append((opener, closer))
    return tuple(pairs)


def _scan(input, position, quotes, /):
    """
    Internal: yield the Tokens of input[position:].

    `position` must point at a non-whitespace character or at the end of the
    input (callers skip leading whitespace first).
    """
    length = len(input)
    while position < length:
        start = position
        for opener, closer in quotes:
            if not input.startswith(opener, position):
                continue
            content = position + len(opener)
            end = input.find(closer, content)
            if end < 0:
                value = input[content:]
                position = length
                trigger(UnterminatedQuoteWarning(
                    "unterminated %r quote at offset %d" % (opener, start),
                    title="unterminated quote",
                    code=FaultCode.UNTERMINATED_QUOTE,
                    hint="close it with %r; the token was read to the end of the input" % closer,
                    offset=start,
                    docs=getdoc(FaultCode.UNTERMINATED_QUOTE)
                ))
            else:
                value = input[content:end]
                position = end + len(closer)
            break
        else:
            position = _WORD.match(input, position).end()
            value = input[start:position]

        raw = input[start:position]
        trailing = _SPACE.match(input, position).group()
        position += len(trailing)
        yield Token(value, raw, trailing)


class Lexer:
    """
    Quote-aware tokenizer over one input string.

    A Lexer holds no scanning state of its own: every iteration starts from
    the beginning of the input, so it can be iterated any number of times.
    """

    def __init__(self, input, /, quotes=()):
        if not isinstance(input, str):
            raise TypeError("lexer input must be a string")
        self._input = input
        self._quotes = _sanitize_quotes(quotes)

    input = view("input")
    quotes = view("quotes")

    @property
    def leading(self):
        """Whitespace before the first token (not part of any token)."""
        return _SPACE.match(self._input).group()

    def set_quotes(self, quotes, /):
        """
        Replace the quote pairs and return the lexer (fluent style).

            >>> Lexer(text).set_quotes([('"', '"'), ("“", "”")]).lex()
        """
        self._quotes = _sanitize_quotes(quotes)
        return self

    def __iter__(self):
        return _scan(self._input, len(self.leading), self._quotes)

    def lex(self):
        """
        Tokenize the whole input.

        Returns
        - list[Token]: empty for an empty (or whitespace-only) input.
        """
        return list(self)

    def lex_command(self, match_prefix, /):
        """
        Split a leading command off the input.

        Parameters
        - match_prefix: Callable[[str], int | None]
          Receives the input (without leading whitespace) and returns the
          length of the command marker, or None when there is no command.

        Returns
        - None when the prefix does not match or no word follows the marker.
        - tuple[Token, Callable[[], list[Token]]] otherwise: the command word
          (marker excluded from value and raw, trailing set to the following
          whitespace) and a thunk that tokenizes the rest of the input when
          called. Each call of the thunk returns a fresh list.

        Example
            >>> command, rest = Lexer("!ping a b").lex_command(lambda s: 1 if s.startswith("!") else None)
            >>> command.value, [token.value for token in rest()]
            ('ping', ['a', 'b'])
        """
        input, quotes = self._input, self._quotes
        start = len(self.leading)

        length = match_prefix(input[start:])
        if length is None:
            return None
        if not isinstance(length, int) or isinstance(length, bool) or length < 0:
            raise TypeError("lex_command() prefix matcher must return a non-negative integer or None")

        if not (match := _WORD.match(input, start + length)):
            # the marker is followed by whitespace or by the end of the input
            return None

        word = match.group()
        trailing = _SPACE.match(input, match.end()).group()
        rest = match.end() + len(trailing)

        @rename("lex_remainder")
        def remainder():
            return list(_scan(input, rest, quotes))

        return Token(word, word, trailing), remainder

    def __rich_repr__(self):
        yield "input", self._input
        yield "quotes", self._quotes, ()

    __repr__ = represent


def lex(input, /, quotes=()):
    """
    Tokenize `input` with the given quote pairs (see Lexer).
    """
    return Lexer(input, quotes=quotes).lex()


__all__ = (
    "Lexer",
    "lex",
    "DEFAULT_QUOTES",
)
