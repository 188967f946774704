"""
Lexonaut tokens: the lexical unit shared by every stage, and the helpers that
work on plain token sequences.

Overview
- Token(value, raw, trailing)
  • value: content with quoting removed.
  • raw: exact original substring (quotes included when quoted).
  • trailing: whitespace that followed the token in the source ("" at the end).

- join_tokens(tokens, separator=None, raw=True)
  • Rebuild a string from tokens. With the defaults this is the exact
    reconstruction: raw + trailing for every token, in order.

- extract_command(match_prefix, tokens, mutate=True)
  • Pull a command word off the first token of an already tokenized input.

Invariant
- For the full output of the tokenizer, "".join(t.raw + t.trailing) is the
  tokenized input, character for character.
"""
from typing import NamedTuple


class Token(NamedTuple):
    """
    One lexical unit of the input.

    Tokens are immutable and compare structurally. `quoted` tells whether the
    token was written with a quote pair (its raw form differs from its value).
    """
    value: str
    raw: str
    trailing: str

    @property
    def quoted(self):
        return self.raw != self.value

    def __rich_repr__(self):
        yield "value", self.value
        yield "raw", self.raw, self.value
        yield "trailing", self.trailing, ""


def join_tokens(tokens, /, separator=None, raw=True):
    """
    Join tokens back into a string.

    Parameters
    - tokens: iterable of Token.
    - separator: when None, each token keeps its own trailing whitespace
      (lossless). Otherwise the separator is placed between tokens and the
      original trailing whitespace is dropped.
    - raw: when True (default) the raw text is used, keeping quotes; when
      False the unquoted value is used.

    Returns
    - str: the reconstructed text.

    Examples
    - join_tokens(lex('a  "b c"', quotes=[('"', '"')])) -> 'a  "b c"'
    - join_tokens(tokens, separator=" ", raw=False)     -> 'a b c'
    """
    if separator is not None and not isinstance(separator, str):
        raise TypeError("join_tokens() 'separator' must be a string")

    if separator is None:
        # trailing whitespace travels with its token
        return "".join((token.raw if raw else token.value) + token.trailing for token in tokens)
    return separator.join(token.raw if raw else token.value for token in tokens)


def extract_command(match_prefix, tokens, /, mutate=True):
    """
    Extract a command from the first token of a token sequence.

    The first token's value is handed to `match_prefix`, which returns the
    length of the command marker (e.g. 1 for "!") or None. On a match, a new
    Token is returned with the marker removed from both value and raw; its
    trailing whitespace is the original token's.

    Parameters
    - match_prefix: Callable[[str], int | None]
    - tokens: sequence of Token (usually the tokenizer output).
    - mutate: when True, the first token is removed from `tokens` on success.

    Returns
    - Token | None: the command token, or None when the sequence is empty, the
      prefix does not match, or nothing is left after the marker.

    Notes
    - Quoted first tokens are matched on their value but the marker is removed
      from the raw text as written, so a quoted command keeps a raw form that
      still reconstructs its original spelling minus the marker.
    """
    if not tokens:
        return None

    first = tokens[0]
    length = match_prefix(first.value)
    if length is None:
        return None
    if not isinstance(length, int) or isinstance(length, bool) or length < 0:
        raise TypeError("extract_command() prefix matcher must return a non-negative integer or None")

    value = first.value[length:]
    if not value:
        return None

    # the marker sits after the opening quote when the token was quoted
    offset = first.raw.find(first.value) if first.quoted else 0
    raw = first.raw[:offset] + first.raw[offset + length:]

    if mutate:
        del tokens[0]
    return Token(value, raw, first.trailing)


__all__ = (
    "Token",
    "join_tokens",
    "extract_command",
)
