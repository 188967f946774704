"""
Lexonaut faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every issue the
  tokenizer and the parser can surface.
- LexonautException / LexonautWarning: base types that carry message + options and
  know how to render themselves through rich.
- trigger(): central entry point to surface any fault (respecting shell/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Where faults come from
- The tokenizer never fails. An unterminated quote is captured to the end of
  the input and reported as an UnterminatedQuoteWarning.
- The parser only fails on an internal-consistency violation (a step that did
  not advance), reported as ParserStateError. It cannot happen with the
  ordered fallback in place.
- API misuse (bad quote pairs, negative limits, wrong types) raises plain
  TypeError/ValueError at the call site instead of going through trigger().

Integration
- In non-shell mode, exceptions are raised and warnings go through warnings.warn.
- In shell mode, both are rendered via rich on stderr. Hosts can restyle the
  output with __styles__, relabel codes with __codes__, and name the program
  with __prog__ in __main__.
"""
import copy
import inspect
import sys
import warnings
from abc import ABC
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - parser errors (112xx)
      • UNREACHABLE_STATE
    - tokenizer warnings (121xx)
      • UNTERMINATED_QUOTE
    """
    # --- parser errors (11xxx) ---
    UNREACHABLE_STATE           = 11201

    # --- warnings (12xxx) ---
    UNTERMINATED_QUOTE          = 12101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


_DEFAULTS = MappingProxyType({
    "shell": False,
    "colorful": True,
    "fancy": False,
    "title": "fault",
    "hint": "",
    "code": Unset,
})


def _render(fault, palette, kind):
    main = __import__("__main__")
    options = fault.options

    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))

    def styler(style):
        return styles[style] if options["colorful"] else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not options["colorful"]:
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), style)

    code = options["code"]
    header = Text.assemble(
        "[ ",
        text(getattr(main, "__prog__", "lexonaut"), styler("prog-name")),
        " — ",
        text(code.normalize() if code is not Unset else kind, styler("code")),
        " | ",
        text(options["title"].title(), styler(kind + "-title")),
        " ]"
    )
    message = text(fault.message, styler(kind + "-message"))
    hint = Text.assemble(text(" → ", styler("hint-arrow")), text(options["hint"], styler("hint")))

    if options["fancy"]:
        return Panel(Group(message, hint), title=header, title_align="left")
    return Group(header, message, hint)


class _Fault:
    """
    Shared behavior of lexonaut errors and warnings.

    A fault keeps its message and a read-only mapping of options; every
    option not listed in _DEFAULTS (offset, position, docs, ...) is carried
    along untouched for hosts to inspect.
    """
    palette = MappingProxyType({})
    kind = "fault"

    def __init__(self, message=Unset, /, **options):
        assert message is Unset or isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(dict(_DEFAULTS) | options)

    def __rich__(self):
        return _render(self, self.palette, self.kind)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **(dict(self.options) | overrides))


class LexonautException(_Fault, Exception):
    palette = MappingProxyType({
        "prog-name": "bold #E6E6F0",
        "code": "bold #00E5FF",
        "error-title": "bold #FF4DA6",
        "error-message": "#C8C8D0",
        "hint-arrow": "#9CE19C dim",
        "hint": "italic #9CE19C",
    })
    kind = "error"

    def __trigger__(self):
        if not self.options["shell"]:
            raise self from None
        console.print(self)
        sys.exit(1)


class ParserStateError(LexonautException): ...


class LexonautWarning(_Fault, ABC, Warning):
    palette = MappingProxyType({
        "prog-name": "bold #E6E6F0",
        "code": "bold #FFB400",
        "warning-title": "bold #FFC2E0",
        "warning-message": "#D6D6DE",
        "hint-arrow": "#B8EFAF dim",
        "hint": "italic #B8EFAF",
    })
    kind = "warning"

    def __trigger__(self):
        if self.options["shell"]:
            console.print(self)
        else:
            warnings.warn(self, stacklevel=len(inspect.stack()))


class UnterminatedQuoteWarning(LexonautWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via the rich console; otherwise exceptions
      are raised and warnings are emitted through the warnings module.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    returns None when nothing is registered.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "LexonautException",
    "ParserStateError",
    "LexonautWarning",
    "UnterminatedQuoteWarning",
    "FaultCode",
    "trigger",
    "getdoc",
)
