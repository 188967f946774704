"""
Lexonaut validation loops: keep asking for input until one parses.

A loop strategy is any object with two callables (and two optional hooks):

- get_input() -> step(text) | finish(value) | fail(error)
    step(text):    a new input to parse.
    finish(value): stop right away with a successful value.
    fail(error):   give up; the loop returns err(error).
- parse(text) -> finish(value) | fail(error) | step(text)
    finish(value): the input was accepted; the loop returns ok(value).
    fail(error):   the input was rejected; ask get_input() again.
    step(text):    parse a replacement input right away (no get_input() call).
- on_input_error(error)        called before the loop gives up (optional).
- on_parse_error(error, text)  called after each rejected input (optional).

Entry points
- loop1(strategy): starts by asking for input.
- loop(input, strategy): starts by parsing `input`.
- loop_async / loop1_async: same flow, awaiting get_input/parse (and the hooks
  when they return awaitables). They run on the caller's event loop.

Example:
    >>> class Number:
    ...     def get_input(self):
    ...         return step(input("number? ")) if sys.stdin.isatty() else fail("no terminal")
    ...     def parse(self, text):
    ...         return finish(int(text)) if text.isdigit() else fail("not a number")
    >>> loop1(Number())
    Ok(value=100)
"""
import inspect

from .results import *


def _expect(action, what, /):
    if not isinstance(action, LoopAction):
        raise TypeError(f"loop strategy {what}() must return a loop action, not {type(action).__name__!r}")
    return action


def _hook(strategy, name, /):
    hook = getattr(strategy, name, None)
    if hook is not None and not callable(hook):
        raise TypeError(f"loop strategy {name} must be callable")
    return hook


def _settle(strategy, text, /):
    """
    Internal: parse `text` (and any replacement it steps to).

    Returns ok(value) on success, None when the input was rejected.
    """
    while True:
        match _expect(strategy.parse(text), "parse"):
            case Finish(value):
                return ok(value)
            case Fail(error):
                if hook := _hook(strategy, "on_parse_error"):
                    hook(error, text)
                return None
            case Step(value):
                text = value


def loop1(strategy, /):
    """
    Alternate get_input() and parse() until parse finishes or get_input fails.

    Returns
    - ok(value) when an input was accepted (or get_input finished directly).
    - err(error) when get_input gave up.
    """
    while True:
        match _expect(strategy.get_input(), "get_input"):
            case Finish(value):
                return ok(value)
            case Fail(error):
                if hook := _hook(strategy, "on_input_error"):
                    hook(error)
                return err(error)
            case Step(text):
                if (result := _settle(strategy, text)) is not None:
                    return result


def loop(input, strategy, /):
    """
    Like loop1(), but parse `input` first, before asking for more.
    """
    if (result := _settle(strategy, input)) is not None:
        return result
    return loop1(strategy)


async def _resolve(object, /):
    return await object if inspect.isawaitable(object) else object


async def _settle_async(strategy, text, /):
    while True:
        match _expect(await _resolve(strategy.parse(text)), "parse"):
            case Finish(value):
                return ok(value)
            case Fail(error):
                if hook := _hook(strategy, "on_parse_error"):
                    await _resolve(hook(error, text))
                return None
            case Step(value):
                text = value


async def loop1_async(strategy, /):
    """
    Asynchronous loop1(): get_input/parse may be coroutine functions.
    """
    while True:
        match _expect(await _resolve(strategy.get_input()), "get_input"):
            case Finish(value):
                return ok(value)
            case Fail(error):
                if hook := _hook(strategy, "on_input_error"):
                    await _resolve(hook(error))
                return err(error)
            case Step(text):
                if (result := await _settle_async(strategy, text)) is not None:
                    return result


async def loop_async(input, strategy, /):
    """
    Asynchronous loop(): parse `input` first, then behave like loop1_async().
    """
    if (result := await _settle_async(strategy, input)) is not None:
        return result
    return await loop1_async(strategy)


__all__ = (
    "loop",
    "loop1",
    "loop_async",
    "loop1_async",
)
