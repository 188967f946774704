"""
Small sum types returned by predicate-driven lookups and validation loops.

Variants
- Maybe:      Some(value) | Nothing
- Result:     Ok(value) | Err(error)
- LoopAction: Step(value) | Finish(value) | Fail(error)

Equality is structural and variant-aware: Some(1) == Some(1), but
Some(1) != Ok(1) and Some(1) != 1. Every variant supports structural pattern
matching:

    >>> match args.find_map(number):
    ...     case Some(value):
    ...         ...
    ...     case Nothing():
    ...         ...

Constructors mirror the type names in lower case (some, none, ok, err,
step, finish, fail); maybe(x) lifts a Python optional into Maybe.
"""
import functools

from .utils import represent


class _Variant:
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value, /):
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __eq__(self, other, /):
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((type(self), self.value))

    def __reduce__(self):
        return type(self), (self.value,)

    def __rich_repr__(self):
        yield "value", self.value

    __repr__ = represent

    def __init_subclass__(cls, **options):
        # Variants are sealed once declared below.
        if cls.__module__ != __name__:
            raise TypeError(f"type {cls.__base__.__name__!r} is not an acceptable base type")
        super().__init_subclass__(**options)


class Maybe(_Variant):
    """
    Optional value: Some(value) or Nothing.
    """
    __slots__ = ()

    def __init__(self, *unused):
        raise TypeError("use some()/none() to build a Maybe")

    @property
    def exists(self):
        return isinstance(self, Some)


class Some(Maybe):
    __slots__ = ()

    def __init__(self, value, /):
        _Variant.__init__(self, value)


class Nothing(Maybe):
    """
    The empty Maybe. Nothing() always returns the same instance.
    """
    __slots__ = ()
    __match_args__ = ()

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __init__(self):
        pass

    def __eq__(self, other, /):
        return other is self if isinstance(other, Nothing) else NotImplemented

    def __hash__(self):
        return hash(type(self))

    def __bool__(self):
        return False

    def __rich_repr__(self):
        yield from ()

    def __repr__(self):
        return "Nothing()"

    def __reduce__(self):
        return type(self), ()

    @property
    def value(self):
        raise AttributeError("'Nothing' has no value")


class Result(_Variant):
    """
    Outcome of a fallible computation: Ok(value) or Err(error).
    """
    __slots__ = ()

    def __init__(self, *unused):
        raise TypeError("use ok()/err() to build a Result")

    @property
    def success(self):
        return isinstance(self, Ok)


class Ok(Result):
    __slots__ = ()

    def __init__(self, value, /):
        _Variant.__init__(self, value)


class Err(Result):
    __slots__ = ()
    __match_args__ = ("error",)

    def __init__(self, error, /):
        _Variant.__init__(self, error)

    @property
    def error(self):
        return self.value

    def __rich_repr__(self):
        yield "error", self.value


class LoopAction(_Variant):
    """
    Signal returned by validation-loop callbacks (see lexonaut.loops).

    - Step(value): continue with a new input.
    - Finish(value): stop with a successful value.
    - Fail(error): the step failed (abort from get_input, retry from parse).
    """
    __slots__ = ()

    def __init__(self, *unused):
        raise TypeError("use step()/finish()/fail() to build a LoopAction")


class Step(LoopAction):
    __slots__ = ()

    def __init__(self, value, /):
        _Variant.__init__(self, value)


class Finish(LoopAction):
    __slots__ = ()

    def __init__(self, value, /):
        _Variant.__init__(self, value)


class Fail(LoopAction):
    __slots__ = ()
    __match_args__ = ("error",)

    def __init__(self, error, /):
        _Variant.__init__(self, error)

    @property
    def error(self):
        return self.value

    def __rich_repr__(self):
        yield "error", self.value


def some(value, /):
    return Some(value)


def none():
    return Nothing()


def maybe(value, /):
    """
    Lift a Python optional: None becomes Nothing, anything else Some(value).
    """
    return Nothing() if value is None else Some(value)


def ok(value, /):
    return Ok(value)


def err(error, /):
    return Err(error)


def step(value, /):
    return Step(value)


def finish(value, /):
    return Finish(value)


def fail(error, /):
    return Fail(error)


__all__ = (
    # Types
    "Maybe",
    "Some",
    "Nothing",
    "Result",
    "Ok",
    "Err",
    "LoopAction",
    "Step",
    "Finish",
    "Fail",

    # Constructors
    "some",
    "none",
    "maybe",
    "ok",
    "err",
    "step",
    "finish",
    "fail",
)
