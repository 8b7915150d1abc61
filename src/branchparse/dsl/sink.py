"""Sink protocol for list accumulation.

A sink receives the values a list produces, strictly in parse order, and is
consumed exactly once by finish(). One sink is created per list activation
by the list's sink factory; it is never shared or reused.

Value shapes delivered to add():
    - LabelMarker: produced by label()
    - Lexeme: produced by capture()
    - any other object: an aggregate produced by a nested list

Subclasses implement _consume() and _result() and typically dispatch on the
value shape with ``match``:

    class CommaCounter(Sink[int]):
        def __init__(self) -> None:
            super().__init__()
            self.count = 0

        def _consume(self, value: object) -> None:
            match value:
                case Lexeme():
                    self.count += 1
                case _:
                    pass

        def _result(self) -> int:
            return self.count
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from branchparse.diagnostics import ErrorTemplate, SinkStateError

__all__ = ["CallbackSink", "CountSink", "ListSink", "Sink", "SinkFactory"]


class Sink[T](ABC):
    """Single-owner accumulator for a list's produced values.

    The base class enforces the exactly-once contract: after finish(),
    both add() and finish() raise SinkStateError.
    """

    __slots__ = ("_finished",)

    def __init__(self) -> None:
        self._finished = False

    @property
    def finished(self) -> bool:
        """True once finish() has been called."""
        return self._finished

    def add(self, value: object) -> None:
        """Deliver one produced value.

        Raises:
            SinkStateError: If the sink was already finished
        """
        if self._finished:
            raise SinkStateError(ErrorTemplate.sink_finished(type(self).__name__, "add"))
        self._consume(value)

    def finish(self) -> T:
        """Consume the sink and return its aggregate.

        Raises:
            SinkStateError: If the sink was already finished
        """
        if self._finished:
            raise SinkStateError(ErrorTemplate.sink_finished(type(self).__name__, "finish"))
        self._finished = True
        return self._result()

    @abstractmethod
    def _consume(self, value: object) -> None:
        """Accumulate one value. Must not fail."""

    @abstractmethod
    def _result(self) -> T:
        """Build the aggregate. Called exactly once."""


type SinkFactory[T] = Callable[[], Sink[T]]


class CountSink(Sink[int]):
    """Counts every delivered value.

    Example:
        >>> sink = CountSink()
        >>> sink.add(LabelMarker(0))
        >>> sink.finish()
        1
    """

    __slots__ = ("_count",)

    def __init__(self) -> None:
        super().__init__()
        self._count = 0

    def _consume(self, value: object) -> None:
        self._count += 1

    def _result(self) -> int:
        return self._count


class ListSink(Sink[tuple[object, ...]]):
    """Collects delivered values into a tuple, in order. Default list sink."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        super().__init__()
        self._values: list[object] = []

    def _consume(self, value: object) -> None:
        self._values.append(value)

    def _result(self) -> tuple[object, ...]:
        return tuple(self._values)


class CallbackSink[T](Sink[T]):
    """Adapts a pair of callables to the sink protocol.

    Args:
        on_value: Called with each delivered value
        result: Called once by finish() to build the aggregate

    Example:
        >>> seen: list[object] = []
        >>> factory = lambda: CallbackSink(seen.append, lambda: len(seen))
    """

    __slots__ = ("_on_value", "_result_fn")

    def __init__(self, on_value: Callable[[object], None], result: Callable[[], T]) -> None:
        super().__init__()
        self._on_value = on_value
        self._result_fn = result

    def _consume(self, value: object) -> None:
        self._on_value(value)

    def _result(self) -> T:
        return self._result_fn()
