from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Mapping, TYPE_CHECKING
)

if TYPE_CHECKING:
    from .container import OrderedList

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
Number = Union[int, float]


def is_number(value: Any) -> bool:
    """true for real numbers. bools are flags, not numbers."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_non_negative_integer(value: Any) -> bool:
    """true for ints (and integral floats) >= 0"""
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return value >= 0
    return math.isfinite(value) and float(value).is_integer() and value >= 0


# --- traversal ---

class Flow(Enum):
    """control-flow result of a traversal callback"""
    CONTINUE = 'continue'
    SKIP = 'skip'            # do not emit the current element
    SKIP_NEXT = 'skip_next'  # do not visit the next scheduled element
    STOP = 'stop'            # no further visits


@dataclass(frozen=True)
class TraversalOptions:
    """direction and stride of a traversal"""
    reverse: bool = False
    step: int = 1

    def __post_init__(self):
        if isinstance(self.step, bool) or not isinstance(self.step, int):
            raise ValueError(f"step must be an integer, got {self.step!r}")
        if self.step < 1:
            raise ValueError(f"step must be positive, got {self.step}")
        object.__setattr__(self, 'reverse', bool(self.reverse))

    @classmethod
    def resolve(cls, options: Union['TraversalOptions', Mapping[str, Any], None] = None,
                reverse: Optional[bool] = None, step: Optional[int] = None) -> 'TraversalOptions':
        """merge an options object (or mapping) with keyword overrides"""
        if options is None:
            base = cls()
        elif isinstance(options, TraversalOptions):
            base = options
        elif isinstance(options, Mapping):
            unknown = set(options) - {'reverse', 'step'}
            if unknown:
                raise ValueError(f"unknown traversal options: {', '.join(sorted(unknown))}")
            base = cls(**options)
        else:
            raise TypeError(f"options must be TraversalOptions or a mapping, got {type(options).__name__}")

        if reverse is None and step is None:
            return base
        return cls(reverse=base.reverse if reverse is None else reverse,
                   step=base.step if step is None else step)


class TraversalContext(Generic[T]):
    """
    per-visit view handed to traversal callbacks.
    previous/next are one step back/forward in traversal order, none at the boundaries.
    """
    __slots__ = ('index', 'value', 'previous_index', 'next_index', 'previous', 'next',
                 'is_first', 'is_last', 'list', 'flow')

    def __init__(self, owner: 'OrderedList[T]', index: int, value: T,
                 previous_index: Optional[int], next_index: Optional[int]):
        data = owner._get_data()
        self.list = owner
        self.index = index
        self.value = value
        self.previous_index = previous_index
        self.next_index = next_index
        self.previous = data[previous_index] if previous_index is not None else None
        self.next = data[next_index] if next_index is not None else None
        self.is_first = previous_index is None
        self.is_last = next_index is None
        self.flow = Flow.CONTINUE

    def request_break(self) -> None:
        """stop after the current callback returns"""
        self.flow = Flow.STOP

    def request_continue(self) -> None:
        """drop the current element from the operation's output"""
        self.flow = Flow.SKIP

    def request_skip_next(self) -> None:
        """skip the next scheduled visit entirely"""
        self.flow = Flow.SKIP_NEXT

    @property
    def skipped(self) -> bool:
        return self.flow is Flow.SKIP

    def __repr__(self) -> str:
        return (f"TraversalContext(index={self.index}, value={self.value!r}, "
                f"previous_index={self.previous_index}, next_index={self.next_index})")


EachCallback = Callable[[T, int, TraversalContext[T]], U]


# --- sorting ---

class SortDirection(str, Enum):
    ASC = 'asc'
    DESC = 'desc'


class SortMethod(str, Enum):
    MERGE = 'merge'
    QUICK = 'quick'
    BUBBLE = 'bubble'
    INSERTION = 'insertion'
    SELECTION = 'selection'
    HEAP = 'heap'
    RADIX = 'radix'
