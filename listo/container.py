from __future__ import annotations

import random
from abc import ABC, abstractmethod
from .types import *

# --- direct operations ---
from .extensions.traversal import _TraversalOperations
from .extensions.sorting import _SortOperations

# --- accessors ---
from .extensions.stats import StatsAccessor
from .extensions.combinatorics import CombinatoricsAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.zip import ZipAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IOrderedList(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the backing list"""
        pass

    @abstractmethod
    def _set_data(self, items: List[T]) -> None:
        """replace the backing list"""
        pass

# --- base implementation ---

class _BaseOrderedList(IOrderedList[T]):
    def __init__(self, items: Optional[Iterable[T]] = None):
        """init with a copy of items. the input is never aliased"""
        self._items: List[T] = list(items) if items is not None else []

    def _get_data(self) -> List[T]:
        return self._items

    def _set_data(self, items: List[T]) -> None:
        self._items = items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: Any) -> bool:
        return item in self._items

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, _BaseOrderedList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    # mutable, so not hashable
    __hash__ = None

    def __str__(self) -> str:
        return '[' + ', '.join(str(item) for item in self._items) + ']'

    def __repr__(self) -> str:
        return str(self)

# --- main class ---

class OrderedList(
    _BaseOrderedList[T],
    _TraversalOperations[T],
    _SortOperations[T]
):
    """an ordered, mutable sequence with traversal, sorting, statistics and combinatorics."""
    def __init__(self, items: Optional[Iterable[T]] = None):
        super().__init__(items)
        # --- initialize accessors ---
        self.stats = StatsAccessor(self)
        self.comb = CombinatoricsAccessor(self)
        self.group = GroupingAccessor(self)
        self.zip = ZipAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

    # --- adding and removing ---

    def push(self, *elements: T) -> int:
        """append elements, return the new length"""
        self._items.extend(elements)
        return len(self._items)

    def unshift(self, *elements: T) -> int:
        """prepend elements (keeping their order), return the new length"""
        self._items[0:0] = elements
        return len(self._items)

    def insert(self, element: T, index: int) -> None:
        self._items.insert(index, element)

    def pop(self) -> Optional[T]:
        """remove and return the last element, none if empty"""
        return self._items.pop() if self._items else None

    def shift(self) -> Optional[T]:
        """remove and return the first element, none if empty"""
        return self._items.pop(0) if self._items else None

    def remove(self, index: int) -> Optional[T]:
        """remove and return the element at index, none if out of range"""
        if -len(self._items) <= index < len(self._items):
            return self._items.pop(index)
        return None

    # --- access ---

    @property
    def length(self) -> int:
        return len(self._items)

    @property
    def first(self) -> Optional[T]:
        return self._items[0] if self._items else None

    @property
    def last(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    def at(self, index: Union[int, Callable[[int], int]]) -> Optional[T]:
        """
        element at index, negative counts from the end.
        index may be a function of the length. none when out of range.
        """
        if callable(index):
            index = index(len(self._items))
        if -len(self._items) <= index < len(self._items):
            return self._items[index]
        return None

    def index_of(self, search: T, from_index: int = 0) -> int:
        """first index of search at or after from_index, or -1"""
        try:
            return self._items.index(search, from_index)
        except ValueError:
            return -1

    def last_index_of(self, search: T, from_index: Optional[int] = None) -> int:
        """last index of search at or before from_index (negative counts from the end), or -1"""
        length = len(self._items)
        if from_index is None:
            stop = length - 1
        elif from_index < 0:
            stop = from_index + length
        else:
            stop = min(from_index, length - 1)
        for i in range(stop, -1, -1):
            if self._items[i] == search:
                return i
        return -1

    def keys(self) -> List[int]:
        return list(range(len(self._items)))

    def entries(self) -> List[Tuple[int, T]]:
        return list(enumerate(self._items))

    def values(self) -> Iterator[T]:
        return iter(self._items)

    def is_empty(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """no elements at all, or none matching predicate"""
        if predicate is None:
            return not self._items
        return not any(predicate(item) for item in self._items)

    def unique(self) -> 'OrderedList[T]':
        """first occurrence of each value, in order"""
        seen, result = set(), []
        for item in self._items:
            try:
                if item in seen:
                    continue
                seen.add(item)
            except TypeError:
                # unhashable, fall back to equality
                if item in result:
                    continue
            result.append(item)
        return OrderedList(result)

    def join(self, separator: str = ',', *, starting: bool = False, trailing: bool = False) -> str:
        result = separator.join(str(item) for item in self._items)
        if starting: result = separator + result
        if trailing: result += separator
        return result

    # --- copies ---

    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> 'OrderedList[T]':
        return OrderedList(self._items[start:end])

    def concat(self, *others: Iterable[T]) -> 'OrderedList[T]':
        result = list(self._items)
        for other in others:
            result.extend(other)
        return OrderedList(result)

    def clone(self) -> 'OrderedList[T]':
        return self.slice()

    # --- in-place, chainable ---

    def fill(self, value: T, start: Optional[int] = None, end: Optional[int] = None) -> 'OrderedList[T]':
        """overwrite items[start:end] with value. returns self"""
        span = range(*slice(start, end).indices(len(self._items)))
        for i in span:
            self._items[i] = value
        return self

    def reverse(self) -> 'OrderedList[T]':
        self._items.reverse()
        return self

    def rotate(self, k: int) -> 'OrderedList[T]':
        """cyclic shift right by k (negative shifts left). returns self"""
        if not self._items:
            return self
        k %= len(self._items)
        if k:
            self._items[:] = self._items[-k:] + self._items[:-k]
        return self

    def shuffle(self) -> 'OrderedList[T]':
        """fisher-yates shuffle in place. returns self"""
        for i in range(len(self._items) - 1, 0, -1):
            j = random.randint(0, i)
            self._items[i], self._items[j] = self._items[j], self._items[i]
        return self
