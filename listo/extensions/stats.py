from __future__ import annotations
import typing
import random
import numpy as np
from itertools import accumulate
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import OrderedList

NAN = float('nan')


def _as_number(value: Any) -> Number:
    """numbers pass through, anything else counts as 0"""
    return value if is_number(value) else 0


def _native(value: Any) -> Any:
    """unwrap numpy scalars"""
    return value.item() if hasattr(value, 'item') else value


def _all_ints(*sequences: List[Any]) -> bool:
    """plain ints stay in python arithmetic, numpy int64 would wrap"""
    return all(isinstance(x, int) for values in sequences for x in values)


class StatsAccessor(Generic[T]):
    def __init__(self, list_instance: 'OrderedList[T]'):
        self._list = list_instance

    def _get_values(self, selector: Optional[Selector[T, Any]] = None) -> List[Any]:
        """helper to project elements before a statistic"""
        data = self._list._get_data()
        return [selector(x) for x in data] if selector else list(data)

    def _require_numeric(self, values: List[Any], operation: str) -> None:
        if not all(is_number(x) for x in values):
            raise TypeError(f"{operation} is only applicable to numeric lists")

    def sum(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """calc sum. non-numeric values count as 0"""
        values = [_as_number(x) for x in self._get_values(selector)]
        if not values: return 0
        if _all_ints(values): return sum(values)
        return _native(np.sum(values))

    def average(self, selector: Optional[Selector[T, Number]] = None) -> float:
        """calc average. nan for an empty list"""
        count = len(self._list)
        if count == 0: return NAN
        return self.sum(selector) / count

    def median(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """middle value of a sorted copy, mean of the middle two for even lengths. nan if empty"""
        values = self._get_values(selector)
        if not values: return NAN
        self._require_numeric(values, "median")
        ordered = sorted(values)
        mid = len(ordered) // 2
        if len(ordered) % 2: return ordered[mid]
        return (ordered[mid - 1] + ordered[mid]) / 2

    def mode(self, selector: Optional[Selector[T, K]] = None) -> Optional[K]:
        """most frequent value; ties go to whichever appeared first. none if empty"""
        values = self._get_values(selector)
        if not values: return None
        # [value, count] in first-seen order
        entries: List[List[Any]] = []
        lookup: Dict[Any, List[Any]] = {}
        for value in values:
            try:
                entry = lookup.get(value)
                if entry is None:
                    entry = lookup[value] = [value, 0]
                    entries.append(entry)
            except TypeError:
                # unhashable, compare by equality
                entry = next((e for e in entries if e[0] == value), None)
                if entry is None:
                    entry = [value, 0]
                    entries.append(entry)
            entry[1] += 1
        # max keeps the first of equal counts
        return max(entries, key=lambda e: e[1])[0]

    def range(self) -> Number:
        """max - min, or nan when empty or not entirely numeric"""
        values = self._get_values()
        if not values or not all(is_number(x) for x in values): return NAN
        if _all_ints(values): return max(values) - min(values)
        arr = np.asarray(values)
        return _native(arr.max() - arr.min())

    def min(self, selector: Optional[Selector[T, Any]] = None) -> Optional[T]:
        """find minimum, none if empty"""
        data = self._list._get_data()
        if not data: return None
        return min(data, key=selector) if selector else min(data)

    def max(self, selector: Optional[Selector[T, Any]] = None) -> Optional[T]:
        """find maximum, none if empty"""
        data = self._list._get_data()
        if not data: return None
        return max(data, key=selector) if selector else max(data)

    def cumulative_sum(self, selector: Optional[Selector[T, Number]] = None) -> 'OrderedList[Number]':
        """running totals, non-numeric values count as 0"""
        from ..container import OrderedList
        values = [_as_number(x) for x in self._get_values(selector)]
        return OrderedList(accumulate(values))

    def is_sorted(self) -> bool:
        """ascending by plain < comparison; equal neighbours are fine"""
        data = self._list._get_data()
        return not any(data[i] < data[i - 1] for i in range(1, len(data)))

    def dot_product(self, other: Iterable[Number]) -> Number:
        """sum of pairwise products. both lists must be numeric and equally long"""
        left, right = self._get_values(), list(other)
        if len(left) != len(right):
            raise ValueError(f"lists must have the same length ({len(left)} != {len(right)})")
        self._require_numeric(left, "dot product")
        self._require_numeric(right, "dot product")
        if not left: return 0
        if _all_ints(left, right): return sum(a * b for a, b in zip(left, right))
        return _native(np.dot(np.asarray(left), np.asarray(right)))

    def histogram(self, bins: int = 10) -> Dict[str, int]:
        """
        count values into equal-width bins between min and max.
        keys are 'start-end' with two decimals, in ascending bin order.
        """
        values = self._get_values()
        self._require_numeric(values, "histogram")
        if not values: raise ValueError("cannot build a histogram of an empty list")
        if bins < 1: raise ValueError("bins must be positive")

        arr = np.asarray(values, dtype=float)
        low, high = arr.min(), arr.max()
        width = (high - low) / bins

        def label(i: int) -> str:
            start = low + i * width
            return f"{start:.2f}-{start + width:.2f}"

        if width == 0:
            indices = np.zeros(len(arr), dtype=int)
        else:
            indices = np.minimum(np.floor((arr - low) / width).astype(int), bins - 1)

        counts = np.bincount(indices, minlength=bins)
        result: Dict[str, int] = {}
        for i in range(bins):
            # equal labels (possible with tiny widths) accumulate
            key = label(i)
            result[key] = result.get(key, 0) + int(counts[i])
        return result

    def random(self) -> Optional[T]:
        """random element, none if empty"""
        data = self._list._get_data()
        return random.choice(data) if data else None
