from __future__ import annotations
import typing
import logging
from functools import cmp_to_key
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import OrderedList

logger = logging.getLogger(__name__)


def default_comparer(direction: Union[SortDirection, str] = SortDirection.ASC) -> Comparer[Any]:
    """numbers compare by subtraction, everything else by < and >. ties are 0"""
    descending = _resolve_direction(direction) is SortDirection.DESC

    def compare(a, b):
        if is_number(a) and is_number(b):
            return b - a if descending else a - b
        if a < b: return 1 if descending else -1
        if a > b: return -1 if descending else 1
        return 0

    return compare


def _resolve_direction(direction: Union[SortDirection, str, None]) -> SortDirection:
    if direction is None:
        return SortDirection.ASC
    try:
        return SortDirection(direction)
    except ValueError:
        raise ValueError(f"unknown sort direction: {direction!r} (expected 'asc' or 'desc')") from None


def _resolve_method(method: Union[SortMethod, str, None]) -> Optional[SortMethod]:
    if method is None:
        return None
    try:
        return SortMethod(method)
    except ValueError:
        names = ', '.join(m.value for m in SortMethod)
        raise ValueError(f"unknown sort method: {method!r} (expected one of {names})") from None


# --- algorithms. merge_sort and radix_sort return a new list, the rest order `items` in place ---

def merge_sort(items: List[T], compare: Comparer[T]) -> List[T]:
    """stable. returns a new list, recursion depth o(log n)"""
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid], compare), merge_sort(items[mid:], compare), compare)


def _merge(left: List[T], right: List[T], compare: Comparer[T]) -> List[T]:
    result = []
    i, j = 0, 0
    while i < len(left) and j < len(right):
        # <= keeps equal elements from the left half first
        if compare(left[i], right[j]) <= 0:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def quick_sort(items: List[T], compare: Comparer[T], low: int = 0, high: Optional[int] = None) -> None:
    """
    lomuto partition with the last element as pivot. unstable.
    recurses into the smaller side and loops on the larger, so the stack stays o(log n).
    """
    if high is None:
        high = len(items) - 1
    while low < high:
        pivot_index = _partition(items, low, high, compare)
        if pivot_index - low < high - pivot_index:
            quick_sort(items, compare, low, pivot_index - 1)
            low = pivot_index + 1
        else:
            quick_sort(items, compare, pivot_index + 1, high)
            high = pivot_index - 1


def _partition(items: List[T], low: int, high: int, compare: Comparer[T]) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if compare(items[j], pivot) <= 0:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def bubble_sort(items: List[T], compare: Comparer[T]) -> None:
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if compare(items[j], items[j + 1]) > 0:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def insertion_sort(items: List[T], compare: Comparer[T]) -> None:
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and compare(items[j], key) > 0:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def selection_sort(items: List[T], compare: Comparer[T]) -> None:
    n = len(items)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if compare(items[j], items[min_index]) < 0:
                min_index = j
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]


def heap_sort(items: List[T], compare: Comparer[T]) -> None:
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i, compare)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0, compare)


def _sift_down(items: List[T], size: int, root: int, compare: Comparer[T]) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and compare(items[left], items[largest]) > 0:
            largest = left
        if right < size and compare(items[right], items[largest]) > 0:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def radix_sort(items: List[Number], direction: Union[SortDirection, str] = SortDirection.ASC) -> List[Number]:
    """
    lsd radix sort, base 10, for non-negative integers. returns a new list.
    'desc' concatenates the ten buckets in reverse order on every digit pass.
    """
    if not all(is_non_negative_integer(x) for x in items):
        raise TypeError("radix sort requires non-negative integers")
    if not items:
        return items

    descending = _resolve_direction(direction) is SortDirection.DESC
    largest = int(max(items))
    exponent = 1
    result = list(items)
    # at least one pass, so an all-zero list still honours the direction
    while True:
        buckets = [[] for _ in range(10)]
        for item in result:
            buckets[int(item) // exponent % 10].append(item)
        if descending:
            buckets.reverse()
        result = [item for bucket in buckets for item in bucket]
        exponent *= 10
        if largest // exponent == 0:
            return result


_IN_PLACE = {
    SortMethod.QUICK: quick_sort,
    SortMethod.BUBBLE: bubble_sort,
    SortMethod.INSERTION: insertion_sort,
    SortMethod.SELECTION: selection_sort,
    SortMethod.HEAP: heap_sort,
}


class _SortOperations(Generic[T]):
    def sort(self: 'OrderedList[T]',
             direction_or_comparer: Union[SortDirection, str, Comparer[T], None] = SortDirection.ASC,
             method: Union[SortMethod, str, None] = None) -> 'OrderedList[T]':
        """
        sort in place and return self.
        direction_or_comparer is 'asc', 'desc' or a cmp-style function (a, b) -> int.
        method picks the algorithm; none uses python's built-in sort.
        """
        sort_method = _resolve_method(method)
        if callable(direction_or_comparer):
            direction = SortDirection.ASC
            compare = direction_or_comparer
        else:
            direction = _resolve_direction(direction_or_comparer)
            compare = default_comparer(direction)

        data = self._get_data()
        if len(data) <= 1:
            return self

        logger.debug("sorting %d items with %s (%s)", len(data),
                     sort_method.value if sort_method else 'builtin', direction.value)

        if sort_method is None:
            data.sort(key=cmp_to_key(compare))
        elif sort_method is SortMethod.MERGE:
            self._set_data(merge_sort(data, compare))
        elif sort_method is SortMethod.RADIX:
            if self.is_radix_sortable():
                self._set_data(radix_sort(data, direction))
            else:
                logger.warning("radix sort needs non-negative integers, falling back to quicksort")
                quick_sort(data, compare)
        else:
            _IN_PLACE[sort_method](data, compare)
        return self

    def is_radix_sortable(self: 'OrderedList[T]') -> bool:
        """every element is a non-negative integer"""
        return all(is_non_negative_integer(x) for x in self._get_data())
