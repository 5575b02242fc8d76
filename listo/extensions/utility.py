from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import OrderedList


def _is_nested(item: Any) -> bool:
    from ..container import OrderedList
    return isinstance(item, (list, tuple, OrderedList))


class UtilityAccessor(Generic[T]):
    def __init__(self, list_instance: 'OrderedList[T]'):
        self._list = list_instance

    def flat(self, depth: int = 1) -> 'OrderedList[Any]':
        """flatten nested lists, tuples and ordered lists to a specified depth"""
        from ..container import OrderedList

        def flatten_recursive(items, current_depth):
            result = []
            for item in items:
                if _is_nested(item) and current_depth > 0:
                    result.extend(flatten_recursive(item, current_depth - 1))
                else:
                    result.append(item)
            return result

        return OrderedList(flatten_recursive(self._list._get_data(), depth))

    def flatten(self, depth: float = float('inf')) -> 'OrderedList[Any]':
        """
        flatten without a depth limit by default.
        uses an explicit stack, so deeply nested input cannot hit the recursion limit.
        """
        from ..container import OrderedList
        result = []
        stack = [(item, depth) for item in reversed(self._list._get_data())]
        while stack:
            item, remaining = stack.pop()
            if _is_nested(item) and remaining > 0:
                stack.extend((child, remaining - 1) for child in reversed(list(item)))
            else:
                result.append(item)
        return OrderedList(result)

    def repeat(self, n: int) -> 'OrderedList[T]':
        """the whole sequence, n times over"""
        from ..container import OrderedList
        return OrderedList(self._list._get_data() * max(n, 0))

    def iterate(self, n: int, func: Callable[[Any], U]) -> 'OrderedList[U]':
        """apply func to every element, n times"""
        from ..container import OrderedList
        result = list(self._list._get_data())
        for _ in range(n):
            result = [func(item) for item in result]
        return OrderedList(result)

    def memoize(self, func: Callable[[T], U]) -> Callable[[T], U]:
        """
        wrap func with a per-element cache. unhashable arguments are computed every time.
        """
        cache: Dict[Any, U] = {}

        def memoized(item: T) -> U:
            try:
                if item in cache:
                    return cache[item]
            except TypeError:
                return func(item)
            result = func(item)
            cache[item] = result
            return result

        return memoized

    def fold_left(self, initial: U, func: Callable[[U, T], U]) -> U:
        """func(acc, item) from the first element to the last"""
        result = initial
        for item in self._list._get_data():
            result = func(result, item)
        return result

    def fold_right(self, initial: U, func: Callable[[T, U], U]) -> U:
        """func(item, acc) from the last element to the first"""
        result = initial
        for item in reversed(self._list._get_data()):
            result = func(item, result)
        return result

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the list into an external function. enables custom, chainable operations.
        example: .pipe(plot_values, title='my data')
        """
        return func(self._list, *args, **kwargs)
