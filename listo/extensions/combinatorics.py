import typing
import math
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import OrderedList


class CombinatoricsAccessor(Generic[T]):
    def __init__(self, list_instance: 'OrderedList[T]'):
        self._list = list_instance

    def binomial_coefficient(self, k: int) -> int:
        """n choose k, using python's math.comb"""
        # math.comb raises valueerror for k < 0. return 0 for consistency.
        if k < 0:
            return 0
        return math.comb(len(self._list), k)

    def permutations(self) -> 'OrderedList[OrderedList[T]]':
        """
        every ordering of the elements, built by removing each element in turn
        and permuting the rest. recursion depth is n, output size is n!.
        an empty list has exactly one permutation: the empty one.
        """
        from ..container import OrderedList

        def permute(items: List[T]) -> List[List[T]]:
            if not items:
                return [[]]
            result = []
            for i, head in enumerate(items):
                for tail in permute(items[:i] + items[i + 1:]):
                    result.append([head] + tail)
            return result

        return OrderedList(OrderedList(p) for p in permute(self._list.to.list()))

    def combinations(self, k: int) -> 'OrderedList[OrderedList[T]]':
        """
        every k-element subset, keeping the original relative order.
        k = 0 gives one empty combination; k < 0 or k > n gives none.
        """
        from ..container import OrderedList
        data = self._list.to.list()
        result: List[List[T]] = []
        if k < 0 or k > len(data):
            return OrderedList()

        def choose(start: int, current: List[T]) -> None:
            if len(current) == k:
                result.append(current)
                return
            # stop early once too few elements remain to fill the combination
            for i in range(start, len(data) - (k - len(current)) + 1):
                choose(i + 1, current + [data[i]])

        choose(0, [])
        return OrderedList(OrderedList(c) for c in result)

    def sublists(self) -> 'OrderedList[OrderedList[T]]':
        """the empty list followed by every contiguous slice, by start then length"""
        from ..container import OrderedList
        data = self._list.to.list()
        result = [OrderedList()]
        for i in range(len(data)):
            for j in range(i, len(data)):
                result.append(OrderedList(data[i:j + 1]))
        return OrderedList(result)
