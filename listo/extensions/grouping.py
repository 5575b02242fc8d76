from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import OrderedList

# marks an omitted fill value, since none is a valid fill
_NO_FILL = object()


def _require_positive(size: int, name: str) -> None:
    if size < 1:
        raise ValueError(f"{name} must be positive, got {size}")


class GroupingAccessor(Generic[T]):
    def __init__(self, list_instance: 'OrderedList[T]'):
        self._list = list_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, 'OrderedList[T]']:
        """group elements by key; groups are ordered by first appearance of their key"""
        from ..container import OrderedList
        groups: Dict[K, OrderedList[T]] = {}
        for item in self._list._get_data():
            key = key_selector(item)
            if key not in groups:
                groups[key] = OrderedList()
            groups[key].push(item)
        return groups

    def partition(self, predicate: Predicate[T]) -> Tuple['OrderedList[T]', 'OrderedList[T]']:
        """partition elements into (matching, not matching), storage order kept in both"""
        from ..container import OrderedList
        true_items, false_items = [], []
        for item in self._list._get_data():
            (true_items if predicate(item) else false_items).append(item)
        return OrderedList(true_items), OrderedList(false_items)

    def chunk(self, size: int) -> 'OrderedList[OrderedList[T]]':
        """split into chunks of specified size, the last one may be shorter"""
        from ..container import OrderedList
        _require_positive(size, "chunk size")
        data = self._list._get_data()
        return OrderedList(OrderedList(data[i:i + size]) for i in range(0, len(data), size))

    def divide_into(self, size: int, fill: Any = _NO_FILL) -> 'OrderedList[OrderedList[T]]':
        """like chunk, but pads the last chunk to full size with fill when one is given"""
        chunks = self.chunk(size)
        if fill is not _NO_FILL and chunks.length:
            tail = chunks.last
            tail.push(*([fill] * (size - tail.length)))
        return chunks

    def sliding_window(self, size: int) -> 'OrderedList[OrderedList[T]]':
        """create sliding windows of specified size"""
        from ..container import OrderedList
        _require_positive(size, "window size")
        data = self._list._get_data()
        if len(data) < size: return OrderedList()
        return OrderedList(OrderedList(data[i:i + size]) for i in range(len(data) - size + 1))

    def sliding_apply(self, size: int, func: Callable[['OrderedList[T]'], U]) -> 'OrderedList[U]':
        """apply func to every sliding window"""
        from ..container import OrderedList
        return OrderedList(func(window) for window in self.sliding_window(size))

    def adjacent_reduce(self, reducer: Callable[[T, T], U]) -> 'OrderedList[U]':
        """reducer(previous, current) for each consecutive pair"""
        from ..container import OrderedList
        data = self._list._get_data()
        return OrderedList(reducer(prev, curr) for prev, curr in zip(data, data[1:]))
