import typing
from .types import *

if typing.TYPE_CHECKING:
    from .container import OrderedList

def from_sequence(data: Iterable[T]) -> 'OrderedList[T]':
    """create a list from an ordered sequence (copied)"""
    from .container import OrderedList
    return OrderedList(data)

def from_set(data: typing.AbstractSet[T]) -> 'OrderedList[T]':
    """create a list from a set (copied, in the set's iteration order)"""
    from .container import OrderedList
    return OrderedList(data)

def of(*elements: T) -> 'OrderedList[T]':
    """create a list from the given elements"""
    from .container import OrderedList
    return OrderedList(elements)

def create(*elements: Any) -> 'OrderedList[Any]':
    """
    create a list from one sequence, one set, or any number of elements.
    a single list, tuple, range or ordered list argument is treated as the sequence
    and a single set or frozenset as the set; anything else (strings included) is an element.
    """
    from .container import OrderedList
    if len(elements) == 1:
        arg = elements[0]
        if isinstance(arg, (list, tuple, range, OrderedList)):
            return from_sequence(arg)
        if isinstance(arg, (set, frozenset)):
            return from_set(arg)
    return of(*elements)

def empty() -> 'OrderedList[Any]':
    """create empty list"""
    from .container import OrderedList
    return OrderedList()

def from_range(start: int, count: int) -> 'OrderedList[int]':
    """create list from range"""
    from .container import OrderedList
    return OrderedList(range(start, start + count))

def repeat(item: T, count: int) -> 'OrderedList[T]':
    """create list with repeated item"""
    from .container import OrderedList
    return OrderedList([item] * count)

# --- aliases ---
L = create
