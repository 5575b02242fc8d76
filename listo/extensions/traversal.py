from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import OrderedList

OptionsArg = Union[TraversalOptions, Mapping[str, Any], None]


class _TraversalOperations(Generic[T]):
    def each(self: 'OrderedList[T]', callback: EachCallback[T, Any], options: OptionsArg = None, *,
             reverse: Optional[bool] = None, step: Optional[int] = None) -> None:
        """
        visit elements in traversal order, calling callback(value, index, context).
        the callback may return a Flow, or use the context's request_* methods.
        """
        opts = TraversalOptions.resolve(options, reverse, step)
        data = self._get_data()
        length = len(data)
        if opts.reverse:
            indices = range(length - 1, -1, -opts.step)
            delta = -opts.step
        else:
            indices = range(0, length, opts.step)
            delta = opts.step

        skip_next = False
        for i in indices:
            if skip_next:
                skip_next = False
                continue

            # the visited range is fixed up front. indices a callback removed are skipped
            length = len(data)
            if i >= length:
                continue

            prev_i, next_i = i - delta, i + delta
            context = TraversalContext(
                self, i, data[i],
                prev_i if 0 <= prev_i < length else None,
                next_i if 0 <= next_i < length else None,
            )
            returned = callback(data[i], i, context)
            if isinstance(returned, Flow) and returned is not Flow.CONTINUE:
                context.flow = returned

            if context.flow is Flow.STOP:
                break
            if context.flow is Flow.SKIP_NEXT:
                skip_next = True

    def map(self: 'OrderedList[T]', callback: EachCallback[T, U], options: OptionsArg = None, *,
            reverse: Optional[bool] = None, step: Optional[int] = None) -> 'OrderedList[U]':
        """collect callback results in traversal order"""
        from ..container import OrderedList
        result = []

        def collect(value, index, context):
            mapped = callback(value, index, context)
            if not context.skipped:
                result.append(mapped)

        self.each(collect, options, reverse=reverse, step=step)
        return OrderedList(result)

    def filter(self: 'OrderedList[T]', predicate: EachCallback[T, bool], options: OptionsArg = None, *,
               reverse: Optional[bool] = None, step: Optional[int] = None) -> 'OrderedList[T]':
        """keep elements whose predicate is truthy, in traversal order"""
        from ..container import OrderedList
        result = []

        def keep(value, index, context):
            if predicate(value, index, context) and not context.skipped:
                result.append(value)

        self.each(keep, options, reverse=reverse, step=step)
        return OrderedList(result)

    def find(self: 'OrderedList[T]', predicate: EachCallback[T, bool], options: OptionsArg = None, *,
             reverse: Optional[bool] = None, step: Optional[int] = None) -> Optional[T]:
        """first matching value in traversal order, or none"""
        index = self.find_index(predicate, options, reverse=reverse, step=step)
        return self._get_data()[index] if index >= 0 else None

    def find_index(self: 'OrderedList[T]', predicate: EachCallback[T, bool], options: OptionsArg = None, *,
                   reverse: Optional[bool] = None, step: Optional[int] = None) -> int:
        """first matching index in traversal order, or -1"""
        found = -1

        def match(value, index, context):
            nonlocal found
            if predicate(value, index, context) and not context.skipped:
                found = index
                context.request_break()

        self.each(match, options, reverse=reverse, step=step)
        return found

    def every(self: 'OrderedList[T]', predicate: EachCallback[T, bool], options: OptionsArg = None, *,
              reverse: Optional[bool] = None, step: Optional[int] = None) -> bool:
        """true unless some visited element fails the predicate. empty -> true"""
        result = True

        def check(value, index, context):
            nonlocal result
            if not predicate(value, index, context) and not context.skipped:
                result = False
                context.request_break()

        self.each(check, options, reverse=reverse, step=step)
        return result

    def some(self: 'OrderedList[T]', predicate: EachCallback[T, bool], options: OptionsArg = None, *,
             reverse: Optional[bool] = None, step: Optional[int] = None) -> bool:
        """true if any visited element passes the predicate. empty -> false"""
        return self.find_index(predicate, options, reverse=reverse, step=step) >= 0

    def reduce(self: 'OrderedList[T]', callback: Callable[[U, T, int, TraversalContext[T]], U], initial: U,
               options: OptionsArg = None, *,
               reverse: Optional[bool] = None, step: Optional[int] = None) -> U:
        """fold in traversal order, starting from initial"""
        accumulator = initial

        def fold(value, index, context):
            nonlocal accumulator
            updated = callback(accumulator, value, index, context)
            if not context.skipped:
                accumulator = updated

        self.each(fold, options, reverse=reverse, step=step)
        return accumulator

    # --- traversal-based equivalents of the plain list operations ---

    def index_of_with_each(self: 'OrderedList[T]', search: T, from_index: int = 0) -> int:
        if from_index < 0:
            from_index = max(from_index + len(self._get_data()), 0)
        found = -1

        def match(value, index, context):
            nonlocal found
            if index >= from_index and value == search:
                found = index
                return Flow.STOP

        self.each(match)
        return found

    def last_index_of_with_each(self: 'OrderedList[T]', search: T, from_index: Optional[int] = None) -> int:
        length = len(self._get_data())
        if from_index is None:
            limit = length - 1
        elif from_index < 0:
            limit = from_index + length
        else:
            limit = from_index
        found = -1

        def match(value, index, context):
            nonlocal found
            if index <= limit and value == search:
                found = index
                return Flow.STOP

        self.each(match, reverse=True)
        return found

    def reverse_with_each(self: 'OrderedList[T]') -> 'OrderedList[T]':
        """reverse in place by a reverse traversal. returns self"""
        reversed_items = []
        self.each(lambda value, index, context: reversed_items.append(value), reverse=True)
        self._set_data(reversed_items)
        return self
