from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import OrderedList


class TerminalAccessor(Generic[T]):
    def __init__(self, list_instance: 'OrderedList[T]'):
        self._list = list_instance

    def list(self) -> List[T]:
        """convert to list. always a copy"""
        return list(self._list._get_data())

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._list._get_data())

    def set(self) -> Set[T]:
        """convert to set, collapsing duplicates"""
        return set(self._list._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._list._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._list._get_data())

    def string(self) -> str:
        """display string, e.g. '[1, 2, 3]'"""
        return str(self._list)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._list._get_data()}

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._list._get_data())
        return sum(1 for x in self._list._get_data() if predicate(x))
