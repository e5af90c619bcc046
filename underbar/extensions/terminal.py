from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..wrapped import Wrapped

class TerminalAccessor(Generic[T]):
    def __init__(self, wrapped_instance: 'Wrapped[T]'):
        self._wrapped = wrapped_instance

    def value(self) -> Any:
        """the wrapped value itself, sequence or mapping"""
        return self._wrapped._get_data()

    def list(self) -> List[T]:
        """convert to list (mapping values for a mapping)"""
        return values_of(self._wrapped._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series. mappings keep their keys as the index"""
        data = self._wrapped._get_data()
        if is_mapping(data):
            return pd.Series(dict(data.items()))
        return pd.Series(list(data))

    def df(self) -> pd.DataFrame:
        """convert a sequence of records to a pandas dataframe"""
        return pd.DataFrame(self.list())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Transformer[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self.list()}

    def count(self) -> int:
        """count elements"""
        return len(self._wrapped._get_data())
