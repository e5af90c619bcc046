from __future__ import annotations
import typing
from itertools import chain, zip_longest
import numpy as np
from ..types import *
from .iteration import ValueSet, get_property

if typing.TYPE_CHECKING:
    from ..wrapped import Wrapped


def shuffle(seq: Sequence[T], rng: Union[None, int, np.random.Generator] = None) -> List[T]:
    """
    returns a uniformly random permutation of seq (fisher-yates). the input is not touched.
    rng may be a numpy generator or an integer seed; the configured default is used otherwise.
    """
    if rng is None:
        from ..config import default_rng
        generator = default_rng()
    elif isinstance(rng, np.random.Generator):
        generator = rng
    else:
        generator = np.random.default_rng(rng)

    result = list(seq)
    for i in range(len(result) - 1, 0, -1):
        j = int(generator.integers(0, i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def sort_by(seq: Sequence[T], key: Union[Any, KeySelector[T, K]]) -> List[T]:
    """
    sorts ascending by a criterion. a callable is applied to each element; anything
    else names a property, e.g. sort_by(people, 'name'). equal keys keep their input order.
    """
    # sorted() is stable
    selector = key if callable(key) else (lambda item: get_property(item, key))
    return sorted(seq, key=selector)


def zip(*sequences: Sequence[Any]) -> List[List[Any]]:
    """
    groups elements sharing an index. the result is as long as the longest input,
    shorter inputs are padded with none.
    ex: zip(['a','b','c','d'], [1,2,3]) -> [['a',1], ['b',2], ['c',3], ['d',None]]
    """
    return [list(group) for group in zip_longest(*sequences, fillvalue=None)]


def flatten(nested: Sequence[Any]) -> List[Any]:
    """flattens lists and tuples at any depth, depth-first. strings and mappings are kept whole"""
    result = []
    stack = list(reversed(nested))
    while stack:
        item = stack.pop()
        if isinstance(item, (list, tuple)):
            stack.extend(reversed(item))
        else:
            result.append(item)
    return result


def intersection(first: Sequence[T], *others: Sequence[T]) -> List[T]:
    """
    elements of first that occur in every other sequence, in first's order.
    duplicates in first are kept: [1, 1, 2] & [1, 2] -> [1, 1, 2]
    """
    lookups = [ValueSet(other) for other in others]
    return [item for item in first if all(item in lookup for lookup in lookups)]


def difference(first: Sequence[T], *others: Sequence[T]) -> List[T]:
    """elements of first that occur in none of the others, keeping first's order and duplicates"""
    excluded = ValueSet(chain.from_iterable(others))
    return [item for item in first if item not in excluded]


# --- aliases ---
sortBy = sort_by


class ArrayAccessor(Generic[T]):
    """set algebra on a wrapped sequence. every method returns a new wrapped list"""

    def __init__(self, wrapped_instance: 'Wrapped[T]'):
        self._wrapped = wrapped_instance

    def _values(self) -> List[T]:
        # a wrapped mapping contributes its values, like every other wrapped step
        return values_of(self._wrapped._get_data())

    def shuffle(self, rng: Union[None, int, np.random.Generator] = None) -> 'Wrapped[T]':
        from ..wrapped import Wrapped
        return Wrapped(shuffle(self._values(), rng))

    def zip(self, *others: Sequence[Any]) -> 'Wrapped[List[Any]]':
        """zip the wrapped sequence (first column) with others"""
        from ..wrapped import Wrapped
        return Wrapped(zip(self._values(), *others))

    def flatten(self) -> 'Wrapped[Any]':
        from ..wrapped import Wrapped
        return Wrapped(flatten(self._values()))

    def intersection(self, *others: Sequence[T]) -> 'Wrapped[T]':
        from ..wrapped import Wrapped
        return Wrapped(intersection(self._values(), *others))

    def difference(self, *others: Sequence[T]) -> 'Wrapped[T]':
        from ..wrapped import Wrapped
        return Wrapped(difference(self._values(), *others))
