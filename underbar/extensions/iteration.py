from __future__ import annotations
import numbers
from functools import reduce as fold
import numpy as np
from ..types import *

# --- comparison helpers shared by the collection and array operations ---

def truthy(value: Any) -> bool:
    """
    coerce a predicate result to a boolean.
    none, false, empty strings, zero and nan are false. any other number is true,
    and so is any other object, including empty containers.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (str, bytes, bytearray)):
        return len(value) > 0
    if isinstance(value, (numbers.Number, np.number)):
        # nan is the only value unequal to itself
        return value == value and value != 0
    return True


def strict_equals(a: Any, b: Any) -> bool:
    """identity, or equality between values of compatible kinds (1 never equals true)"""
    if a is b:
        return True
    if isinstance(a, (bool, np.bool_)) != isinstance(b, (bool, np.bool_)):
        return False
    result = a == b
    # arrays compare element-wise; only a plain boolean answer counts
    return isinstance(result, (bool, np.bool_)) and bool(result)


def strict_key(item: Any) -> Tuple[bool, Any]:
    """a hashable key under which strictly equal values collide and 1 stays apart from true"""
    return isinstance(item, (bool, np.bool_)), item


class ValueSet:
    """
    membership under strict equality. hashable items go through a set,
    unhashable ones fall back to a linear scan.
    """

    def __init__(self, items: Iterable[Any] = ()):
        self._hashed: Set[Tuple[bool, Any]] = set()
        self._unhashable: List[Any] = []
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        try:
            self._hashed.add(strict_key(item))
        except TypeError:
            self._unhashable.append(item)

    def __contains__(self, item: Any) -> bool:
        try:
            return strict_key(item) in self._hashed
        except TypeError:
            return any(strict_equals(item, other) for other in self._unhashable)


def get_property(record: Any, name: Any) -> Any:
    """
    record[name] for mappings, record.name for objects with such an attribute
    (namedtuples, dataclasses), record[name] again for everything else (e.g. list indices)
    """
    if is_mapping(record):
        return record[name]
    if isinstance(name, str) and hasattr(record, name):
        return getattr(record, name)
    return record[name]


# --- iteration primitives ---

def first(seq: Sequence[T], n: Optional[int] = None) -> Union[Optional[T], List[T]]:
    """first element (none when empty), or a list of the first n elements"""
    if n is None:
        return seq[0] if len(seq) > 0 else None
    if n <= 0:
        return []
    return list(seq[:n])


def last(seq: Sequence[T], n: Optional[int] = None) -> Union[Optional[T], List[T]]:
    """last element (none when empty), or a list of the last n elements in original order"""
    if n is None:
        return seq[len(seq) - 1] if len(seq) > 0 else None
    if n <= 0:
        return []
    if n >= len(seq):
        return list(seq)
    return list(seq[len(seq) - n:])


def each(collection: Collection[T], iterator: Iteratee[T]) -> None:
    """
    calls iterator(value, key, collection) for every element, for side-effects only.
    keys are indices for sequences and keys for mappings. the collection must not be
    mutated while this runs.
    """
    for key, value in entries(collection):
        iterator(value, key, collection)


def index_of(seq: Sequence[T], target: T) -> int:
    """position of the first element strictly equal to target, or -1"""
    for index, item in enumerate(seq):
        if strict_equals(item, target):
            return index
    return -1


def filter(collection: Collection[T], predicate: Predicate[T]) -> List[T]:
    """elements whose predicate result is truthy, in order"""
    return [item for item in values_of(collection) if truthy(predicate(item))]


def reject(collection: Collection[T], predicate: Predicate[T]) -> List[T]:
    """elements whose predicate result is falsy, in order"""
    return [item for item in values_of(collection) if not truthy(predicate(item))]


def uniq(seq: Sequence[T]) -> List[T]:
    """first occurrence of each distinct element, in first-seen order"""
    seen = ValueSet()
    result = []
    for item in seq:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def map(collection: Collection[T], transformer: Transformer[T, U]) -> List[U]:
    """apply transformer to every element, preserving order and length"""
    return [transformer(item) for item in values_of(collection)]


def pluck(records: Sequence[Any], property_name: Any) -> List[Any]:
    """the named property of every record. e.g. people -> their ages"""
    return [get_property(record, property_name) for record in records]


def invoke(seq: Sequence[T], method: Union[str, Callable[..., U]], *args: Any) -> List[Any]:
    """
    calls a method on every element and collects the results.
    a string names a method bound to each element; a callable receives the
    element as its first argument, followed by args.
    """
    if isinstance(method, str):
        return [getattr(item, method)(*args) for item in seq]
    return [method(item, *args) for item in seq]


def reduce(collection: Collection[T], reducer: Reducer[A, T], initial: Any = MISSING) -> A:
    """
    left fold over the elements (mapping values in iteration order).
    without an initial value the first element seeds the fold.
    """
    items = values_of(collection)
    if initial is MISSING:
        if not items:
            raise TypeError("reduce of empty collection with no initial value")
        return fold(reducer, items)
    return fold(reducer, items, initial)


def contains(collection: Collection[T], target: T) -> bool:
    """true if any element (or mapping value) strictly equals target"""
    return any(strict_equals(item, target) for item in values_of(collection))


def every(collection: Collection[T], predicate: Optional[Predicate[T]] = None) -> bool:
    """true if every predicate result is truthy. vacuously true when empty"""
    check = predicate or (lambda item: item)
    return all(truthy(check(item)) for item in values_of(collection))


def some(collection: Collection[T], predicate: Optional[Predicate[T]] = None) -> bool:
    """true if at least one predicate result is truthy. false when empty"""
    check = predicate or (lambda item: item)
    return any(truthy(check(item)) for item in values_of(collection))


# --- aliases ---
indexOf = index_of
