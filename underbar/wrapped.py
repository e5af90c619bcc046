from __future__ import annotations

from .types import *
from .extensions import iteration, objects

# --- accessors ---
from .extensions.arrays import ArrayAccessor, sort_by
from .extensions.terminal import TerminalAccessor


class Wrapped(Generic[T]):
    """
    a chainable holder for a sequence or a mapping. every step runs immediately and
    returns a new wrapped result; scalar answers (reduce, contains, ...) come back bare.
    ex: chain(people).filter(is_active).sort_by('age').pluck('name').to.list()
    """

    def __init__(self, value: Collection[T]):
        self._value = value
        # --- initialize accessors ---
        self.arrays = ArrayAccessor(self)
        self.to = TerminalAccessor(self)

    def _get_data(self) -> Collection[T]:
        return self._value

    def _items(self) -> List[T]:
        return values_of(self._value)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        return f"Wrapped({self._value!r})"

    # --- sequence and mapping primitives ---

    def first(self, n: Optional[int] = None) -> Union[Optional[T], 'Wrapped[T]']:
        """first element, or the first n wrapped"""
        result = iteration.first(self._items(), n)
        return result if n is None else Wrapped(result)

    def last(self, n: Optional[int] = None) -> Union[Optional[T], 'Wrapped[T]']:
        """last element, or the last n wrapped"""
        result = iteration.last(self._items(), n)
        return result if n is None else Wrapped(result)

    def each(self, iterator: Iteratee[T]) -> 'Wrapped[T]':
        """
        runs iterator(value, key, collection) for every element.
        returns the same instance to allow chaining.
        """
        iteration.each(self._value, iterator)
        return self

    def filter(self, predicate: Predicate[T]) -> 'Wrapped[T]':
        return Wrapped(iteration.filter(self._value, predicate))

    def reject(self, predicate: Predicate[T]) -> 'Wrapped[T]':
        return Wrapped(iteration.reject(self._value, predicate))

    def uniq(self) -> 'Wrapped[T]':
        return Wrapped(iteration.uniq(self._items()))

    def map(self, transformer: Transformer[T, U]) -> 'Wrapped[U]':
        return Wrapped(iteration.map(self._value, transformer))

    def pluck(self, property_name: Any) -> 'Wrapped[Any]':
        return Wrapped(iteration.pluck(self._items(), property_name))

    def invoke(self, method: Union[str, Callable[..., Any]], *args: Any) -> 'Wrapped[Any]':
        return Wrapped(iteration.invoke(self._items(), method, *args))

    def sort_by(self, key: Union[Any, KeySelector[T, K]]) -> 'Wrapped[T]':
        return Wrapped(sort_by(self._items(), key))

    # --- scalar results ---

    def index_of(self, target: T) -> int:
        return iteration.index_of(self._items(), target)

    def reduce(self, reducer: Reducer[A, T], initial: Any = MISSING) -> A:
        return iteration.reduce(self._value, reducer, initial)

    def contains(self, target: T) -> bool:
        return iteration.contains(self._value, target)

    def every(self, predicate: Optional[Predicate[T]] = None) -> bool:
        return iteration.every(self._value, predicate)

    def some(self, predicate: Optional[Predicate[T]] = None) -> bool:
        return iteration.some(self._value, predicate)

    # --- mappings ---

    def extend(self, *sources: Mapping[Any, Any]) -> 'Wrapped[T]':
        """merges sources into the wrapped mapping in place. returns the same instance"""
        objects.extend(self._value, *sources)
        return self

    def defaults(self, *sources: Mapping[Any, Any]) -> 'Wrapped[T]':
        """fills keys missing from the wrapped mapping in place. returns the same instance"""
        objects.defaults(self._value, *sources)
        return self
