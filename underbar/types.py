from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Sequence, Mapping, MutableMapping, Protocol
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')

Predicate = Callable[[T], Any]
Transformer = Callable[[T], U]
Reducer = Callable[[A, T], A]
KeySelector = Callable[[T], K]
Iteratee = Callable[[T, Any, Any], Any]

# a sequence or a mapping; see is_mapping() for how the two are told apart
Collection = Union[Sequence[T], Mapping[Any, T]]


class _Missing:
    """marks an argument that was not supplied, where none is a legal value"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class Scheduler(Protocol):
    """anything that can run a callable no earlier than wait_ms from now"""

    def schedule(self, wait_ms: float, fn: Callable[..., Any], *args: Any) -> None: ...

    def pending(self) -> int: ...


def is_mapping(collection: Any) -> bool:
    """key/value containers are recognised by exposing a callable items()"""
    return callable(getattr(collection, 'items', None))


def entries(collection: Any) -> Iterator[Tuple[Any, Any]]:
    """(key, value) pairs for a mapping, (index, element) pairs for a sequence"""
    if is_mapping(collection):
        return iter(collection.items())
    return enumerate(collection)


def values_of(collection: Any) -> List[Any]:
    """the values of a mapping, or the elements of a sequence, as a new list"""
    if is_mapping(collection):
        return [value for _, value in collection.items()]
    return list(collection)
