import typing
from .types import *

if typing.TYPE_CHECKING:
    from .wrapped import Wrapped

def chain(value: Union[Collection[T], Iterable[T]]) -> 'Wrapped[T]':
    """
    wrap a sequence or mapping for chaining. mappings and sized, indexable sequences
    are held as they are; any other iterable is read into a list first.
    """
    from .wrapped import Wrapped
    if is_mapping(value) or (hasattr(value, '__len__') and hasattr(value, '__getitem__')):
        return Wrapped(value)
    return Wrapped(list(value))

# --- aliases ---
wrap = chain
W = chain
