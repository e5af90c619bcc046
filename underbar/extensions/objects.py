from __future__ import annotations
from ..types import *


def extend(target: MutableMapping[K, V], *sources: Mapping[K, V]) -> MutableMapping[K, V]:
    """
    copies every key of every source into target, later sources winning.
    mutates and returns target. a failing source leaves target partially updated.
    """
    for source in sources:
        for key, value in source.items():
            target[key] = value
    return target


def defaults(target: MutableMapping[K, V], *sources: Mapping[K, V]) -> MutableMapping[K, V]:
    """
    like extend, but never overwrites a key target already defines.
    the first source to offer a missing key wins. mutates and returns target.
    """
    for source in sources:
        for key, value in source.items():
            if key not in target:
                target[key] = value
    return target
