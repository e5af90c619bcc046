r"""
'                  _           _
'   _   _ _ __   __| | ___ _ __| |__   __ _ _ __
'  | | | | '_ \ / _` |/ _ \ '__| '_ \ / _` | '__|
'  | |_| | | | | (_| |  __/ |  | |_) | (_| | |
'   \__,_|_| |_|\__,_|\___|_|  |_.__/ \__,_|_|
"""

import logging

# expose the collection primitives
from .extensions.iteration import (
    first,
    last,
    each,
    index_of,
    filter,
    reject,
    uniq,
    map,
    pluck,
    invoke,
    reduce,
    contains,
    every,
    some,
    indexOf
)

# expose the mapping helpers
from .extensions.objects import extend, defaults

# expose the function combinators
from .extensions.functions import once, memoize, delay

# expose the array set algebra
from .extensions.arrays import (
    shuffle,
    sort_by,
    zip,
    flatten,
    intersection,
    difference,
    sortBy
)

# expose chaining, scheduling and configuration
from .wrapped import Wrapped
from .factories import chain, wrap, W
from .scheduling import ThreadingScheduler, ManualScheduler
from .config import Settings, get_settings, configure
from .types import MISSING

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "first",
    "last",
    "each",
    "index_of",
    "filter",
    "reject",
    "uniq",
    "map",
    "pluck",
    "invoke",
    "reduce",
    "contains",
    "every",
    "some",
    "indexOf",
    "extend",
    "defaults",
    "once",
    "memoize",
    "delay",
    "shuffle",
    "sort_by",
    "zip",
    "flatten",
    "intersection",
    "difference",
    "sortBy",
    "Wrapped",
    "chain",
    "wrap",
    "W",
    "ThreadingScheduler",
    "ManualScheduler",
    "Settings",
    "get_settings",
    "configure",
    "MISSING"
]
