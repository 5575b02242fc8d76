"""
'    .__  .__          __
'    |  | |__| _______/  |_  ____
'    |  | |  |/  ___/\   __\/  _ \
'    |  |_|  |\___ \  |  | (  <_> )
'    |____/__/____  > |__|  \____/
'                 \/
"""

# expose the main class
from .container import OrderedList

# expose the factory functions
from .factories import (
    create,
    from_sequence,
    from_set,
    of,
    empty,
    from_range,
    repeat,
    L
)

# expose supporting types
from .types import (
    Flow,
    TraversalOptions,
    TraversalContext,
    SortDirection,
    SortMethod
)

# expose the standalone sort algorithms
from .extensions.sorting import (
    default_comparer,
    merge_sort,
    quick_sort,
    bubble_sort,
    insertion_sort,
    selection_sort,
    heap_sort,
    radix_sort
)

# define what `import *` does
__all__ = [
    "OrderedList",
    "create",
    "from_sequence",
    "from_set",
    "of",
    "empty",
    "from_range",
    "repeat",
    "L",
    "Flow",
    "TraversalOptions",
    "TraversalContext",
    "SortDirection",
    "SortMethod",
    "default_comparer",
    "merge_sort",
    "quick_sort",
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "heap_sort",
    "radix_sort"
]
