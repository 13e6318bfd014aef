r"""
'                 _ _
'     _ __  _   _| | | __ _
'    | '_ \| | | | | |/ _` |
'    | |_) | |_| | | | (_| |
'    | .__/ \__,_|_|_|\__, |
'    |_|                 |_|
"""

import logging

# expose the sequence protocol
from .sequence import Sequence, Pull, DONE, as_sequence

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_mapping,
    from_range,
    repeat,
    empty,
    pullq,
    P,
)

# expose supporting data classes
from .types import (
    KeyValue,
    Group,
    self_selector,
    default_comparer,
)

from .config import PullqConfig
from . import ops

# library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# define what `import *` does
__all__ = [
    "Sequence",
    "Pull",
    "DONE",
    "as_sequence",
    "Enumerable",
    "from_iterable",
    "from_mapping",
    "from_range",
    "repeat",
    "empty",
    "pullq",
    "P",
    "KeyValue",
    "Group",
    "self_selector",
    "default_comparer",
    "PullqConfig",
    "ops",
]
