"""
'              _       _  ____             __
'    ____ ___  (_)___  (_)/ __/_  ______  / /__
'   / __ `__ \/ / __ \/ / /_/ / / / __ \/ //_/
'  / / / / / / / / / / / __/ /_/ / / / / ,<
' /_/ /_/ /_/_/_/ /_/_/_/  \__,_/_/ /_/_/|_|
"""

import logging

# expose the main classes
from .enumerable import Enumerable
from .stream import Stream

# expose the factory functions
from .factories import (
    stream,
    enumerable,
    of,
    empty,
    from_range,
    S
)

# expose supporting types and errors
from .types import Maybe
from .exceptions import InvalidArgumentError

# the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "Stream",
    "stream",
    "enumerable",
    "of",
    "empty",
    "from_range",
    "S",
    "Maybe",
    "InvalidArgumentError"
]
