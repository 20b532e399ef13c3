"""
Mython Language Core

Lexer and runtime object model for Mython, a small class based scripting
language with indentation defined blocks.
"""

__version__ = "0.1.0"

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


from ._error import *
from ._holder import *
from ._object import *
from ._compare import *
from ._context import *
from ._lexer import *
from . import token
