from .config import Config
from .core import *
from .convert import create_variables, to_sympy, from_sympy

__version__ = "0.1.0"
