from .do_imports import *

__version__ = '1.0.0'
