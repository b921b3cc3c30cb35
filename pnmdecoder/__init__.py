# pnmdecoder/__init__.py

from .pnmdecoder import __doc__, __all__, __version__
from .pnmdecoder import *
