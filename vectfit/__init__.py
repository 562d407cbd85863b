import importlib.metadata

from vectfit.exceptions import *
from vectfit.poles import *
from vectfit.model import *
from vectfit.core import *
from .config import *

try:
    __version__ = importlib.metadata.version("vectfit")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1"
