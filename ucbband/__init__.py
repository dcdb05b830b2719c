from .errors import BanditError, BanditStateError, ErrorKind
from .rwlock import RWLock
from .ucb import UCB1

__all__ = ["BanditError", "BanditStateError", "ErrorKind", "RWLock", "UCB1"]
__version__ = "0.1.0"
