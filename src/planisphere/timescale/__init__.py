from .epoch import J2000, J2010, Epoch
from . import sidereal

__all__ = ["Epoch", "J2000", "J2010", "sidereal"]
