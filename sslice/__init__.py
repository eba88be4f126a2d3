from ._version import __version__
from ._sslice import SSlice, sslice, sl

__all__ = ('SSlice', 'sslice', 'sl')
