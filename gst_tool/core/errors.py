"""Exception types raised by the tiling engine."""


class GSTError(Exception):
    """Base class for all gst_tool errors."""


class InvalidParameterError(GSTError, ValueError):
    """A tiling or scoring parameter is out of range."""


class EmptyInputError(GSTError, ValueError):
    """One of the input sequences has no tokens."""


class TilingError(GSTError, RuntimeError):
    """The tiling run could not converge or its commit order was violated."""
