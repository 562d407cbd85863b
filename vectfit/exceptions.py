class VectFitError(Exception):
    """Root exception class for vectfit."""


class ShapeMismatchError(VectFitError, ValueError):
    """Array rank, shape or length does not match what is required."""


class InvalidParameterError(VectFitError, ValueError):
    """Parameter value is outside of its accepted range."""


class PoleConfigurationError(VectFitError, ValueError):
    """Complex poles do not appear as adjacent conjugate pairs."""


class InternalInconsistencyError(VectFitError, RuntimeError):
    """Internal state that should be unreachable was encountered."""
