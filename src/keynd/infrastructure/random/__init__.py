from ._numpy_source import NumpyRandomSource, default_source, seed

__all__ = [
    NumpyRandomSource.__name__,
    default_source.__name__,
    seed.__name__,
]
