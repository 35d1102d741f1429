from ._dtype import DType, DTypeFamily

__all__ = [DType.__name__, DTypeFamily.__name__]
