"""Decorators for reporting facade methods."""

import copy
from functools import wraps
from typing import Any, Callable


def skip_if_not_visualizing(default: Any = None) -> Callable:
    """
    Skip the decorated method when ``self.visualize`` is false.

    The method then returns a copy of ``default`` without touching any
    plotter, so disabled plotting never imports matplotlib.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            if not getattr(self, 'visualize', False):
                self.logger.debug(f"Plotting disabled, skipping {func.__name__}")
                return copy.copy(default)
            return func(self, *args, **kwargs)
        return wrapper
    return decorator
