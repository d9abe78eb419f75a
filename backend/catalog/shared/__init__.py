"""
Shared building blocks - structured errors and results

Use cases return Result objects instead of raising across layers.
"""
from catalog.shared.app_error import AppError
from catalog.shared.result import Result, ok, fail

__all__ = ['AppError', 'Result', 'ok', 'fail']
