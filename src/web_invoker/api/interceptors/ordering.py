# /api/interceptors/ordering.py
"""
Ordering of interceptors by descending priority. Sorting relies on the stability of `sorted`, so interceptors
with equal priorities keep the order in which they were registered.
"""
from functools import cmp_to_key
from typing import Iterable, List

from web_invoker.api.interceptors.base import InterceptorProtocol


def compare_interceptors(first: InterceptorProtocol, second: InterceptorProtocol) -> int:
    """
    Compares two interceptors so that the one with the higher priority sorts first.

    Returns:
        int: -1 if `first` runs before `second`, 1 if it runs after, and 0 for equal priorities
    """
    difference = second.priority - first.priority
    return (difference > 0) - (difference < 0)


interceptor_sort_key = cmp_to_key(compare_interceptors)


def order_interceptors(interceptors: Iterable[InterceptorProtocol]) -> List[InterceptorProtocol]:
    """Returns the interceptors sorted by descending priority, preserving registration order for ties"""
    return sorted(interceptors, key=interceptor_sort_key)
