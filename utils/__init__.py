"""
Flow Board - Utilities Package
Coordinate text helpers and the board's reader/writer lock.
"""
from .coords import point_to_string, string_to_int, string_to_point
from .rwlock import ReadWriteLock

__all__ = ['point_to_string', 'string_to_int', 'string_to_point', 'ReadWriteLock']
