"""
Schema statement generation.
"""

from .builder import SchemaBuilder

__all__ = ["SchemaBuilder"]
