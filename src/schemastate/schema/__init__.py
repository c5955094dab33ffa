"""
Desired-state schema building and DDL rendering.
"""

from .builder import SchemaBuilder, TableDefinition, TableRef
from .ddl import DDLRenderer

__all__ = ["SchemaBuilder", "TableDefinition", "TableRef", "DDLRenderer"]
