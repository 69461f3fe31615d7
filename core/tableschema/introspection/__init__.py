"""
Warehouse introspection: enumerate the tables of a dataset and read
their schemas into TableSchema values.
"""
