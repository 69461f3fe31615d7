"""
BigQuery table schema code generation.

Introspects the tables of a BigQuery dataset and renders a Python module
that declares one dataclass record per table.
"""
