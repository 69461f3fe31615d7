"""
Code generation layer.

Includes the BigQuery -> Python type map, naming helpers, the per-table
struct generator, the import block renderer and the document assembler
that hands the raw module text to the source formatter.
"""
