"""Adapters bridging parsed rows to external data structures.

WHY: Analysis code usually wants a DataFrame, not a list of dataclasses.
Keeping the conversion in its own package keeps pandas out of the core
parsing modules.

HOW: dataframe.py converts TextGridRow sequences to pandas DataFrames.
"""

from textgrid_converter.adapters.dataframe import rows_to_dataframe

__all__ = ["rows_to_dataframe"]
