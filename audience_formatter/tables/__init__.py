"""Lookup tables driving the field normalizers.

``defaults`` holds the built-in tables, ``registry`` merges caller
overrides into them and freezes the result, and ``loader`` reads
override files from YAML.
"""
from audience_formatter.tables.registry import TableRegistry, build

__all__ = ["TableRegistry", "build"]
