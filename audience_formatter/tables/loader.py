"""Table override loader.

Reads a YAML document whose top-level keys are table names (see
``audience_formatter.tables.registry``) and returns a plain dict ready to
pass to ``build()``.  Example::

    phone_prefix_map:
      us: "1"
      br: "55"
    state_mappings:
      us:
        new york: ny

Scalar keys and values are converted to strings, so ``br: 55`` is read as
``"55"``.  YAML 1.1 reads unquoted ``no``, ``yes``, ``on`` and ``off`` as
booleans, and an entry with nothing after the colon as null; such keys
and values are rejected and must be quoted.  A whole table left empty
(``number_map:``) is passed through and treated as an empty table.
"""
from __future__ import annotations

from pathlib import Path

import yaml

from audience_formatter.core.errors import TableConfigError


def _stringify(value: object, path: Path, nested: bool = False) -> object:
    if isinstance(value, dict):
        result: dict[str, object] = {}
        for key, item in value.items():
            if isinstance(key, bool):
                raise TableConfigError(
                    f"{path}: key {key!r} was read as a boolean; quote it in the YAML file"
                )
            if isinstance(item, bool):
                raise TableConfigError(
                    f"{path}: value for {key!r} was read as a boolean; quote it in the YAML file"
                )
            if item is None and nested:
                raise TableConfigError(
                    f"{path}: value for {key!r} is empty; quote it in the YAML file"
                )
            result[str(key)] = _stringify(item, path, nested=True)
        return result
    if value is None or isinstance(value, (list, tuple)):
        return value
    return str(value)


def load_tables(path: str | Path) -> dict[str, object]:
    """Load table overrides from a YAML file.

    Raises
    ------
    TableConfigError
        If the document is not a mapping, a key or value was parsed as a
        boolean, or an entry inside a table has no value.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise TableConfigError(f"{path}: expected a YAML mapping, got {type(data).__name__}")

    return _stringify(data, path)
