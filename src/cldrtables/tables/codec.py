"""JSON codec for persisted locale tables.

Serializes a LocaleTable to the on-disk document format and back. Output
is deterministic: members in fixed order, one entry per line, non-ASCII
text written literally (UTF-8), shared timezone name sets re-emitted as
``{"ref": name}`` references.

Round-trip guarantee:
    loads_table(dumps_table(table)) == table

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cldrtables.constants import MAX_TABLE_SIZE, TABLE_FILE_SUFFIX
from cldrtables.enums import TableDomain
from cldrtables.integrity import IntegrityContext, TableSchemaError
from cldrtables.tables.schema import REF_MEMBER, build_table

if TYPE_CHECKING:
    from cldrtables.tables.model import LocaleTable
    from cldrtables.tables.types import TableValue

__all__ = [
    "decode_table_bytes",
    "dumps_table",
    "loads_table",
    "read_table",
    "to_document",
    "write_table",
]


def _encode(value: object) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _encode_value(value: TableValue) -> str | list[str]:
    if isinstance(value, str):
        return value
    return list(value)


def to_document(table: LocaleTable) -> dict[str, Any]:
    """Convert a table to its JSON-compatible document form."""
    document: dict[str, Any] = {"domain": str(table.domain), "locale": table.locale}
    if table.domain is TableDomain.TIME_ZONE_NAMES:
        document["name_sets"] = {name: list(names) for name, names in table.name_sets.items()}
    entries: list[list[Any]] = []
    for key, value in table.entries:
        set_name = table.name_set_of(key)
        if set_name is not None:
            entries.append([key, {REF_MEMBER: set_name}])
        else:
            entries.append([key, _encode_value(value)])
    document["entries"] = entries
    return document


def dumps_table(table: LocaleTable) -> str:
    """Serialize a table to JSON text (one entry per line).

    Args:
        table: Table to serialize

    Returns:
        JSON text ending with a newline
    """
    document = to_document(table)
    lines = [
        "{",
        f'  "domain": {_encode(document["domain"])},',
        f'  "locale": {_encode(document["locale"])},',
    ]
    if "name_sets" in document:
        name_sets = document["name_sets"]
        if name_sets:
            lines.append('  "name_sets": {')
            lines.append(
                ",\n".join(
                    f"    {_encode(name)}: {_encode(names)}" for name, names in name_sets.items()
                )
            )
            lines.append("  },")
        else:
            lines.append('  "name_sets": {},')
    if document["entries"]:
        lines.append('  "entries": [')
        lines.append(",\n".join(f"    {_encode(entry)}" for entry in document["entries"]))
        lines.append("  ]")
    else:
        lines.append('  "entries": []')
    lines.append("}")
    return "\n".join(lines) + "\n"


def _reject_duplicate_members(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for name, value in pairs:
        if name in result:
            msg = f"Duplicate JSON object member '{name}'"
            raise TableSchemaError(
                msg, IntegrityContext(component="codec", operation="decode", key=name)
            )
        result[name] = value
    return result


def loads_table(
    text: str,
    *,
    expected_domain: TableDomain | None = None,
    expected_locale: str | None = None,
) -> LocaleTable:
    """Decode JSON text and validate it into a LocaleTable.

    Args:
        text: JSON document text
        expected_domain: Domain implied by the file name, if known
        expected_locale: Locale implied by the file name, if known

    Returns:
        Validated LocaleTable

    Raises:
        TableSchemaError: If the text is not valid JSON or fails validation
    """
    try:
        document = json.loads(text, object_pairs_hook=_reject_duplicate_members)
    except json.JSONDecodeError as e:
        msg = f"Invalid table JSON at line {e.lineno} column {e.colno}: {e.msg}"
        raise TableSchemaError(
            msg, IntegrityContext(component="codec", operation="decode", actual=e.msg)
        ) from e
    return build_table(
        document, expected_domain=expected_domain, expected_locale=expected_locale
    )


def decode_table_bytes(
    data: bytes,
    *,
    source: str,
    expected_domain: TableDomain | None = None,
    expected_locale: str | None = None,
    max_bytes: int = MAX_TABLE_SIZE,
) -> LocaleTable:
    """Decode raw file content and validate it into a LocaleTable.

    Args:
        data: Raw file content
        source: File name for diagnostics
        expected_domain: Domain implied by the file name, if known
        expected_locale: Locale implied by the file name, if known
        max_bytes: Size limit for the raw content

    Raises:
        TableSchemaError: If the content is too large, not UTF-8, or fails validation
    """
    if len(data) > max_bytes:
        msg = f"Table file {source} is {len(data)} bytes; limit is {max_bytes}"
        raise TableSchemaError(
            msg,
            IntegrityContext(
                component="codec",
                operation="read",
                key=source,
                expected=f"<= {max_bytes}",
                actual=str(len(data)),
            ),
        )
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"Table file {source} is not valid UTF-8"
        raise TableSchemaError(
            msg, IntegrityContext(component="codec", operation="read", key=source)
        ) from e
    return loads_table(text, expected_domain=expected_domain, expected_locale=expected_locale)


def read_table(
    path: Path,
    *,
    expected_domain: TableDomain | None = None,
    expected_locale: str | None = None,
    max_bytes: int = MAX_TABLE_SIZE,
) -> LocaleTable:
    """Read and validate a table file.

    The size limit is checked against the file's stat before reading.

    Raises:
        FileNotFoundError: If the file does not exist
        TableSchemaError: If the file is too large, not UTF-8, or fails validation
    """
    size = path.stat().st_size
    if size > max_bytes:
        msg = f"Table file {path.name} is {size} bytes; limit is {max_bytes}"
        raise TableSchemaError(
            msg,
            IntegrityContext(
                component="codec",
                operation="read",
                key=path.name,
                expected=f"<= {max_bytes}",
                actual=str(size),
            ),
        )
    return decode_table_bytes(
        path.read_bytes(),
        source=path.name,
        expected_domain=expected_domain,
        expected_locale=expected_locale,
        max_bytes=max_bytes,
    )


def write_table(table: LocaleTable, directory: Path) -> Path:
    """Write a table as ``<directory>/<Domain>_<locale>.json``.

    Returns:
        Path of the written file
    """
    path = directory / f"{table.file_stem}{TABLE_FILE_SUFFIX}"
    path.write_text(dumps_table(table), encoding="utf-8")
    return path
