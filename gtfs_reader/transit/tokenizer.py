"""Splits a record of a GTFS table into its fields.

GTFS tables are comma-separated with `"` quoting. The tokenizer is permissive: it never fails
and always returns at least one field.

```python
split_record('27681 ,,"Sisters, OR",,"44.29124",1')
# > ['27681', '', 'Sisters, OR', '', '44.29124', '1']
```
"""

from ..params import DELIMITER, DROPPED_CHARS, QUOTE, UTF8_BOM, UTF8_BOM_UNDECODED


def _strip_bom(record: str) -> str:
    for bom in (UTF8_BOM, UTF8_BOM_UNDECODED):
        if record.startswith(bom):
            return record[len(bom) :]
    return record


def split_record(record: str, is_header: bool = False) -> list[str]:
    """Split a record into a list of fields.

    - A leading byte-order mark is skipped on the header.
    - `"` toggles quoting and is never part of a field. Delimiters inside quotes are kept.
    - Spaces leading a field are skipped and trailing spaces are stripped.
    - `\\r` and `\\t` are dropped wherever they are. An unterminated quote ends at the end of
        the record.

    Args:
        record: one line of a table without its trailing newline.
        is_header: True if the record is the header of the table.
    """
    if is_header:
        record = _strip_bom(record)

    fields: list[str] = []
    token: list[str] = []
    quoted = False
    token_start = 0

    for i, char in enumerate(record):
        if char == QUOTE:
            quoted = not quoted
        elif char == " ":
            # spaces are skipped only while they lead the field
            if i == token_start:
                token_start = i + 1
            else:
                token.append(char)
        elif char == DELIMITER and not quoted:
            fields.append("".join(token).rstrip(" "))
            token = []
            token_start = i + 1
        elif char not in DROPPED_CHARS:
            token.append(char)

    fields.append("".join(token).rstrip(" "))
    return fields
