"""CSV line tokenizer for spreadsheet exports."""


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line into trimmed fields.

    Double-quoted fields may contain commas, and a doubled quote ("") inside
    a field is read as a literal quote. An unterminated quote is closed at the
    end of the line. Fields spanning several lines are not supported: callers
    split the text into lines first.

    Args:
        line: One line of CSV text, without the line terminator

    Returns:
        List of field values with surrounding whitespace removed
    """
    fields = []
    current = []
    in_quote = False

    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quote = not in_quote
        elif char == "," and not in_quote:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields
