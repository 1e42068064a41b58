from aincome_parser.extraction.amount import has_digit


def split_segments(message: str) -> list[str]:
    """
    Split a message into candidate single-transaction segments.

    Newlines always split. Commas split only when every piece carries a digit;
    otherwise the message stays whole. "1,500 đồng tiền ăn" still splits in two
    because both pieces contain digits.
    """
    trimmed = message.strip()
    if not trimmed:
        return []

    if "\n" in trimmed:
        return [line.strip() for line in trimmed.split("\n") if line.strip()]

    if "," in trimmed:
        parts = [part.strip() for part in trimmed.split(",")]
        if len(parts) > 1 and all(has_digit(part) for part in parts):
            return parts

    return [trimmed]
