def normalize(text: str) -> str:
    """Lowercased, trimmed copy of ``text`` used for keyword and pattern matching."""
    return text.strip().lower()


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)
