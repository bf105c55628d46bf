"""String helpers shared by the matcher components."""


def has_text(value: str | None) -> bool:
    """Check that a string holds at least one non-whitespace character.

    Args:
        value: String to check, may be None

    Returns:
        True if the string has actual text
    """
    return bool(value and value.strip())


def tokenize_to_list(
    text: str | None,
    separator: str,
    trim_tokens: bool = True,
    ignore_empty: bool = True,
) -> list[str]:
    """Split text into tokens around every exact occurrence of a separator.

    Args:
        text: Text to split (None yields no tokens)
        separator: Literal separator string, not a regex
        trim_tokens: Strip surrounding whitespace from each token
        ignore_empty: Drop zero-length tokens (after trimming)

    Returns:
        Ordered list of tokens
    """
    if text is None:
        return []

    tokens = []
    for token in text.split(separator):
        if trim_tokens:
            token = token.strip()
        if ignore_empty and not token:
            continue
        tokens.append(token)
    return tokens
