"""Module: transform_utils.py

Author: Michael Economou
Date: 2025-05-31

Utility functions for applying case and separator transformations to names.
"""

import re


def apply_transform(name: str, transform: str) -> str:
    """Apply a string transformation to a name.

    Args:
        name (str): Input name
        transform (str): One of 'original', 'lower', 'UPPER', 'Capitalize',
                         'Title Case', 'camelCase', 'PascalCase',
                         'snake_case', 'kebab-case', 'space'

    Returns:
        str: Transformed name. Unknown transforms return the name unchanged.

    """
    if not name.strip():
        return ""

    if transform == "original":
        return name

    if transform == "lower":
        return name.lower()

    if transform == "UPPER":
        return name.upper()

    if transform == "Capitalize":
        return " ".join(w.capitalize() for w in name.split())

    if transform == "Title Case":
        return name.title()

    if transform == "camelCase":
        words = _split_words(name)
        if not words:
            return ""
        return words[0].lower() + "".join(w.capitalize() for w in words[1:])

    if transform == "PascalCase":
        return "".join(w.capitalize() for w in _split_words(name))

    if transform in ("snake_case", "kebab-case"):
        sep = "_" if transform == "snake_case" else "-"
        result = re.sub(r"\s+", sep, name.strip())
        result = re.sub(r"_+", "_", result)
        return re.sub(r"-+", "-", result)

    if transform == "space":
        return re.sub(r"\s+", " ", re.sub(r"[_\-]+", " ", name)).strip()

    return name


def change_first_character(name: str, to_upper: bool) -> str:
    """Upper- or lower-case only the first character of `name`."""
    if not name:
        return name
    first = name[0].upper() if to_upper else name[0].lower()
    return first + name[1:]


def _split_words(name: str) -> list[str]:
    # Whitespace, underscores and dashes all separate words
    return [w for w in re.split(r"[\s_\-]+", name) if w]
