"""
Name normalization for comparison.

The normalized form is only used to compare letters; callers keep the
original string for display.
"""


def normalize(name: str) -> str:
    """
    Remove all whitespace and lowercase the rest. Letter order is unchanged.

    Examples:
      normalize("Mary Jane") -> "maryjane"
      normalize("  ")        -> ""
    """
    return "".join(name.split()).lower()
