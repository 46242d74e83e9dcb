"""Coarse lexical change estimate between two versions of a post."""

SIGNIFICANT_CHANGE_THRESHOLD = 0.3


def _tokenize(text):
    return set(text.lower().split())


def calculate_content_difference(original: str, updated: str) -> float:
    """
    Share of the updated text's distinct words that are absent from the original.

    Both texts are lower-cased and split on whitespace into word sets. Returns
    0.0 when the updated text has no words.
    """
    original_words = _tokenize(original)
    updated_words = _tokenize(updated)

    if not updated_words:
        return 0.0

    different_words = updated_words - original_words
    return len(different_words) / len(updated_words)


def is_significant_change(original: str, updated: str) -> bool:
    """Whether the update changed more than the significance threshold."""
    return (
        calculate_content_difference(original, updated) > SIGNIFICANT_CHANGE_THRESHOLD
    )
