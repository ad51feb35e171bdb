import unicodedata


def normalize_text(text: str) -> str:
    """Lower-case and strip accents so "José" matches "jose" """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower()
