"""Text helpers for Turkish letters."""

from .config import PUNCTUATION, WORD_LENGTH_BUCKETS

_IDENTITY_FOLD = str.maketrans({
    'İ': 'I', 'ı': 'I', 'i': 'I',
    'Ğ': 'G', 'ğ': 'G',
    'Ü': 'U', 'ü': 'U',
    'Ş': 'S', 'ş': 'S',
    'Ö': 'O', 'ö': 'O',
    'Ç': 'C', 'ç': 'C',
})

_TURKISH_UPPER = str.maketrans({'i': 'İ', 'ı': 'I'})


def normalize_for_identity(text: str) -> str:
    """Uppercase and fold Turkish letters to ASCII look-alikes.

    Only for matching a character against mapping keys, never for display.
    """
    return text.upper().translate(_IDENTITY_FOLD)


def normalize_for_display(text: str) -> str:
    """Turkish-correct uppercase: i -> İ and ı -> I stay distinct."""
    return text.translate(_TURKISH_UPPER).upper()


def is_letter(char: str) -> bool:
    return char not in PUNCTUATION and not char.isspace()


def split_words(text: str) -> list[str]:
    """Split a sentence on whitespace, dropping empty tokens."""
    return text.split()


def word_letters(word: str) -> list[str]:
    """Letters of a word with punctuation removed, original casing kept."""
    return [char for char in word if is_letter(char)]


def sentence_letters(text: str) -> list[str]:
    """Display-normalized letters of a sentence, one per LetterPosition."""
    return [normalize_for_display(char) for char in text if is_letter(char)]


def word_spans(text: str) -> list[tuple[int, int]]:
    """Global (start, length) of each word that has letters, in sentence order.

    One entry per word occurrence, so repeated words get separate spans.
    """
    spans = []
    start = 0
    for word in split_words(text):
        length = len(word_letters(word))
        if length:
            spans.append((start, length))
        start += length
    return spans


def word_length_bucket(length: int) -> str:
    """Bucket label for a word of the given letter count."""
    for bucket, (low, high) in WORD_LENGTH_BUCKETS.items():
        if length >= low and (high is None or length <= high):
            return bucket
    raise ValueError(f"No bucket for word length {length}")


def format_as_clock(seconds: int) -> str:
    """Format seconds as MM:SS."""
    seconds = max(0, int(seconds))
    minutes, remaining = divmod(seconds, 60)
    return f"{minutes:02d}:{remaining:02d}"
