"""Latvian diacritic folding for upstream descriptions."""
from photo_describer.constants import DIACRITIC_FOLDS

_FOLD_TABLE = str.maketrans(DIACRITIC_FOLDS)


def fold_diacritics(text: str) -> str:
    """Replace each lowercase Latvian accented letter with its plain Latin counterpart."""
    return text.translate(_FOLD_TABLE)
