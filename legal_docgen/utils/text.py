"""French text processing utilities"""

import re
import unicodedata
from typing import Optional


def remove_diacritics(text: str) -> str:
    """Strip accents: 'meublée' -> 'meublee'"""
    decomposed = unicodedata.normalize('NFD', text)
    stripped = ''.join(c for c in decomposed if unicodedata.category(c) != 'Mn')
    return unicodedata.normalize('NFC', stripped)


def clean_text(text: str) -> str:
    """Clean text by removing extra whitespace"""
    text = re.sub(r'\s+', ' ', text)
    return text.strip()


def normalize_choice(text: str) -> str:
    """Lowercase, accent-free, single-spaced form used to compare user choices"""
    text = remove_diacritics(text).lower()
    text = re.sub(r'[_\-]+', ' ', text)
    return clean_text(text)


# Words accepted for yes/no questions, compared after normalize_choice()
TRUE_WORDS = {'true', 'oui', 'o', 'yes', 'y', '1', 'vrai'}
FALSE_WORDS = {'false', 'non', 'n', 'no', '0', 'faux'}


def parse_yes_no(text: str) -> Optional[bool]:
    """
    Parse a yes/no answer in French or English.

    Returns None when the text is neither.
    """
    word = normalize_choice(text)
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    return None


def sanitize_filename(name: str) -> str:
    """Make a string safe to use as a file name stem"""
    name = remove_diacritics(name).lower()
    name = re.sub(r'[^a-z0-9]+', '_', name)
    return name.strip('_') or 'document'
