"""
Slug generation for categories and scripts
"""

import re
import unicodedata

# Characters NFKD cannot reduce to ASCII on their own
CHAR_MAP = {
    '&': 'and',
    'ß': 'ss',
    'Æ': 'AE', 'æ': 'ae',
    'Ø': 'O', 'ø': 'o',
    'Œ': 'OE', 'œ': 'oe',
    'Đ': 'D', 'đ': 'd',
    'Ł': 'L', 'ł': 'l',
    'Þ': 'TH', 'þ': 'th',
    'Ð': 'D', 'ð': 'd',
}

_NON_ALNUM = re.compile(r'[^A-Za-z0-9\s]')
_WHITESPACE = re.compile(r'\s+')


def generate_slug(text: str) -> str:
    """Turn display text into a lowercase ASCII slug ("Teleport Hack!" -> "teleport-hack")"""
    mapped = ''.join(CHAR_MAP.get(ch, ch) for ch in text or '')
    ascii_text = unicodedata.normalize('NFKD', mapped).encode('ascii', 'ignore').decode('ascii')
    # Hyphens are the separator, so they count as whitespace until the end
    ascii_text = _NON_ALNUM.sub('', ascii_text.replace('-', ' '))
    return _WHITESPACE.sub('-', ascii_text.strip()).lower()
