#!/usr/bin/env python3
"""
String normalization and domain classification for candidate values.
"""

import re
import unicodedata

from .candidate_rules import DOMAINS

# prefix followed by a separator ("org.apache") or an identifier-shaped dotted
# value led by the prefix ("commons.io"); plain words such as "organization" and
# free-text names such as "comScore, Inc." do not match
_DOMAIN_PATTERN = re.compile(r'^(?:' + '|'.join(re.escape(d) for d in DOMAINS) + r')(?:[^A-Za-z0-9]|[A-Za-z0-9_-]*\.)')

_ASCII_REPLACEMENTS = {
    'ø': 'o', 'Ø': 'O',
    'æ': 'ae', 'Æ': 'AE',
    'ß': 'ss',
    'ł': 'l', 'Ł': 'L',
    '©': 'c',
    '®': 'r',
    '™': 'tm',
}


def normalize_to_ascii(text):
    """Convert Unicode text to an ASCII-compatible string"""
    if not text:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Decompose accented chars and drop the combining marks
    normalized = unicodedata.normalize('NFD', text)
    ascii_text = ''.join(char for char in normalized
                         if unicodedata.category(char) != 'Mn')

    for unicode_char, ascii_replacement in _ASCII_REPLACEMENTS.items():
        ascii_text = ascii_text.replace(unicode_char, ascii_replacement)

    return ''.join(char for char in ascii_text if ord(char) < 128)


def normalize_name(name: str) -> str:
    """Normalize a free-text vendor name, e.g. "Acme  Corp" -> "acme_corp"."""
    if not name or not isinstance(name, str):
        return ''
    name = normalize_to_ascii(name.strip())
    return '_'.join(name.lower().split())


def normalize_title(title: str) -> str:
    """Normalize a declared vendor title, e.g. "Red Hat, Inc." -> "redhat".

    Anything after the first comma is treated as a legal-entity qualifier and
    dropped, as is a trailing standalone "inc"/"inc.".
    """
    if not title or not isinstance(title, str):
        return ''
    title = normalize_to_ascii(title.strip()).split(',')[0]
    title = re.sub(r'\s+inc\.?$', '', title.strip(), flags=re.IGNORECASE)
    return ''.join(title.lower().split())


def starts_with_domain(value) -> bool:
    """True if value looks like a reverse-domain namespace (com.*, org.*, net.*, io.*)

    This is a heuristic: "commons.io" and "netty.io" are reported as
    namespaces, "company" and "organization" are not.
    """
    if not isinstance(value, str):
        return False
    return _DOMAIN_PATTERN.match(value) is not None
