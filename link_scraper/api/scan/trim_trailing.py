"""Conservative trailing-punctuation stripper for URLs found in prose."""

import re

SENTENCE_PUNCTUATION = ".,;:!?'\"*"

_CLOSERS = {")": "(", "]": "[", "}": "{"}

_TRAILING_SLASHES = re.compile(r"/{2,}$")


def trim_trailing(candidate: str, protected: int = 0) -> str:
    """Strip characters that end a URL in prose rather than belong to it.

    Repeats until stable:

    - sentence punctuation ``. , ; : ! ? ' " *`` is removed
    - a closing ``)``, ``]`` or ``}`` is removed only while the candidate
      holds more of that closer than of its opener, so ``/wiki/A_(b)``
      survives while ``(see http://a.test)`` loses its parenthesis
    - a trailing ``>`` is removed

    When sentence punctuation was removed and the candidate then ends in
    two or more slashes, they collapse to a single slash.

    Args:
        candidate: Raw matched text
        protected: Length of a prefix (e.g. ``https://``) that is never trimmed

    Returns:
        The trimmed candidate, or "" when nothing beyond the protected prefix remains
    """
    text = candidate
    stripped_punctuation = False

    while len(text) > protected:
        last = text[-1]
        if last in SENTENCE_PUNCTUATION:
            text = text[:-1]
            stripped_punctuation = True
            continue
        if last == ">":
            text = text[:-1]
            continue
        opener = _CLOSERS.get(last)
        if opener is not None and text.count(last) > text.count(opener):
            text = text[:-1]
            continue
        break

    if stripped_punctuation:
        match = _TRAILING_SLASHES.search(text)
        if match and match.start() >= protected:
            text = text[: match.start() + 1]

    if len(text) <= protected:
        return ""
    return text
