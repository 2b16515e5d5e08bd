import re

# Characters allowed anywhere after the scheme.
_BODY = r"[a-z0-9\-+&@#/%?=~_|!:,.;]"
# Characters a link may end on. Prose punctuation such as . , ; : ! ? is left out.
_SAFE_END = r"[a-z0-9\-+&@#/%=~_|]"
_SAFE_END_OR_CLOSE = r"[a-z0-9\-+&@#/%=~_|)]"

# Link pattern, compiled once and shared by every detector.
# Case folding is ASCII-only after the word boundary, so letters such as
# U+017F or U+212A never fold into the scheme or the body.
LINK_PATTERN = re.compile(
    r"\b"  # scheme, not preceded by a word character
    r"(?a:"
    r"(?:https?|ftp)://"
    r"(?:"
    rf"{_BODY}*\({_BODY}*"  # body containing an opening parenthesis
    rf"(?:\){_BODY}*{_SAFE_END}|{_SAFE_END_OR_CLOSE})"  # closed inside the link
    r"|"  # OR
    rf"{_BODY}*{_SAFE_END}"  # body without parentheses
    r")"
    r")",
    re.IGNORECASE,
)
