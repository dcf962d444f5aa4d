"""Line breaking for inline "1) 2) 3)" enumerations"""

import re


NUMBERED_RE = re.compile(r'([ \t　]*)([0-9]{1,2}[)）])')


def break_numbered_lines(text: str) -> str:
    """Start every 'N)' / 'N）' marker on its own line.

    Markers already at a line start (optionally indented) are left alone.
    Otherwise the spaces in front of the marker are replaced by a single '\\n'.
    """
    if not text:
        return ''

    def _repl(m: re.Match) -> str:
        start = m.start()
        if start == 0 or text[start - 1] == '\n':
            return m.group(0)
        return f"\n{m.group(2)}"

    return NUMBERED_RE.sub(_repl, text)
