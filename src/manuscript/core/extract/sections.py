"""Section-level helpers over parsed blocks: step headings, quick summaries and quick cards"""

import re

from manuscript.core.models import Heading, ListBlock, Paragraph, QuickCard, QuickSection, StepHeading


STEP_RE = re.compile(r'^STEP\s*(\d+)[.:：]?\s*(.*)$', re.IGNORECASE)
LITE_RES = (
    re.compile(r'\*\*(.+?)\*\*'),
    re.compile(r'__(.+?)__'),
    re.compile(r'`(.+?)`'),
)
# quick-card title patterns, highest priority first
PRIORITY_PATTERNS = (
    re.compile(r'結論|先に結論|まとめ|要点'),
    re.compile(r'最短|手順|流れ|まず|チェック|初動|やること|順番'),
    re.compile(r'やってはいけない|注意|失敗|NG|危険'),
    re.compile(r'次に読む|次にやる|関連'),
)
WHITESPACE_RE = re.compile(r'\s+')


def strip_markdown_lite(text: str) -> str:
    """Drop **bold**, __underline__ and `code` wrappers, keeping their content."""
    for pattern in LITE_RES:
        text = pattern.sub(r'\1', text)
    return text.strip()


def extract_step_headings(headings: list[Heading]) -> list[StepHeading]:
    """Headings of the form 'STEP 2: label', sorted by step number."""
    steps = []
    for h in headings:
        m = STEP_RE.match(h.text)
        if not m:
            continue
        number = int(m.group(1))
        steps.append(StepHeading(id=h.id, step_number=number, label=m.group(2).strip() or f"STEP {number}"))
    return sorted(steps, key=lambda s: s.step_number)


def build_quick_sections(
    blocks: list,
    max_bullets: int = 6,
    max_paragraphs: int = 2,
    ) -> list[QuickSection]:
    """Group blocks under each level-2 heading into bullet/paragraph summaries.

    Only the first list of a section contributes bullets. Blocks before the
    first level-2 heading are ignored, as are sections with nothing to show.
    """
    sections: list[dict] = []
    current = None

    for block in blocks:
        if isinstance(block, Heading) and block.level == 2:
            current = {"id": block.id, "title": block.text, "bullets": [], "paragraphs": []}
            sections.append(current)
            continue
        if current is None:
            continue
        if isinstance(block, ListBlock) and not current["bullets"]:
            bullets = [strip_markdown_lite(item) for item in block.items]
            current["bullets"] = [b for b in bullets if b][:max_bullets]
        elif isinstance(block, Paragraph) and len(current["paragraphs"]) < max_paragraphs:
            cleaned = strip_markdown_lite(block.text)
            if cleaned:
                current["paragraphs"].append(cleaned)

    return [QuickSection(**s) for s in sections if s["bullets"] or s["paragraphs"]]


def _sentence_bullets(paragraphs: list[str], limit: int = 3) -> list[str]:
    """Split paragraphs into sentences on '。', each re-terminated with '。'."""
    joined = WHITESPACE_RE.sub(" ", " ".join(paragraphs)).strip()
    sentences = [s.strip() for s in joined.split("。")]
    return [f"{s}。" for s in sentences if s][:limit]


def pick_quick_cards(
    sections: list[QuickSection],
    limit: int = 3,
    max_bullets: int = 4,
    ) -> list[QuickCard]:
    """Choose up to `limit` sections as quick cards.

    The first section matching each of PRIORITY_PATTERNS is taken in pattern
    order, then the remaining slots are filled from the top. A section without
    bullets is summarized by the first sentences of its paragraphs.
    """
    usable = [s for s in sections if s.bullets or s.paragraphs]
    picked: list[QuickSection] = []

    for pattern in PRIORITY_PATTERNS:
        hit = next((s for s in usable if pattern.search(s.title)), None)
        if hit is not None and hit not in picked:
            picked.append(hit)
    for s in usable:
        if len(picked) >= limit:
            break
        if s not in picked:
            picked.append(s)

    cards = []
    for s in picked[:limit]:
        bullets = (s.bullets or _sentence_bullets(s.paragraphs))[:max_bullets]
        if bullets:
            cards.append(QuickCard(id=s.id, title=s.title, bullets=bullets))
    return cards
