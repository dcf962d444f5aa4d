"""Car taxonomy groupings (maker, body type, segment) used for hub page paths"""

import re
import unicodedata
from dataclasses import dataclass


BODY_TYPE_ALIASES: dict[str, str] = {
    "sedan":        "セダン",
    "coupe":        "クーペ",
    "sports-coupe": "クーペ",
    "gt-coupe":     "クーペ",
    "roadster":     "オープンカー",
    "open":         "オープンカー",
    "オープン":     "オープンカー",
}

BODY_TYPE_KEY_OVERRIDES: dict[str, str] = {
    "セダン":            "sedan",
    "クーペ":            "coupe",
    "オープンカー":      "open",
    "SUV/クロスオーバー": "suv-crossover",
    "SUV":               "suv-crossover",
    "ハッチバック":      "hatchback",
    "軽スポーツ":        "kei-sports",
    "軽オープン":        "kei-open",
    "軽ハッチバック":    "kei-hatchback",
}

SEGMENT_KEY_OVERRIDES: dict[str, str] = {
    "GT":                        "gt",
    "クラシックGT":              "classic-gt",
    "クラシックスポーツ":        "classic-sports",
    "クーペ":                    "coupe",
    "グランドツアラー":          "grand-tourer",
    "スポーツ":                  "sports",
    "スポーツセダン":            "sports-sedan",
    "スーパーカー":              "supercar",
    "スーパースポーツ":          "super-sports",
    "スーパースポーツ / HPEV":   "super-sports-hpev",
    "ハイパーカー":              "hypercar",
    "フラッグシップ":            "flagship",
    "フラッグシップGT / スポーツ": "flagship-gt-sports",
    "プレミアムGT":              "premium-gt",
    "プレミアムSUV":             "premium-suv",
    "プレミアムスポーツ":        "premium-sports",
    "プレミアムセダン":          "premium-sedan",
    "ホットハッチ":              "hot-hatch",
    "ホモロゲーション":          "homologation",
    "ライトウェイト":            "lightweight",
    "ライトスポーツ":            "light-sports",
    "ラグジュアリーセダン":      "luxury-sedan",
    "ラリー系スポーツ":          "rally-sports",
    "軽スポーツ":                "kei-sports",
}


@dataclass
class TaxonomyInfo:
    key:   str     # URL path segment
    label: str     # display label (mostly Japanese)
    count: int = 1


def _clean(value) -> str:
    """NFKC-normalize and trim; non-strings become ''."""
    if not isinstance(value, str):
        return ''
    return unicodedata.normalize('NFKC', value).strip()


def to_slug(text: str) -> str:
    """ASCII slug for latin labels; '' when nothing latin remains."""
    v = _clean(text).lower()
    if not v:
        return ''
    v = v.replace('&', ' and ')
    v = re.sub(r'[^a-z0-9]+', '-', v)
    return re.sub(r'-+', '-', v).strip('-')


def fnv1a32(text: str) -> int:
    """32-bit FNV-1a over UTF-16 code units."""
    h = 0x811c9dc5
    data = text.encode('utf-16-le')
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * 0x01000193) & 0xffffffff
    return h


def _base36(n: int) -> str:
    digits = '0123456789abcdefghijklmnopqrstuvwxyz'
    if n == 0:
        return '0'
    out = []
    while n:
        n, r = divmod(n, 36)
        out.append(digits[r])
    return ''.join(reversed(out))


def to_stable_key(text: str, prefix: str) -> str:
    """Deterministic '{prefix}-{base36 hash}' key for labels that cannot be slugged."""
    p = re.sub(r'[^a-z0-9]+', '', (prefix or '').lower()) or 'key'
    return f"{p}-{_base36(fnv1a32(text))}"


def normalize_body_type_label(raw) -> str:
    v = _clean(raw)
    if not v:
        return ''
    return BODY_TYPE_ALIASES.get(v.lower()) or re.sub(r'\s+', ' ', v)


def normalize_segment_label(raw) -> str:
    v = _clean(raw)
    if not v:
        return ''
    v = re.sub(r'\s+', ' ', v)
    return re.sub(r'\s*/\s*', ' / ', v)


def body_type_key(label: str) -> str:
    label = normalize_body_type_label(label)
    if not label:
        return ''
    return BODY_TYPE_KEY_OVERRIDES.get(label) or to_slug(label) or to_stable_key(label, 'bt')


def segment_key(label: str) -> str:
    label = normalize_segment_label(label)
    if not label:
        return ''
    return SEGMENT_KEY_OVERRIDES.get(label) or to_slug(label) or to_stable_key(label, 'seg')


def _group(labels, key_fn) -> list[TaxonomyInfo]:
    """Count labels per key; on key collision the longer label wins. Sorted by label."""
    infos: dict[str, TaxonomyInfo] = {}
    for label in labels:
        if not label:
            continue
        key = key_fn(label)
        if not key:
            continue
        existing = infos.get(key)
        if existing is None:
            infos[key] = TaxonomyInfo(key=key, label=label)
            continue
        existing.count += 1
        if len(label) > len(existing.label):
            existing.label = label
    return sorted(infos.values(), key=lambda info: info.label)


def build_body_type_infos(cars) -> list[TaxonomyInfo]:
    return _group((normalize_body_type_label(c.body_type) for c in cars), body_type_key)


def build_segment_infos(cars) -> list[TaxonomyInfo]:
    return _group((normalize_segment_label(c.segment) for c in cars), segment_key)


def build_maker_infos(cars) -> list[TaxonomyInfo]:
    """Maker hubs keyed by maker_key; the first maker label seen for a key wins."""
    infos: dict[str, TaxonomyInfo] = {}
    for car in cars:
        key, maker = _clean(car.maker_key), _clean(car.maker)
        if not key or not maker:
            continue
        if key in infos:
            infos[key].count += 1
        else:
            infos[key] = TaxonomyInfo(key=key, label=maker)
    return list(infos.values())
