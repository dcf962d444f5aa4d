"""Hand-authored titles for list pages and GUIDE hub pages"""

from manuscript.core.models import InternalLinkMeta, LinkKind


def _meta(title: str, kind: LinkKind) -> InternalLinkMeta:
    return InternalLinkMeta(title=title, kind=kind)


STATIC_INTERNAL_LINKS: dict[str, InternalLinkMeta] = {
    "/guide/hub-consumables":     _meta("タイヤ・バッテリー・消耗品HUB", LinkKind.GUIDE),
    "/guide/hub-import-trouble":  _meta("輸入車メンテ・故障HUB", LinkKind.GUIDE),
    "/guide/hub-loan":            _meta("ローン/支払いHUB", LinkKind.GUIDE),
    "/guide/hub-paperwork":       _meta("名義変更・必要書類HUB", LinkKind.GUIDE),
    "/guide/hub-sell-compare":    _meta("比較の使い方を先に揃える", LinkKind.GUIDE),
    "/guide/hub-sell-loan":       _meta("残債ありの手放しを、先に片付ける", LinkKind.GUIDE),
    "/guide/hub-sell-prepare":    _meta("査定準備HUB", LinkKind.GUIDE),
    "/guide/hub-sell-price":      _meta("売却相場HUB", LinkKind.GUIDE),
    "/guide/hub-sell":            _meta("売却HUB", LinkKind.GUIDE),
    "/guide/hub-shaken":          _meta("車検HUB", LinkKind.GUIDE),
    "/guide/hub-usedcar":         _meta("中古車検索HUB", LinkKind.GUIDE),
    "/guide/insurance":           _meta("自動車保険の見直し（比較の前に）", LinkKind.GUIDE),
    "/guide/lease":               _meta("定額カーリースの選び方（条件の読み方）", LinkKind.GUIDE),
    "/guide/maintenance":         _meta("メンテ用品の選び方（まず揃える定番）", LinkKind.GUIDE),
    "/guide":                     _meta("GUIDE", LinkKind.GUIDE),
    "/column":                    _meta("COLUMN", LinkKind.COLUMN),
    "/cars":                      _meta("CARS", LinkKind.CARS),
    "/cars/makers":               _meta("メーカー別 車種一覧", LinkKind.CARS),
    "/cars/body-types":           _meta("ボディタイプ別 車種一覧", LinkKind.CARS),
    "/cars/segments":             _meta("セグメント別 車種一覧", LinkKind.CARS),
    "/heritage":                  _meta("HERITAGE", LinkKind.HERITAGE),
}
