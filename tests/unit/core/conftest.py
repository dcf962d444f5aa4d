"""Shared fixtures for core unit tests"""

import pytest

from manuscript.core.content import ContentRecord, ContentSnapshot
from manuscript.core.index.link_index import LinkIndexResolver


SAMPLE_MANUSCRIPT = """\
# 輸入車の名義変更ガイド

## STEP 1: 書類を揃える
必要書類は次の通り。
詳しくは guide/hub-paperwork を参照。

- 車検証
- **印鑑証明**（3か月以内）
- 委任状

### 注意点
書類の期限に注意 1)印鑑証明 2)住民票

## まとめ
[在庫一覧](/cars/bmw-m3) と {{ABS|アンチロック・ブレーキ・システム}} の確認を。
"""


@pytest.fixture(name="sample_manuscript")
def sample_manuscript_fixture():
    return SAMPLE_MANUSCRIPT


@pytest.fixture(name="snapshot")
def snapshot_fixture():
    """A small content snapshot covering every collection and taxonomy."""
    return ContentSnapshot(
        columns=[ContentRecord(slug="import-car-costs", title="Import costs", titleJa="輸入車の維持費")],
        guides=[ContentRecord(slug="paperwork-basics", title="名義変更の基本")],
        cars=[
            ContentRecord(slug="bmw-m3", name="BMW M3", maker="BMW", makerKey="bmw",
                          bodyType="sedan", segment="スポーツセダン"),
            ContentRecord(slug="bmw-z4", name="BMW Z4", maker="BMW", makerKey="bmw",
                          bodyType="roadster", segment="ライトスポーツ"),
            ContentRecord(slug="copen", maker="ダイハツ", makerKey="daihatsu", bodyType="軽オープン"),
        ],
        heritage=[ContentRecord(slug="ae86", title="")],
    )


@pytest.fixture(name="links")
def links_fixture(snapshot):
    return LinkIndexResolver(snapshot)


@pytest.fixture(name="empty_links")
def empty_links_fixture():
    return LinkIndexResolver(ContentSnapshot())
