from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

_HEADER_PAIR = (
    "<tr><th>状態発生日</th><th>配送履歴</th><th>詳細</th><th>取扱局</th><th>県名等</th></tr>"
    "<tr><th>郵便番号</th></tr>"
)


def _event_pair(datetime="", status="", detail="", office="", prefecture="", postcode=""):
    return (
        f"<tr><td>{datetime}</td><td>{status}</td><td>{detail}</td>"
        f"<td>{office}</td><td>{prefecture}</td></tr>"
        f"<tr><td>{postcode}</td></tr>"
    )


def build_history_html(events, *, header=True, summary="履歴情報"):
    """Render a minimal result page: each event is a dict of TrackingStatus fields."""
    body = _HEADER_PAIR if header else ""
    body += "".join(_event_pair(**e) for e in events)
    return (
        "<html><head><meta charset='utf-8'><title>個別番号検索結果</title></head><body>"
        f"<table summary='{summary}'>{body}</table>"
        "</body></html>"
    )


@pytest.fixture
def history_html():
    return build_history_html


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def accepted_event():
    return {
        "datetime": "2024/05/01 10:12",
        "status": "引受",
        "detail": "",
        "office": "銀座郵便局",
        "prefecture": "東京都",
        "postcode": "104-8799",
    }


@pytest.fixture
def delivered_event():
    return {
        "datetime": "2024/05/02 14:03",
        "status": "お届け先にお届け済み",
        "detail": "",
        "office": "新大阪郵便局",
        "prefecture": "大阪府",
        "postcode": "532-8799",
    }
