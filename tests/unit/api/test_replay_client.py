from pathlib import Path

import pytest

from jp_post_tracking.api.client import ReplayClient
from jp_post_tracking.errors import TransportError


def test_replay_client_serves_saved_pages(tmp_path: Path):
    (tmp_path / "123456789012.html").write_text("<html>引受</html>", encoding="utf-8")

    client = ReplayClient(tmp_path)

    assert client.fetch("123456789012") == "<html>引受</html>"
    # codes are matched on digits only
    assert client.fetch("1234-5678-9012") == "<html>引受</html>"


def test_replay_client_unknown_code_is_a_transport_error(tmp_path: Path):
    client = ReplayClient(tmp_path)

    with pytest.raises(TransportError):
        client.fetch("000000000000")


def test_replay_client_requires_directory(tmp_path: Path):
    with pytest.raises(ValueError):
        ReplayClient(tmp_path / "missing")

    f = tmp_path / "page.html"
    f.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError):
        ReplayClient(f)
