"""Daemon entry point tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from mbtnd.apps.mbtnd import main


def test_key_map_clash_is_a_config_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["mbtnd", "-c", str(tmp_path / "missing.yaml"), "-o", "buttons/keys/next=KEY_PLAYPAUSE"])
    assert str(exc_info.value.code).startswith("ConfigError: ")
    assert "already mapped to primary" in str(exc_info.value.code)
