"""Tests for the ``folio`` command-line interface.

Usage
-----
Run ``pytest tests/test_cli.py -v``. The ``serve`` command is tested with
``run_server`` replaced so no socket is opened.
"""

from __future__ import annotations

import typing as typ

import pytest

from folio_pages import cli

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_build_command_writes_bundle(
    site_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output_dir = tmp_path / "dist"
    cli.build(config=site_root / "site.yaml", output_dir=output_dir)
    assert (output_dir / "index.html").is_file()
    assert (output_dir / "blogpost" / "javascript-closures" / "index.html").is_file()
    out = capsys.readouterr().out
    assert "wrote" in out
    assert "404.html" in out


def test_build_command_applies_map_key(site_root: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "dist"
    cli.build(
        config=site_root / "site.yaml", output_dir=output_dir, map_api_key="cli-key"
    )
    contact = (output_dir / "contact" / "index.html").read_text(encoding="utf-8")
    assert "cli-key" in contact
    assert 'id="map-container"' in contact


def test_serve_command_passes_options(
    site_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[dict[str, object]] = []

    def _fake_run_server(site: object, *, host: str, port: int) -> None:
        calls.append({"site": site, "host": host, "port": port})

    monkeypatch.setattr(cli, "run_server", _fake_run_server)
    cli.serve(config=site_root / "site.yaml", host="0.0.0.0", port=9000)
    assert len(calls) == 1
    assert calls[0]["host"] == "0.0.0.0"
    assert calls[0]["port"] == 9000


def test_app_parses_build_options(site_root: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "via-app"
    command, bound, _ignored = cli.app.parse_args(
        [
            "build",
            "--config",
            str(site_root / "site.yaml"),
            "--output-dir",
            str(output_dir),
        ]
    )
    assert command is cli.build
    command(*bound.args, **bound.kwargs)
    assert (output_dir / "404.html").is_file()
