from __future__ import annotations

import runpy
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "render"))

import termpix_app.__main__ as app_main


def test_main_passes_through_args(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(app_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = app_main.main(["render", "cat.png", "--raw"])
    assert rc == 0
    assert calls == [["render", "cat.png", "--raw"]]


def test_main_without_args_shows_help(capsys) -> None:
    rc = app_main.main([])
    assert rc == 0
    assert "usage: termpix" in capsys.readouterr().out


def test_main_module_runpath_without_package_context() -> None:
    main_path = ROOT / "apps" / "cli" / "termpix_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result
