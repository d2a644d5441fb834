from __future__ import annotations

from pathlib import Path

import tabpad.app as app_mod
import tabpad.main as main_mod


# ----------------------------
# Fakes (Qt)
# ----------------------------

class FakeQApplication:
    org_name: str | None = None
    app_name: str | None = None

    def __init__(self, argv: list[str]) -> None:
        self.argv = list(argv)
        self.exec_called = 0

    @classmethod
    def setOrganizationName(cls, name: str) -> None:
        cls.org_name = name

    @classmethod
    def setApplicationName(cls, name: str) -> None:
        cls.app_name = name

    def exec(self) -> int:
        self.exec_called += 1
        return 0


class FakeWindow:
    def __init__(self) -> None:
        self.shown = False

    def show(self) -> None:
        self.shown = True


class FakeContainer:
    instances: list["FakeContainer"] = []

    def __init__(self, *, config=None) -> None:
        self.config = config
        self.window = FakeWindow()
        self.build_args: dict | None = None
        FakeContainer.instances.append(self)

    def build_main_window(self, *, start_paths=None, app_title: str = "tabpad"):
        self.build_args = {"start_paths": start_paths, "app_title": app_title}
        return self.window


# ----------------------------
# Tests
# ----------------------------

def test_run_app_builds_and_shows_window(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(app_mod, "QApplication", FakeQApplication)
    monkeypatch.setattr(app_mod, "Container", FakeContainer)
    levels: list[str] = []
    monkeypatch.setattr(app_mod, "configure_logging", lambda level: levels.append(level))
    monkeypatch.setattr(
        "tabpad.services.config.ini_config_service.user_config_dir",
        lambda appname, appauthor=None: str(tmp_path / "cfg"),
    )
    FakeContainer.instances.clear()

    rc = app_mod.run_app(["tabpad", "one.txt", "two.txt"])

    assert rc == 0
    assert FakeQApplication.org_name == "tabpad"
    assert FakeQApplication.app_name == "tabpad"
    assert levels == ["WARNING"]

    c = FakeContainer.instances[-1]
    assert c.config is not None
    assert c.build_args == {
        "start_paths": [Path("one.txt"), Path("two.txt")],
        "app_title": "tabpad",
    }
    assert c.window.shown is True


def test_main_delegates_to_run_app(monkeypatch) -> None:
    seen: list[list[str]] = []
    monkeypatch.setattr(main_mod, "run_app", lambda argv: seen.append(list(argv)) or 3)
    monkeypatch.setattr(main_mod.sys, "argv", ["tabpad"])
    assert main_mod.main() == 3
    assert seen == [["tabpad"]]
