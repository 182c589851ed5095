from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)

from PySide6.QtCore import QThreadPool

from instafilter.core.filter_kinds import FilterKind
from instafilter.core.usage import UsageCounter
from instafilter.gui.ui import main_window as main_window_module
from instafilter.gui.ui.controllers.filter_controller import FilterController
from instafilter.gui.ui.main_window import MainWindow
from instafilter.gui.ui.widgets import dialogs


@pytest.fixture
def window(qtbot):
    pool = QThreadPool()
    controller = FilterController(usage=UsageCounter(), thread_pool=pool)
    window = MainWindow(controller)
    qtbot.addWidget(window)
    yield window
    pool.waitForDone(5000)


def _open(qtbot, window: MainWindow, path: Path) -> None:
    with qtbot.waitSignal(window._controller.outputChanged, timeout=5000):
        window.open_path(path)


def test_share_hidden_until_output_exists(qtbot, window, tmp_path: Path, png_bytes) -> None:
    assert window.share_button.isHidden()
    assert not window.viewer.has_image()

    path = tmp_path / "photo.png"
    path.write_bytes(png_bytes)
    _open(qtbot, window, path)

    assert not window.share_button.isHidden()
    assert window.viewer.has_image()


def test_cancelled_import_loads_nothing(qtbot, window, monkeypatch) -> None:
    monkeypatch.setattr(dialogs, "select_image_file", lambda *_args, **_kwargs: None)

    with qtbot.assertNotEmitted(window._controller.loadingChanged):
        window.import_photo()
    assert window._controller.session.selection_token == 0


def test_clicking_viewer_opens_picker(qtbot, window, monkeypatch, tmp_path: Path, png_bytes) -> None:
    path = tmp_path / "photo.png"
    path.write_bytes(png_bytes)
    monkeypatch.setattr(dialogs, "select_image_file", lambda *_args, **_kwargs: path)

    with qtbot.waitSignal(window._controller.outputChanged, timeout=5000):
        window.viewer.clicked.emit()


def test_slider_drives_intensity(window) -> None:
    window.slider.setValue(0.8)
    assert window._controller.intensity() == pytest.approx(0.8)


def test_choose_filter_and_review_prompt(window, monkeypatch) -> None:
    prompts: list[object] = []
    monkeypatch.setattr(dialogs, "show_review_prompt", lambda parent: prompts.append(parent))
    choices = iter([FilterKind.VIGNETTE, None, FilterKind.EDGES, FilterKind.PIXELLATE])
    monkeypatch.setattr(main_window_module, "pick_filter", lambda *_args: next(choices))

    window.choose_filter()
    assert window._filter_label.text() == "Vignette"
    window.choose_filter()  # cancelled, not counted
    window.choose_filter()
    assert prompts == []
    window.choose_filter()

    assert window._controller.session.usage.value == 3
    assert prompts == [window]
    assert window._filter_label.text() == "Pixellate"


def test_save_as_writes_png(qtbot, window, monkeypatch, tmp_path: Path, png_bytes) -> None:
    source = tmp_path / "photo.png"
    source.write_bytes(png_bytes)
    _open(qtbot, window, source)

    target = tmp_path / "export" / "out.png"
    monkeypatch.setattr(dialogs, "ask_save_image_path", lambda *_args: target)
    window.save_image_as()

    assert target.read_bytes().startswith(b"\x89PNG")
