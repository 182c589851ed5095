import pytest

pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)

from PySide6.QtGui import QGuiApplication, QImage

from instafilter.core.filter_kinds import FilterKind
from instafilter.core.share import build_share_payload
from instafilter.gui.ui.controllers.share_controller import ShareController
from instafilter.gui.ui.image_utils import pil_to_qimage
from instafilter.gui.ui.widgets.filter_picker import FilterPickerDialog
from instafilter.gui.ui.widgets.image_viewer import PLACEHOLDER_TEXT, ImageViewer
from instafilter.gui.ui.widgets.intensity_slider import IntensitySlider


def test_slider_clamps_and_emits(qtbot) -> None:
    slider = IntensitySlider(initial=0.5)
    qtbot.addWidget(slider)

    with qtbot.waitSignal(slider.valueChanged) as blocker:
        slider.setValue(1.7)
    assert blocker.args == [1.0]
    assert slider.value() == 1.0

    with qtbot.assertNotEmitted(slider.valueChanged):
        slider.setValue(0.2, emit=False)
    assert slider.value() == pytest.approx(0.2)


def test_filter_picker_lists_every_filter(qtbot) -> None:
    dialog = FilterPickerDialog(FilterKind.SEPIA_TONE)
    qtbot.addWidget(dialog)

    assert dialog.windowTitle() == "Select a filter"
    assert dialog.button_for(FilterKind.GAUSSIAN_BLUR).text() == "Gaussian Blur"
    assert dialog.button_for(FilterKind.SEPIA_TONE).isDefault()

    dialog.button_for(FilterKind.CRYSTALLIZE).click()
    assert dialog.selected() is FilterKind.CRYSTALLIZE


def test_viewer_placeholder_and_image(qtbot, make_image) -> None:
    viewer = ImageViewer()
    qtbot.addWidget(viewer)
    assert viewer._label.text() == PLACEHOLDER_TEXT

    viewer.set_image(pil_to_qimage(make_image()))
    assert viewer.has_image()
    assert viewer.pixmap().width() == 48

    viewer.set_image(QImage())
    assert not viewer.has_image()
    assert viewer._label.text() == PLACEHOLDER_TEXT


def test_pil_to_qimage_keeps_pixels(qapp, make_image) -> None:
    source = make_image(4, 3)
    image = pil_to_qimage(source)

    assert image.format() == QImage.Format.Format_ARGB32
    colour = image.pixelColor(3, 2)
    assert (colour.red(), colour.green(), colour.blue()) == source.getpixel((3, 2))


def test_share_controller_copies_title_and_image(qtbot, make_image) -> None:
    share = ShareController()
    payload = build_share_payload(make_image(6, 6))

    with qtbot.waitSignal(share.shared) as blocker:
        assert share.copy_to_clipboard(payload)
    assert blocker.args == ["clipboard"]
    assert QGuiApplication.clipboard().text() == "Instafilter processed image"
    assert share.copy_to_clipboard(None) is False
