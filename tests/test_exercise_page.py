import pytest

from ui.main_window import MainWindow


@pytest.fixture
def window(qt_app):
    win = MainWindow()
    win.show()
    qt_app.processEvents()
    yield win
    win.close()
    win.deleteLater()
    qt_app.processEvents()


def start_box_breathing(window, qt_app):
    window.preset_page.preset_selected.emit("BoxBreathing")
    qt_app.processEvents()
    window.exercise_page.start_btn.click()
    assert window.controller.is_running
    assert window.controller.is_ticking


def test_preset_choice_opens_exercise_page(window, qt_app):
    window.preset_page.preset_selected.emit("Coffee")
    qt_app.processEvents()

    assert window.stack.currentWidget() is window.exercise_page
    assert window.exercise_page.title_label.text() == "Coffee"
    assert not window.controller.is_running


def test_start_button_shows_countdown(window, qt_app):
    start_box_breathing(window, qt_app)

    page = window.exercise_page
    assert page.phase_label.text() == "Inhale"
    assert page.time_label.text() == "4"
    assert page.start_btn.text() == "Restart"

    window.controller.advance()
    assert page.time_label.text() == "3"


def test_back_button_stops_session(window, qt_app):
    start_box_breathing(window, qt_app)

    window.exercise_page.back_btn.click()
    qt_app.processEvents()

    assert window.stack.currentWidget() is window.preset_page
    assert window.controller.is_idle
    assert not window.controller.is_ticking


def test_switching_pages_stops_session(window, qt_app):
    start_box_breathing(window, qt_app)

    window.stack.setCurrentWidget(window.preset_page)
    qt_app.processEvents()

    assert window.controller.is_idle
    assert not window.controller.is_ticking


def test_closing_window_stops_session(window, qt_app):
    start_box_breathing(window, qt_app)

    window.close()
    qt_app.processEvents()

    assert window.controller.is_idle
    assert not window.controller.is_ticking


def test_minimizing_keeps_session_running(window, qt_app):
    start_box_breathing(window, qt_app)

    window.showMinimized()
    qt_app.processEvents()

    assert window.controller.is_running
    assert window.controller.is_ticking


def test_congrats_after_completion(window, qt_app):
    start_box_breathing(window, qt_app)

    for _ in range(72):
        window.controller.advance()

    page = window.exercise_page
    assert window.controller.is_completed
    assert not page.congrats_label.isHidden()
    assert page.countdown_box.isHidden()
    assert page.start_btn.text() == "Start Exercise"
