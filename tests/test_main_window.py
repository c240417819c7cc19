from smartconverter.app.state import Store
from smartconverter.app.ui.main_window import CATEGORY_GLYPHS, MainWindow


def test_typing_updates_every_card(qapp, scheduler, clipboard):
    win = MainWindow(Store(clipboard=clipboard.append, schedule=scheduler))
    assert win.cards["celsius_to_fahrenheit"].lbl_result.text() == "0"
    assert len(win.cards) == 9

    win.input.setText("100")
    assert win.store.raw_input == "100"
    assert win.cards["celsius_to_fahrenheit"].lbl_result.text() == "212"
    assert win.cards["fahrenheit_to_celsius"].lbl_result.text() == "37.78"
    assert win.cards["kg_to_lbs"].lbl_input.text() == "100"
    assert win.hint.isHidden()


def test_clicking_a_card_copies_its_result(qapp, scheduler, clipboard):
    win = MainWindow(Store(clipboard=clipboard.append, schedule=scheduler))
    win.input.setText("1")
    win.cards["miles_to_km"].click()
    assert clipboard == ["1.61"]
    assert win.store.highlighted_id == "miles_to_km"


def test_category_pills_draw_their_icons(qapp, scheduler, clipboard):
    win = MainWindow(Store(clipboard=clipboard.append, schedule=scheduler))
    assert list(win.category_icons) == ["Temperature", "Length", "Weight", "Speed"]
    assert win.category_icons["Temperature"].text() == CATEGORY_GLYPHS["thermometer.medium"]
    assert all(icon.text() for icon in win.category_icons.values())
