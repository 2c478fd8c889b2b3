"""Tests for terminal rendering."""

import io

import numpy as np
import pytest
from rich.console import Console

from vpoker.game.cards import parse_cards
from vpoker.game.evaluator import HandCategory
from vpoker.viz import hand as hand_module
from vpoker.viz import HandDisplay, display_hand, paytable_rows


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, record=True, color_system=None)


class TestPaytable:
    def test_rows(self):
        rows = paytable_rows()
        assert rows[0] == ["ROYAL FLUSH", "250", "500", "750", "1000", "4000"]
        assert rows[-1] == ["JACKS OR BETTER", "1", "2", "3", "4", "5"]
        assert len(rows) == 9

    def test_rendered(self, console):
        display = HandDisplay(console)
        console.print(display.paytable(bet=3))
        text = console.export_text()
        assert "ROYAL FLUSH" in text
        assert "4000" in text
        assert "BET 3" in text


class TestHandDisplay:
    def test_cards_and_holds(self, console):
        display = HandDisplay(console)
        console.print(display.hand(parse_cards("As Kd 7h 2c Ts"), [True, False, False, False, True]))
        text = console.export_text()
        assert "A♠" in text
        assert "K♦" in text
        assert text.count("HELD") == 2

    def test_face_down(self, console):
        display = HandDisplay(console)
        console.print(display.hand([None] * 5))
        assert "##" in console.export_text()

    def test_session_status(self, console, make_session):
        session = make_session("Ts Js Qs Ks As")
        display = HandDisplay(console)
        session.bet_max()
        for i in range(5):
            session.toggle_hold(i)
        session.draw()
        display.display(session)
        text = console.export_text()
        assert "Credits: 4095" in text
        assert "WIN 4000" in text
        assert "ROYAL FLUSH" in text

    def test_new_session(self, console, make_session):
        HandDisplay(console).display(make_session())
        text = console.export_text()
        assert "Credits: 100" in text
        assert "BET 0" in text

    def test_display_hand(self, console):
        display_hand(parse_cards("2c 3c 4c 5c 6c"), console)
        assert "6♣" in console.export_text()


class TestPlotFrequencies:
    def test_without_matplotlib(self, monkeypatch, tmp_path):
        monkeypatch.setattr(hand_module, "HAS_MATPLOTLIB", False)
        target = tmp_path / "freq.png"
        frequencies = np.full(len(HandCategory), 0.1)
        assert hand_module.plot_frequencies(frequencies, save_path=str(target)) is False
        assert not target.exists()
