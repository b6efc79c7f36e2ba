"""Tests for TkInputMapper edge detection (no display needed)."""

import pytest

pytest.importorskip("tkinter")

from ladybug.ui.input_mapper import TkInputMapper  # noqa: E402

PRESS = "<KeyPress-space>"
RELEASE = "<KeyRelease-space>"


@pytest.fixture
def mapper(fake_root):
    return TkInputMapper(fake_root)


class TestJumpKey:
    def test_press_sets_jump_once(self, mapper, fake_root):
        fake_root.send(PRESS)
        assert mapper.sample().jump_pressed is True
        assert mapper.sample().jump_pressed is False

    def test_repeated_press_without_release(self, mapper, fake_root):
        """Repeat as plain KeyPress events does not re-trigger."""
        fake_root.send(PRESS)
        mapper.sample()
        for _ in range(5):
            fake_root.send(PRESS)
        assert mapper.sample().jump_pressed is False

    def test_x11_style_repeat_does_not_retrigger(self, mapper, fake_root):
        """Held key sending release/press pairs gives a single jump."""
        fake_root.send(PRESS)
        assert mapper.sample().jump_pressed is True

        edges = 0
        for _ in range(10):
            fake_root.send(RELEASE)
            fake_root.send(PRESS)
            fake_root.run_pending()
            edges += mapper.sample().jump_pressed
        assert edges == 0

    def test_real_release_then_press_jumps_again(self, mapper, fake_root):
        fake_root.send(PRESS)
        mapper.sample()
        fake_root.send(RELEASE)
        fake_root.run_pending()
        fake_root.send(PRESS)
        assert mapper.sample().jump_pressed is True


class TestOtherInputs:
    def test_click_sets_jump(self, mapper, fake_root):
        fake_root.send("<ButtonPress-1>")
        assert mapper.sample().jump_pressed is True

    @pytest.mark.parametrize("key", ["<KeyPress-m>", "<KeyPress-M>"])
    def test_m_sets_menu(self, mapper, fake_root, key):
        fake_root.send(key)
        inp = mapper.sample()
        assert inp.menu_pressed is True
        assert inp.jump_pressed is False

    def test_sample_clears_both_edges(self, mapper, fake_root):
        fake_root.send("<ButtonPress-1>")
        fake_root.send("<KeyPress-m>")
        first = mapper.sample()
        assert first.jump_pressed and first.menu_pressed
        second = mapper.sample()
        assert not second.jump_pressed
        assert not second.menu_pressed
