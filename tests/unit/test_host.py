"""Tests for the host adapter that drives motions against an editor."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from micromotion.editing import (
    CursorHost,
    LineSource,
    Position,
    TextBuffer,
    apply_motion,
    apply_word_left,
    apply_word_right,
)


class TestTextBuffer:
    """Tests for the in-memory host."""

    def test_satisfies_host_protocols(self) -> None:
        buffer = TextBuffer("abc")
        assert isinstance(buffer, LineSource)
        assert isinstance(buffer, CursorHost)

    def test_lines(self) -> None:
        buffer = TextBuffer("foo\nbar\n")
        assert buffer.get_line_count() == 3
        assert buffer.get_line_text(1) == "bar"
        assert buffer.get_line_text(2) == ""
        assert buffer.text == "foo\nbar\n"

    def test_empty_text_has_one_line(self) -> None:
        buffer = TextBuffer()
        assert buffer.get_line_count() == 1
        assert buffer.get_cursor() == (0, 0)

    def test_set_cursor_clamps(self) -> None:
        buffer = TextBuffer("foo\nlonger line")
        buffer.set_cursor(5, 99)
        assert buffer.get_cursor() == (1, 11)
        buffer.set_cursor(-1, -3)
        assert buffer.get_cursor() == (0, 0)

    def test_initial_cursor(self) -> None:
        assert TextBuffer("foo bar", cursor=(0, 4)).get_cursor() == (0, 4)


class TestApplyMotions:
    """Tests for reading, computing and writing back the cursor."""

    def test_word_right_walks_the_buffer(self) -> None:
        buffer = TextBuffer("foo bar\nbaz")
        stops = []
        for _ in range(5):
            apply_word_right(buffer)
            stops.append(buffer.get_cursor())
        assert stops == [(0, 3), (0, 7), (1, 0), (1, 3), (1, 3)]

    def test_word_left_walks_the_buffer(self) -> None:
        buffer = TextBuffer("foo bar\nbaz", cursor=(1, 3))
        stops = []
        for _ in range(5):
            apply_word_left(buffer)
            stops.append(buffer.get_cursor())
        assert stops == [(1, 0), (0, 7), (0, 4), (0, 0), (0, 0)]

    def test_result_reports_start_and_target(self) -> None:
        buffer = TextBuffer("abc\ndef", cursor=(0, 3))
        result = apply_word_right(buffer)
        assert result.start == Position(0, 3)
        assert result.position == Position(1, 0)
        assert result.crossed_line

    def test_empty_lines_are_crossed_one_at_a_time(self) -> None:
        buffer = TextBuffer("a\n\n\nb", cursor=(0, 1))
        apply_word_right(buffer)
        assert buffer.get_cursor() == (1, 0)
        apply_word_right(buffer)
        assert buffer.get_cursor() == (2, 0)
        apply_word_left(buffer)
        assert buffer.get_cursor() == (1, 0)

    def test_text_is_not_modified(self) -> None:
        text = "x = y->z;  // done\n\tnext"
        buffer = TextBuffer(text)
        for _ in range(12):
            apply_word_right(buffer)
        for _ in range(12):
            apply_word_left(buffer)
        assert buffer.text == text
        assert buffer.get_cursor() == (0, 0)

    def test_host_collaborators_are_used(self) -> None:
        host = MagicMock()
        host.get_cursor.return_value = (1, 0)
        host.get_line_text.side_effect = ["second", "first line"]
        host.get_line_count.return_value = 2

        result = apply_word_left(host)

        host.set_cursor.assert_called_once_with(0, 10)
        assert result.position == Position(0, 10)
        assert [c.args for c in host.get_line_text.call_args_list] == [(1,), (0,)]

    def test_apply_motion_by_name(self) -> None:
        buffer = TextBuffer("foo.bar")
        apply_motion(buffer, "word_right")
        assert buffer.get_cursor() == (0, 3)
        apply_motion(buffer, "word_left")
        assert buffer.get_cursor() == (0, 0)

    def test_apply_motion_unknown_name(self) -> None:
        with pytest.raises(KeyError):
            apply_motion(TextBuffer("abc"), "paragraph_down")
