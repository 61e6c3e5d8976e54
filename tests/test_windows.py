# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import pytest

from scrollpanes.host import Host, WindowSetHost
from scrollpanes.windows import Window, WindowSet


class TestWindow:
    def test_changing_buffer_resets_cursor(self):
        w = Window((10, 40, 0, 0), 'A', 7)
        w.set_buffer('A')
        assert w.cursor == 7
        w.set_buffer('B')
        assert w.cursor == 0
        w.set_buffer('C', 3)
        assert (w.buffer(), w.cursor) == ('C', 3)


class TestWindowSet:
    def test_split_right_keeps_selection(self):
        ws = WindowSet(50, 240, 'A')
        first = ws.selected_window()
        second = ws.split_window_right()
        assert ws.selected_window() is first
        assert ws.windows() == [first, second]
        assert second.buffer() == 'A'
        assert second.left > first.left

    def test_select_left_and_right(self):
        ws = WindowSet(50, 240, 'A')
        first = ws.selected_window()
        second = ws.split_window_right()
        ws.select_window(second)
        third = ws.split_window_right()
        assert ws.windows() == [first, second, third]

        assert ws.select_right_window() is third
        assert ws.select_right_window() is None
        assert ws.selected_window() is third
        assert ws.select_left_window() is second
        assert ws.select_left_window() is first
        assert ws.select_left_window() is None
        assert ws.selected_window() is first

    def test_split_fails_when_too_small(self):
        ws = WindowSet(50, 30, 'A')
        assert ws.split_window_right() is None
        assert len(ws.windows()) == 1
        assert ws.logger.messages == ['Can not split. Dimensions too small.']

    def test_delete_selected_window(self):
        ws = WindowSet(50, 240, 'A')
        first = ws.selected_window()
        second = ws.split_window_right()
        ws.select_window(second)
        third = ws.split_window_right()
        ws.select_window(second)

        assert ws.delete_selected_window() is True
        assert ws.windows() == [first, third]
        assert ws.selected_window() is third
        assert ws.select_left_window() is first

    def test_can_not_delete_last_window(self):
        ws = WindowSet(50, 240, 'A')
        assert ws.delete_selected_window() is False
        assert len(ws.windows()) == 1

    def test_delete_all_windows(self):
        ws = WindowSet(50, 240, 'A')
        second = ws.split_window_right()
        ws.select_window(second)
        ws.split_window_right()

        ws.delete_all_windows()
        assert ws.windows() == [second]
        assert second.dimensions == (50, 240, 0, 0)

    def test_balance(self):
        ws = WindowSet(50, 241, 'A')
        second = ws.split_window_right()
        ws.select_window(second)
        ws.split_window_right()
        ws.balance()

        widths = [w.columns for w in ws.windows()]
        assert max(widths) - min(widths) <= 1
        assert sum(widths) + 2 == 241

    def test_select_foreign_window(self):
        ws = WindowSet(50, 240, 'A')
        assert ws.select_window(Window((1, 1, 0, 0), 'B')) is None


class TestWindowSetHost:
    def test_host_interface_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Host().get_active_content()

    def test_window_state(self, host):
        handle = host.get_active_window_handle()
        host.set_window_content(handle, 'B')
        host.set_window_cursor_offset(handle, 12)
        assert host.get_active_content() == 'B'
        assert host.get_active_cursor_offset() == 12
        assert host.get_window_content(handle) == 'B'
        assert host.get_window_cursor_offset(handle) == 12

    def test_move_focus_directional(self, host):
        first = host.get_active_window_handle()
        second = host.create_split_window()
        assert host.get_active_window_handle() is first
        host.move_focus_directional('right')
        assert host.get_active_window_handle() is second
        host.move_focus_directional('left')
        assert host.get_active_window_handle() is first
        with pytest.raises(ValueError):
            host.move_focus_directional('up')

    def test_delete_window_keeps_focus(self, host):
        first = host.get_active_window_handle()
        second = host.create_split_window()
        assert host.delete_window(second) is True
        assert host.windows() == [first]
        assert host.get_active_window_handle() is first

    def test_simulated_user_interaction(self):
        host = WindowSetHost('A')
        host.switch_buffer('B')
        host.move_cursor(4)
        assert (host.get_active_content(), host.get_active_cursor_offset()) == ('B', 4)
