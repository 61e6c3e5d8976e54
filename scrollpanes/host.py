# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module defines the interface between a scroll panes session and
the environment that actually owns the windows on screen.

Window handles, content handles and cursor offsets are opaque to the
session. It only stores them and hands them back to the host. A host
integration subclasses Host and implements all of its methods.

WindowSetHost is a complete host that keeps its windows in memory,
laid out side by side in a WindowSet. It is used for testing and by
the demo command line.
"""

from scrollpanes.util import forward
from scrollpanes.windows import WindowSet

LEFT = 'left'
RIGHT = 'right'
DIRECTIONS = (LEFT, RIGHT)


class Host(object):
    def get_active_window_handle(self):
        """Return the handle of the window that currently has focus."""
        raise NotImplementedError()

    def get_active_content(self):
        raise NotImplementedError()

    def get_active_cursor_offset(self):
        raise NotImplementedError()

    def get_window_content(self, handle):
        raise NotImplementedError()

    def get_window_cursor_offset(self, handle):
        raise NotImplementedError()

    def set_window_content(self, handle, content):
        raise NotImplementedError()

    def set_window_cursor_offset(self, handle, offset):
        raise NotImplementedError()

    def select_window(self, handle):
        """Give focus to the window identified by ``handle``."""
        raise NotImplementedError()

    def create_split_window(self):
        """
        Split the active window, creating a new window right of it.

        The active window keeps the focus. Return the handle of the new
        window, or None if no window could be created.
        """
        raise NotImplementedError()

    def delete_window(self, handle):
        raise NotImplementedError()

    def close_all_windows_except_active(self):
        raise NotImplementedError()

    def move_focus_directional(self, direction):
        """
        Move focus to the window next to the active one on screen.

        :param direction: Either ``'left'`` or ``'right'``
        """
        raise NotImplementedError()

    def rebalance_window_sizes(self):
        pass


@forward(lambda self: self.window_set,
         ['selected_window',
          'select_window',
          'windows',
          'render'],
         WindowSet)
class WindowSetHost(Host):
    """
    Host that manages an in-memory WindowSet.

    Window handles are the Window objects of the window set, contents
    are the buffers they display.
    """

    def __init__(self, initial_buffer=None, rows=50, columns=240, logger=None):
        self.window_set = WindowSet(rows, columns, initial_buffer, logger=logger)

    def get_active_window_handle(self):
        return self.selected_window()

    def get_active_content(self):
        return self.selected_window().buffer()

    def get_active_cursor_offset(self):
        return self.selected_window().cursor

    def get_window_content(self, handle):
        return handle.buffer()

    def get_window_cursor_offset(self, handle):
        return handle.cursor

    def set_window_content(self, handle, content):
        handle.set_buffer(content)

    def set_window_cursor_offset(self, handle, offset):
        handle.set_cursor(offset)

    def create_split_window(self):
        return self.window_set.split_window_right()

    def delete_window(self, handle):
        active = self.selected_window()
        if self.window_set.select_window(handle) is None:
            return False
        deleted = self.window_set.delete_selected_window()
        if active is not handle:
            self.window_set.select_window(active)
        return deleted

    def close_all_windows_except_active(self):
        self.window_set.delete_all_windows()

    def move_focus_directional(self, direction):
        if direction not in DIRECTIONS:
            raise ValueError('Unknown direction: %s' % direction)
        if direction == LEFT:
            return self.window_set.select_left_window()
        return self.window_set.select_right_window()

    def rebalance_window_sizes(self):
        self.window_set.balance()

    # Simulated user interaction

    def switch_buffer(self, buffer_object, cursor=None):
        """Display ``buffer_object`` in the selected window."""
        self.selected_window().set_buffer(buffer_object, cursor)

    def move_cursor(self, cursor):
        self.selected_window().set_cursor(cursor)
