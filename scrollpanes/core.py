# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import functools
import sys
import traceback

from scrollpanes.host import LEFT, RIGHT
from scrollpanes.logger import Logger
from scrollpanes.panes import Pane, PaneSequence, Viewport
from scrollpanes.util import deep_get, deep_put

__all__ = ['Session',
           'ScrollPanesError', 'InactiveModeError',
           'InconsistentBindingError', 'ConfigurationError']

DEFAULT_MAX_VISIBLE_PANES = 3

MAX_VISIBLE_PANES = ['scroll-panes', 'max-visible-panes']
MESSAGE_HOOK      = ['scroll-panes', 'message-hook']
REDRAW_HOOK       = ['scroll-panes', 'redraw-hook']
ENABLE_HOOK       = ['scroll-panes', 'enable-hook']
DISABLE_HOOK      = ['scroll-panes', 'disable-hook']


class ScrollPanesError(Exception):
    pass


class InactiveModeError(ScrollPanesError):
    def __init__(self, operation):
        super(InactiveModeError, self).__init__(
            'Scroll panes mode is not active, can not %s.' % operation)
        self.operation = operation


class InconsistentBindingError(ScrollPanesError):
    pass


class ConfigurationError(ScrollPanesError):
    pass


def requires_active(fn):
    """Decorator for session operations that need the mode enabled."""
    @functools.wraps(fn)
    def _fn(self, *args, **kwargs):
        if not self.active:
            raise InactiveModeError(fn.__name__.replace('_', '-'))
        return fn(self, *args, **kwargs)
    return _fn


class Session(object):
    """
    The state of one scroll panes workspace.

    A session maps a sequence of panes onto the windows of ``host``.
    Only ``viewport.count`` panes, starting at ``viewport.first``, are
    visible at a time, one per window in ``binding``. All operations
    save the state of the visible windows before they change anything,
    and redraw the windows before they return.
    """

    def __init__(self, host, max_visible_panes=DEFAULT_MAX_VISIBLE_PANES):
        self.host = host
        self.logger = Logger()
        self.panes = PaneSequence()
        self.viewport = Viewport()
        self.binding = []
        self.active = False
        self._last_message = ''
        self._init_state(max_visible_panes)

    def _init_state(self, max_visible_panes):
        self._state = {}
        self.def_variable(MAX_VISIBLE_PANES, max_visible_panes)
        self.def_hook(MESSAGE_HOOK)
        self.def_hook(REDRAW_HOOK)
        self.def_hook(ENABLE_HOOK)
        self.def_hook(DISABLE_HOOK)

    # Variables and hooks

    def get_variable(self, path):
        return deep_get(self._state, path, return_none=False)

    def def_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=True)

    def set_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=False)

    def def_hook(self, path):
        self.def_variable(path, [])

    def add_hook(self, path, fn):
        hooks = self.get_variable(path)
        if fn not in hooks:
            hooks.append(fn)

    def remove_hook(self, path, fn):
        self.get_variable(path).remove(fn)

    def run_hook(self, path, *args, **kwargs):
        for hook in list(self.get_variable(path)):
            hook(*args, **kwargs)

    @property
    def max_visible_panes(self):
        value = self.get_variable(MAX_VISIBLE_PANES)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationError('max-visible-panes must be a positive integer, got %r.'
                                     % (value,))
        return value

    # Messages

    @property
    def last_message(self):
        return self._last_message

    def message(self, msg, show_log=True, log_message=None):
        """
        Display a message in the echo area and log it.

        :param msg: The message to be displayed
        :param show_log: Set to False, to avoid appending the message to the log
        :param log_message: Provide an alternative text for appending to the log
        """
        self._last_message = msg
        if log_message:
            self.logger.log(log_message)
        elif show_log:
            self.logger.log(msg)
        self.run_hook(MESSAGE_HOOK, msg)

    def exception(self):
        """
        Call to log the last thrown exception.
        """
        exc_type, exc_value, exc_tb = sys.exc_info()
        self.message(traceback.format_exception_only(exc_type, exc_value)[-1].strip(),
                     log_message=traceback.format_exc())

    # Focus

    @requires_active
    def active_slot(self):
        handle = self.host.get_active_window_handle()
        for slot, bound in enumerate(self.binding):
            if bound is handle:
                return slot
        raise InconsistentBindingError(
            'The selected window is not a scroll panes window, use reload.')

    def active_index(self):
        return self.viewport.index(self.active_slot())

    def _select_slot(self, slot):
        self.host.select_window(self.binding[slot])

    # Snapshot, save and redraw

    def snapshot_current(self):
        return Pane(self.host.get_active_content(),
                    self.host.get_active_cursor_offset())

    def save_visible(self):
        for slot in self.viewport.slots():
            handle = self.binding[slot]
            self.panes[self.viewport.index(slot)] = Pane(
                self.host.get_window_content(handle),
                self.host.get_window_cursor_offset(handle))

    def insert_after_visible_region(self, pane, index=None):
        """
        Insert ``pane`` right after the last visible pane.

        Returns the index of the inserted pane.
        """
        if index is None:
            index = self.viewport.end
        index = min(index, len(self.panes))
        self.panes.insert(index, pane)
        return index

    def redraw(self):
        for slot in self.viewport.slots():
            pane = self.panes[self.viewport.index(slot)]
            handle = self.binding[slot]
            self.host.set_window_content(handle, pane.content)
            self.host.set_window_cursor_offset(handle, pane.cursor)
        self.run_hook(REDRAW_HOOK, self)

    def visible_panes(self):
        return [self.panes[self.viewport.index(slot)] for slot in self.viewport.slots()]

    def check_invariants(self):
        """Return True if viewport, binding and panes agree."""
        return (self.viewport.is_valid(len(self.panes)) and
                len(self.binding) == self.viewport.count)

    # Mode lifecycle

    def enable(self):
        if self.active:
            self.message('Scroll panes mode is already active.')
            return False

        self.host.close_all_windows_except_active()
        self.binding = [self.host.get_active_window_handle()]
        self.panes = PaneSequence([self.snapshot_current()])
        self.viewport = Viewport(0, 1)
        self.active = True
        self.run_hook(ENABLE_HOOK, self)
        self.redraw()
        return True

    @requires_active
    def disable(self):
        self.save_visible()
        self.panes = PaneSequence()
        self.viewport = Viewport()
        self.binding = []
        self.active = False
        self.run_hook(DISABLE_HOOK, self)
        return True

    def toggle(self):
        return self.disable() if self.active else self.enable()

    # Navigation

    def _go(self, direction):
        self.save_visible()
        slot = self.active_slot()
        moved = True
        if direction == LEFT:
            at_edge = slot == 0
            hidden = self.viewport.hidden_left()
            step = -1
        else:
            at_edge = slot == self.viewport.last_slot
            hidden = self.viewport.hidden_right(len(self.panes))
            step = 1

        if at_edge and hidden:
            self.viewport.scroll(step)
        elif not at_edge:
            self.host.move_focus_directional(direction)
        else:
            self.message('Beginning of panes.' if direction == LEFT else 'End of panes.')
            moved = False
        self.redraw()
        return moved

    @requires_active
    def go_left(self):
        """
        Focus the pane left of the current one.

        Scrolls the viewport if the leftmost window has focus.
        """
        return self._go(LEFT)

    @requires_active
    def go_right(self):
        """
        Focus the pane right of the current one.

        Scrolls the viewport if the rightmost window has focus.
        """
        return self._go(RIGHT)

    # Reordering

    def _move(self, direction):
        self.save_visible()
        index = self.active_index()
        neighbour = index - 1 if direction == LEFT else index + 1
        if not self.panes.swap(index, neighbour):
            self.message('Can not move pane %s, it is the %s pane.'
                         % (direction, 'first' if direction == LEFT else 'last'))
            self.redraw()
            return False
        self.redraw()
        self._go(direction)
        return True

    @requires_active
    def move_left(self):
        """Exchange the current pane with its left neighbour."""
        return self._move(LEFT)

    @requires_active
    def move_right(self):
        """Exchange the current pane with its right neighbour."""
        return self._move(RIGHT)

    # Opening, closing and reloading

    def _split_rightmost(self):
        self._select_slot(-1)
        handle = self.host.create_split_window()
        if handle is not None:
            self.binding.append(handle)
            self.host.rebalance_window_sizes()
        return handle

    @requires_active
    def open(self):
        """
        Open a new pane showing the current content right of the
        visible panes.

        The viewport grows until it holds ``max-visible-panes`` panes.
        After that, opening a pane from the rightmost window scrolls the
        viewport instead.
        """
        max_visible = self.max_visible_panes
        self.save_visible()
        new_pane = self.snapshot_current()
        slot = self.active_slot()
        insert_at = self.viewport.end

        if slot == self.viewport.last_slot and self.viewport.count >= max_visible:
            self.viewport.scroll(1)
        elif self.viewport.count < max_visible:
            if self._split_rightmost() is not None:
                self.viewport.grow()
            else:
                self.message('Can not open another window for the new pane.')

        self.insert_after_visible_region(new_pane, insert_at)
        self.redraw()
        self._select_slot(-1)
        return True

    @requires_active
    def close(self):
        """
        Remove the current pane.

        Hidden panes move into view to fill the gap. If there are none,
        the rightmost window is deleted.
        """
        self.save_visible()
        slot = self.active_slot()
        if len(self.panes) == 1:
            self.message('Can not close the last pane.')
            self.redraw()
            return False

        self.panes.pop(self.viewport.index(slot))
        if len(self.panes) >= self.viewport.count:
            if self.viewport.end > len(self.panes):
                self.viewport.scroll(-1)
        else:
            handle = self.binding.pop()
            self.viewport.shrink()
            self.host.delete_window(handle)
            self.host.rebalance_window_sizes()
            slot = min(slot, self.viewport.last_slot)
        self.redraw()
        self._select_slot(slot)
        return True

    @requires_active
    def reload(self):
        """
        Recreate the windows of the viewport.

        Use this if windows were closed or rearranged by other means.
        The panes and the viewport stay as they are. If the host can not
        provide enough windows, the viewport is reduced to the windows
        that could be created before InconsistentBindingError is raised.
        """
        handle = self.host.get_active_window_handle()
        slot = 0
        for i, bound in enumerate(self.binding):
            if bound is handle:
                slot = i

        self.host.close_all_windows_except_active()
        self.binding = [self.host.get_active_window_handle()]
        count = self.viewport.count
        while len(self.binding) < count:
            if self._split_rightmost() is None:
                break
        self.host.rebalance_window_sizes()

        if len(self.binding) < count:
            self.viewport.count = len(self.binding)
        self.redraw()
        self._select_slot(min(slot, self.viewport.last_slot))
        if self.viewport.count < count:
            raise InconsistentBindingError(
                'Could not create %s windows, showing %s panes.'
                % (count, self.viewport.count))
        return True
