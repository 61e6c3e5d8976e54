# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import math

from scrollpanes.logger import Logger
from scrollpanes.windows.window import Window

MIN_WINDOW_HEIGHT = 4
MIN_WINDOW_WIDTH  = 20


class WindowSet(object):
    def __init__(self, rows, columns, initial_buffer=None, logger=None):
        self.logger = logger or Logger()
        self._rows = rows
        self._columns = columns
        self._windows = {}
        self._root = self._init_root(initial_buffer)
        self.select_window(self._root['content'])

    def _root_dimensions(self):
        return (self._rows, self._columns, 0, 0)

    def _init_root(self, initial_buffer):
        dim = self._root_dimensions()
        w = Window(dim, initial_buffer)
        self._windows[id(w)] = {
            'wm_type':    'window',
            'dimensions': dim,
            'content':    w,
            'parent':     None
        }
        return self._windows[id(w)]

    def message(self, msg):
        self.logger.log(msg)

    def _iterate_windows(self, yield_window=True, yield_rsplit=False):
        win_stack = [self._root]
        while win_stack:
            w = win_stack.pop(0)
            if w['wm_type'] == 'window':
                if yield_window:
                    yield w
            else:
                win_stack[0:0] = w['content'] # extend at front
                if yield_rsplit:
                    yield w

    def windows(self):
        """Return all windows, ordered from left to right."""
        return [w['content'] for w in self._iterate_windows()]

    def _neighbouring_window(self, direction):
        rdirection = (direction + 1) % 2
        current = self._selected_window
        while True:
            if current['parent'] is None:
                # Is first/last leaf in tree
                return None
            elif current is current['parent']['content'][rdirection]:
                current = current['parent']['content'][direction]
                break
            current = current['parent']

        while current['wm_type'] != 'window':
            current = current['content'][rdirection]

        return current

    def select_window(self, window):
        """Return window or None if not part of this WindowSet."""
        _window = self._windows.get(id(window))
        if _window:
            self._selected_window = _window
        return _window['content'] if _window else None

    def selected_window(self):
        return self._selected_window['content']

    def _select_neighbour(self, direction):
        neighbour = self._neighbouring_window(direction)
        if neighbour is None:
            return None
        return self.select_window(neighbour['content'])

    def select_left_window(self):
        """
        Select the window left of the selected window.

        Returns the newly selected window, or None if the selected
        window is the leftmost one.
        """
        return self._select_neighbour(0)

    def select_right_window(self):
        """
        Select the window right of the selected window.

        Returns the newly selected window, or None if the selected
        window is the rightmost one.
        """
        return self._select_neighbour(1)

    def _get_horizontal_dimensions(self, parent_dimension, first_size):
        return (
            (parent_dimension[0],
             first_size,
             parent_dimension[2],
             parent_dimension[3]),
            (parent_dimension[0],
             parent_dimension[1] - first_size - 1,
             parent_dimension[2],
             parent_dimension[3] + first_size + 1)
        )

    def _get_horizontal_dimensions_by_ratio(self, parent_dimension, ratio=.5):
        return self._get_horizontal_dimensions(parent_dimension,
                                               int(math.floor(parent_dimension[1] * ratio)))

    def _check_dimension(self, d):
        return d[0] < MIN_WINDOW_HEIGHT or d[1] < MIN_WINDOW_WIDTH

    def split_window_right(self):
        """
        Split the selected window and create a new one to the right of it.

        The new window displays the same buffer as the selected one. The
        selected window stays selected. Returns None if the window is
        too small to be split.
        """
        d1, d2 = self._get_horizontal_dimensions_by_ratio(self._selected_window['dimensions'])
        if self._check_dimension(d1) or self._check_dimension(d2):
            self.message('Can not split. Dimensions too small.')
            return None

        selected = self._selected_window['content']
        new_win = Window(d2, selected.buffer(), selected.cursor)
        w1 = {
            'wm_type':    self._selected_window['wm_type'],
            'dimensions': d1,
            'content':    selected._update_dimensions(d1),
            'parent':     self._selected_window
        }
        w2 = {
            'wm_type':    'window',
            'dimensions': d2,
            'content':    new_win,
            'parent':     self._selected_window
        }
        self._windows[id(w1['content'])] = w1
        self._windows[id(new_win)] = w2

        self._selected_window['wm_type'] = 'rsplit'
        self._selected_window['ratio'] = .5
        self._selected_window['content'] = [w1, w2]
        self.select_window(w1['content'])
        return w2['content']

    def delete_selected_window(self):
        # Do not delete last window
        if self._root is self._selected_window:
            self.message('Can not delete last window.')
            return False

        next_window = (self._neighbouring_window(1) or
                       self._neighbouring_window(0))['content']
        del self._windows[id(self._selected_window['content'])]

        parent = self._selected_window['parent']
        new_parent_content = parent['content'][1] \
                             if parent['content'][0] is self._selected_window else \
                             parent['content'][0]

        parent['wm_type'] = new_parent_content['wm_type']
        parent['content'] = new_parent_content['content']
        if parent['wm_type'] != 'window':
            parent['ratio'] = new_parent_content['ratio']
            parent['content'][0]['parent'] = parent
            parent['content'][1]['parent'] = parent
        else:
            parent.pop('ratio', None)
            self._windows[id(parent['content'])] = parent
        self._resize_window_tree(parent)

        self.select_window(next_window)
        return True

    def delete_all_windows(self):
        self._root = self._selected_window
        self._root['parent'] = None
        self._windows = {id(self._root['content']): self._root}
        self._root['dimensions'] = self._root_dimensions()
        self._resize_window_tree(self._root)

    def _leaf_count(self, window):
        if window['wm_type'] == 'window':
            return 1
        return sum(self._leaf_count(w) for w in window['content'])

    def balance(self):
        """Give every window the same share of the horizontal space."""
        for w in self._iterate_windows(yield_window=False, yield_rsplit=True):
            w['ratio'] = self._leaf_count(w['content'][0]) / self._leaf_count(w)
        self._resize_window_tree(self._root)

    def _resize_window_tree(self, window):
        if window['wm_type'] == 'window':
            window['content']._update_dimensions(window['dimensions'])
        else:
            d1, d2 = self._get_horizontal_dimensions_by_ratio(window['dimensions'],
                                                              window['ratio'])
            window['content'][0]['dimensions'] = d1
            self._resize_window_tree(window['content'][0])
            window['content'][1]['dimensions'] = d2
            self._resize_window_tree(window['content'][1])

    def render(self):
        """Return a one-line textual representation of the windows."""
        return ' | '.join(('*%s*' if w is self.selected_window() else ' %s ')
                          % w.buffer()
                          for w in self.windows())
