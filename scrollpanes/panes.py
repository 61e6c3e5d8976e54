# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Bookkeeping for the sequence of panes and the part of it that is
visible.

A pane is the state of one window as it was last saved: the handle of
the content the window displayed and the cursor position inside of it.
Neither is interpreted here, they are handed back to the host verbatim
when the pane becomes visible again.

The viewport selects a contiguous slice of the pane sequence. Slot
``i`` of the viewport corresponds to index ``first + i`` of the
sequence.
"""

import collections


Pane = collections.namedtuple('Pane', ['content', 'cursor'])


class PaneSequence(object):
    def __init__(self, panes=None):
        self._panes = list(panes or [])

    def __len__(self):
        return len(self._panes)

    def __iter__(self):
        return iter(self._panes)

    def __getitem__(self, index):
        return self._panes[index]

    def __setitem__(self, index, pane):
        self._panes[index] = pane

    def __repr__(self):
        return '#<panes %s>' % self._panes

    def in_range(self, index):
        return 0 <= index < len(self._panes)

    def insert(self, index, pane):
        self._panes.insert(index, pane)

    def pop(self, index):
        return self._panes.pop(index)

    def swap(self, i, j):
        """
        Exchange the panes at ``i`` and ``j``.

        Returns False and leaves the sequence untouched if either
        index is out of range.
        """
        if not (self.in_range(i) and self.in_range(j)):
            return False
        self._panes[i], self._panes[j] = self._panes[j], self._panes[i]
        return True


class Viewport(object):
    def __init__(self, first=0, count=1):
        self.first = first
        self.count = count

    def __repr__(self):
        return '#<viewport first=%s count=%s>' % (self.first, self.count)

    def __eq__(self, other):
        return (isinstance(other, Viewport) and
                (self.first, self.count) == (other.first, other.count))

    @property
    def end(self):
        """Index one past the last visible pane."""
        return self.first + self.count

    @property
    def last_slot(self):
        return self.count - 1

    def slots(self):
        return range(self.count)

    def index(self, slot):
        return self.first + slot

    def hidden_left(self):
        return self.first > 0

    def hidden_right(self, length):
        return self.end < length

    def scroll(self, step):
        self.first += step

    def grow(self):
        self.count += 1

    def shrink(self):
        self.count -= 1

    def is_valid(self, length, max_count=None):
        return (0 <= self.first and
                1 <= self.count and
                self.end <= length and
                (max_count is None or self.count <= max_count))
