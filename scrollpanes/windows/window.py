# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class Window(object):
    """
    A window of the reference host.

    The window displays a buffer, which may be any object, and keeps its
    own cursor position within that buffer. Dimensions are given as
    ``(rows, columns, top, left)``.
    """

    def __init__(self, dimensions, displayed_buffer, cursor=0):
        self._buffer = None
        self._cursor = 0
        self._update_dimensions(dimensions)
        self.set_buffer(displayed_buffer, cursor)

    @property
    def columns(self):
        return self.dimensions[1]

    @property
    def left(self):
        return self.dimensions[3]

    def _update_dimensions(self, dimensions):
        self.dimensions = dimensions
        return self

    def set_buffer(self, displayed_buffer, cursor=None):
        """
        Display ``displayed_buffer`` in this window.

        The cursor is reset to the start of the buffer when the buffer
        changes and no cursor is given.
        """
        if displayed_buffer != self._buffer and cursor is None:
            cursor = 0
        self._buffer = displayed_buffer
        if cursor is not None:
            self._cursor = cursor

    def buffer(self):
        return self._buffer

    @property
    def cursor(self):
        return self._cursor

    def set_cursor(self, cursor):
        self._cursor = cursor

    def __str__(self):
        return ('#<window "%s" cursor=%s dimensions=%s>'
                % (self._buffer, self._cursor, str(self.dimensions)))
