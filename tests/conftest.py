# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import pytest

from scrollpanes import Pane, PaneSequence, Session, Viewport, WindowSetHost


@pytest.fixture
def host():
    return WindowSetHost('A')


@pytest.fixture
def session(host):
    s = Session(host)
    s.enable()
    return s


@pytest.fixture
def make_session(host):
    """
    Create an enabled session showing ``names[first:first + count]``
    with the window of slot ``focus`` selected.
    """
    def _make_session(names, first=0, count=None, focus=0, max_visible_panes=3):
        s = Session(host, max_visible_panes=max_visible_panes)
        s.enable()
        s.panes = PaneSequence(Pane(name, 0) for name in names)
        s.viewport = Viewport(first, count if count is not None else len(names))
        s.reload()
        host.select_window(s.binding[focus])
        return s
    return _make_session