# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Scroll panes arrange any number of panes side by side, of which only a
few are shown on screen at a time.

Each pane remembers the content it displays and the cursor position in
that content. The panes that are visible are displayed in windows that
are provided by a host, see scrollpanes.host. Moving the focus past the
leftmost or rightmost window scrolls the hidden panes into view.
"""

from scrollpanes.core import \
    Session, \
    ScrollPanesError, InactiveModeError, InconsistentBindingError, ConfigurationError
from scrollpanes.commands import run_command, command_names, COMMANDS
from scrollpanes.host import Host, WindowSetHost
from scrollpanes.panes import Pane, PaneSequence, Viewport

__all__ = [
    'Session',
    'ScrollPanesError',
    'InactiveModeError',
    'InconsistentBindingError',
    'ConfigurationError',

    'run_command',
    'command_names',
    'COMMANDS',

    'Host',
    'WindowSetHost',

    'Pane',
    'PaneSequence',
    'Viewport',
]
