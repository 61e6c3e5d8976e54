# Copyright (c) 2017-2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module provides the in-memory windows of the reference host.

A WindowSet contains a set of windows that are displayed side by side.
It always has at least one window. New windows are created by splitting
an existing window, and windows are deleted by merging two neighbouring
windows together. WindowSet stores the layout of its windows in a tree
structure, where each leaf node represents a window and the inner nodes
represent splits.
"""

from scrollpanes.windows.window import Window
from scrollpanes.windows.window_set import WindowSet
