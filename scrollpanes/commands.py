# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
The commands a host exposes to the user, by name.

A host binds its keys to these names and runs them with run_command.
Failures that concern the user are shown as messages of the session
instead of being raised.
"""

from scrollpanes.core import ScrollPanesError

COMMANDS = {
    'open':       lambda session: session.open(),
    'close':      lambda session: session.close(),
    'go-left':    lambda session: session.go_left(),
    'go-right':   lambda session: session.go_right(),
    'move-left':  lambda session: session.move_left(),
    'move-right': lambda session: session.move_right(),
    'reload':     lambda session: session.reload(),
    'enable':     lambda session: session.enable(),
    'disable':    lambda session: session.disable(),
    'toggle':     lambda session: session.toggle(),
}


def command_names():
    return sorted(COMMANDS)


def run_command(session, name):
    """
    Run the command ``name`` in ``session``.

    Returns the result of the command, or None if it failed. Errors of
    the scroll panes mode are displayed as message, any other exception
    is logged with its traceback.

    :raises KeyError: if there is no command called ``name``
    """
    if name not in COMMANDS:
        raise KeyError('Unknown command: %s' % name)

    try:
        return COMMANDS[name](session)
    except ScrollPanesError as e:
        session.message('%s' % e)
    except Exception:
        session.exception()
    return None
