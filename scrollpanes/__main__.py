# Copyright (c) 2017-2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Replay scroll panes commands against the in-memory host and print the
windows after each step.

Besides the command names, ``buffer=NAME`` displays buffer NAME in the
selected window and ``cursor=N`` moves its cursor, which simulates the
user working in a pane.
"""

import argparse
import sys

from scrollpanes.commands import run_command, command_names
from scrollpanes.core import Session
from scrollpanes.host import WindowSetHost


def _describe(session):
    if not session.active:
        return 'inactive  %s' % session.host.render()
    hidden_left = session.viewport.first
    hidden_right = len(session.panes) - session.viewport.end
    return '%s<  %s  >%s' % (hidden_left, session.host.render(), hidden_right)


def replay(session, steps, out=None):
    out = out or sys.stdout
    for step in steps:
        if step.startswith('buffer='):
            session.host.switch_buffer(step[len('buffer='):])
        elif step.startswith('cursor='):
            session.host.move_cursor(int(step[len('cursor='):]))
        else:
            session.message('', show_log=False)
            run_command(session, step)
        line = '%-12s %s' % (step, _describe(session))
        if session.last_message:
            line += '    ; %s' % session.last_message
        out.write(line + '\n')


def main(argv=None):
    parser = argparse.ArgumentParser('Replay scroll panes commands')
    parser.add_argument('steps', nargs='*', metavar='STEP',
                        help='One of %s, buffer=NAME or cursor=N'
                        % ', '.join(command_names()))
    parser.add_argument('-n', '--max-visible-panes', type=int, default=3,
                        help='Number of panes visible at a time')
    parser.add_argument('--width', type=int, default=240, help='Width of the screen')
    parser.add_argument('--height', type=int, default=50, help='Height of the screen')
    parser.add_argument('--log', action='store_true', help='Print the message log at exit')
    args = parser.parse_args(argv)

    host = WindowSetHost('scratch', rows=args.height, columns=args.width)
    session = Session(host, max_visible_panes=args.max_visible_panes)

    steps = args.steps
    if not steps or steps[0] != 'enable':
        steps = ['enable'] + steps

    try:
        replay(session, steps)
    except (KeyError, ValueError) as e:
        parser.error(e.args[0])

    if args.log:
        for log_item in session.logger.messages + host.window_set.logger.messages:
            print(log_item)
    return 0


if __name__ == '__main__':
    sys.exit(main())
