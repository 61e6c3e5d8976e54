# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import io

import pytest

from scrollpanes import Session, WindowSetHost, run_command, command_names
from scrollpanes.__main__ import main, replay


class TestRunCommand:
    def test_command_names(self):
        assert command_names() == ['close', 'disable', 'enable', 'go-left', 'go-right',
                                   'move-left', 'move-right', 'open', 'reload', 'toggle']

    def test_runs_operation(self, session):
        assert run_command(session, 'open') is True
        assert session.viewport.count == 2
        assert run_command(session, 'go-left') is True
        assert session.active_slot() == 0

    def test_inactive_mode_is_reported(self, host):
        session = Session(host)
        assert run_command(session, 'go-right') is None
        assert session.last_message == 'Scroll panes mode is not active, can not go-right.'
        assert session.logger.messages == [session.last_message]

    def test_boundary_is_reported(self, session):
        assert run_command(session, 'move-right') is False
        assert session.last_message == 'Can not move pane right, it is the last pane.'

    def test_unexpected_errors_are_logged(self, session, monkeypatch):
        def _fail():
            raise RuntimeError('boom')
        monkeypatch.setattr(session.host, 'create_split_window', _fail)

        assert run_command(session, 'open') is None
        assert session.last_message == 'RuntimeError: boom'
        assert 'Traceback' in session.logger.messages[-1]

    def test_unknown_command(self, session):
        with pytest.raises(KeyError):
            run_command(session, 'move-to-next')


class TestDemo:
    def test_replays_steps(self, capsys):
        assert main(['open', 'buffer=B', 'cursor=4', 'go-left']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 5
        assert lines[0].startswith('enable')
        assert '*scratch*' in lines[0]
        assert lines[2].split()[0] == 'buffer=B'
        assert '*B*' in lines[2]
        assert lines[4].split()[0] == 'go-left'
        assert '*scratch*' in lines[4]

    def test_reports_boundaries(self, capsys):
        main(['go-left'])
        out = capsys.readouterr().out
        assert 'Beginning of panes.' in out

    def test_message_log(self, capsys):
        main(['-n', '1', 'open', 'go-right', '--log'])
        out = capsys.readouterr().out
        assert out.splitlines()[-1] == 'End of panes.'

    def test_unknown_step(self, capsys):
        with pytest.raises(SystemExit):
            main(['no-such-command'])

    def test_replay_writes_to_given_stream(self):
        session = Session(WindowSetHost('A'))
        out = io.StringIO()
        replay(session, ['enable', 'open'], out=out)
        lines = out.getvalue().splitlines()
        assert len(lines) == 2
        assert lines[1].split()[0] == 'open'

    def test_screen_width(self, capsys):
        main(['--width', '30', 'open'])
        out = capsys.readouterr().out
        assert 'Can not open another window for the new pane.' in out
