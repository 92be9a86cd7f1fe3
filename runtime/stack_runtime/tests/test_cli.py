"""
Test suite for the stackrun command line
Verifies interactive and batch line sources
"""

import io
import logging

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from stack_runtime.cli import main, run_batch, run_interactive
from stack_runtime.errors import UnterminatedBlock
from stack_runtime.machine import Machine
from stack_runtime.values import Number, Block


@pytest.fixture
def program(tmp_path):
    def write(text):
        path = tmp_path / 'prog.stk'
        path.write_text(text, encoding='utf-8')
        return str(path)
    return write


class TestInteractive:
    """Test the interactive line source"""

    def test_renders_stack_after_each_line(self):
        out = io.StringIO()
        run_interactive(Machine(), ['1 2 +\n', '{ 3 4 * }\n'], out)
        assert out.getvalue().splitlines() == [
            'stack: [3]',
            'stack: [3, { 3 4 * }]',
        ]

    def test_open_block_across_lines(self):
        out = io.StringIO()
        machine = Machine()
        run_interactive(machine, ['{ 1\n', '2 }\n'], out)
        assert out.getvalue().splitlines() == ['stack: []', 'stack: [{ 1 2 }]']

    def test_main_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'stdin', io.StringIO('/x 10 def\nx\n'))
        assert main([]) == 0
        assert capsys.readouterr().out.splitlines() == ['stack: []', 'stack: [10]']


class TestBatch:
    """Test the batch line source"""

    def test_runs_all_lines(self):
        machine = Machine()
        run_batch(machine, ['/double { 2 * } def\n', '10 double\n'])
        assert machine.stack == [Number(20)]

    def test_unterminated_block(self):
        with pytest.raises(UnterminatedBlock):
            run_batch(Machine(), ['{ 1 2\n'])

    def test_block_closed_on_later_line(self):
        machine = Machine()
        run_batch(machine, ['{ 1\n', '}\n'])
        assert machine.stack == [Block([Number(1)])]

    def test_main_batch_output(self, program, capsys):
        path = program('1 2 + puts\n')
        assert main([path]) == 0
        assert capsys.readouterr().out == '3\n'

    def test_main_batch_no_stack_rendering(self, program, capsys):
        assert main([program('1 2 +\n')]) == 0
        assert capsys.readouterr().out == ''


class TestFailures:
    """Test fatal error reporting"""

    def test_error_exits_nonzero(self, program, capsys):
        assert main([program('1 0 /\n5 puts\n')]) == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'E_DIVISION_BY_ZERO' in captured.err

    def test_interactive_error(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'stdin', io.StringIO('}\n'))
        assert main([]) == 1
        assert 'E_MALFORMED_BLOCK' in capsys.readouterr().err

    def test_invalid_utf8_file(self, tmp_path, capsys):
        path = tmp_path / 'bad.stk'
        path.write_bytes(b'1 2 +\n\xff\xfe\n')
        assert main([str(path)]) == 1
        assert 'not valid UTF-8' in capsys.readouterr().err

    def test_invalid_utf8_stdin(self, monkeypatch, capsys):
        stdin = io.TextIOWrapper(io.BytesIO(b'1 2 +\n\xff\n'), encoding='utf-8')
        monkeypatch.setattr(sys, 'stdin', stdin)
        assert main([]) == 1
        assert '<stdin>' in capsys.readouterr().err

    def test_directory_path(self, tmp_path, capsys):
        assert main([str(tmp_path)]) == 1
        assert 'Could not read' in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / 'missing.stk')]) == 1
        assert 'not found' in capsys.readouterr().err


class TestTrace:
    """Test debug tracing"""

    def test_trace_logs_words(self, program, caplog):
        with caplog.at_level(logging.DEBUG, logger='stack_runtime'):
            assert main(['--trace', program('1 2 +\n')]) == 0
        messages = [r.getMessage() for r in caplog.records]
        assert any('stack: [1, 2]' in m for m in messages)
        assert any('stack: [3]' in m for m in messages)

    def test_quiet_by_default(self, program, caplog):
        with caplog.at_level(logging.WARNING, logger='stack_runtime'):
            assert main([program('1 2 +\n')]) == 0
        assert caplog.records == []
