'''
Command line interface tests
'''

import io

from rpncalc import cli
from rpncalc.cli import CLI


def run(*args):
    output = io.StringIO()
    status = CLI(output=output).run(args=list(args))
    return status, output.getvalue()


def test_expression():
    assert run('-e', '5', '7', '+') == (0, '12\n')


def test_negative_operands_after_expression():
    assert run('-e', '-10', '5', '+') == (0, '-5\n')


def test_error_is_output():
    assert run('-e', '10', '0', '%') == (0, 'Error: division by zero\n')


def test_type():
    assert run('-t', 'i32', '-e', '99999999999999999999', '1', '+') == \
        (0, "Error: failed to parse input '99999999999999999999': "
            "parse type value overflow\n")
    assert run('-t', 'f64', '-e', '7', '2', '/') == (0, '3.5\n')


def test_precision():
    assert run('-t', 'f64', '-k', '2', '-e', '2', '3', '/') == (0, '0.67\n')


def test_strict():
    assert run('-s', '-e', '1', '2', '^') == \
        (0, "Error: expected operator, got invalid token '^'\n")


def test_dump():
    status, output = run('-D', '-s', '-e', '3', '-', '-4', 'x')
    assert status == 0
    assert output.splitlines() == [
        '<token>\t<repr(word)>',
        "Operand\t'3'",
        "Operator\t'-'",
        "Operand\t'-4'",
        "Invalid\t'x'",
        'EndOfInput\tNone',
    ]


def test_raw_grammar():
    status, output = run('-G')
    assert status == 0
    grammar = output.splitlines()
    assert grammar[0] == '-?[0-9]+'
    assert len(grammar) == 2


def test_stdin(monkeypatch):
    monkeypatch.setattr(cli, 'stdin', io.StringIO('1 2 +\n3 4 +\n'))
    assert run('-l') == (0, '3\n7\n')


def test_stdin_reset(monkeypatch):
    monkeypatch.setattr(cli, 'stdin', io.StringIO('1 0 /\n3 4 +\n'))
    assert run('-l', '-r') == (0, 'Error: division by zero\n7\n')


def test_stdin_stream(monkeypatch):
    monkeypatch.setattr(cli, 'stdin', io.StringIO('4 5 *\n5 *\n30 -\n2 /\n'))
    assert run() == (0, '35\n')


def test_input_error(monkeypatch):
    class Broken(io.StringIO):
        def __next__(self):
            raise OSError('gone')

    errors = io.StringIO()
    monkeypatch.setattr(cli, 'stdin', Broken())
    monkeypatch.setattr(cli, 'stderr', errors)
    status, output = run()
    assert status == 2
    assert output == ''
    assert 'failed to read input stream' in errors.getvalue()
