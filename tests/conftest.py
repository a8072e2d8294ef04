from pytest import Item, fixture

from rpncalc.lexer import WordSource


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, so a run can be audited afterwards.

    Excessive in most cases. Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          # Drop the full-diff hint lines; -vv if you want them.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def source():
    '''
    Factory for word sources over literal text, one calculation per stream.
    '''
    def make(text, per_line=False):
        return WordSource(text.splitlines(keepends=True), per_line=per_line)
    return make
