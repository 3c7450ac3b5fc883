from pytest import Item, fixture

from toycalc.calculator import Calculator


@fixture
def calc():
    return Calculator()


@fixture
def displays(calc):
    '''
    Every display string calc shows, in order.
    '''
    shown = []
    calc.add_display_listener(shown.append)
    return shown


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
