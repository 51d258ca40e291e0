import numpy as np
import pytest

from dashstats.operations import OPERATIONS, Operation


def test_every_operation_has_a_reducer() -> None:
    assert set(OPERATIONS) == set(Operation)


@pytest.mark.parametrize(
    "name, expected",
    [("avg", Operation.AVG), ("SUM", Operation.SUM), (Operation.MAX, Operation.MAX)],
)
def test_parse(name, expected) -> None:
    assert Operation.parse(name) is expected


def test_parse_unknown() -> None:
    with pytest.raises(ValueError, match="expected one of avg, sum, min, max"):
        Operation.parse("mode")


def test_reducers_on_empty_input() -> None:
    empty = np.array([], dtype=float)
    assert OPERATIONS[Operation.AVG](empty) == 0
    assert OPERATIONS[Operation.SUM](empty) == 0
    assert OPERATIONS[Operation.MIN](empty) == 0
    assert OPERATIONS[Operation.MAX](empty, empty=None) is None
