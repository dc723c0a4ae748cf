import pytest

from statdash.dataset import Dataset
from statdash.loader import load_sample


def make_dataset(**columns):
    """Build a dataset from equal-length column lists."""
    names = list(columns)
    n = len(columns[names[0]]) if names else 0
    rows = [{name: columns[name][i] for name in names} for i in range(n)]
    return Dataset.from_records(rows, source="test")


@pytest.fixture
def sales():
    return load_sample("sales")


@pytest.fixture
def one_to_ten():
    return make_dataset(v=list(range(1, 11)))


@pytest.fixture
def linear():
    return make_dataset(
        x=[1, 2, 3, 4, 5],
        y=[2, 4, 6, 8, 10],
        z=[5, 4, 3, 2, 1],
        label=["a", "b", "c", "d", "e"],
    )


@pytest.fixture
def mixed():
    return make_dataset(
        amount=[10, "n/a", None, 12.5, 7],
        name=["x", "y", "x", "z", "x"],
        code=["1", "2", "3", "4", "5"],
    )
