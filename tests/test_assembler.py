import pytest

from models import AssemblyError
from solver.assembler import assemble, zero_usage
from tests.data import catalog, sample_catalog


def test_every_catalog_id_reported_in_ascending_order():
    cat = catalog(("C", 3, 6), ("A", 1, 2), ("B", 2, 3))
    usage = assemble({"B": 6}, cat, 18)
    assert [u.id for u in usage] == ["A", "B", "C"]
    assert [(u.count, u.cost) for u in usage] == [(0, 0), (6, 18), (0, 0)]
    assert usage[1].size == 2


def test_cost_mismatch_raises():
    with pytest.raises(AssemblyError):
        assemble({"B": 6}, sample_catalog(), 17)


def test_unknown_id_raises():
    with pytest.raises(AssemblyError):
        assemble({"Z": 1}, sample_catalog(), 1)


def test_zero_usage_lists_all_ids():
    usage = zero_usage(sample_catalog())
    assert [u.as_dict() for u in usage] == [
        {"id": "A", "size": 1, "count": 0, "cost": 0},
        {"id": "B", "size": 2, "count": 0, "cost": 0},
        {"id": "C", "size": 3, "count": 0, "cost": 0},
    ]
