import math
import sys

from tinterrain.candidates import (
    Candidate,
    CandidateList,
    is_no_data,
    order_triangle_points,
)


def test_default_candidate_importance():
    assert Candidate().importance == -sys.float_info.max


def test_consider_keeps_most_important():
    c = Candidate()
    c.consider(1, 2, 3.0, 5.0)
    c.consider(7, 8, 9.0, 2.0)
    assert (c.x, c.y, c.z, c.importance) == (1, 2, 3.0, 5.0)
    c.consider(4, 5, 6.0, 10.0)
    assert (c.x, c.y, c.z, c.importance) == (4, 5, 6.0, 10.0)


def test_candidate_ordering():
    low = Candidate(importance=1.0)
    high = Candidate(importance=2.0)
    assert low < high
    assert high > low
    assert not high < low


def test_grab_greatest_in_descending_order():
    cl = CandidateList()
    importances = [3.0, -1.0, 10.0, 4.5, 0.0]
    for i, imp in enumerate(importances):
        cl.push(Candidate(x=i, importance=imp))
    assert len(cl) == len(importances)
    grabbed = [cl.grab_greatest().importance for _ in importances]
    assert grabbed == sorted(importances, reverse=True)
    assert len(cl) == 0
    assert not cl


def test_grab_from_empty_returns_default():
    cl = CandidateList()
    c = cl.grab_greatest()
    assert c.importance == Candidate().importance
    assert c.triangle is None


def test_order_triangle_points():
    pts = [(0.0, 3.0), (1.0, 1.0), (2.0, 2.0)]
    ordered = order_triangle_points(pts)
    assert [p[1] for p in ordered] == sorted(p[1] for p in pts)
    assert sorted(ordered) == sorted(pts)


def test_order_triangle_points_ties_are_stable():
    pts = [(5.0, 1.0), (2.0, 1.0), (0.0, 0.0)]
    ordered = order_triangle_points(pts)
    assert ordered[1:] == [(5.0, 1.0), (2.0, 1.0)]


def test_is_no_data():
    assert is_no_data(math.nan, -9999.0)
    assert is_no_data(-9999.0, -9999.0)
    assert not is_no_data(12.5, -9999.0)