from cengaver.collision import CollisionPoint, CollisionPointGroup
from cengaver.constants import COLL_BOTTOM, COLL_LEFT, COLL_TOP


def test_add_at_sets_marker_distance():
    group = CollisionPointGroup()
    group.add_at(3, 4, COLL_TOP)
    (point,) = list(group)
    assert (point.x, point.y, point.direction) == (3, 4, COLL_TOP)
    assert point.pseudo_distance == -1.0
    assert point.is_enemy is False


def test_equality_ignores_direction():
    assert CollisionPoint(1, 2, 5.0, COLL_TOP) == CollisionPoint(1, 2, 5.0, COLL_LEFT)
    assert not CollisionPoint(1, 2, 5.0) == CollisionPoint(1, 2, 6.0)


def test_add_by_moving_extends_in_steps():
    group = CollisionPointGroup()
    group.add_at(1, 1, COLL_BOTTOM)
    group.add_by_moving(1, 0, 2)
    assert [(p.x, p.y) for p in group] == [(1, 1), (2, 1), (3, 1)]
    assert all(p.direction == COLL_BOTTOM for p in group)


def test_add_by_moving_removes_adjacent_duplicates():
    group = CollisionPointGroup()
    group.add_at(5, 5, COLL_TOP)
    group.add_by_moving(0, 0, 3)
    assert len(group) == 1


def test_add_by_moving_zero_times_keeps_points():
    group = CollisionPointGroup()
    group.add_at(1, 2, COLL_TOP)
    group.add_at(3, 4, COLL_TOP)
    group.add_by_moving(1, 1, 0)
    assert [(p.x, p.y) for p in group] == [(1, 2), (3, 4)]


def test_add_by_moving_x_and_y_double_the_group():
    group = CollisionPointGroup()
    group.add_at(2, 2, COLL_LEFT)
    group.add_by_moving_x(4)
    assert [(p.x, p.y) for p in group] == [(2, 2), (6, 2)]
    group.add_by_moving_y(-1)
    assert len(group) == 4
    assert [(p.x, p.y) for p in group][2:] == [(2, 1), (6, 1)]


def test_copy_to_appends_points():
    group = CollisionPointGroup([CollisionPoint(1, 1), CollisionPoint(2, 2)])
    target = [CollisionPoint(9, 9)]
    group.copy_to(target)
    assert len(target) == 3
    assert target[1:] == list(group)


def test_constructor_copies_input():
    points = [CollisionPoint(1, 1)]
    group = CollisionPointGroup(points)
    group.add(CollisionPoint(2, 2))
    assert len(points) == 1
    assert group[1] == CollisionPoint(2, 2)