from collisionbench.cpu_detection import detect_collisions
from collisionbench.max_collisions import max_collisions
from collisionbench.model import Collidable


def _c(entity, x, y, radius=1.0, sensor=False):
    return Collidable(center_x=x, center_y=y, radius=radius, entity=entity, is_sensor=sensor)


def test_empty_input_gives_no_pairs():
    assert detect_collisions([]) == []


def test_single_collidable_gives_no_pairs():
    assert detect_collisions([_c(1, 0.0, 0.0)]) == []


def test_overlapping_pair_is_reported_in_input_order():
    pairs = detect_collisions([_c(7, 0.0, 0.0), _c(3, 0.5, 0.0, sensor=True)])
    assert len(pairs) == 1
    assert pairs[0].metadata1.entity == 7
    assert pairs[0].metadata2.entity == 3
    assert pairs[0].metadata1.is_sensor is False
    assert pairs[0].metadata2.is_sensor is True
    assert (pairs[0].metadata2.x, pairs[0].metadata2.y) == (0.5, 0.0)


def test_distant_circles_do_not_collide():
    assert detect_collisions([_c(1, 0.0, 0.0), _c(2, 100.0, 100.0)]) == []


def test_touching_circles_collide():
    pairs = detect_collisions([_c(1, 0.0, 0.0, 1.0), _c(2, 2.0, 0.0, 1.0)])
    assert [(p.metadata1.entity, p.metadata2.entity) for p in pairs] == [(1, 2)]


def test_all_coincident_gives_every_pair_once():
    items = [_c(i, 0.0, 0.0) for i in range(6)]
    pairs = detect_collisions(items)
    assert len(pairs) == max_collisions(6)
    keys = {(p.metadata1.entity, p.metadata2.entity) for p in pairs}
    assert len(keys) == len(pairs)
    assert all(a < b for a, b in keys)


def test_accepts_generator():
    pairs = detect_collisions(_c(i, float(i) * 0.5, 0.0) for i in range(3))
    assert all(p.metadata1.entity < p.metadata2.entity for p in pairs)
    assert len(pairs) == max_collisions(3)