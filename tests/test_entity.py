from deathrooms.entity import Entity
from deathrooms.sprite import FloatRect


def test_initial_rect_is_empty():
    assert Entity().rect == FloatRect(0.0, 0.0, 0.0, 0.0)


def test_hooks_leave_rect_unchanged():
    entity = Entity()
    entity.begin()
    entity.tick(0.5, None, None)
    entity.render(None)
    entity.event(None, None)
    entity.finish()
    assert entity.rect.center == (0.0, 0.0)