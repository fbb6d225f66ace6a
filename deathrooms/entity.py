"""Base class for entities living in a scene."""

from deathrooms.sprite import FloatRect


class Entity:
    """An object with lifecycle hooks and a bounding rectangle."""

    def __init__(self):
        self.rect = FloatRect(0.0, 0.0, 0.0, 0.0)
        self.active = False

    def begin(self):
        """Called when the entity starts; marks it active."""
        self.active = True

    def tick(self, dt, window, scene):
        """Advance the entity by dt seconds."""

    def render(self, window):
        """Draw the entity."""

    def event(self, event, window):
        """Handle one window event."""

    def finish(self):
        """Release the entity's resources."""
        self.active = False