"""Base class for scenes driven by the scenes handler."""


class Scene:
    """A scene with lifecycle hooks; subclasses override what they need."""

    def __init__(self):
        self.clear_color = (0, 0, 0)

    def begin(self):
        """Called when the scene becomes current."""

    def tick(self, dt, window):
        """Advance the scene by dt seconds."""

    def render(self, window):
        """Draw the scene."""

    def event(self, event, window):
        """Handle one window event."""

    def finish(self):
        """Called when the scene stops being current."""