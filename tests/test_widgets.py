import pygame

from nfsim.widgets import Alert, Button, TextInput


def click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def key(code, unicode=""):
    return pygame.event.Event(pygame.KEYDOWN, key=code, unicode=unicode)


class TestButton:
    """Test cases for clickable buttons"""

    def test_click_runs_action(self):
        calls = []
        button = Button(0, 0, 100, 30, "Next Step", (0, 0, 0), calls.append, ["step"])

        assert button.handle_event(click((10, 10)))
        assert calls == ["step"]

    def test_click_outside_is_ignored(self):
        calls = []
        button = Button(0, 0, 100, 30, "Next Step", (0, 0, 0), lambda: calls.append(1))

        assert not button.handle_event(click((200, 200)))
        assert calls == []

    def test_disabled_button_ignores_clicks(self):
        calls = []
        button = Button(0, 0, 100, 30, "Next Step", (0, 0, 0), lambda: calls.append(1))
        button.enabled = False

        assert not button.handle_event(click((10, 10)))
        assert calls == []


class TestTextInput:
    """Test cases for the comma separated input fields"""

    def test_typing_after_focus(self):
        field = TextInput(0, 0, 200, 30, None)
        field.handle_event(click((5, 5)))
        for char in "10,2":
            field.handle_event(key(pygame.K_a, char))

        assert field.active
        assert field.text == "10,2"

    def test_typing_without_focus_is_ignored(self):
        field = TextInput(0, 0, 200, 30, None)
        field.handle_event(key(pygame.K_a, "1"))

        assert field.text == ""

    def test_backspace_and_enter(self):
        field = TextInput(0, 0, 200, 30, None, "100")
        field.active = True

        assert not field.handle_event(key(pygame.K_BACKSPACE))
        assert field.text == "10"
        assert field.handle_event(key(pygame.K_RETURN))

    def test_disabled_field(self):
        field = TextInput(0, 0, 200, 30, None, "5")
        field.enabled = False

        assert not field.handle_event(click((5, 5)))
        assert not field.active

    def test_clear(self):
        field = TextInput(0, 0, 200, 30, None, "5")
        field.active = True
        field.clear()

        assert field.text == ""
        assert not field.active


class TestAlert:
    """Test cases for the modal warning"""

    def test_inactive_alert_passes_events(self):
        alert = Alert(None)

        assert not alert.handle_event(key(pygame.K_SPACE))

    def test_active_alert_swallows_events(self):
        alert = Alert(None)
        alert.show("Not Enough Space", "Process 4 (426 KB) cannot be allocated to any block.")

        assert alert.handle_event(key(pygame.K_SPACE))
        assert alert.active

    def test_escape_dismisses(self):
        alert = Alert(None)
        alert.show("Not Enough Space", "msg")
        alert.handle_event(key(pygame.K_ESCAPE))

        assert not alert.active

    def test_ok_click_dismisses(self):
        alert = Alert(None)
        alert.show("Not Enough Space", "msg")
        alert.handle_event(click(alert.ok_rect.center))

        assert not alert.active
