import pygame

from .config import Config


class Button:
    def __init__(self, x, y, width, height, text, color, action=None, args=None):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.color = color
        self.action = action
        self.args = args if args is not None else []
        self.enabled = True

    def draw(self, screen, font, mouse_pos):
        # Check if mouse is over button
        hover = self.enabled and self.rect.collidepoint(mouse_pos)
        if not self.enabled:
            color = Config.GRAY
        else:
            color = Config.DARK_GRAY if hover else self.color

        pygame.draw.rect(screen, color, self.rect, border_radius=5)
        text_color = Config.BLACK if color in (Config.YELLOW, Config.GRAY) else Config.WHITE
        text_surf = font.render(self.text, True, text_color)
        text_rect = text_surf.get_rect(center=self.rect.center)
        screen.blit(text_surf, text_rect)

    def handle_event(self, event):
        if not self.enabled:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos) and self.action:
                self.action(*self.args)
                return True
        return False


class Tooltip:
    def __init__(self, text, font):
        self.text = text
        self.font = font
        self.active = False
        self.rect = None
        self.surface = None
        self._create_surface()

    def _create_surface(self):
        self.surface = self.font.render(self.text, True, Config.BLACK)
        self.rect = self.surface.get_rect()

    def show(self, pos):
        self.active = True
        self.rect.topleft = (pos[0], pos[1] - self.rect.height)

    def hide(self):
        self.active = False

    def draw(self, screen):
        if self.active:
            bg_rect = self.rect.inflate(10, 5)
            pygame.draw.rect(screen, Config.WHITE, bg_rect)
            pygame.draw.rect(screen, Config.BLACK, bg_rect, 1)
            screen.blit(self.surface, self.rect)


class TextInput:
    def __init__(self, x, y, width, height, font, initial_text=""):
        self.rect = pygame.Rect(x, y, width, height)
        self.font = font
        self.text = initial_text
        self.active = False
        self.enabled = True
        self.cursor_timer = 0

    def clear(self):
        self.text = ""
        self.active = False

    def handle_event(self, event):
        """Returns True when Enter is pressed in the field."""
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEBUTTONDOWN:
            self.active = self.rect.collidepoint(event.pos)

        if event.type == pygame.KEYDOWN and self.active:
            if event.key == pygame.K_RETURN:
                return True
            elif event.key == pygame.K_ESCAPE:
                self.active = False
            elif event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            elif event.unicode and event.unicode.isprintable():
                self.text += event.unicode

        return False

    def draw(self, screen):
        background = Config.WHITE if self.enabled else Config.LIGHT_BLUE
        pygame.draw.rect(screen, background, self.rect)
        pygame.draw.rect(screen, Config.BLACK if self.active else Config.GRAY, self.rect, 2)

        text_surf = self.font.render(self.text, True, Config.BLACK)
        screen.blit(text_surf, (self.rect.x + 5, self.rect.y + 5))

        if self.active:
            self.cursor_timer += 1
            if self.cursor_timer // 10 % 2 == 0:  # Blink every 10 frames
                text_width = self.font.size(self.text)[0]
                pygame.draw.line(
                    screen,
                    Config.BLACK,
                    (self.rect.x + 5 + text_width, self.rect.y + 5),
                    (self.rect.x + 5 + text_width, self.rect.y + self.rect.height - 5)
                )


class Alert:
    """Modal warning box. While active it swallows every event until dismissed."""

    def __init__(self, font, width=460, height=150):
        self.font = font
        self.rect = pygame.Rect(
            (Config.WIDTH - width) // 2, (Config.HEIGHT - height) // 2, width, height
        )
        self.ok_rect = pygame.Rect(self.rect.right - 90, self.rect.bottom - 40, 70, 28)
        self.title = ""
        self.message = ""
        self.active = False

    def show(self, title, message):
        self.title = title
        self.message = message
        self.active = True

    def dismiss(self):
        self.active = False

    def handle_event(self, event):
        """Returns True if the event was consumed by the alert."""
        if not self.active:
            return False
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_ESCAPE):
            self.dismiss()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.ok_rect.collidepoint(event.pos):
                self.dismiss()
        return True

    def _wrap(self, text, width):
        words = text.split()
        lines, line = [], ""
        for word in words:
            candidate = f"{line} {word}".strip()
            if self.font.size(candidate)[0] <= width:
                line = candidate
            else:
                if line:
                    lines.append(line)
                line = word
        if line:
            lines.append(line)
        return lines

    def draw(self, screen):
        if not self.active:
            return

        pygame.draw.rect(screen, Config.WHITE, self.rect)
        pygame.draw.rect(screen, Config.ORANGE, self.rect, 3)

        title_surf = self.font.render(self.title, True, Config.RED)
        screen.blit(title_surf, (self.rect.x + 15, self.rect.y + 12))

        for i, line in enumerate(self._wrap(self.message, self.rect.width - 30)):
            line_surf = self.font.render(line, True, Config.BLACK)
            screen.blit(line_surf, (self.rect.x + 15, self.rect.y + 45 + i * 22))

        pygame.draw.rect(screen, Config.BLUE, self.ok_rect, border_radius=5)
        ok_text = self.font.render("OK", True, Config.WHITE)
        screen.blit(ok_text, ok_text.get_rect(center=self.ok_rect.center))
