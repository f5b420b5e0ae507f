import logging

import pygame

from .allocator import Allocator
from .config import Config
from .parsing import InputValidationError, parse_input
from .views import (
    INVALID_INPUT_MESSAGE,
    REJECTION_TITLE,
    block_lines,
    process_lines,
    rejection_message,
    step_message,
)
from .widgets import Alert, Button, TextInput, Tooltip

logger = logging.getLogger("NFSim")


# Initialize Pygame
def initialize_pygame():
    try:
        pygame.init()
        screen = pygame.display.set_mode((Config.WIDTH, Config.HEIGHT))
        pygame.display.set_caption(Config.TITLE)
        clock = pygame.time.Clock()
        font = pygame.font.SysFont(Config.FONT_NAME, Config.FONT_SIZE)
        small_font = pygame.font.SysFont(Config.FONT_NAME, Config.SMALL_FONT_SIZE)
        return screen, clock, font, small_font
    except Exception as e:
        logger.critical(f"Failed to initialize Pygame: {e}")
        raise


class NFSim:
    def __init__(self, block_text="", process_text=""):
        self.screen, self.clock, self.font, self.small_font = initialize_pygame()

        self.allocator = Allocator()

        # Simulation state
        self.running = True
        self.submitted = False
        self.input_error = False
        self.status_message = "Enter block and process sizes, then press Submit"

        # UI components
        self.block_input = TextInput(20, 45, 640, 30, self.font, block_text)
        self.process_input = TextInput(20, 110, 640, 30, self.font, process_text)
        self.buttons = self._create_buttons()
        self.tooltips = self._create_tooltips()
        self.active_tooltip = None
        self.alert = Alert(self.font)
        self._update_button_states()

        logger.info("NFSim initialized")

    def _create_buttons(self):
        return {
            "Submit Input": Button(680, 110, 190, 30, "Submit Input", Config.BLUE, self.submit_input),
            "Next Step": Button(180, 630, 160, 34, "Next Step", Config.GREEN, self.next_step),
            "Reset": Button(370, 630, 160, 34, "Reset", Config.YELLOW, self.reset_simulation),
            "Close": Button(560, 630, 160, 34, "Close", Config.RED, self.close),
        }

    def _create_tooltips(self):
        return {
            "Submit Input": Tooltip("Start a simulation with these sizes", self.small_font),
            "Next Step": Tooltip("Allocate the next process using Next-Fit", self.small_font),
            "Reset": Tooltip("Clear everything and go back to input", self.small_font),
            "Close": Tooltip("Quit the simulator", self.small_font),
        }

    def _update_button_states(self):
        self.buttons["Submit Input"].enabled = not self.submitted
        self.buttons["Next Step"].enabled = self.submitted and not self.allocator.is_complete()
        self.block_input.enabled = not self.submitted
        self.process_input.enabled = not self.submitted

    def submit_input(self):
        """Parse both input fields and start a new simulation run."""
        try:
            blocks, processes = parse_input(self.block_input.text, self.process_input.text)
        except InputValidationError as e:
            self.allocator.reset()
            self.input_error = True
            self.status_message = str(e)
            return

        self.allocator.initialize(blocks, processes)
        self.submitted = True
        self.input_error = False
        self.block_input.active = False
        self.process_input.active = False
        self.status_message = f"Loaded {len(blocks)} blocks and {len(processes)} processes"
        self._update_button_states()

    def next_step(self):
        """Allocate the next process."""
        if self.alert.active:
            return

        result = self.allocator.step()
        if result is None:
            return

        self.status_message = step_message(result)
        if not result.allocated:
            self.alert.show(REJECTION_TITLE, rejection_message(result))

        if self.allocator.is_complete():
            self.status_message += " - simulation complete"
        self._update_button_states()

    def reset_simulation(self):
        """Reset the simulation and go back to the input stage."""
        self.block_input.clear()
        self.process_input.clear()
        self.allocator.reset()
        self.alert.dismiss()
        self.submitted = False
        self.input_error = False
        self.status_message = "Simulation reset"
        self._update_button_states()
        logger.info("Simulation reset to input stage")

    def close(self):
        self.running = False

    def draw_inputs(self, screen):
        screen.blit(self.font.render(f"Enter memory block sizes in {Config.UNIT} (comma separated):",
                                     True, Config.BLACK), (20, 18))
        self.block_input.draw(screen)
        screen.blit(self.font.render(f"Enter process sizes in {Config.UNIT} (comma separated):",
                                     True, Config.BLACK), (20, 83))
        self.process_input.draw(screen)

    def draw_memory(self, screen, x, y, width, height):
        """Draw each block as a used/free bar with its list line."""
        pygame.draw.rect(screen, Config.GRAY, (x, y, width, height), 2)
        screen.blit(self.font.render("Memory Blocks:", True, Config.BLACK), (x + 10, y + 8))

        if self.input_error:
            screen.blit(self.small_font.render(INVALID_INPUT_MESSAGE, True, Config.RED), (x + 10, y + 40))
            return

        snapshot = self.allocator.snapshot()
        lines = block_lines(snapshot)
        for i, line in enumerate(lines[:Config.MAX_DISPLAY_ROWS]):
            row_y = y + 40 + i * Config.ROW_HEIGHT
            original = snapshot.block_sizes[i]
            free = snapshot.block_capacities[i]

            # Used part of the bar in blue, free part in green
            bar = pygame.Rect(x + 10, row_y, Config.BAR_WIDTH, Config.ROW_HEIGHT - 6)
            pygame.draw.rect(screen, Config.GREEN, bar)
            if original > 0:
                used_width = int(Config.BAR_WIDTH * (original - free) / original)
                pygame.draw.rect(screen, Config.DARK_BLUE, (bar.x, bar.y, used_width, bar.height))
            border = Config.ORANGE if snapshot.cursor == i else Config.BLACK
            pygame.draw.rect(screen, border, bar, 2 if snapshot.cursor == i else 1)

            screen.blit(self.small_font.render(line, True, Config.BLACK), (bar.right + 10, row_y + 2))

        if len(lines) > Config.MAX_DISPLAY_ROWS:
            more = self.small_font.render(f"... {len(lines) - Config.MAX_DISPLAY_ROWS} more", True, Config.DARK_GRAY)
            screen.blit(more, (x + 10, y + height - 22))

    def draw_processes(self, screen, x, y, width, height):
        pygame.draw.rect(screen, Config.GRAY, (x, y, width, height), 2)
        screen.blit(self.font.render("Processes:", True, Config.BLACK), (x + 10, y + 8))

        if self.input_error:
            screen.blit(self.small_font.render(INVALID_INPUT_MESSAGE, True, Config.RED), (x + 10, y + 40))
            return

        snapshot = self.allocator.snapshot()
        lines = process_lines(snapshot)
        for i, line in enumerate(lines[:Config.MAX_DISPLAY_ROWS]):
            if i == snapshot.next_process - 1:
                color = Config.BLUE if snapshot.allocations[i] is not None else Config.RED
            else:
                color = Config.BLACK
            screen.blit(self.small_font.render(line, True, color), (x + 10, y + 42 + i * Config.ROW_HEIGHT))

        if len(lines) > Config.MAX_DISPLAY_ROWS:
            more = self.small_font.render(f"... {len(lines) - Config.MAX_DISPLAY_ROWS} more", True, Config.DARK_GRAY)
            screen.blit(more, (x + 10, y + height - 22))

    def draw_dashboard(self, screen, x, y):
        snapshot = self.allocator.snapshot()
        cursor = "none" if snapshot.cursor is None else f"Block {snapshot.cursor + 1}"
        metrics = [
            f"Last allocated: {cursor}",
            f"Stepped: {snapshot.next_process}/{len(snapshot.process_sizes)}",
            f"Fragmentation: {self.allocator.fragmentation():.2%}",
        ]
        for i, metric in enumerate(metrics):
            screen.blit(self.small_font.render(metric, True, Config.BLACK), (x + i * 280, y))

    def draw_status_bar(self, screen, x, y, width, height):
        pygame.draw.rect(screen, Config.DARK_GRAY, (x, y, width, height))
        text = self.small_font.render(self.status_message, True, Config.WHITE)
        screen.blit(text, (x + 10, y + (height - text.get_height()) // 2))

    def draw_buttons(self, screen):
        mouse_pos = pygame.mouse.get_pos()

        for name, button in self.buttons.items():
            button.draw(screen, self.font, mouse_pos)

            # Show tooltip if mouse is over button
            if button.rect.collidepoint(mouse_pos) and not self.alert.active:
                tooltip = self.tooltips.get(name)
                if tooltip:
                    tooltip.show(mouse_pos)
                    self.active_tooltip = tooltip

    def draw(self):
        """Draw the entire UI."""
        self.screen.fill(Config.WHITE)

        self.draw_inputs(self.screen)
        self.draw_memory(self.screen, 10, 155, 480, 360)
        self.draw_processes(self.screen, 500, 155, 390, 360)
        self.draw_dashboard(self.screen, 20, 525)
        self.draw_status_bar(self.screen, 10, 555, 880, 30)
        self.draw_buttons(self.screen)

        if self.active_tooltip and self.active_tooltip.active:
            self.active_tooltip.draw(self.screen)

        self.alert.draw(self.screen)

        pygame.display.flip()

    def handle_events(self):
        """Handle user input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            # The alert blocks everything else until dismissed
            if self.alert.handle_event(event):
                continue

            if self.block_input.handle_event(event) or self.process_input.handle_event(event):
                if not self.submitted:
                    self.submit_input()
                continue

            if event.type == pygame.MOUSEBUTTONDOWN:
                for button in self.buttons.values():
                    if button.handle_event(event):
                        break

            if event.type == pygame.KEYDOWN and not (self.block_input.active or self.process_input.active):
                if event.key in (pygame.K_SPACE, pygame.K_n) and self.buttons["Next Step"].enabled:
                    self.next_step()

            # Reset tooltip when mouse moves
            if event.type == pygame.MOUSEMOTION:
                if self.active_tooltip:
                    self.active_tooltip.hide()
                    self.active_tooltip = None

    def run(self):
        """Main loop."""
        try:
            while self.running:
                self.handle_events()
                self.draw()
                self.clock.tick(Config.FPS)
        except Exception as e:
            logger.critical(f"Runtime error: {e}")
            raise
        finally:
            logger.info("NFSim shutting down")
            pygame.quit()
