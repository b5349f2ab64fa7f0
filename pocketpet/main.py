import os
import sys
import time
import platform
import pygame

from .constants import *
from .models import Mood
from .pet_entity import Pet
from .actions import ActionController
from .scheduler import Scheduler
from .storage import SnapshotStore
from .thought_bubble import ThoughtBubble
from .ui_components import ActionButton

PET_COLORS = {
    Mood.HAPPY: COLOR_PET_HAPPY,
    Mood.HUNGRY: COLOR_PET_HUNGRY,
    Mood.SLEEPY: COLOR_PET_SLEEPY,
    Mood.SICK: COLOR_PET_SICK,
    Mood.OKAY: COLOR_PET_OKAY,
}

BARS = [
    ("health", "Health", COLOR_HEALTH),
    ("hunger", "Hunger", COLOR_HUNGER),
    ("energy", "Energy", COLOR_ENERGY),
    ("clean", "Clean", COLOR_CLEAN),
]

PET_POS = (340, 150)


class GameEngine:
    """Hosts the pet: owns the pygame window and the event loop that serialises ticks and clicks."""
    def __init__(self, save_path=None):
        pygame.init()

        headless = os.environ.get("SDL_VIDEODRIVER") == "dummy"
        if platform.system() == "Linux" and not headless:
            try:
                self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.FULLSCREEN)
            except pygame.error:
                self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        else:
            try:
                self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SCALED | pygame.RESIZABLE)
            except pygame.error:
                # Some headless drivers do not support scaled/resizable
                self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))

        pygame.display.set_caption("Pocket Pet")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)
        self.small_font = pygame.font.Font(None, 20)

        self.pet = Pet(SnapshotStore(save_path))
        self.pet.load()
        self.actions = ActionController(self.pet)
        self.scheduler = Scheduler(self.pet)
        self.bubble = ThoughtBubble(self.screen, self.small_font, lambda: PET_POS)

        self.view = self.pet.view()
        self.pet.subscribe(on_change=self._on_change, on_message=self.bubble.show)
        self.buttons = self._build_buttons()

        self.pet.commit()
        self.scheduler.start()
        self._last_step_time = time.time()

    def _on_change(self, view):
        self.view = view

    def _build_buttons(self):
        s = lambda: self.pet.stats
        layout = [
            ("Feed", COLOR_BTN_FEED, self.actions.feed),
            ("Play", COLOR_BTN_PLAY, self.actions.play),
            (lambda: "Wake" if s().is_sleeping else "Sleep", COLOR_BTN_SLEEP, self.actions.toggle_sleep),
            ("Heal", COLOR_BTN_HEAL, self.actions.heal),
            (lambda: "Resume Time" if s().paused else "Pause Time", COLOR_BTN_PAUSE, self.actions.toggle_pause),
            ("Reset", COLOR_BTN_RESET, self.actions.reset),
        ]
        gap = 6
        width = (SCREEN_WIDTH - gap * (len(layout) + 1)) // len(layout)
        y = SCREEN_HEIGHT - 46
        return [
            ActionButton(gap + i * (width + gap), y, width, 36, text, color, on_click=handler)
            for i, (text, color, handler) in enumerate(layout)
        ]

    def draw_bar(self, x, y, value, color, label):
        """Renders a stat bar with its numeric value."""
        pygame.draw.rect(self.screen, COLOR_UI_BAR_BG, (x, y, 140, 14), border_radius=4)
        width = int(140 * max(0, min(100, value)) / 100)
        pygame.draw.rect(self.screen, color, (x, y, width, 14), border_radius=4)
        lbl = self.small_font.render(f"{label}  {value}", True, COLOR_TEXT)
        self.screen.blit(lbl, (x, y - 16))

    def draw_pet(self, mood):
        dx, dy = self.bubble.pet_offset()
        cx, cy = PET_POS[0] + dx, PET_POS[1] + dy
        body = PET_COLORS.get(mood, COLOR_PET_OKAY)
        pygame.draw.ellipse(self.screen, body, (cx - 40, cy - 34, 80, 68))
        if self.view["is_sleeping"]:
            pygame.draw.line(self.screen, COLOR_PET_EYES, (cx - 20, cy - 6), (cx - 8, cy - 6), 2)
            pygame.draw.line(self.screen, COLOR_PET_EYES, (cx + 8, cy - 6), (cx + 20, cy - 6), 2)
        else:
            pygame.draw.circle(self.screen, COLOR_PET_EYES, (cx - 14, cy - 6), 5)
            pygame.draw.circle(self.screen, COLOR_PET_EYES, (cx + 14, cy - 6), 5)
        if mood in (Mood.HAPPY, Mood.OKAY):
            pygame.draw.arc(self.screen, COLOR_PET_EYES, (cx - 12, cy, 24, 14), 3.4, 6.0, 2)
        else:
            pygame.draw.arc(self.screen, COLOR_PET_EYES, (cx - 12, cy + 8, 24, 14), 0.3, 2.8, 2)

    def draw(self):
        self.screen.fill(COLOR_BG)
        v = self.view

        for i, (key, label, color) in enumerate(BARS):
            self.draw_bar(16, 36 + i * 48, v[key], color, label)

        # Mood chip
        chip = self.font.render(v["mood"].value, True, COLOR_TEXT)
        chip_rect = chip.get_rect(topright=(SCREEN_WIDTH - 16, 12)).inflate(16, 8)
        pygame.draw.rect(self.screen, COLOR_CHIP_BORDER, chip_rect, 2, border_radius=10)
        self.screen.blit(chip, chip.get_rect(center=chip_rect.center))

        info = f"{v['condition']}  |  Age {v['age_minutes']} min"
        self.screen.blit(self.small_font.render(info, True, COLOR_TEXT), (200, 16))

        self.draw_pet(v["mood"])
        self.bubble.draw()
        for btn in self.buttons:
            btn.draw(self.screen, self.small_font)

    def step(self):
        """Process a single loop iteration (useful for headless tests). Returns False to stop."""
        now = time.time()
        dt = now - self._last_step_time
        self._last_step_time = now

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if self.scheduler.handle_event(event):
                continue
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                for btn in self.buttons:
                    if btn.handle_event(event.pos, event.type):
                        break

        self.bubble.update(dt)
        self.draw()
        pygame.display.flip()
        self.clock.tick(FPS)
        return True

    def shutdown(self):
        self.scheduler.stop()
        self.pet.store.save(self.pet.stats)
        pygame.quit()

    def run(self):
        running = True
        while running:
            running = self.step()
        self.shutdown()
        sys.exit()


def main():
    GameEngine().run()


if __name__ == "__main__":
    main()
