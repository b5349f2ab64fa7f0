import math
import pygame

from .constants import MESSAGE_DURATION, EMPHASIS_DURATION
from .models import Emphasis


class ThoughtBubble:
    """Shows the latest pet notification above the pet and animates its emphasis."""
    def __init__(self, screen, font, get_pet_pos_func):
        self.screen = screen
        self.font = font
        self.get_pet_pos = get_pet_pos_func
        self.active = False
        self.message = ""
        self.timer = 0
        self.emphasis = None
        self.emphasis_timer = 0
        self.color = (255, 255, 255)
        self.text_color = (0, 0, 0)
        self.padding = 5
        self.border_radius = 5

    def show(self, note, duration=MESSAGE_DURATION):
        """Listener for Pet notifications."""
        self.message = note.message
        self.active = True
        self.timer = duration
        # A new cue restarts the animation
        self.emphasis = note.emphasis
        self.emphasis_timer = EMPHASIS_DURATION if note.emphasis else 0

    def update(self, dt):
        if self.active:
            self.timer -= dt
            if self.timer <= 0:
                self.active = False
        if self.emphasis_timer > 0:
            self.emphasis_timer -= dt
            if self.emphasis_timer <= 0:
                self.emphasis = None

    def pet_offset(self):
        """(dx, dy) to apply to the pet sprite for the running emphasis cue."""
        if not self.emphasis or self.emphasis_timer <= 0:
            return 0, 0
        phase = (EMPHASIS_DURATION - self.emphasis_timer) / EMPHASIS_DURATION
        if self.emphasis == Emphasis.POSITIVE:
            return 0, -int(12 * math.sin(phase * math.pi))
        return int(6 * math.sin(phase * math.pi * 6)), 0

    def draw(self):
        if not self.active:
            return
        pet_x, pet_y = self.get_pet_pos()

        text_surf = self.font.render(self.message, True, self.text_color)
        text_rect = text_surf.get_rect()
        bubble_width = text_rect.width + 2 * self.padding
        bubble_height = text_rect.height + 2 * self.padding

        # Position above pet
        bubble_x = pet_x - bubble_width // 2
        bubble_y = pet_y - bubble_height - 50
        bubble_rect = pygame.Rect(bubble_x, bubble_y, bubble_width, bubble_height)
        pygame.draw.rect(self.screen, self.color, bubble_rect, border_radius=self.border_radius)
        self.screen.blit(text_surf, (bubble_x + self.padding, bubble_y + self.padding))

        tail_top = bubble_rect.bottom
        pygame.draw.polygon(self.screen, self.color,
                            [(pet_x - 8, tail_top), (pet_x + 8, tail_top), (pet_x, tail_top + 12)])
