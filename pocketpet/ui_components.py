import pygame
from typing import Tuple, Optional, Callable, Union
from .constants import RETRO_SHADOW, RETRO_DARK, BUTTON_SHADOW_OFFSET, BUTTON_BORDER_RADIUS, BUTTON_GLASS_ALPHA, BUTTON_BORDER_WIDTH


class ActionButton:
    """Touch-friendly action button. `text` may be a callable so the label can follow pet state."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 text: Union[str, Callable[[], str]], color: Tuple[int, int, int],
                 on_click: Optional[Callable] = None):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.color = color
        self.on_click = on_click
        self.pressed = False

    @property
    def label(self) -> str:
        return self.text() if callable(self.text) else self.text

    def draw(self, surface: pygame.Surface, font: pygame.font.Font):
        # Shadow
        shadow_rect = self.rect.copy()
        shadow_rect.x += BUTTON_SHADOW_OFFSET
        shadow_rect.y += BUTTON_SHADOW_OFFSET
        pygame.draw.rect(surface, RETRO_SHADOW, shadow_rect, border_radius=BUTTON_BORDER_RADIUS)

        offset = 2 if self.pressed else 0
        draw_rect = self.rect.move(offset, offset)

        dark_colour = tuple(max(0, c - 30) for c in self.color)
        pygame.draw.rect(surface, dark_colour, draw_rect, border_radius=BUTTON_BORDER_RADIUS)
        top_rect = draw_rect.copy()
        top_rect.height //= 2
        light_colour = tuple(min(255, c + 20) for c in self.color)
        pygame.draw.rect(surface, light_colour, top_rect, border_radius=BUTTON_BORDER_RADIUS)

        glass = pygame.Surface((max(1, draw_rect.width - 8), max(1, draw_rect.height // 3)), pygame.SRCALPHA)
        glass.fill((255, 255, 255, BUTTON_GLASS_ALPHA))
        surface.blit(glass, (draw_rect.x + 4, draw_rect.y + 4))

        pygame.draw.rect(surface, RETRO_DARK, draw_rect, BUTTON_BORDER_WIDTH, border_radius=BUTTON_BORDER_RADIUS)

        text_surface = font.render(self.label, True, RETRO_DARK)
        surface.blit(text_surface, text_surface.get_rect(center=draw_rect.center))

    def handle_event(self, pos: Tuple[int, int], event_type: int) -> bool:
        """Press on MOUSEBUTTONDOWN, fire on MOUSEBUTTONUP inside the button. Returns True when fired."""
        if event_type == pygame.MOUSEBUTTONDOWN:
            if self.rect.collidepoint(pos):
                self.pressed = True
        elif event_type == pygame.MOUSEBUTTONUP:
            fired = self.pressed and self.rect.collidepoint(pos)
            self.pressed = False
            if fired:
                if self.on_click:
                    self.on_click()
                return True
        return False
