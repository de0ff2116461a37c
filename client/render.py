"""Pygame based renderer for match snapshots."""

from __future__ import annotations

import math
from typing import Iterable, List

import pygame

from serpent import constants


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.font = pygame.font.SysFont("arial", 18)
        self.title_font = pygame.font.SysFont("arial", 36, bold=True)
        self.background_color = (26, 26, 46)
        self.grid_color = (15, 15, 30)
        self.food_color = (239, 68, 68)
        self.slow_color = (251, 191, 36)
        self.dead_color = (102, 102, 102)
        self.grid_step = 30

    def clear(self) -> None:
        self.screen.fill(self.background_color)
        width, height = self.screen.get_size()
        for x in range(0, width, self.grid_step):
            pygame.draw.line(self.screen, self.grid_color, (x, 0), (x, height))
        for y in range(0, height, self.grid_step):
            pygame.draw.line(self.screen, self.grid_color, (0, y), (width, y))

    def _glow(self, color: tuple[int, int, int], center: tuple[int, int], radius: int, alpha: int) -> None:
        overlay = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(overlay, (*color, alpha), (radius, radius), radius)
        self.screen.blit(overlay, (center[0] - radius, center[1] - radius))

    def draw_snakes(self, snakes: Iterable[dict]) -> None:
        for snake in snakes:
            segments = snake["segments"]
            count = len(segments)
            color = tuple(snake["color"])
            # Tail first so nearer segments draw on top.
            for index in range(count - 1, -1, -1):
                segment = segments[index]
                alpha = 0.3 + (index / count) * 0.7 if snake["alive"] else 0.2
                self._glow(color, (int(segment["x"]), int(segment["y"])), 5, int(alpha * 255))
            head = (int(snake["head"]["x"]), int(snake["head"]["y"]))
            pygame.draw.circle(self.screen, color if snake["alive"] else self.dead_color, head, 7)
            if not snake["alive"]:
                continue
            if snake["slowed"]:
                pygame.draw.circle(self.screen, self.slow_color, head, 12, width=2)
            tip = (
                int(head[0] + math.cos(snake["angle"]) * 15),
                int(head[1] + math.sin(snake["angle"]) * 15),
            )
            pygame.draw.line(self.screen, color, head, tip, 3)

    def draw_projectiles(self, projectiles: Iterable[dict], colors: dict[int, tuple[int, int, int]]) -> None:
        for projectile in projectiles:
            color = colors.get(projectile["owner"], (255, 255, 255))
            center = (int(projectile["x"]), int(projectile["y"]))
            self._glow(color, center, 8, 64)
            pygame.draw.circle(self.screen, color, center, 4)

    def draw_food(self, food: dict) -> None:
        center = (int(food["x"]), int(food["y"]))
        self._glow(self.food_color, center, 12, 77)
        pygame.draw.circle(self.screen, self.food_color, center, 8)

    def draw_panel(self, snapshot: dict) -> None:
        lines: List[str] = []
        for snake in snapshot["snakes"]:
            lines.append(f"{snake['name']}  score {snake['score']}  length {snake['length']}")
        lines.append(f"Speed {snapshot['speed']:.2f}  ({snapshot['difficulty']})")
        y = 10
        for line in lines:
            label = self.font.render(line, True, (255, 255, 255))
            self.screen.blit(label, (10, y))
            y += label.get_height() + 2

    def draw_game_over(self, snapshot: dict) -> None:
        width, height = self.screen.get_size()
        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        self.screen.blit(shade, (0, 0))
        winner = snapshot["winner"]
        if winner is None:
            title = "Game Over"
        elif winner == constants.TIE:
            title = "Tie!"
        else:
            names = {snake["id"]: snake["name"] for snake in snapshot["snakes"]}
            title = f"{names.get(winner, winner)} wins!"
        rows = [
            self.title_font.render(title, True, (255, 255, 255)),
            self.font.render(snapshot["reason"], True, (220, 220, 220)),
            self.font.render("Press R to restart, Esc to quit", True, (160, 160, 160)),
        ]
        y = height / 2 - 60
        for row in rows:
            self.screen.blit(row, (width / 2 - row.get_width() / 2, y))
            y += row.get_height() + 12

    def draw(self, snapshot: dict) -> None:
        self.clear()
        colors = {snake["id"]: tuple(snake["color"]) for snake in snapshot["snakes"]}
        self.draw_snakes(snapshot["snakes"])
        self.draw_projectiles(snapshot["projectiles"], colors)
        self.draw_food(snapshot["food"])
        self.draw_panel(snapshot)
        if snapshot["status"] == "ended":
            self.draw_game_over(snapshot)

    def present(self) -> None:
        pygame.display.flip()
