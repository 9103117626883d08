"""
Frame Rendering Service for snake sessions

Renders a GameSnapshot to a PIL (Pillow) image:
- Dark board with grid lines and a green border
- Snake head with eyes facing the current direction, body fading toward the tail
- Food with a soft glow and a shine highlight
- Dimmed overlays with captions for WAITING, PAUSED and GAME_OVER

FrameRecorder is a listener that writes one PNG per engine notification.
"""

import logging
from pathlib import Path
from typing import Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from ..domain.game_state import GameSnapshot, GameState
from ..domain.grid import Direction, Point
from ..engine import GameEventListener

logger = logging.getLogger(__name__)

CELL_SIZE = 24  # Size of each grid cell in pixels
BORDER_WIDTH = 2


class ColorScheme:
    """Board palette, readable on both dark and light hosts"""

    BACKGROUND = "#1E1E1E"
    GRID_LINE = "#282828"
    BORDER = "#50C878"
    SNAKE_HEAD = "#50DC64"
    SNAKE_BODY = "#32AA46"
    SNAKE_OUTLINE = "#1E7832"
    FOOD = "#FF5050"
    FOOD_SHINE = "#FFB4B4"
    TEXT_PRIMARY = "#DCDCDC"
    TEXT_DIM = "#8C8C8C"
    PAUSED = "#FFC832"

    FOOD_GLOW_ALPHA = 60
    OVERLAY_ALPHA = 160


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def interpolate_color(a: str, b: str, t: float) -> Tuple[int, int, int]:
    """Blend from color a to color b; t is clamped to [0, 1]"""
    t = max(0.0, min(1.0, t))
    ra, ga, ba = hex_to_rgb(a)
    rb, gb, bb = hex_to_rgb(b)
    return (
        int(ra + t * (rb - ra)),
        int(ga + t * (gb - ga)),
        int(ba + t * (bb - ba)),
    )


class FrameRenderer:
    """Render snake snapshots to images"""

    def __init__(self, cell_size: int = CELL_SIZE):
        self.cell_size = cell_size

        try:
            self.font_large = ImageFont.truetype("DejaVuSansMono-Bold.ttf", 28)
            self.font_small = ImageFont.truetype("DejaVuSansMono.ttf", 14)
        except OSError:
            self.font_large = ImageFont.load_default()
            self.font_small = ImageFont.load_default()

    def board_size(self, snapshot: GameSnapshot) -> Tuple[int, int]:
        return snapshot.cols * self.cell_size, snapshot.rows * self.cell_size

    def render(self, snapshot: GameSnapshot) -> Image.Image:
        """Render a single frame of the game"""
        width, height = self.board_size(snapshot)
        img = Image.new('RGBA', (width, height), hex_to_rgb(ColorScheme.BACKGROUND) + (255,))
        draw = ImageDraw.Draw(img)

        self._draw_grid(draw, width, height)
        self._draw_border(draw, width, height)

        if snapshot.state == GameState.WAITING:
            img = self._draw_overlay(img, [
                ("SNAKE", self.font_large, ColorScheme.TEXT_PRIMARY, -30),
                ("Press ENTER to play", self.font_small, ColorScheme.TEXT_DIM, 10),
                ("Arrow Keys / WASD to move  |  P to pause  |  R to restart",
                 self.font_small, ColorScheme.TEXT_DIM, 32),
            ])
            return img.convert('RGB')

        img = self._draw_food(img, snapshot.food)
        self._draw_snake(ImageDraw.Draw(img), snapshot)

        if snapshot.state == GameState.PAUSED:
            img = self._draw_overlay(img, [
                ("PAUSED", self.font_large, ColorScheme.PAUSED, -14),
                ("Press P or ESC to resume", self.font_small, ColorScheme.TEXT_DIM, 18),
            ])
        elif snapshot.state == GameState.GAME_OVER:
            img = self._draw_overlay(img, [
                ("GAME OVER", self.font_large, ColorScheme.FOOD, -40),
                (f"Score: {snapshot.score}", self.font_small, ColorScheme.TEXT_PRIMARY, -4),
                (f"High Score: {snapshot.high_score}", self.font_small, ColorScheme.TEXT_PRIMARY, 18),
                ("Press ENTER to play again", self.font_small, ColorScheme.TEXT_DIM, 42),
            ])

        return img.convert('RGB')

    def _draw_grid(self, draw: ImageDraw.ImageDraw, width: int, height: int):
        for x in range(0, width + 1, self.cell_size):
            draw.line([x, 0, x, height], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)
        for y in range(0, height + 1, self.cell_size):
            draw.line([0, y, width, y], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)

    def _draw_border(self, draw: ImageDraw.ImageDraw, width: int, height: int):
        draw.rectangle(
            [0, 0, width - 1, height - 1],
            outline=hex_to_rgb(ColorScheme.BORDER),
            width=BORDER_WIDTH
        )

    def _draw_snake(self, draw: ImageDraw.ImageDraw, snapshot: GameSnapshot):
        body = snapshot.snake
        pad = 2
        # Tail first so the head is painted on top
        for i in range(len(body) - 1, -1, -1):
            px = body[i].x * self.cell_size
            py = body[i].y * self.cell_size
            box = [px + pad, py + pad, px + self.cell_size - pad - 1, py + self.cell_size - pad - 1]

            if i == 0:
                draw.rounded_rectangle(
                    box, radius=4,
                    fill=hex_to_rgb(ColorScheme.SNAKE_HEAD),
                    outline=hex_to_rgb(ColorScheme.SNAKE_OUTLINE)
                )
                self._draw_eyes(draw, body[0], snapshot.direction or Direction.RIGHT)
            else:
                ratio = i / len(body)
                draw.rounded_rectangle(
                    box, radius=3,
                    fill=interpolate_color(ColorScheme.SNAKE_BODY, ColorScheme.BACKGROUND, ratio * 0.35),
                    outline=hex_to_rgb(ColorScheme.SNAKE_OUTLINE)
                )

    def _draw_eyes(self, draw: ImageDraw.ImageDraw, head: Point, direction: Direction):
        px = head.x * self.cell_size
        py = head.y * self.cell_size
        eye_size = 4
        offset = 5
        near = offset
        far = self.cell_size - offset - eye_size

        if direction == Direction.UP:
            eyes = [(px + near, py + near), (px + far, py + near)]
        elif direction == Direction.DOWN:
            eyes = [(px + near, py + far), (px + far, py + far)]
        elif direction == Direction.LEFT:
            eyes = [(px + near, py + near), (px + near, py + far)]
        else:
            eyes = [(px + far, py + near), (px + far, py + far)]

        for ex, ey in eyes:
            draw.ellipse([ex, ey, ex + eye_size - 1, ey + eye_size - 1], fill=(0, 0, 0))
            draw.ellipse([ex + 1, ey + 1, ex + eye_size // 2, ey + eye_size // 2], fill=(255, 255, 255))

    def _draw_food(self, img: Image.Image, food) -> Image.Image:
        if food is None:
            return img

        px = food.x * self.cell_size
        py = food.y * self.cell_size
        pad = 3
        size = self.cell_size - 2 * pad

        glow = Image.new('RGBA', img.size, (0, 0, 0, 0))
        ImageDraw.Draw(glow).ellipse(
            [px + pad - 2, py + pad - 2, px + pad + size + 1, py + pad + size + 1],
            fill=hex_to_rgb(ColorScheme.FOOD) + (ColorScheme.FOOD_GLOW_ALPHA,)
        )
        img = Image.alpha_composite(img, glow)

        draw = ImageDraw.Draw(img)
        draw.ellipse([px + pad, py + pad, px + pad + size - 1, py + pad + size - 1],
                     fill=hex_to_rgb(ColorScheme.FOOD))
        draw.ellipse([px + pad + 2, py + pad + 2, px + pad + 2 + size // 3, py + pad + 2 + size // 3],
                     fill=hex_to_rgb(ColorScheme.FOOD_SHINE))
        return img

    def _draw_overlay(self, img: Image.Image, lines) -> Image.Image:
        """Dim the board and draw centered caption lines (text, font, color, y offset from middle)"""
        overlay = Image.new('RGBA', img.size, (0, 0, 0, ColorScheme.OVERLAY_ALPHA))
        img = Image.alpha_composite(img, overlay)
        draw = ImageDraw.Draw(img)

        width, height = img.size
        for text, font, color, dy in lines:
            bbox = draw.textbbox((0, 0), text, font=font)
            text_width = bbox[2] - bbox[0]
            draw.text(
                (width // 2 - text_width // 2, height // 2 + dy),
                text,
                fill=hex_to_rgb(color),
                font=font
            )
        return img


class FrameRecorder(GameEventListener):
    """Listener that saves every notified snapshot as frame_00000.png, frame_00001.png, ..."""

    def __init__(self, output_dir: Union[str, Path], renderer: FrameRenderer = None):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.renderer = renderer or FrameRenderer()
        self.frame_count = 0

    def on_state_changed(self, snapshot: GameSnapshot) -> None:
        path = self.output_dir / f"frame_{self.frame_count:05d}.png"
        self.renderer.render(snapshot).save(path)
        self.frame_count += 1
        logger.debug("Saved frame %s", path)
