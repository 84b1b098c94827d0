"""Playable character presets and their sprite details.

Each character is a body cube plus a few flat details (eyes, beak, snout)
whose placement depends on the character and the direction it faces.
Details are looked up in per-facing dispatch tables keyed by
``CharacterType``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict

from roadhop.graphics.primitives import Buffer, Color, draw_rect
from roadhop.graphics.shading import hex_to_rgb
from roadhop.graphics.voxel import draw_cube


class CharacterType(Enum):
    """Selectable characters, in select-screen order."""

    PIG = "pig"
    CHICKEN = "chicken"
    DUCK = "duck"
    COW = "cow"

    @classmethod
    def parse(cls, name: "str | CharacterType") -> "CharacterType":
        if isinstance(name, CharacterType):
            return name
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"Unknown character: {name!r}") from None


class Facing(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Palette:
    body: Color
    dark: Color
    detail: Color
    eye: Color = (0, 0, 0)


PALETTES: Dict[CharacterType, Palette] = {
    CharacterType.PIG: Palette(hex_to_rgb("#ffb6c1"), hex_to_rgb("#e08ba3"), hex_to_rgb("#ff69b4")),
    CharacterType.CHICKEN: Palette(hex_to_rgb("#ffffff"), hex_to_rgb("#dddddd"), hex_to_rgb("#ff0000")),
    CharacterType.DUCK: Palette(hex_to_rgb("#ffeb3b"), hex_to_rgb("#fdd835"), hex_to_rgb("#ff9800")),
    CharacterType.COW: Palette(hex_to_rgb("#eeeeee"), hex_to_rgb("#bdbdbd"), hex_to_rgb("#222222")),
}

WHITE: Color = (255, 255, 255)
ORANGE = hex_to_rgb("#ff9800")
RED = hex_to_rgb("#ff0000")
NOSTRIL = hex_to_rgb("#b04060")
HORN = hex_to_rgb("#dddddd")

BODY_W = 32
BODY_H = 24
BODY_D = 20
LEG_W = 6
LEG_H = 8

# Birds stand on orange legs
BIRDS = frozenset({CharacterType.CHICKEN, CharacterType.DUCK})

Detail = Callable[[Buffer, float, float, Palette], None]


# Front view (facing down, toward the camera)

def _front_eyes(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    draw_rect(buffer, cx + 4, cy + 6, 8, 5, WHITE)
    draw_rect(buffer, cx + 20, cy + 6, 8, 5, WHITE)
    draw_rect(buffer, cx + 6, cy + 7, 4, 4, pal.eye)
    draw_rect(buffer, cx + 22, cy + 7, 4, 4, pal.eye)


def _pig_front(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    _front_eyes(buffer, cx, cy, pal)
    draw_rect(buffer, cx + 10, cy + 14, 12, 6, pal.detail)
    draw_rect(buffer, cx + 12, cy + 16, 3, 3, NOSTRIL)
    draw_rect(buffer, cx + 17, cy + 16, 3, 3, NOSTRIL)


def _chicken_front(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    _front_eyes(buffer, cx, cy, pal)
    draw_rect(buffer, cx + 14, cy + 16, 4, 6, RED)      # wattle
    draw_rect(buffer, cx + 12, cy + 12, 8, 5, ORANGE)   # beak


def _duck_front(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    _front_eyes(buffer, cx, cy, pal)
    draw_rect(buffer, cx + 10, cy + 14, 12, 5, pal.detail)


def _cow_front(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    # Pupils pushed to the outer corners
    draw_rect(buffer, cx + 4, cy + 6, 8, 5, WHITE)
    draw_rect(buffer, cx + 20, cy + 6, 8, 5, WHITE)
    draw_rect(buffer, cx + 4, cy + 7, 3, 3, pal.eye)
    draw_rect(buffer, cx + 25, cy + 7, 3, 3, pal.eye)
    draw_rect(buffer, cx + 8, cy + 16, 16, 6, pal.detail)
    draw_cube(buffer, cx - 2, cy - 4, 6, 8, 4, HORN)
    draw_cube(buffer, cx + 28, cy - 4, 6, 8, 4, HORN)


# Side views

def _left_eye(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    draw_rect(buffer, cx + 8, cy + 6, 8, 5, WHITE)
    draw_rect(buffer, cx + 8, cy + 7, 4, 4, pal.eye)


def _right_eye(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    draw_rect(buffer, cx + 16, cy + 6, 8, 5, WHITE)
    draw_rect(buffer, cx + 20, cy + 7, 4, 4, pal.eye)


def _bird_left(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    _left_eye(buffer, cx, cy, pal)
    draw_rect(buffer, cx, cy + 14, 6, 4, ORANGE)


def _bird_right(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    _right_eye(buffer, cx, cy, pal)
    draw_rect(buffer, cx + 28, cy + 14, 6, 4, ORANGE)


# Back view

def _pig_back(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    draw_rect(buffer, cx + 14, cy + 18, 4, 4, pal.detail)


def _nothing(buffer: Buffer, cx: float, cy: float, pal: Palette) -> None:
    pass


DETAILS: Dict[Facing, Dict[CharacterType, Detail]] = {
    Facing.DOWN: {
        CharacterType.PIG: _pig_front,
        CharacterType.CHICKEN: _chicken_front,
        CharacterType.DUCK: _duck_front,
        CharacterType.COW: _cow_front,
    },
    Facing.LEFT: {
        CharacterType.PIG: _left_eye,
        CharacterType.CHICKEN: _bird_left,
        CharacterType.DUCK: _bird_left,
        CharacterType.COW: _left_eye,
    },
    Facing.RIGHT: {
        CharacterType.PIG: _right_eye,
        CharacterType.CHICKEN: _bird_right,
        CharacterType.DUCK: _bird_right,
        CharacterType.COW: _right_eye,
    },
    Facing.UP: {
        CharacterType.PIG: _pig_back,
        CharacterType.CHICKEN: _nothing,
        CharacterType.DUCK: _nothing,
        CharacterType.COW: _nothing,
    },
}


def draw_character(
    buffer: Buffer,
    character: CharacterType,
    facing: Facing,
    cx: float,
    cy: float,
) -> None:
    """Draw a character whose body's top-left corner is at (cx, cy)."""
    pal = PALETTES[character]
    leg_color = ORANGE if character in BIRDS else pal.dark

    draw_cube(buffer, cx + 4, cy + 22, LEG_W, LEG_H, 4, leg_color)
    draw_cube(buffer, cx + 20, cy + 22, LEG_W, LEG_H, 4, leg_color)
    draw_cube(buffer, cx, cy, BODY_W, BODY_H, BODY_D, pal.body)

    DETAILS[facing][character](buffer, cx, cy, pal)

    # Comb shows from every side
    if character is CharacterType.CHICKEN:
        draw_rect(buffer, cx + 12, cy - 6, 8, 6, RED)
