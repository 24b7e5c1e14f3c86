"""Pixel-exact platformer collision world with tiled layers, actors and solids."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

Vec2 = tuple[float, float]


class Tile(Enum):
    """Kind of a static tile or of a collision result."""

    EMPTY = "empty"
    SOLID = "solid"
    JUMP_THROUGH = "jump_through"
    COLLIDER = "collider"

    def combine(self, other: Tile) -> Tile:
        """Merge two collision results; anything solid-like wins."""
        passable = {Tile.EMPTY, Tile.JUMP_THROUGH}
        if self is Tile.EMPTY and other is Tile.EMPTY:
            return Tile.EMPTY
        if self in passable and other in passable:
            return Tile.JUMP_THROUGH
        return Tile.SOLID


@dataclass(frozen=True)
class Actor:
    """Handle of a moving body that collides with the world."""

    index: int


@dataclass(frozen=True)
class Solid:
    """Handle of a moving platform that pushes and carries actors."""

    index: int


@dataclass(frozen=True)
class _Rect:
    x: float
    y: float
    w: float
    h: float

    def overlaps(self, other: _Rect) -> bool:
        return (
            self.x <= other.x + other.w
            and self.x + self.w >= other.x
            and self.y <= other.y + other.h
            and self.y + self.h >= other.y
        )

    def contains(self, point: Vec2) -> bool:
        px, py = point
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h


@dataclass
class _StaticTiledLayer:
    static_colliders: list[Tile]
    tile_width: float
    tile_height: float
    width: int
    tag: int


@dataclass
class _Collider:
    pos: Vec2
    width: int
    height: int
    collidable: bool = True
    squished: bool = False
    x_remainder: float = 0.0
    y_remainder: float = 0.0
    squishers: set[Solid] = field(default_factory=set)
    descent: bool = False
    seen_wood: bool = False

    def rect(self) -> _Rect:
        return _Rect(self.pos[0], self.pos[1], float(self.width), float(self.height))


def _vec(pos: Sequence[float]) -> Vec2:
    x, y = pos
    return (float(x), float(y))


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class World:
    """Collision world: static tile layers plus dynamic actors and solids."""

    def __init__(self) -> None:
        self._layers: list[_StaticTiledLayer] = []
        self._solids: list[_Collider] = []
        self._actors: list[_Collider] = []

    def add_static_tiled_layer(self, static_colliders, tile_width, tile_height, width, tag):
        """Add a row-major grid of tiles, ``width`` tiles per row."""
        self._layers.append(
            _StaticTiledLayer(
                static_colliders=list(static_colliders),
                tile_width=float(tile_width),
                tile_height=float(tile_height),
                width=int(width),
                tag=int(tag),
            )
        )

    def add_actor(self, pos, width, height) -> Actor:
        """Create an actor; one spawned inside a jump-through tile may fall through it."""
        pos = _vec(pos)
        actor = Actor(len(self._actors))
        inside_wood = self.collide_solids(pos, width, height) is Tile.JUMP_THROUGH
        self._actors.append(
            _Collider(
                pos=pos,
                width=int(width),
                height=int(height),
                descent=inside_wood,
                seen_wood=inside_wood,
            )
        )
        return actor

    def add_solid(self, pos, width, height) -> Solid:
        """Create a moving solid."""
        solid = Solid(len(self._solids))
        self._solids.append(_Collider(pos=_vec(pos), width=int(width), height=int(height)))
        return solid

    def set_actor_position(self, actor, pos) -> None:
        """Teleport an actor, dropping any accumulated sub-pixel movement."""
        collider = self._actors[actor.index]
        collider.x_remainder = 0.0
        collider.y_remainder = 0.0
        collider.pos = _vec(pos)

    def descent(self, actor) -> None:
        """Let the actor drop through jump-through tiles."""
        self._actors[actor.index].descent = True

    def move_v(self, actor, dy) -> bool:
        """Move vertically pixel by pixel; return False if blocked."""
        collider = self._actors[actor.index]
        collider.y_remainder += dy
        steps = _round(collider.y_remainder)
        if steps != 0:
            collider.y_remainder -= steps
            sign = _sign(steps)
            while steps != 0:
                x, y = collider.pos
                tile = self.collide_solids((x, y + sign), collider.width, collider.height)
                if tile is Tile.JUMP_THROUGH and collider.descent:
                    collider.seen_wood = True
                if tile is Tile.JUMP_THROUGH and sign < 0:
                    collider.seen_wood = True
                    collider.descent = True
                if tile is Tile.EMPTY or (tile is Tile.JUMP_THROUGH and collider.descent):
                    collider.pos = (x, y + sign)
                    steps -= sign
                else:
                    return False

        tile = self.collide_solids(collider.pos, collider.width, collider.height)
        if tile is not Tile.JUMP_THROUGH:
            collider.seen_wood = False
            collider.descent = False
        return True

    def move_h(self, actor, dx) -> bool:
        """Move horizontally pixel by pixel; return False if blocked."""
        collider = self._actors[actor.index]
        collider.x_remainder += dx
        steps = _round(collider.x_remainder)
        if steps != 0:
            collider.x_remainder -= steps
            sign = _sign(steps)
            while steps != 0:
                x, y = collider.pos
                tile = self.collide_solids((x + sign, y), collider.width, collider.height)
                if tile is Tile.JUMP_THROUGH:
                    collider.descent = True
                    collider.seen_wood = True
                if tile in (Tile.EMPTY, Tile.JUMP_THROUGH):
                    collider.pos = (x + sign, y)
                    steps -= sign
                else:
                    return False
        return True

    def solid_move(self, solid, dx, dy) -> None:
        """Move a solid, carrying riders and pushing (or squishing) actors."""
        collider = self._solids[solid.index]
        collider.x_remainder += dx
        collider.y_remainder += dy
        move_x = _round(collider.x_remainder)
        move_y = _round(collider.y_remainder)

        sx, sy = collider.pos
        riding_rect = _Rect(sx, sy - 1.0, float(collider.width), 1.0)
        pushing_rect = _Rect(
            sx + move_x, sy, float(collider.width) - 1.0, float(collider.height)
        )

        riding: list[Actor] = []
        pushing: list[Actor] = []
        for index, actor_collider in enumerate(self._actors):
            ax, ay = actor_collider.pos
            rider_rect = _Rect(
                ax, ay + actor_collider.height - 1.0, float(actor_collider.width), 1.0
            )
            pushed = pushing_rect.overlaps(actor_collider.rect())
            if riding_rect.overlaps(rider_rect):
                riding.append(Actor(index))
            elif pushed and not actor_collider.squished:
                pushing.append(Actor(index))

            if not pushed:
                actor_collider.squishers.discard(solid)
                if not actor_collider.squishers:
                    actor_collider.squished = False

        collider.collidable = False
        for actor in riding:
            self.move_h(actor, float(move_x))
        for actor in pushing:
            if not self.move_h(actor, float(move_x)):
                victim = self._actors[actor.index]
                victim.squished = True
                victim.squishers.add(solid)
        collider.collidable = True

        x, y = collider.pos
        if move_x != 0:
            collider.x_remainder -= move_x
            x += move_x
        if move_y != 0:
            collider.y_remainder -= move_y
            y += move_y
        collider.pos = (x, y)

    def solid_at(self, pos) -> bool:
        """Whether a point is inside a solid tile (tag 1) or a collidable solid."""
        return self.tag_at(pos, 1)

    def tag_at(self, pos, tag) -> bool:
        """Whether the first non-empty tile under a point carries ``tag``."""
        pos = _vec(pos)
        for layer in self._layers:
            tile = self._tile_at(layer, pos)
            if tile is not None and tile is not Tile.EMPTY:
                return layer.tag == tag
        return any(s.collidable and s.rect().contains(pos) for s in self._solids)

    def collide_solids(self, pos, width, height) -> Tile:
        """Collision of a box with tag-1 tiles, then with collidable solids."""
        pos = _vec(pos)
        tile = self.collide_tag(1, pos, width, height)
        if tile is not Tile.EMPTY:
            return tile
        box = _Rect(pos[0], pos[1], float(width), float(height))
        if any(s.collidable and s.rect().overlaps(box) for s in self._solids):
            return Tile.COLLIDER
        return Tile.EMPTY

    def collide_tag(self, tag, pos, width, height) -> Tile:
        """Collision of a box with the tiles of layers carrying ``tag``."""
        px, py = _vec(pos)
        for layer in self._layers:
            if layer.tag != tag:
                continue

            def check(point: Vec2, layer: _StaticTiledLayer = layer) -> Tile:
                tile = self._tile_at(layer, point)
                return Tile.EMPTY if tile is None else tile

            right = px + width - 1.0
            bottom = py + height - 1.0
            tile = (
                check((px, py))
                .combine(check((right, py)))
                .combine(check((right, bottom)))
                .combine(check((px, bottom)))
            )
            if tile is not Tile.EMPTY:
                return tile

            if width > int(layer.tile_width):
                x = px + layer.tile_width
                while x < right:
                    tile = check((x, py)).combine(check((x, bottom)))
                    if tile is not Tile.EMPTY:
                        return tile
                    x += layer.tile_width

            if height > int(layer.tile_height):
                y = py + layer.tile_height
                while y < bottom:
                    tile = check((px, y)).combine(check((right, y)))
                    if tile is not Tile.EMPTY:
                        return tile
                    y += layer.tile_height
        return Tile.EMPTY

    def squished(self, actor) -> bool:
        """Whether a solid has crushed the actor against something."""
        return self._actors[actor.index].squished

    def actor_pos(self, actor) -> Vec2:
        return self._actors[actor.index].pos

    def solid_pos(self, solid) -> Vec2:
        return self._solids[solid.index].pos

    def collide_check(self, actor, pos) -> bool:
        """Whether the actor placed at ``pos`` would collide."""
        collider = self._actors[actor.index]
        tile = self.collide_solids(pos, collider.width, collider.height)
        if collider.descent:
            return tile in (Tile.SOLID, Tile.COLLIDER)
        return tile in (Tile.SOLID, Tile.COLLIDER, Tile.JUMP_THROUGH)

    @staticmethod
    def _tile_at(layer: _StaticTiledLayer, pos: Vec2) -> Tile | None:
        # Row uses tile_width and column tile_height, matching the layer lookup rules.
        row = int(pos[1] / layer.tile_width)
        col = int(pos[0] / layer.tile_height)
        index = row * layer.width + col
        if 0 <= index < len(layer.static_colliders):
            return layer.static_colliders[index]
        return None