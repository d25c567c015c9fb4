"""Collision layers: which collision shapes may interact with which."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Type, Union

MAX_LAYERS = 32
_ALL_32 = 0xFFFF_FFFF


class PhysicsLayer(Enum):
    """Base for enums that describe collision layers.

    Each member maps to one bit, in declaration order: the first member is
    bit 0, the second bit 1, and so on. At most 32 members are allowed.
    """

    @classmethod
    def _check_size(cls) -> int:
        count = len(cls)
        if count > MAX_LAYERS:
            raise TypeError(f"Reached the maximum of {MAX_LAYERS} layers")
        return count

    def to_bits(self) -> int:
        """The single bit of this layer."""
        type(self)._check_size()
        return 1 << list(type(self)).index(self)

    @classmethod
    def all_bits(cls) -> int:
        """The bits of every layer in this enum."""
        count = cls._check_size()
        return _ALL_32 if count == MAX_LAYERS else (1 << count) - 1


LayerLike = Union[PhysicsLayer, int]


def _bits(layer: LayerLike) -> int:
    if isinstance(layer, PhysicsLayer):
        return layer.to_bits()
    if isinstance(layer, int):
        return layer & _ALL_32
    raise TypeError(f"not a physics layer: {layer!r}")


@dataclass(frozen=True)
class CollisionLayers:
    """The groups a collision shape belongs to and the masks it collides with.

    Two shapes interact if a group of each is in the masks of the other.
    The default has every layer in both groups and masks.
    """

    groups: int = _ALL_32
    masks: int = _ALL_32

    @classmethod
    def new(cls, group: LayerLike, mask: LayerLike) -> CollisionLayers:
        """A single group and a single mask."""
        return cls.from_bits(_bits(group), _bits(mask))

    @classmethod
    def all(cls, layer_type: Type[PhysicsLayer]) -> CollisionLayers:
        """Every layer of ``layer_type`` in both groups and masks."""
        bits = layer_type.all_bits()
        return cls.from_bits(bits, bits)

    @classmethod
    def all_groups(cls, layer_type: Type[PhysicsLayer]) -> CollisionLayers:
        """Every layer of ``layer_type`` as group, no masks."""
        return cls.from_bits(layer_type.all_bits(), 0)

    @classmethod
    def all_masks(cls, layer_type: Type[PhysicsLayer]) -> CollisionLayers:
        """No groups, every layer of ``layer_type`` as mask."""
        return cls.from_bits(0, layer_type.all_bits())

    @classmethod
    def none(cls) -> CollisionLayers:
        """No groups and no masks: interacts with nothing."""
        return cls.from_bits(0, 0)

    @classmethod
    def from_bits(cls, groups: int, masks: int) -> CollisionLayers:
        """Build from raw bit sets."""
        return cls(groups & _ALL_32, masks & _ALL_32)

    def interacts_with(self, other: CollisionLayers) -> bool:
        """True if this shape and ``other`` would interact."""
        return bool(self.groups & other.masks) and bool(other.groups & self.masks)

    def contains_group(self, layer: LayerLike) -> bool:
        """True if ``layer`` is among the groups."""
        return bool(self.groups & _bits(layer))

    def with_group(self, layer: LayerLike) -> CollisionLayers:
        """Copy with ``layer`` added to the groups."""
        return dataclasses.replace(self, groups=self.groups | _bits(layer))

    def with_groups(self, layers: Iterable[LayerLike]) -> CollisionLayers:
        """Copy with every one of ``layers`` added to the groups."""
        groups = self.groups
        for layer in layers:
            groups |= _bits(layer)
        return dataclasses.replace(self, groups=groups)

    def without_group(self, layer: LayerLike) -> CollisionLayers:
        """Copy with ``layer`` removed from the groups."""
        return dataclasses.replace(self, groups=self.groups & ~_bits(layer) & _ALL_32)

    def contains_mask(self, layer: LayerLike) -> bool:
        """True if ``layer`` is among the masks."""
        return bool(self.masks & _bits(layer))

    def with_mask(self, layer: LayerLike) -> CollisionLayers:
        """Copy with ``layer`` added to the masks."""
        return dataclasses.replace(self, masks=self.masks | _bits(layer))

    def with_masks(self, layers: Iterable[LayerLike]) -> CollisionLayers:
        """Copy with every one of ``layers`` added to the masks."""
        masks = self.masks
        for layer in layers:
            masks |= _bits(layer)
        return dataclasses.replace(self, masks=masks)

    def without_mask(self, layer: LayerLike) -> CollisionLayers:
        """Copy with ``layer`` removed from the masks."""
        return dataclasses.replace(self, masks=self.masks & ~_bits(layer) & _ALL_32)