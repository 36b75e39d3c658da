"""A tree of animation property configurations with inherited values."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(eq=False)
class AnimationPropertyConfig:
    """Animation properties of one node.

    ``values`` is the node whose properties are in effect (itself when
    overridden, otherwise inherited); ``parent_animation`` is the parent node,
    or the node itself for a root.
    """

    overridden: bool = False
    internal_bezier: str = ""
    internal_style: str = ""
    internal_speed: float = 0.0
    internal_enabled: int = -1
    values: Optional["AnimationPropertyConfig"] = field(default=None, repr=False)
    parent_animation: Optional["AnimationPropertyConfig"] = field(default=None, repr=False)


class AnimationConfigTree:
    """Named animation configs arranged as a tree of inheriting nodes."""

    def __init__(self) -> None:
        self._configs: dict[str, AnimationPropertyConfig] = {}

    def create_node(self, name: str, parent: str = "") -> None:
        """Create or reset a node inheriting from ``parent``.

        With no (known) parent the node becomes a root referencing its own
        values. An existing node keeps its identity and is reset in place.
        """
        parent_config = self._configs.get(parent) if parent else None
        config = self._configs.get(name)
        if config is None:
            config = AnimationPropertyConfig()

        config.overridden = False
        config.internal_bezier = ""
        config.internal_style = ""
        config.internal_speed = 0.0
        config.internal_enabled = -1
        if parent_config is not None:
            config.values = parent_config.values
            config.parent_animation = parent_config
        else:
            config.values = config
            config.parent_animation = config

        self._configs[name] = config

    def node_exists(self, name: str) -> bool:
        """Whether a node of this name has been created."""
        return name in self._configs

    def set_config_for_node(
        self, name: str, enabled: int, speed: float, bezier: str, style: str = ""
    ) -> None:
        """Override a node's values and pass them down to non-overridden children.

        Unknown names are ignored.
        """
        config = self._configs.get(name)
        if config is None:
            return

        config.overridden = True
        config.internal_bezier = bezier
        config.internal_style = style
        config.internal_speed = float(speed)
        config.internal_enabled = int(enabled)
        config.values = config

        self._set_anim_for_children(config)

    def get_config(self, name: str) -> AnimationPropertyConfig:
        """The config of a node; raises KeyError for unknown names."""
        return self._configs[name]

    def full_config(self) -> Mapping[str, AnimationPropertyConfig]:
        """A read-only view of all nodes by name."""
        return MappingProxyType(self._configs)

    def _set_anim_for_children(self, parent: AnimationPropertyConfig) -> None:
        for config in self._configs.values():
            if config is parent:
                continue
            if config.parent_animation is parent and not config.overridden:
                config.values = parent.values
                self._set_anim_for_children(config)