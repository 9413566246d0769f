"""Layers that receive update and render calls, and the stack holding them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator


class Layer(ABC):
    """A unit of application behaviour driven by the main loop."""

    def __init__(self, application: Any = None) -> None:
        self.application = application

    @abstractmethod
    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""

    @abstractmethod
    def on_detach(self) -> None:
        """Called when the layer is removed from a stack."""

    @abstractmethod
    def on_update(self, delta: float) -> None:
        """Advance the layer by ``delta``."""

    @abstractmethod
    def on_render(self) -> None:
        """Draw the layer."""


class LayerStack:
    """An ordered collection of layers, updated and rendered in order."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.pop_all_layers()

    def push_layer(self, layer: Layer) -> None:
        """Insert ``layer`` and attach it."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1
        layer.on_attach()

    def pop_layer(self, layer: Layer) -> None:
        """Remove ``layer`` and detach it; unknown layers are ignored."""
        position = next(
            (i for i, held in enumerate(self._layers) if held is layer), None
        )
        if position is None:
            return
        del self._layers[position]
        self._insert_index -= 1
        layer.on_detach()

    def pop_all_layers(self) -> None:
        """Detach and remove every layer."""
        for layer in self._layers:
            layer.on_detach()
        self._layers.clear()
        self._insert_index = 0

    def on_update(self, delta: float) -> None:
        """Update every layer in order."""
        for layer in list(self._layers):
            layer.on_update(delta)

    def on_render(self) -> None:
        """Render every layer in order."""
        for layer in list(self._layers):
            layer.on_render()