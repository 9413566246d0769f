"""Command-line entry point running the render layer until the image is done."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from pathlib import Path
from typing import Any, Optional, Sequence

from gentracer.camera import Camera
from gentracer.image import Image, ImageType, ImageWriter
from gentracer.layer import Layer, LayerStack
from gentracer.log import DEFAULT_LOGFILE, TRACE, get_logger, init_logger
from gentracer.ray import Vec3
from gentracer.scene import Scene, Sphere

DEFAULT_WIDTH = 3840
DEFAULT_HEIGHT = 2160
DEFAULT_SAMPLES = 2048
DEFAULT_OUTPUT = "result.png"

STATUS_IDLE = "Render not started."
STATUS_RENDERING = "Rendering in progress..."
STATUS_FINISHED = "Render finished."

_FRAME_INTERVAL = 0.1
_SPHERE_COLOR = Vec3(0.619, 0.286, 0.396)


def build_scene() -> Scene:
    """A small sphere resting on a large ground sphere."""
    scene = Scene()
    scene.add(Sphere(Vec3(0.0, 0.0, -1.0), 0.5, _SPHERE_COLOR))
    scene.add(Sphere(Vec3(0.0, -100.5, -1.0), 100.0, _SPHERE_COLOR))
    return scene


class RenderLayer(Layer):
    """Renders the scene in the background and tracks its progress."""

    def __init__(
        self,
        application: Any = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        samples_per_pixel: int = DEFAULT_SAMPLES,
        output: str | Path = DEFAULT_OUTPUT,
        image_type: ImageType = ImageType.PNG,
        threads: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(application)
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.image_type = image_type
        self.writer = ImageWriter(output)
        self.threads = threads
        self._rng = rng

        self.image: Optional[Image] = None
        self.scene: Optional[Scene] = None
        self.camera: Optional[Camera] = None
        self.status = STATUS_IDLE
        self.error: Optional[BaseException] = None

        self._thread: Optional[threading.Thread] = None
        self._finished = threading.Event()
        self._started = False
        self._lock = threading.Lock()
        self._scanlines = 0
        self._total = 1

    @property
    def finished(self) -> bool:
        return self._finished.is_set()

    @property
    def started(self) -> bool:
        return self._started

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the render finishes or ``timeout`` passes."""
        return self._finished.wait(timeout)

    def on_attach(self) -> None:
        self.image = Image(self.width, self.height)
        self._total = self.height
        self.scene = build_scene()
        self.scene.rng = self._rng
        self.camera = Camera(
            Vec3(),
            Vec3(0.0, 0.0, -1.0),
            Vec3(0.0, 1.0, 0.0),
            samples_per_pixel=self.samples_per_pixel,
            threads=self.threads,
            rng=self._rng,
        )
        self.start_render()

    def on_detach(self) -> None:
        if self._thread is not None:
            self._thread.join()

    def on_update(self, delta: float) -> None:
        pass

    def on_render(self) -> None:
        if self.finished:
            self.status = STATUS_FINISHED
        elif self._started:
            self.status = f"{STATUS_RENDERING} {self.progress():.0%}"
        else:
            self.status = STATUS_IDLE

    def start_render(self) -> None:
        """Start a fresh render, waiting for any earlier one to finish."""
        if self.image is None or self.scene is None or self.camera is None:
            raise RuntimeError("the layer must be attached before rendering")
        if self._thread is not None:
            self._thread.join()

        self._finished.clear()
        self._started = True
        self.error = None
        with self._lock:
            self._scanlines = 0
        self._total = self.image.height

        self._thread = threading.Thread(target=self._render, daemon=True)
        self._thread.start()

    def _render(self) -> None:
        assert self.camera is not None and self.scene is not None and self.image is not None
        try:
            self.camera.render(self.scene, self.image, self._on_scanline)
        except Exception as exc:  # reported to the caller through ``error``
            self.error = exc
            get_logger().error("Render failed: %s", exc)
        finally:
            self._finished.set()

    def _on_scanline(self, row: int) -> None:
        with self._lock:
            self._scanlines += 1

    def progress(self) -> float:
        """Fraction of scanlines rendered so far."""
        with self._lock:
            return self._scanlines / self._total

    def save(self) -> Path:
        """Write the finished image and return its path."""
        if self.image is None or not self.finished:
            raise RuntimeError("there is no finished render to save")
        self.writer.write(self.image_type, self.image)
        return self.writer.file_name


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gentracer", description="Render the demo scene to an image file."
    )
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT)
    parser.add_argument("--samples", type=_positive_int, default=DEFAULT_SAMPLES)
    parser.add_argument("--threads", type=_positive_int, default=None)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    parser.add_argument(
        "--format", choices=[t.value for t in ImageType], default=ImageType.PNG.value
    )
    parser.add_argument("--log", default=DEFAULT_LOGFILE)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render, report progress on stderr, save the result; return the exit status."""
    args = _parser().parse_args(argv)
    init_logger(args.log)
    logger = get_logger()
    logger.log(TRACE, "Application running...")

    layer = RenderLayer(
        width=args.width,
        height=args.height,
        samples_per_pixel=args.samples,
        output=args.output,
        image_type=ImageType(args.format),
        threads=args.threads,
    )
    with LayerStack() as stack:
        stack.push_layer(layer)
        last = time.monotonic()
        shown = None
        while True:
            done = layer.finished
            now = time.monotonic()
            stack.on_update(now - last)
            last = now
            stack.on_render()
            if layer.status != shown:
                print(layer.status, file=sys.stderr)
                shown = layer.status
            if done:
                break
            layer.wait(_FRAME_INTERVAL)

    if layer.error is not None:
        return 1
    path = layer.save()
    logger.info("Saved %s", path)
    logger.log(TRACE, "Application destroyed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())