# gentracer

A small path tracer in plain Python. It renders a diffuse sphere resting on a
large ground sphere, lit by a white-to-blue sky gradient, and saves the result
as a PNG or a plain-text (P3) PPM image.

There are no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

## Command line

```
gentracer
```

renders the demo scene in a background thread, prints status lines
("Rendering in progress... 42%", "Render finished.") on stderr and writes the
image when it is done. The exit status is 0 on success and 1 if the render
failed.

Options:

- `--width N`, `--height N`: image size in pixels (default 3840 x 2160).
- `--samples N`: jittered samples per pixel (default 2048).
- `--threads N`: worker threads; by default one per CPU.
- `--output PATH`: output file (default `result.png`).
- `--format {png,ppm}`: output format (default `png`).
- `--log PATH`: log file (default `logs/log.txt`).

The defaults are heavy for pure Python; for a quick result try something like

```
gentracer --width 320 --height 180 --samples 8
```

Log messages go to the log file and to the controlling terminal (or stderr
when there is none).

## Library use

```python
from gentracer.camera import Camera
from gentracer.cli import build_scene
from gentracer.image import Image, ImageType, ImageWriter
from gentracer.ray import Vec3

scene = build_scene()
image = Image(160, 90)
camera = Camera(
    Vec3(0.0, 0.0, 0.0),
    Vec3(0.0, 0.0, -1.0),
    Vec3(0.0, 1.0, 0.0),
    samples_per_pixel=4,
)
camera.render(scene, image, lambda row: None)

ImageWriter("result.png").write(ImageType.PNG, image)
```

Modules:

- `gentracer.ray`: `Vec3`, an immutable vector with arithmetic, `dot`,
  `cross`, `length` and `normalized`, and `Ray` with `at(t)`.
- `gentracer.interval`: `Interval`, a closed range of floats with `contains`,
  `surrounds`, `clamp`, `expand_to_include`, `size`, `is_empty`, `intersect`
  and `overlaps`.
- `gentracer.sampling`: `random_float`, `random_vector`, `random_unit_vector`
  and `random_on_hemisphere`; each takes an optional `random.Random`.
- `gentracer.scene`: `HitInfo`, the `SceneObject` base class, `Sphere` and
  `Scene`. `Scene.cast(ray, depth)` follows diffuse bounces, halving the
  light at each, and returns the sky colour for rays that hit nothing.
- `gentracer.camera`: `Camera`, which renders a scene into an `Image`,
  averaging `samples_per_pixel` jittered rays per pixel with up to 10 bounces,
  split across threads, and calls a callback with each finished row.
- `gentracer.image`: `Image` (linear RGB pixels; `data()` gives gamma-2.2
  corrected bytes), `ImageType`, `encode_png`, `encode_ppm` and
  `ImageWriter`.
- `gentracer.layer`: `Layer` and `LayerStack`, which dispatch attach, detach,
  update and render calls; the stack detaches every layer when used as a
  context manager and left.
- `gentracer.log`: `init_logger`, `get_logger` and `format_vec3`.
- `gentracer.cli`: `build_scene`, `RenderLayer` (background render with
  `progress()` and `save()`) and `main`.

## What it does not do

There is no window or interactive preview: the render is shown only as
status lines on stderr and as the saved file. The scene is fixed to the two
spheres of `build_scene`, and there is no scene file format.

## Tests

```
pip install .[test]
pytest
```