# pathtrace

A small Monte Carlo path tracer. It renders a fixed scene of four spheres
(a large ground sphere, a matte centre sphere, a glass sphere and a mirror-like
metal sphere) under a white-to-blue sky gradient into a window. Worker threads
render horizontal bands of rows, and the window shows the picture as it fills in.

## Installation

```
pip install .
```

This pulls in `pygame`, which is used for the window.

## Running

```
pathtrace
```

A resizable window of 800×600 pixels opens and the image fills in band by
band; the window picks up new pixels about every 100 ms. Resizing the window
stops the running jobs, clears the image and renders the scene again at the new
size. Closing the window stops all jobs.

Options:

- `--width N`, `--height N`: the starting window size (default 800 and 600;
  both must be positive).
- `--single-thread`: render the whole image on the main thread instead of in
  bands on a worker pool. The window does not respond until that render is done.

Each pixel averages 50 jittered samples, and a path may bounce up to 1000
times before it counts as black.

## Using it as a library

The pieces of the renderer can be used on their own:

- `pathtrace.vec3.Vec3`: an immutable 3-component vector with arithmetic,
  `dot`, `cross`, `length`, `normalize` (raises `ValueError` for a zero
  vector), `clamp`, `reflect`, `refract` and random sampling helpers
  (`Vec3.random`, `random_in_unit_sphere`, `random_unit_vector`,
  `random_on_hemisphere`).
- `pathtrace.rng.Random`: uniform floats in `[low, high)`, optionally seeded.
- `pathtrace.ray.Ray`: a ray whose non-zero direction is normalised on
  construction, with `Ray.at(t)`.
- `pathtrace.display.Display`: image size, aspect ratio and
  `framebuffer_pos(x, y)`, the offset of a pixel's red byte in an RGBA
  framebuffer (raises `ValueError` when the position is out of range).
- `pathtrace.hittable`: `HitRecord`, the abstract `SceneObject` and `Sphere`;
  `hit(ray, t_min, t_max)` returns a `HitRecord` or `None`.
- `pathtrace.material`: `Lambertian`, `Metal` and `Dielectric`;
  `scatter(ray_in, hit)` returns `(attenuation, scattered_ray)` or `None` when
  the ray is absorbed.
- `pathtrace.scene.Scene`: a list of objects, `create_scene_objects()` for the
  demo layout, and the closest-hit search `hit(ray, t_min, t_max)`.
- `pathtrace.camera.Camera`: primary rays through a pixel, with
  (`get_ray_with_offset`) or without (`get_ray`) jitter.
- `pathtrace.raytracer.RayTracer`: `ray_color(ray, depth, scene)` and
  `render(framebuffer, display, y_min, y_max, should_abort)`, which fills rows
  of a `bytearray` and returns `False` if the abort flag was set before it
  finished.
- `pathtrace.gradient.draw_gradient`: fills a framebuffer with a red/green
  gradient, useful for checking a display path.
- `pathtrace.threadpool`: `ThreadPool` (a task queue with futures, `push_task`,
  `submit`, `parallelize_loop`, `wait_for_tasks`, `reset`, pausing, and use as
  a context manager), `SyncedStream` for thread-safe printing and `Timer`.
- `pathtrace.app`: `row_bands(height, thread_count)`, the split of rows into
  render bands, and `MainWindow`, which drives the window.

Rendering a small image without a window:

```python
import threading

from pathtrace.display import Display
from pathtrace.raytracer import RayTracer

display = Display(80, 60)
framebuffer = bytearray(display.width * display.height * 4)
RayTracer(samples_per_pixel=4).render(
    framebuffer, display, 0, display.height, threading.Event()
)
```

The framebuffer then holds RGBA bytes, row by row from the top left corner.

## What it does not do

The scene is fixed in code; there is no scene file to load. The rendered
image is only shown in the window: nothing is written to an image file.

## Tests

```
pip install .[test]
pytest
```