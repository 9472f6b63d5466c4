# genart

The state and the arithmetic behind a collection of generative art sketches.
No window, renderer or event loop comes with it. Every piece takes plain
values and returns plain values, so you can drive it from whatever draws your
frames. You can also run it headless to produce images and animated GIFs.

## What is inside

| Module | Contents |
| --- | --- |
| `genart.vector` | `Vec2`, `Rect`, `map_range`, `wrap_edges`, `bounce_velocity` |
| `genart.interaction` | `Key`, `key_pressed`, and `save_path` / `frame_path` for saving frames under dated folders |
| `genart.imaging` | Floyd–Steinberg error diffusion (`dither_image`) and posterisation (`posterize_image`) of RGBA arrays |
| `genart.polygons` | Regular polygons with interpolated inner lines (`PolyThing`, `poly_points`, `gen_line_points`, `new_things`) and `tile_grid` |
| `genart.fluid`, `genart.fluid_object` | A grid-based fluid solver on numpy arrays (`diffuse`, `advect`, `project`, `FluidCube`, `DensColor`, `scaled_fluid_cube`) |
| `genart.nbody` | Gravitating bodies set out on a circle (`Body`, `StartingPosition.circle`, `System`) |
| `genart.ecosystem` | A pond of species that hunt, drift and wander (`Ecosystem`, `create_species`, `closest_prey_position`) |
| `genart.schotter` | A grid of squares that scatter further down the grid, seeded or animated (`make_gravel`, `randomize_gravel`, `animate_gravel`, `Controls`) |
| `genart.camera` | A look-at camera with perspective projection and orbit controls (`Camera`, `CameraUniform`, `CameraStaging`, `CameraController`) |
| `genart.forces` | Movers pushed by gravity, wind and edge forces (`Mover`, `wind_from_noise`) |
| `genart.chase` | Balls that steer towards a target point (`Chaser`, `make_chasers`) |
| `genart.walks` | Step functions for random walks (`cardinal_step`, `skew_step`, `mouse_step`, `custom_step`, `gaussian_step`) and a `walk` generator |
| `genart.bouncing` | Balls that bounce off some walls and wrap through others (`Ball`, `WallBounce`, `create_balls`) |
| `genart.swarm` | Dots that contract towards the centre (`create_dots`, `contract`) |
| `genart.splatter` | Gaussian paint splatter (`Splat`, `SplatterFields`) |
| `genart.palette` | Sampling a tile palette from an image and sorting it (`get_colors`, `sort_colors`, `SortMode`, `grid_cells`) |
| `genart.gif` | Assembling frames into an animated GIF (`images_to_gif`, `get_frames`, `folder_gif`) |

Functions that make random choices take an optional `random.Random`, so you
can seed them and get results you can repeat.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## A few examples

Vector helpers:

```python
from genart.vector import Vec2, map_range

Vec2(3.0, 4.0).length()            # 5.0
map_range(5, 0, 10, 0.0, 1.0)      # 0.5
```

A seeded grid of 22 rows by 12 columns:

```python
from genart.schotter import make_gravel, randomize_gravel

gravel = make_gravel(22, 12)
randomize_gravel(gravel, 1234, 1.0, 1.0, 22)
```

Ten bodies on a circle, moving along its tangent:

```python
from genart.nbody import StartingPosition, System
from genart.vector import Rect

system = System(StartingPosition.circle(10, 50.0, 1.0), top_speed=10.0, grav=2.0)
system.update(Rect.from_wh(500.0, 500.0))
```

Polygon outlines and their inner lines:

```python
from genart.polygons import poly_points, gen_line_points

outline = poly_points(5, 100.0)        # closed: the first corner is repeated at the end
lines = gen_line_points(0.1, outline)
```

## Making a GIF from a folder of frames

`genart.gif` turns the image files in a folder, taken in name order, into one
animated GIF. From Python, call `folder_gif(path, frames_per_sec, output_path)`,
or `images_to_gif(frames, frames_per_sec, output_path)` for RGBA arrays or
Pillow images you already hold. From the command line:

```
genart-gif [folder] [--fps FPS] [--output FILE]
```

The folder defaults to `./assets/images/gif/output/cube_flow`, the rate to 25
frames per second, and the output to `cube_flow1.gif`. Every file in the
folder must be an image. Subfolders are skipped.

## What it does not do

genart opens no windows and draws nothing on screen. It handles no keyboard
or mouse events itself, and does no GPU work. The camera module computes
matrices but renders nothing. The fluid, polygon and palette modules yield
cells, lines and colours for you to draw. The key-handling helpers only
update values and tell you when a frame should be captured. Capturing the
frame is up to the program that draws.