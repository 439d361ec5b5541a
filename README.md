# mahikit

A small toolkit of building blocks for interactive and graphical programs.
It uses only the standard library.

| Module            | What it holds |
|-------------------|---------------|
| `mahikit.vec2`    | `Vec2`, a mutable 2D vector, and planar geometry helpers |
| `mahikit.rect`    | `Rect`, an axis-aligned rectangle |
| `mahikit.tween`   | Easing functions that blend a start value into an end value |
| `mahikit.perlin`  | Seeded 3D Perlin noise that can wrap, with fractal variants |
| `mahikit.life`    | `LifeGrid`, Conway's Game of Life on a board that wraps at the edges |
| `mahikit.survey`  | The model behind a Likert-scale survey: config, answers, saving |

## Installation

```
pip install .
```

## Vectors and rectangles

`Vec2` is a dataclass with `x` and `y`. It supports `+`, `-`, unary `-`,
scalar `*` and `/`, equality, iteration and indexing (`v[0]`, `v[1]`).

```python
from mahikit.vec2 import Vec2, dot, magnitude, unit, polygon_area
from mahikit.rect import Rect

v = Vec2(3.0, 4.0)
print(magnitude(v))              # 5.0
print(dot(v, Vec2(1.0, 0.0)))    # 3.0
print(unit(v))                   # Vec2(x=0.6, y=0.8)

square = [Vec2(0, 0), Vec2(1, 0), Vec2(1, 1), Vec2(0, 1)]
print(polygon_area(square))      # 0.5 * the signed doubled area: 1.0

r = Rect(0, 0, 10, 20)
print(r.contains(Vec2(5, 5)))    # True
print(r.center())                # Vec2(x=5.0, y=10.0)
```

Other helpers in `mahikit.vec2`: `abs_vec`, `sq_len`, `normal`, `cross`,
`parallel`, `perpendicular`, `intersect` (do two segments properly cross),
`intersection` (where two lines meet; `(inf, inf)` when parallel),
`inside_line`, `inside_triangle`, `inside_polygon` (even-odd rule),
`is_convex`, `angle` (direction of one vector, or signed angle between two)
and `winding` (-1, 0 or 1, from two vectors or three points).
`unit` raises `ValueError` for the zero vector, and `polygon_area` raises
`ValueError` for fewer than three points.

`Rect` has `left`, `top`, `width` and `height`, the constructor
`Rect.from_pos_size(position, size)`, and `pos()`, `size()`, `tl()`, `tr()`,
`bl()`, `br()`, `center()` and `contains(p)`. `contains` includes the left
and top edges but not the right and bottom ones.

## Tweens

Every tween is called as `f(a, b, t)`. `t` normally runs from 0 to 1. The
values may be numbers, anything with `+`, `-` and scalar `*` (such as
`Vec2`), or lists and tuples of those. Lists and tuples are blended element
by element and cut to the shorter length.

```python
from mahikit.tween import linear, bounce_out, cubic_in_out
from mahikit.vec2 import Vec2

print(linear(0.0, 10.0, 0.25))                  # 2.5
print(linear([0.0, 0.0], [2.0, 4.0], 0.5))      # [1.0, 2.0]
print(cubic_in_out(Vec2(0, 0), Vec2(10, 10), 0.5))
print(bounce_out(0.0, 1.0, 1.0))
```

Available: `instant`, `delayed`, `linear`, `smoothstep`, `smootherstep`,
`smootheststep`, and `_in`, `_out` and `_in_out` forms of `quadratic`,
`cubic`, `quartic`, `quintic`, `sinusoidal`, `exponential`, `circular`,
`elastic`, `back` and `bounce`.

## Perlin noise

```python
from mahikit.perlin import noise3, fbm_noise3, ridge_noise3

value = noise3(0.5, 1.25, 2.0)                     # default period 256, seed 0
tiled = noise3(0.5, 1.25, 2.0, 4, 4, 4, seed=7)    # wraps every 4 units
cloud = fbm_noise3(0.5, 1.25, 2.0, 2.0, 0.5, 6)
ridges = ridge_noise3(0.5, 1.25, 2.0, 2.0, 0.5, 1.0, 6)
```

`noise3` wraps at powers of two, or at 256 when a wrap is 0. Only the low 8
bits of `seed` are used. `noise3_wrap_nonpow2` accepts any integer period.
`turbulence_noise3` sums the absolute value of each octave. Noise is zero at
integer lattice points.

## Game of Life

```python
import random
from mahikit.life import LifeGrid

grid = LifeGrid(20, 20)
grid.glider_br(5, 5)
grid.step()
print(grid.live_cells())          # sorted (row, col) pairs
print(grid.age(6, 6))             # generations a live cell has survived
grid.spawn(10, random.Random(1))  # 10 pairs of gliders at random places
```

`LifeGrid` also has `is_alive`, `set_alive`, `living_neighbors` and
`glider_bl`. Cells outside the board raise `IndexError`.

## Likert survey

```python
from mahikit.survey import (
    Gender, Response, SurveyError, SurveySession, load_config, write_default_config,
)

write_default_config("likert.json")
config = load_config("likert.json")
print(config.window_size())          # (width, height) that fits the questions

session = SurveySession(config)
session.subject = "S01"
session.age = 30
session.gender = Gender.FEMALE
for i in range(len(config.questions)):
    session.answer(i, Response.AGREE)
path = session.submit(".")           # writes ./S01.json, then resets the session
```

A config file is a JSON object with `title`, `questions`, `autoClose` and an
optional `rowHeight` (30 by default). `load_config` raises `SurveyError` when
the file is missing, unreadable or holds the wrong types. `validate()`,
`to_record()` and `submit()` raise `SurveyError` with a message naming the
first missing item: the subject, age, gender or an unanswered question.
A saved record holds `subject`, `age`, `gender`, `responses` (-2 to 2) and
`responsesText`.

## What it does not do

mahikit is pure logic. It opens no windows and draws nothing. The survey has
no on-screen form and the Game of Life board has no display. Connect these
pieces to a user interface of your own choosing. The package provides no
command-line tools.

## Tests

```
pip install .[test]
pytest
```