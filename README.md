# hermeskit

Pieces of a small UI toolkit, written in plain Python. The package uses
nothing outside the standard library.

## Modules

- `hermeskit.dynamicarray`: `DynamicArray`, a sequence that keeps track
  of a capacity. The capacity doubles whenever the array would fill up, so
  there is always at least one free slot. Methods: `append`, `extend`,
  `concat`, `insert`, `delete`, `replace`, `clear`, `grow`, `shrink` and
  `capacity`. It also supports `len()`, indexing and iteration. An
  `IndexError` is raised when an index or range falls outside the array.
- `hermeskit.utils`:
  - Numbers: `floor_float` (single-precision floor) and `linear_map`.
  - Colours: `color_from_float`, `color_from_rgba_float`, `color_to_hsv`
    and `hsv_to_rgb`. `color_to_hsv` returns an `HSV` tuple. Hue runs from
    0 to 6 and is `None` for greys.
  - UTF-8: `utf8_code_point` returns a code point, or `None` when the input
    is malformed, together with the number of bytes consumed. The other
    UTF-8 helpers are `utf8_char_bytes`, `utf8_previous_char` and
    `utf8_string_length`.
  - Tabs: `byte_to_column` and `column_to_byte` convert between byte
    offsets and display columns, expanding tabs as they go.
- `hermeskit.gpu_context`: the `Rectangle` type, which offers
  `intersection`, `width`, `height` and `is_valid`. It also defines
  `Vertex`, `GPUTexture` and `GPUContext`, the abstract interface that a
  rendering back end implements.
- `hermeskit.font`: the built-in 8×16 code page 437 bitmap font for
  characters 0 to 127. Any other character is drawn as `?`.
  - `glyph_rows` returns the 16 row bytes of a glyph.
  - `draw_glyph` draws a glyph into a flat pixel list, clipped to a
    `Rectangle`.
  - `Font` records a path and a size. Its glyph cell is always 9×16.
  - `activate_font` and `active_font` set and read the font that is
    currently active.
- `hermeskit.gpu_painter`: `GPUPainter` draws through a `GPUContext`.
  - Drawing methods: `draw_block`, `draw_line`, `draw_triangle`,
    `draw_circle`, `draw_image`, `draw_invert` and `draw_glyph`.
  - It keeps a clip stack, managed with `set_clip` and `restore_clip`.
  - Creating a painter calls `begin` on the context. `close()`, or leaving
    a `with` block, calls `present`.
  - Glyphs are packed into a 512×512 `GlyphAtlas`, made of
    `GlyphAtlasEntry` items, and drawn from it.
- `hermeskit.converter`: the model of a unit converter.
  - `Unit` and `Category` describe units. `CATEGORIES` holds length and
    temperature units.
  - `convert` converts a value from one unit to another.
  - `parse_leading_float` reads the number at the start of a string.
  - `calculate` returns the converter's output line.
- `hermeskit.todo`: the model of a to-do list: `Item`, `Tab` (`ALL`,
  `ACTIVE`, `COMPLETED`) and `TodoList`. `TodoList` has the methods `add`,
  `toggle`, `take_for_edit` and `visible`.

## Example

```python
from hermeskit.converter import CATEGORIES, calculate
from hermeskit.dynamicarray import DynamicArray
from hermeskit.todo import Tab, TodoList
from hermeskit.utils import color_to_hsv, hsv_to_rgb

array = DynamicArray(2)
array.extend([1, 2, 3])
print(len(array), array.capacity())       # 3 4

print(color_to_hsv(0xFF0000))             # HSV(hue=0.0, saturation=1.0, value=1.0)
print(hex(hsv_to_rgb(0.0, 1.0, 1.0)))     # 0xff0000

length = CATEGORIES[0]
print(calculate(length, 1, 0, "2"))       # 2000.000000 Millimeters (mm)

todos = TodoList()
todos.add("write docs")
todos.toggle(0)
print([item.text for _, item in todos.visible(Tab.COMPLETED)])
```

## What it does not do

The package does not provide:

- windows, widgets or an event loop;
- a concrete GPU back end. You supply your own `GPUContext`;
- outline fonts. `Font` only records a path and a size, and every glyph
  comes from the built-in bitmap font.

Some drawing operations are simplified:

- `GPUPainter.draw_circle` always fills the circle. It ignores the
  `outline` and `hollow` arguments.
- `draw_invert` lays a translucent white overlay over the area instead of
  inverting it.
- When the glyph atlas is full, further new glyphs are not drawn.

There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```