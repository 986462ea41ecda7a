# cubes

This package holds the building blocks of a block-diagram configuration editor.
It is a plain Python library and needs no GUI toolkit. Its only runtime
dependency is networkx.

## Installation

```
pip install .
pip install ".[test]"   # with pytest
```

## Modules

### `cubes.log_types`

This module defines the message model.

- `SourceType` and `MessageType` are enums.
- `Message`, `Variable` and `SourceTypeDescription` are records.
- `LogManager` is an abstract base with one method, `add_message(message)`.
- Lookup functions:
  - `get_source_type_code_offset`
  - `get_source_type_descriptions`
  - `get_source_type_description`
  - `source_type_to_string`
  - `get_source_type_prefix`
  - `get_message_type_prefix`
- `create_code` builds a message code. For example,
  `create_code(MessageType.ERROR, SourceType.FILE_ANALYSIS, 5)` gives `"EFA5"`.

### `cubes.log_helper`

`LogHelper` builds messages for a single source type and passes each one to a
log manager's `add_message`. It provides four methods:

- `log_information`
- `log_warning`
- `log_error`
- `log`, which uses the message type registered for the error code, and
  `ERROR` when none is registered.

When a call gives no description or details, the helper uses the ones
registered for the error code. Each method returns the message it sent. If the
helper has no manager, it returns `None`.

### `cubes.log_filter`

`LogFilter` keeps only the messages whose type is in its filter. You change the
filter with `set_filter`, `add_to_filter` and `remove_from_filter`.

`apply(messages, column)` filters the messages and, if you give a column, sorts
them by that column. A column is the name of a `Message` field:

- `"type"` sorts by the message type.
- Every other column sorts by its text.
- An unknown column raises `ValueError`.

### `cubes.base64_codec`

This module provides `encode`, `encode_pem` (lines of 64 characters) and
`encode_mime` (lines of 76 characters).

With `url=True`, `encode` uses the URL-safe alphabet and `.` as padding.

`decode` accepts either alphabet and either padding character, and it does not
require padding. With `remove_linebreaks=True` it drops newlines before
decoding. It raises `ValueError` on invalid input.

### `cubes.zip_utils`

- `zip_bytes(data, name, dst_path, method)` stores one member in an archive.
  `zip_file(src_path, dst_path, method)` stores a file under its base name.
- `ZipMethod.CREATE` replaces the archive. `ZipMethod.APPEND` adds to an
  archive that must already exist.
- `zipped_file_names` lists the members. It returns an empty list if the
  archive cannot be read.
- `unzip_file` returns a member's bytes. It raises `KeyError` if no member has
  that name.

### `cubes.graph`

These functions work on graphs whose vertices are `0 .. vertex_count - 1`:

- `make_connected`
- `make_biconnected`
- `make_maximal_planar`
- `get_coordinates`
- `rearrange_graph`

They return new sorted edge lists or integer grid coordinates. A graph that is
not planar raises `NotPlanarError`. `rearrange_graph` places graphs with fewer
than three vertices at `(0, 0)` and `(0, 1)`.

### `cubes.diagram_item_types`

This module defines the enums `ItemType`, `HorizontalAlignment` and
`VerticalAlignment`, and the constant `GRID_SIZE`, which is 16.

`PropertiesForDrawing` is a dataclass. Its `copy()` method returns a deep copy.

### `cubes.geometry`

- `Rect` is an integer rectangle with the methods `adjusted`, `contains` and
  `center`.
- `snap_to_grid` rounds a value to the grid.
- `border_hit` tells which `SizingType` edge or corner a point grabs.
- `resize_rect` applies a drag to a handle. It returns the new rectangle and
  the position offset.

### `cubes.tree_mime`

`mime_types()` returns `["application/x-dnditemdata"]`.

`encode_items` and `decode_items` convert `(text, (x, y))` pairs to and from
the drag payload. Text is stored as length-prefixed UTF-16BE, and points as two
signed 32-bit big-endian integers. A malformed payload raises `ValueError`.

### `cubes.diagram_item`

`DiagramItem` holds the state and interaction rules of one diagram block, which
is either a unit icon or a text box. It provides the following:

- Setters: `set_name`, `set_include_name`, `set_color`, `set_border_only`,
  `set_size` and `set_text`.
- `display_text()` returns the text as it is drawn.
- `snap_position` snaps a selected item to the grid.
- `line_anchor_position` returns the point where lines attach.
- Resizing with the mouse goes through `hover`, `leave`, `begin_resize`,
  `resize_to`, `end_resize` and `cancel_resize`.

Optional callbacks report repaints, position changes and size changes.

### `cubes.property_manager`

`StringPropertyManager` keeps a string value, an old value and a regular
expression for each property. Values that do not match the expression are
rejected.

`editing_finished` reports the new value and the old value through the
`finished` signal.

`LineEditFactory` creates `LineEditor` objects and keeps their text and
validators in step with the manager. Text typed into an editor goes back to the
manager.

## Example

```python
from cubes.base64_codec import encode, decode
from cubes.graph import rearrange_graph

assert decode(encode(b"hello")) == b"hello"
coordinates = rearrange_graph(4, [(0, 1), (1, 2), (2, 3)])
```

## What this package does not do

It has no command, no windows and no painting. It models item geometry, text
and colours, but it does not draw them. There is no log view or table model
either: messages go to whatever `LogManager` you supply.

## Running the tests

```
pytest
```