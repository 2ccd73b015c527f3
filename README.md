# tourmap

`tourmap` builds and queries tourist maps. A map has a reference image, a
scale in metres per pixel, junctions, named spots and the roads that join
them. Pick a start node and the shortest route to any other node is found
over the road network.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs a `tourmap` command with three subcommands:

```
tourmap --help
```

- `tourmap new IMAGE NAME OUTPUT [--scale SCALE]` creates an empty map over
  the reference image `IMAGE`, titled `NAME`, and writes it to `OUTPUT`.
  The scale is in metres per pixel, defaults to `1.0`, is rounded to three
  decimals and must lie between `0` and `99.99`.
- `tourmap info MAP` prints the map's name, scale and the numbers of
  junctions, spots and roads, then one line per spot with its node index,
  name and description.
- `tourmap route MAP SOURCE DESTINATION` takes two node indices and prints
  the length of the shortest route in metres (`distance: N m`) and the
  number of roads along it (`roads: K`). It prints `unreachable` and exits
  with status 1 when there is no route.

Errors (an unreadable image or map file, an unknown node index) are
reported on standard error and the command exits with status 1.

## Library use

```python
from tourmap.touristmap import TouristMap

tourist_map = TouristMap.from_file("campus.map")
```

`TouristMap.from_file` raises `tourmap.mapfile.MapFormatError` for a
malformed file. A new map starts from a picture, which is decoded with
Pillow (a `ValueError` is raised if it cannot be):

```python
tourist_map = TouristMap.from_image("campus.png", "Campus", 1.5)
```

Junctions (`tourmap.models.Node`) and named spots (`tourmap.models.Spot`)
are added with `add_node`; roads (`tourmap.models.Road`, a polyline built
with `line_to` whose `distance` is its length in pixels) are added with
`add_road` once both `node1` and `node2` are set. `del_node` removes a node
together with every road that touches it, and `del_road` removes a single
road.

`TouristMap.press_node` follows the map's selection rules:

- the first node pressed becomes the start, and distances to every other
  node are worked out from it;
- the next node pressed becomes the destination and the roads of its
  route are marked as checked;
- pressing another node moves the destination there;
- pressing the destination again deselects it;
- pressing the start again clears the whole selection (as `clear` does).

`TouristMap.shortest_distance(node)` gives the length of the route from the
start (`inf` if the node cannot be reached), and
`TouristMap.path_to(destination)` gives the roads along it in travel order.
Both raise `ValueError` when no start is selected.

`save_file(file_name)` writes the map, storing junctions before spots and
renumbering the nodes accordingly, and clears the selection. `save()`
writes to the file the map was opened from or last given, and returns
`False` when it has no file name to write to.

### Editing

`tourmap.editor.Editor` applies user actions to a map according to a mode
(`Mode.SELECT`, `Mode.NODE`, `Mode.SPOT`, `Mode.ROAD`, `Mode.DEL`):

- `toggle(mode)` switches an editing mode on, or back to selection when
  that mode is already on;
- `click(x, y)` handles a left click at a position: it adds a junction,
  marks where a spot is to go (`pending_spot`), builds a road from node to
  node through the clicked points, deletes the node or road under it, or
  selects it;
- `add_spot(x, y, name, description)` adds the spot, unless both texts are
  empty;
- `hover_road`, `hover_spot` and `leave` fill, place and hide the map's
  `InfoTip` (`tourmap.infotip`), which holds the tip's HTML, position and
  visibility;
- `enlarge(flag)` multiplies or divides the zoom factor by 1.2.

## What the package does not do

There is no graphical window. `Editor` and `InfoTip` keep the editing
state and the tip's contents, but nothing draws the map, its image or the
tip on screen; the command line creates, describes and routes on map files
only, and does not edit them.

## Map file format

Map files are read and written by `tourmap.mapfile` (`load_map`,
`dump_map`, `read_map`, `write_map`, with the data in `MapData` and
`RoadRecord`). All numbers are big-endian.

| Size     | Contents                                  |
|----------|-------------------------------------------|
| 12 bytes | `TOURIST MAP` followed by a zero byte     |
| 4 bytes  | magic number `0x52391391`                 |
| 8 bytes  | u64 image size in bytes                   |
| 8 bytes  | f64 scale, metres per pixel               |
| 8 bytes  | u64 number of junctions                   |
| 8 bytes  | u64 number of spots                       |
| 8 bytes  | u64 number of roads                       |
| varies   | string: map title                         |
| varies   | junctions                                 |
| varies   | spots                                     |
| varies   | roads                                     |
| varies   | image bytes                               |

- **String**: u64 length of the UTF-8 encoding, then the bytes.
- **Point**: f64 x, f64 y.
- **Junction**: one point.
- **Spot**: one point, then a name string and a description string.
- **Road**: u64 index of the first node, u64 index of the second node,
  u64 number of points, then that many points (at least one).

Node indices count junctions first, then spots.