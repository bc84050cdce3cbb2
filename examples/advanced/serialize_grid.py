"""Snapshot a grid as JSON and restore it."""

from pipegrid import parse, serialize
from pipegrid.serialization import from_json, to_json

grid = parse("| key | value |\n| --- | --- |\n| `a|b` | [[page|alias]] |")
snapshot = to_json(grid, indent=2)
print(snapshot)

restored = from_json(snapshot)
print("Equal after round-trip:", restored == grid)
print(serialize(restored))
