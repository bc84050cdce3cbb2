"""Parse a table block, add a row, write it back."""

from pipegrid import insert_row_below, parse, serialize

grid = parse("| Name | Role |\n|---|---|\n| Ada | Engineer |")
row = insert_row_below(grid, 1)
row.cells[0].value = "Grace"
row.cells[1].value = "Admiral"
print(serialize(grid))
