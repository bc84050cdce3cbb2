"""Drive a table the way a grid widget would: select, edit, save."""

from pipegrid import TableSession


def on_save(text: str) -> None:
    print("--- saved ---")
    print(text)


session = TableSession("3x2", on_save=on_save)

session.select(0)
session.toggle_header()

session.select(0, 0)
session.set_cell_value("Step")
session.select(1, 0)
session.set_cell_value("Run `make`\nthen check output")

print()
print("Editor sees:", repr(session.edit_text()))
print("Block to write back:")
print(session.fenced_text)
