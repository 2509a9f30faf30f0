"""Keep the cursor in its cell while the table reformats around it."""

from mesita import Alignment, Point, alter_alignment, format_table, read_table, reformat_lines

# User types a new row; the cursor sits right after "banana"
lines = ["| Fruit | Qty |", "|---|---|", "| apple | 3 |", "| banana| 12"]
cursor = Point(3, 8)

result = reformat_lines(lines, cursor)
print("\n".join(result.lines))
print("Cursor moved from", cursor, "to", result.cursor)
print()

# Right-align the Qty column; unchanged rows are shared with the old table
table = read_table(result.lines)
aligned = alter_alignment(table, 1, Alignment.RIGHT)
print("\n".join(format_table(aligned).table.to_lines()))
print("Header row unchanged (same object?):", table.rows[0] is aligned.rows[0])
