"""Align a hand-typed table in 3 lines, zero config, zero deps."""

from mesita import reformat_lines

result = reformat_lines(["| Name | Qty |", "| apple | 3 |", "| 梨 | 12 |"])
print("\n".join(result.lines))
