"""Rescan only when something changed: scrolling, editing and searching."""

from tinta import Highlighter, Language, profiled_scan

rows = ["/* a comment", "   spanning lines */", "int main(void) {"] + [
    f"    int v{i} = {i};" for i in range(200)
] + ["}"]

highlighter = Highlighter(Language.C, rows)

with profiled_scan() as metrics:
    highlighter.rescan(rows, visible_bottom=40)  # first screen
    highlighter.rescan(rows, visible_bottom=40)  # nothing changed: no-op
    highlighter.rescan(rows, visible_bottom=80)  # scrolled down

    rows[1] = "   spanning lines"  # comment now left open
    highlighter.mark_dirty()
    highlighter.rescan(rows, visible_bottom=80)

print(metrics.summary())
print("Line 2 now a comment:", {c.name for c in highlighter.lines[2]})

highlighter.set_match(50, 8, 11)  # search hit on "v47"
print("Redraw line:", highlighter.clear_match())
