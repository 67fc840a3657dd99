"""Highlight a C snippet for the terminal with zero config."""

from tinta import Language, highlight_lines, render_line

lines = ["int x = 42; // note", 'char c = \'\\n\';', 'return "done";']
for text, categories in zip(lines, highlight_lines(lines, Language.C)):
    print(render_line(text, categories))
