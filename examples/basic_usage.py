#!/usr/bin/env python3
"""
Example: Basic usage of Boltzmann Lens as a Python library
"""

from boltzmann_lens import HighlightSession, generate, load_analysis, load_attenuation, load_config
from boltzmann_lens.analysis import analysis_path_for

project = "/path/to/project"
config = load_config(attenuation=True)

# Analyser output for src/app.py lives at .boltzmann/src/app.py.blta
analysis = load_analysis(analysis_path_for(project, "src/app.py"))
attenuation = load_attenuation(project, enabled=config.attenuation)
highlights = generate(analysis, attenuation, config)

session = HighlightSession(enabled=True)
session.register(highlights, analysis.total_complexity, "app.py")

for h in highlights:
    span = h.span
    print(f"{span.start_line + 1}:{span.start_col + 1}-{span.end_line + 1}:{span.end_col + 1}"
          f"  {h.color.hex}  {h.hover_text}")

print(f"File complexity: {session.status_text()} "
      f"({len(highlights)} highlight(s), attenuation {'on' if attenuation.enabled else 'off'})")
