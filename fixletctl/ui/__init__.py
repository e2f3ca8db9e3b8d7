"""
Console presentation for fixletctl.

Modules:
  theme.py  — colours, criticality styles, the shared Rich Theme.
  render.py — List / Search output: fixed line format and table view.
"""
