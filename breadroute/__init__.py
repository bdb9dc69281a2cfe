"""breadroute — wire routing for multi-board breadboard layouts.

Packages, leaf first:

  layout     boards, holes, components, wires (plain data + geometry)
  router     hole grid, obstacles, A* search, routing sessions, overlap offsets
  workspace  editable layout state and JSON persistence
"""
