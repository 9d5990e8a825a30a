"""Maze Bounded Context.

Responsible for the pipe maze puzzle:
- Value Objects: Direction, Shape, Position, PipeGrid, PipeLoop, MazeSummary
- Parsing: parse_grid
- Services: connectivity, trace_loop (farthest point), count_enclosed
"""
