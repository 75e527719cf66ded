"""Snake game model: grid map, snake, timed items, gates and walls, stages, missions and a demo command."""

__version__ = "0.1.0"