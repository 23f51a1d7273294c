"""Core pieces of a small 2D game engine: vector, matrix and quaternion math, colours, vertex data, logging, input state, frame timing, sprite batching and game-state stacking."""

__version__ = "0.1.0"