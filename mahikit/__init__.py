"""2D vectors and rectangles, easing functions, Perlin noise, Game of Life and Likert survey helpers."""

__version__ = "1.0.0"
__all__ = ["perlin", "vec2", "rect", "tween", "life", "survey"]