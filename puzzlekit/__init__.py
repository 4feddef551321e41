"""Solutions to classic puzzles on numbers, strings, arrays, lists, trees and grids."""

__version__ = "0.1.0"