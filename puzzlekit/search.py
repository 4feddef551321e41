"""Search puzzles: grid word search and the combination lock."""

from collections.abc import Iterable, Sequence

_START = "0000"
_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Whether ``word`` can be traced through adjacent cells, each used once."""
    if not word or not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def extend(row: int, col: int, index: int) -> bool:
        if index == len(word):
            return True
        for d_row, d_col in _DIRECTIONS:
            r, c = row + d_row, col + d_col
            if (
                0 <= r < rows
                and 0 <= c < cols
                and (r, c) not in visited
                and board[r][c] == word[index]
            ):
                visited.add((r, c))
                if extend(r, c, index + 1):
                    return True
                visited.discard((r, c))
        return False

    for row, cells in enumerate(board):
        for col, cell in enumerate(cells):
            if cell == word[0]:
                visited.add((row, col))
                if extend(row, col, 1):
                    return True
                visited.discard((row, col))
    return False


def _neighbours(combination: str):
    for wheel, digit in enumerate(combination):
        for step in (1, -1):
            turned = str((int(digit) + step) % 10)
            yield combination[:wheel] + turned + combination[wheel + 1 :]


def open_lock(deadends: Iterable[str], target: str) -> int:
    """Fewest wheel turns from "0000" to ``target`` avoiding dead ends, or -1."""
    seen = set(deadends)
    if _START in seen:
        return -1
    seen.add(_START)
    frontier = [_START]
    turns = 0
    while frontier:
        if target in frontier:
            return turns
        next_frontier = []
        for combination in frontier:
            for neighbour in _neighbours(combination):
                if neighbour not in seen:
                    seen.add(neighbour)
                    next_frontier.append(neighbour)
        frontier = next_frontier
        turns += 1
    return -1