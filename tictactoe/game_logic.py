import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple, Optional, Tuple

log = logging.getLogger(__name__)

BOARD_SIZE = 3                       # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# winning index triples, checked in this order
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
)


class Cell(Enum):
    EMPTY = ''
    X = 'X'
    O = 'O'


class Mark(Enum):
    X = 'X'
    O = 'O'

    @property
    def cell(self):
        return Cell(self.value)

    def opposite(self):
        return Mark.O if self is Mark.X else Mark.X


class GameMode(Enum):
    HUMAN_VS_HUMAN = "human"
    HUMAN_VS_COMPUTER = "computer"


class OutcomeKind(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    game result, winner only set for WIN
    """
    kind: OutcomeKind
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls):
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def win(cls, mark):
        return cls(OutcomeKind.WIN, mark)

    @classmethod
    def draw(cls):
        return cls(OutcomeKind.DRAW)

    @property
    def is_terminal(self):
        return self.kind is not OutcomeKind.IN_PROGRESS


EMPTY_BOARD = (Cell.EMPTY,) * CELL_COUNT


@dataclass(frozen=True)
class GameSession:
    """
    board + whose turn + mode; replaced, never edited in place
    """
    board: Tuple[Cell, ...] = EMPTY_BOARD
    current_player: Mark = Mark.X
    mode: GameMode = GameMode.HUMAN_VS_HUMAN


class MoveStatus(Enum):
    INVALID = "invalid"
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"


class MoveResult(NamedTuple):
    status: MoveStatus
    session: GameSession
    reason: Optional[str] = None

    @property
    def accepted(self):
        return self.status is not MoveStatus.INVALID


def evaluate(board):
    """
    classify a board: first uniform line wins, full board draws
    """
    line = winning_line(board)
    if line:
        return Outcome.win(Mark(board[line[0]].value))
    if all(cell is not Cell.EMPTY for cell in board):
        return Outcome.draw()
    return Outcome.in_progress()


def winning_line(board):
    """
    index triple of the first completed line, or None
    """
    for line in LINES:
        a, b, c = line
        if board[a] is not Cell.EMPTY and board[a] == board[b] == board[c]:
            return line
    return None


def _valid_index(index):
    # bool is an int subclass but never a board index
    return isinstance(index, int) and not isinstance(index, bool) \
        and 0 <= index < CELL_COUNT


def empty_cells(board):
    return [i for i, cell in enumerate(board) if cell is Cell.EMPTY]


def reset(mode=GameMode.HUMAN_VS_HUMAN):
    """
    fresh session: empty board, X to move
    """
    return GameSession(EMPTY_BOARD, Mark.X, GameMode(mode))


def _rejected(session, reason):
    log.debug("move rejected: %s", reason)
    return MoveResult(MoveStatus.INVALID, session, reason)


def _place(session, index):
    # mark the cell, hand the turn over and classify the new board
    board = list(session.board)
    board[index] = session.current_player.cell
    board = tuple(board)
    updated = replace(session, board=board,
                      current_player=session.current_player.opposite())
    outcome = evaluate(board)
    if outcome.kind is OutcomeKind.WIN:
        status = MoveStatus.WIN
    elif outcome.kind is OutcomeKind.DRAW:
        status = MoveStatus.DRAW
    else:
        status = MoveStatus.CONTINUE
    log.debug("%s played %d -> %s", session.current_player.value, index, status.value)
    return MoveResult(status, updated)


def apply_move(session, index):
    """
    place the current player's mark at index
    returns MoveResult; INVALID leaves the session untouched
    """
    if not _valid_index(index):
        return _rejected(session, f"index {index!r} out of range")
    if evaluate(session.board).is_terminal:
        return _rejected(session, "game is over")
    if session.board[index] is not Cell.EMPTY:
        return _rejected(session, f"cell {index} taken")
    if session.mode is GameMode.HUMAN_VS_COMPUTER \
       and session.current_player is not Mark.X:
        return _rejected(session, "not your turn")
    return _place(session, index)


def computer_move(session, rng=None):
    """
    computer (O) picks a random empty cell
    """
    if session.mode is not GameMode.HUMAN_VS_COMPUTER:
        return _rejected(session, "no computer player in this mode")
    if session.current_player is not Mark.O:
        return _rejected(session, "not the computer's turn")
    if evaluate(session.board).is_terminal:
        return _rejected(session, "game is over")
    free = empty_cells(session.board)
    if not free:
        return _rejected(session, "no empty cells")
    index = (rng or random).choice(free)
    return _place(session, index)


def format_board(board):
    """
    3-line text grid, '.' for empty cells
    """
    rows = []
    for r in range(BOARD_SIZE):
        row = board[r * BOARD_SIZE:(r + 1) * BOARD_SIZE]
        rows.append(" ".join(cell.value or '.' for cell in row))
    return "\n".join(rows)


class GameLogic:
    """
    tic-tac-toe rules and state; sole owner of the live session
    """
    def __init__(self, mode=GameMode.HUMAN_VS_HUMAN, rng=None):
        """
        init session and random source
        """
        self._rng = rng or random.Random()
        self._session = reset(mode)

    @property
    def session(self):
        return self._session

    @property
    def board(self):
        return self._session.board

    @property
    def current_player(self):
        return self._session.current_player

    @property
    def mode(self):
        return self._session.mode

    @property
    def outcome(self):
        # always recomputed from the board
        return evaluate(self._session.board)

    @property
    def game_over(self):
        return self.outcome.is_terminal

    @property
    def winner(self):
        return self.outcome.winner

    @property
    def winning_line(self):
        return winning_line(self._session.board)

    @property
    def is_computer_turn(self):
        return self.mode is GameMode.HUMAN_VS_COMPUTER \
            and self.current_player is Mark.O and not self.game_over

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if _valid_index(index):
            return self._session.board[index] is Cell.EMPTY
        return False

    def _commit(self, result):
        self._session = result.session
        if result.status in (MoveStatus.WIN, MoveStatus.DRAW):
            log.info("game over (%s): %s\n%s", self.mode.value,
                     result.status.value, format_board(self.board))
        return result

    def make_move(self, index):
        """
        place current player's mark
        returns MoveResult with status win/draw/continue/invalid
        """
        return self._commit(apply_move(self._session, index))

    def computer_move(self):
        return self._commit(computer_move(self._session, self._rng))

    def reset_game(self, mode=None):
        """
        clear board, X to move; keeps mode unless one is given
        """
        self._session = reset(self.mode if mode is None else mode)
        log.info("new game: %s", self.mode.value)
        return self._session
