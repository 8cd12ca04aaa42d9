from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, List

import pandas as pd

from tictactoe.core.board import Board
from tictactoe.core.rules import check_winner_with_line, line_kind
from tictactoe.game.results import Continue, Draw, InvalidMove, Winner
from tictactoe.types import CellIndex, Symbol
from tictactoe.ui.prompts import parse_index


RESULT_COLS = ["game_id", "start", "result", "winner", "moves_played", "invalid_moves", "line"]


@dataclass(frozen=True)
class ReplayRecord:
    game_id: str
    start: str
    result: str          # "winner" | "draw" | "unfinished"
    winner: str = ""
    moves_played: int = 0
    invalid_moves: int = 0
    line: str = ""       # "row" | "column" | "diagonal" for wins


def parse_symbol(raw: str, game_id: str) -> Symbol:
    s = raw.strip().upper()
    try:
        return Symbol(s)
    except ValueError:
        raise ValueError(f"Game {game_id}: start must be X or O, got {raw!r}") from None


def parse_moves(raw: str, game_id: str) -> List[CellIndex]:
    """
    "1,1 0,0 2,2" -> [CellIndex(1, 1), CellIndex(0, 0), CellIndex(2, 2)]
    """
    moves: List[CellIndex] = []
    for tok in raw.split():
        parts = tok.split(",")
        nums = [parse_index(p) for p in parts]
        if len(nums) != 2 or None in nums:
            raise ValueError(f"Game {game_id}: bad move token {tok!r} (expected COL,ROW)")
        col, row = nums
        if col > 2 or row > 2:
            raise ValueError(f"Game {game_id}: move {tok!r} is off the board")
        moves.append(CellIndex(col, row))
    return moves


def replay_game(game_id: str, start: Symbol, moves: Iterable[CellIndex]) -> ReplayRecord:
    board = Board(start)
    played = 0
    invalid = 0

    for move in moves:
        result = board.process_turn(move)
        match result:
            case InvalidMove():
                invalid += 1
                continue
            case Continue():
                played += 1
            case Draw():
                return ReplayRecord(game_id, str(start), "draw", "", played + 1, invalid)
            case Winner(symbol=symbol):
                found = check_winner_with_line(board)
                kind = line_kind(found[1]) if found else ""
                return ReplayRecord(game_id, str(start), "winner", str(symbol), played + 1, invalid, kind)

    # Moves after a terminal outcome are never reached
    return ReplayRecord(game_id, str(start), "unfinished", "", played, invalid)


def replay_frame(games: pd.DataFrame) -> pd.DataFrame:
    records = []
    for row in games.itertuples(index=False):
        gid = str(row.game_id)
        start = parse_symbol(str(row.start), gid)
        moves = parse_moves(str(row.moves), gid)
        records.append(asdict(replay_game(gid, start, moves)))

    return pd.DataFrame.from_records(records, columns=RESULT_COLS)
