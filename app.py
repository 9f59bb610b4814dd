from __future__ import annotations

import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        Grid,
        TILES,
        Player,
        LoadError,
        ResizeError,
        MoveOutcome,
        load_level,
        load_level_text,
        resize_grid,
        move_player,
        next_position,
        monster_step,
    )
except ImportError:
    from game import (  # type: ignore
        Grid,
        TILES,
        Player,
        LoadError,
        ResizeError,
        MoveOutcome,
        load_level,
        load_level_text,
        resize_grid,
        move_player,
        next_position,
        monster_step,
    )

LEVEL_DIR = os.getenv("DUNGEON_LEVEL_DIR", "levels")

app = Flask(__name__)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def _level_dir() -> str:
    if os.path.isabs(LEVEL_DIR):
        return LEVEL_DIR
    return os.path.join(os.getcwd(), LEVEL_DIR)


def grid_to_json(g: Grid) -> Dict[str, Any]:
    return {"rows": int(g.rows), "cols": int(g.cols), "tiles": list(g.tiles)}


def grid_from_json(obj: Dict[str, Any]) -> Grid:
    rows = int(obj["rows"])
    cols = int(obj["cols"])
    tiles = [str(x) for x in obj["tiles"]]
    if len(tiles) != rows * cols:
        raise ValueError(f"expected {rows * cols} tiles, got {len(tiles)}")
    unknown = sorted(set(tiles) - TILES)
    if unknown:
        raise ValueError(f"unknown tiles {unknown}")
    return Grid(rows=rows, cols=cols, tiles=tiles)


def state_to_json(g: Grid, p: Player) -> Dict[str, Any]:
    return {
        "grid": grid_to_json(g),
        "player": {"row": int(p.row), "col": int(p.col), "treasure": int(p.treasure)},
    }


def json_to_state(obj: Dict[str, Any]) -> Tuple[Grid, Player]:
    grid = grid_from_json(obj["grid"])
    p = obj["player"]
    player = Player(row=int(p["row"]), col=int(p["col"]), treasure=int(p.get("treasure", 0)))
    if not grid.in_bounds(player.row, player.col):
        raise ValueError(f"player ({player.row}, {player.col}) outside grid")
    # A captured player has no marker left; otherwise it must sit where the player is.
    marker = grid.player_position()
    if marker is not None and marker != player.pos:
        raise ValueError(f"player marker at {marker}, player at {player.pos}")
    return grid, player


def _bad_request(message: str) -> Any:
    return jsonify({"ok": False, "error": message}), 400


def _state_from_body(body: Dict[str, Any]) -> Tuple[Optional[Tuple[Grid, Player]], Optional[str]]:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return None, "state required"
    try:
        return json_to_state(s_in), None
    except (KeyError, TypeError, ValueError) as e:
        return None, f"bad state: {e}"


def _target_from_body(body: Dict[str, Any], player: Player) -> Tuple[Optional[Tuple[int, int]], Optional[str]]:
    if "target" in body:
        try:
            r, c = body["target"]
            return (int(r), int(c)), None
        except (TypeError, ValueError) as e:
            return None, f"bad target: {e}"
    key = body.get("key")
    if not isinstance(key, str):
        return None, "key or target required"
    return next_position(player, key[:1].lower()), None


# ---------- Level API ----------

@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.get("/api/levels")
def api_levels() -> Any:
    d = _level_dir()
    names: List[str] = []
    if os.path.isdir(d):
        names = sorted(n for n in os.listdir(d) if n.endswith(".txt"))
    return jsonify({"ok": True, "levels": names})


@app.post("/api/load")
def api_load() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    text = body.get("level")
    name = body.get("name")
    if isinstance(text, str):
        level = load_level_text(text)
    elif isinstance(name, str):
        # Only plain file names inside the level directory
        if not name or name in (".", "..") or os.path.basename(name) != name:
            return _bad_request("bad level name")
        path = os.path.join(_level_dir(), name)
        if os.path.exists(path) and not os.path.isfile(path):
            return _bad_request("bad level name")
        level = load_level(path)
    else:
        return _bad_request("level or name required")
    if isinstance(level, LoadError):
        return jsonify({"ok": False, "error": level.value}), 400
    return jsonify({"ok": True, "state": state_to_json(level.grid, level.player)})


# ---------- Game API ----------

@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    st, err = _state_from_body(body)
    if st is None:
        return _bad_request(err or "bad state")
    grid, player = st
    target, err = _target_from_body(body, player)
    if target is None:
        return _bad_request(err or "bad target")
    outcome = move_player(grid, player, target[0], target[1])
    return jsonify({"ok": True, "outcome": outcome.name, "state": state_to_json(grid, player)})


@app.post("/api/monsters")
def api_monsters() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    st, err = _state_from_body(body)
    if st is None:
        return _bad_request(err or "bad state")
    grid, player = st
    captured = monster_step(grid, player)
    return jsonify({"ok": True, "captured": captured, "state": state_to_json(grid, player)})


@app.post("/api/resize")
def api_resize() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    st, err = _state_from_body(body)
    if st is None:
        return _bad_request(err or "bad state")
    grid, player = st
    new_grid = resize_grid(grid)
    if isinstance(new_grid, ResizeError):
        return jsonify({"ok": False, "error": new_grid.value}), 400
    return jsonify({"ok": True, "state": state_to_json(new_grid, player)})


@app.post("/api/turn")
def api_turn() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    st, err = _state_from_body(body)
    if st is None:
        return _bad_request(err or "bad state")
    grid, player = st
    target, err = _target_from_body(body, player)
    if target is None:
        return _bad_request(err or "bad target")
    outcome = move_player(grid, player, target[0], target[1])
    monsters = body.get("monsters")
    if not isinstance(monsters, bool):
        monsters = _env_flag("DUNGEON_MONSTERS", "1")
    captured = False
    # Leaving the level ends the turn before monsters react.
    if monsters and outcome not in (MoveOutcome.MOVED_TO_EXIT, MoveOutcome.MOVED_THROUGH_DOOR):
        captured = monster_step(grid, player)
    return jsonify({
        "ok": True,
        "outcome": outcome.name,
        "captured": captured,
        "state": state_to_json(grid, player),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
