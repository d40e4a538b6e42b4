# Cell-state constants centralized for modular imports
EMPTY = 0
FLOOR = 1
WALL = 2
CORRIDOR = 3

OPEN_STATES = (FLOOR, CORRIDOR)

# Display characters used by to_ascii() and the JSON grid rows
CHARS = {
    EMPTY: " ",
    FLOOR: ".",
    WALL: "#",
    CORRIDOR: ",",
}


def state_to_char(state: int) -> str:
    return CHARS.get(state, "?")


def state_to_name(state: int) -> str:
    if state == FLOOR:
        return "floor"
    if state == WALL:
        return "wall"
    if state == CORRIDOR:
        return "corridor"
    return "empty"


__all__ = ["EMPTY", "FLOOR", "WALL", "CORRIDOR", "OPEN_STATES", "CHARS", "state_to_char", "state_to_name"]
