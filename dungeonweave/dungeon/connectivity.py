"""Room connectivity: spanning corridors, redundant loops, graph checks.

Rooms are joined Prim-style over room centers so the graph is connected after
the spanning phase alone; a probabilistic redundancy phase then adds loops.
"""
from __future__ import annotations

import math
from collections import deque
from typing import Dict, List, Set, Tuple

from .corridors import Corridor
from .rng import RandomSource
from .rooms import Room

EXTRA_CONNECTION_CHANCE = 0.2


def connect_rooms(
    rooms: List[Room], rng: RandomSource, extra_connection_chance: float = EXTRA_CONNECTION_CHANCE
) -> Tuple[List[Corridor], int]:
    """Return (corridors, spanning_count).

    ``corridors[:spanning_count]`` are the spanning edges, the rest came from the
    redundancy phase.
    """
    corridors: List[Corridor] = []
    if len(rooms) < 2:
        return corridors, 0
    centers = [r.center for r in rooms]
    connected = [0]
    unconnected = list(range(1, len(rooms)))
    while unconnected:
        best = None
        best_dist = math.inf
        for a in connected:
            ax, ay = centers[a]
            for b in unconnected:
                bx, by = centers[b]
                dist = math.hypot(ax - bx, ay - by)
                # strict '<' keeps the first minimum in scan order
                if dist < best_dist:
                    best_dist = dist
                    best = (a, b)
        a, b = best
        corridors.append(Corridor.between(rooms, a, b, rng))
        connected.append(b)
        unconnected.remove(b)
    spanning = len(corridors)
    for i in range(len(rooms)):
        for j in range(i + 1, len(rooms)):
            if rng.value() < extra_connection_chance:
                if any(c.connects(i, j) for c in corridors):
                    continue
                corridors.append(Corridor.between(rooms, i, j, rng))
    return corridors, spanning


def adjacency(room_count: int, corridors: List[Corridor]) -> Dict[int, Set[int]]:
    adj: Dict[int, Set[int]] = {i: set() for i in range(room_count)}
    for c in corridors:
        adj[c.room_a].add(c.room_b)
        adj[c.room_b].add(c.room_a)
    return adj


def reachable_rooms(room_count: int, corridors: List[Corridor], start: int = 0) -> Set[int]:
    if room_count == 0:
        return set()
    adj = adjacency(room_count, corridors)
    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        for nxt in adj[cur]:
            if nxt not in seen:
                seen.add(nxt)
                q.append(nxt)
    return seen


def is_connected(room_count: int, corridors: List[Corridor]) -> bool:
    return len(reachable_rooms(room_count, corridors)) == room_count


__all__ = ["connect_rooms", "adjacency", "reachable_rooms", "is_connected", "EXTRA_CONNECTION_CHANCE"]
