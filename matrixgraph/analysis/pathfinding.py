"""
Least-cost path finding for weighted networks.

This module provides a label-setting (Dijkstra-style) search between a single
source and a single target over non-negative edge weights.
"""

import heapq
import itertools
import logging
from typing import List, Optional, Set, Tuple, TYPE_CHECKING

import numpy as np

from ..classes.pathnode import pypathnode

if TYPE_CHECKING:
    from ..core.network import WeightedNetwork

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms for weighted networks.

    All search state (frontier, settled set, path nodes) is local to each
    call, so one PathFinder may serve any number of searches.
    """

    def __init__(self, network: "WeightedNetwork"):
        """
        Initialize the path finder.

        Args:
            network: WeightedNetwork instance to search
        """
        self.network = network

    def find_cheapest_path(self, source_id: int, target_id: int) -> Optional[pypathnode]:
        """
        Find the minimum-cost path from source to target.

        The frontier is a min-heap keyed by the full-precision cumulative
        cost, ties broken by insertion order. A vertex may sit in the
        frontier several times; only its first (cheapest) pop settles it.
        The search stops the first time the target is popped.

        Args:
            source_id: Source vertex index
            target_id: Target vertex index

        Returns:
            Path node for the target carrying the total cost, or None if the
            target is unreachable
        """
        nVertex = self.network.nVertex
        aVertex = self.network.aVertex
        adjacency = self.network.aAdjacency[:nVertex, :nVertex]
        weights = self.network.aWeight[:nVertex, :nVertex]

        sequence = itertools.count()
        frontier: List[Tuple[float, int, pypathnode]] = []
        heapq.heappush(frontier, (0.0, next(sequence), pypathnode(aVertex[source_id], source_id)))
        settled: Set[int] = set()

        while frontier:
            cost, _, node = heapq.heappop(frontier)

            if node.index == target_id:
                logger.debug(f"Cheapest path {source_id} -> {target_id} found, cost {cost}")
                return node

            if node.index in settled:
                continue
            settled.add(node.index)

            for neighbor_id in np.flatnonzero(adjacency[node.index]):
                neighbor_id = int(neighbor_id)
                if neighbor_id in settled:
                    continue
                successor = node.extend(aVertex[neighbor_id], neighbor_id, float(weights[node.index, neighbor_id]))
                heapq.heappush(frontier, (successor.cost, next(sequence), successor))

        logger.debug(f"Frontier exhausted, no path {source_id} -> {target_id} ({len(settled)} settled)")
        return None
