"""Run every algorithm on the graphs of examples/textbook_graphs.toml."""

import logging
from pathlib import Path

from graphwalk import (
    CycleDetectedError,
    breadth_first_search,
    depth_first_search,
    get_config,
    load_graphs,
    topological_sort,
)

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    config = get_config()
    graphs = load_graphs(Path(__file__).parent / "textbook_graphs.toml", config=config)
    for name, graph in graphs.items():
        with graph:
            dfs = depth_first_search(graph, capacity=config.container_capacity)
            bfs = breadth_first_search(graph, capacity=config.container_capacity)
            logger.info("%s: %r", name, graph)
            logger.info("  DFS order: %s", " ".join(dfs.order()))
            logger.info("  BFS order: %s", " ".join(bfs.order()))
            try:
                ranks = topological_sort(graph)
            except CycleDetectedError as e:
                logger.info("  not a DAG: %s", e)
            else:
                logger.info("  ranks: %s", ranks.by_label())


if __name__ == "__main__":
    main()
