import time
import tracemalloc
import gc

import numpy as np

from .Quad_tree import QuadTree, MAX_DEPTH, MAX_POINTS_PER_NODE
from .errors import InvariantViolation
from .logger import logger


def _get_quadtree_node_stats(tree):
    # devuelve (num_nodes, num_leaves, max_depth, list_points_per_leaf)
    num_nodes = 0
    depth_max = 0
    leaves = []
    for node, depth in tree.nodes():
        num_nodes += 1
        depth_max = max(depth_max, depth)
        if not node.has_children():
            leaves.append(len(node.bucket))
    return num_nodes, len(leaves), depth_max, leaves


def analyze_quadtree_instance(tree: QuadTree):
    """Analiza un QuadTree existente y devuelve métricas similares a benchmark_quadtree para un único tamaño."""
    gc.collect()
    tracemalloc.start()
    start = time.perf_counter()

    num_nodes, num_leaves, depth_max, leaves = _get_quadtree_node_stats(tree)

    elapsed = time.perf_counter() - start
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    avg_occ = float(np.mean(leaves)) if leaves else 0.0
    lf = avg_occ / tree.max_points_per_node

    return {
        'sizes': [len(tree)],
        'times': [elapsed],
        'mem_peaks': [peak],
        'num_nodes': [num_nodes],
        'num_leaves': [num_leaves],
        'max_depth': [depth_max],
        'avg_occupancies': [avg_occ],
        'load_factors': [lf]
    }


def benchmark_quadtree(sizes, max_points_per_node=MAX_POINTS_PER_NODE, max_depth=MAX_DEPTH,
                       split_policy="overflow", seed=None):
    """Inserta puntos aleatorios en el cuadrado unidad y devuelve métricas para cada tamaño.
    Retorna dict con listas: sizes, times, query_times, mem_peaks, num_nodes, num_leaves,
    max_depth, avg_occupancies, load_factors
    """
    sizes = list(sizes)
    rng = np.random.default_rng(seed)
    metrics = {
        'sizes': sizes,
        'times': [],
        'query_times': [],
        'mem_peaks': [],
        'num_nodes': [],
        'num_leaves': [],
        'max_depth': [],
        'avg_occupancies': [],
        'load_factors': []
    }

    for n in sizes:
        coords = rng.random((n, 2))

        gc.collect()
        tracemalloc.start()
        start = time.perf_counter()

        tree = QuadTree(max_points_per_node=max_points_per_node, max_depth=max_depth,
                        split_policy=split_policy)
        for i, (x, y) in enumerate(coords):
            tree.insert((x, y), i)

        elapsed = time.perf_counter() - start
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        # una consulta sobre todo el dominio
        start = time.perf_counter()
        found = tree.query((0.0, 0.0), (1.0, 1.0))
        query_elapsed = time.perf_counter() - start
        if len(found) != n:
            raise InvariantViolation(f"la consulta completa devolvió {len(found)} puntos de {n}")

        stats = analyze_quadtree_instance(tree)
        metrics['times'].append(elapsed)
        metrics['query_times'].append(query_elapsed)
        metrics['mem_peaks'].append(peak)
        for key in ('num_nodes', 'num_leaves', 'max_depth', 'avg_occupancies', 'load_factors'):
            metrics[key].append(stats[key][0])

        logger.info("n=%d: %.4fs inserción, %d nodos (%s)", n, elapsed, stats['num_nodes'][0], split_policy)

    return metrics
