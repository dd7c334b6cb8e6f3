"""
Random playout benchmark for the Othello engine.
Plays complete games choosing uniformly among the legal moves and reports
throughput and result statistics.
"""
import argparse
import random
import time
from typing import Dict, Any, List, Optional

from tqdm import tqdm

from .config import Config, load_config
from .game import GameState, Player, DRAW
from .logger import setup_logger


def play_random_game(rng: random.Random) -> Dict[str, Any]:
    """
    Play one game to completion with uniformly random legal moves.

    Returns:
        Dictionary with the final score, winner, number of moves and passes
    """
    state = GameState()
    moves = 0
    passes = 0
    while not state.is_game_over():
        row, col = rng.choice(state.get_valid_moves())
        if state.play(row, col) is not None:
            passes += 1
        moves += 1

    black, white = state.get_score()
    return {
        'black': black,
        'white': white,
        'winner': state.get_winner(),
        'moves': moves,
        'passes': passes,
    }


def run_benchmark(config: Config) -> Dict[str, Any]:
    """
    Play config.benchmark.num_games random games.

    Returns:
        Aggregate metrics: games, moves, moves_per_sec, black_wins, white_wins, draws, passes
    """
    bench = config.benchmark
    rng = random.Random(bench.seed)
    results: List[Dict[str, Any]] = []

    start_time = time.time()
    for _ in tqdm(range(bench.num_games), desc="Games", disable=not bench.progress):
        results.append(play_random_game(rng))
    elapsed = time.time() - start_time

    total_moves = sum(r['moves'] for r in results)
    return {
        'games': len(results),
        'moves': total_moves,
        'moves_per_sec': total_moves / elapsed if elapsed > 0 else float('inf'),
        'black_wins': sum(1 for r in results if r['winner'] == Player.BLACK),
        'white_wins': sum(1 for r in results if r['winner'] == Player.WHITE),
        'draws': sum(1 for r in results if r['winner'] == DRAW),
        'passes': sum(r['passes'] for r in results),
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Benchmark the Othello engine with random playouts')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--games', type=int, default=None,
                        help='Number of games to play (overrides config)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (overrides config)')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.games is not None:
        config.benchmark.num_games = args.games
    if args.seed is not None:
        config.benchmark.seed = args.seed

    log = setup_logger(config)
    try:
        metrics = run_benchmark(config)
        log.log_metrics(metrics, step=config.benchmark.num_games)
    finally:
        log.close()
    return 0
