#!/usr/bin/env python3
"""
Quick Start Examples for the OneMax genetic algorithm

This script shows the most common usage patterns.

Usage: python examples/quick_start.py
"""


def example_1_simple_usage():
    """Example 1: One function call with the production settings"""
    print("=" * 60)
    print("EXAMPLE 1: Simple Usage")
    print("=" * 60)

    from onemax import solve, Config

    config = Config.from_dict({"output": {"verbosity": "minimal"}})
    result = solve(config)

    print(f"Best fitness: {result.best_fitness}")
    print(f"Generations: {result.generations}")
    print(f"Time: {result.elapsed_ms}ms (seed {result.seed})")
    print()


def example_2_reproducible_run():
    """Example 2: Small, seeded runs give identical results"""
    print("=" * 60)
    print("EXAMPLE 2: Reproducible Runs")
    print("=" * 60)

    from onemax import EvolutionConfig, EvolutionLoop

    config = EvolutionConfig(population_size=20, genome_length=64, seed=7)

    first = EvolutionLoop(config).run()
    second = EvolutionLoop(config).run()

    print(f"First run:  {first.generations} generations")
    print(f"Second run: {second.generations} generations")
    print(f"Same best genome: {bool((first.best_genome == second.best_genome).all())}")
    print()


def example_3_progress():
    """Example 3: Following progress generation by generation"""
    print("=" * 60)
    print("EXAMPLE 3: Progress Callback")
    print("=" * 60)

    from onemax import EvolutionConfig, EvolutionLoop

    config = EvolutionConfig(population_size=40, genome_length=200, seed=1)

    def report(snapshot):
        if snapshot.generation % 25 == 0 or snapshot.solved:
            print(
                f"Gen {snapshot.generation:4d} | best = {snapshot.best_fitness} | "
                f"diversity = {snapshot.diversity:.3f}"
            )

    result = EvolutionLoop(config).run(on_generation=report)
    print(f"Solved in {result.generations} generations")
    print()


if __name__ == "__main__":
    print("OneMax - Quick Start Examples")
    print("=" * 60)
    print()

    try:
        example_2_reproducible_run()
        example_3_progress()
        example_1_simple_usage()

        print("=" * 60)
        print("All examples completed!")

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
