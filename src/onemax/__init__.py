"""
OneMax solved with a genetic algorithm.

A population of 100 random bit strings of length 1000 evolves until one of
them is all 1s. Every generation runs the same fixed pipeline:

1. **Evaluate**: sort the population by fitness (number of 1s), best first
2. **Select**: pair neighbours in that order
3. **Recombine**: single-point crossover on every pair
4. **Mutate**: shuffle the genes of roughly 8% of the individuals

## API Reference

### Simple Interface
```python
from onemax import solve

result = solve()
print(result.best_fitness, result.generations, result.elapsed_ms)
```

### Reproducible, smaller runs
```python
from onemax import EvolutionConfig, EvolutionLoop

config = EvolutionConfig(population_size=20, genome_length=64, seed=7)
result = EvolutionLoop(config).run()
```

### CLI Usage
```bash
onemax
```
"""

from onemax.config import Config, EvolutionConfig, OutputConfig, get_default_config
from onemax.core.random_source import RandomSource
from onemax.evolution.loop import (
    EvolutionLoop,
    EvolutionResult,
    EvolutionState,
    GenerationSnapshot,
)
from onemax.solve import solve

__version__ = "0.1.0"

__all__ = [
    # Main interfaces
    "solve",               # One-call runner
    "EvolutionLoop",       # Generational loop
    "EvolutionResult",     # Result dataclass
    "EvolutionState",      # Loop stages
    "GenerationSnapshot",  # Per-generation statistics
    "RandomSource",        # Explicit, seedable randomness

    # Configuration classes
    "Config",
    "EvolutionConfig",
    "OutputConfig",
    "get_default_config",
]
