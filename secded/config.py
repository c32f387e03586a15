from dataclasses import asdict, dataclass, field, fields
from typing import List, Optional
import json
import os

DEFAULT_BIT_ERROR_RATES = [1e-4, 3e-4, 1e-3, 3e-3, 1e-2, 3e-2, 1e-1]


@dataclass
class SimulationConfig:
    trials: int = 100_000          # codewords per bit-error rate
    bit_error_rates: List[float] = field(default_factory=lambda: list(DEFAULT_BIT_ERROR_RATES))
    seed: Optional[int] = 0

    def __post_init__(self):
        if isinstance(self.trials, bool) or not isinstance(self.trials, int):
            raise ValueError(f'trials must be an int, got {self.trials!r}')
        if self.trials <= 0:
            raise ValueError(f'trials must be positive, got {self.trials}')
        if not isinstance(self.bit_error_rates, list):
            raise ValueError(f'bit_error_rates must be a list, got {self.bit_error_rates!r}')
        for p in self.bit_error_rates:
            if isinstance(p, bool) or not isinstance(p, (int, float)):
                raise ValueError(f'bit error rate {p!r} is not a number')
            if not 0.0 <= p <= 1.0:
                raise ValueError(f'bit error rate {p} is not a probability')
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f'seed must be an int or null, got {self.seed!r}')

    @classmethod
    def load(cls, filename: str = 'simulation.json') -> 'SimulationConfig':
        """Load settings from a JSON file, or the defaults if it doesn't exist."""
        if not os.path.exists(filename):
            return cls()
        with open(filename, 'r', encoding='utf-8') as f:
            data = json.load(f)
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f'unknown settings in {filename}: {sorted(unknown)}')
        return cls(**data)

    def save(self, filename: str = 'simulation.json') -> None:
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4)

    def to_dict(self) -> dict:
        return asdict(self)
