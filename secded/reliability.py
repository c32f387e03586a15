"""Monte Carlo estimate of how the code behaves on a binary symmetric channel.

Every bit of every codeword is flipped independently with probability ``p``.
Each decoded word then falls into one of three buckets:

    recovered     the original message came back (0 or 1 bit errors)
    detected      the decoder reported an uncorrectable word
    miscorrected  the decoder returned a wrong message without noticing
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np
from scipy import stats

from .batch import UNCORRECTABLE, decode_array, encode_array
from .config import SimulationConfig
from .hamming import MESSAGE_MASK, WORD_BITS

logger = logging.getLogger(__name__)

# Integer weight of each codec position, position 0 being the MSB
POSITION_WEIGHTS = 1 << np.arange(WORD_BITS - 1, -1, -1, dtype=np.int64)


@dataclass
class ReliabilityPoint:
    bit_error_rate: float
    trials: int
    recovered: float
    detected: float
    miscorrected: float


@dataclass
class Prediction:
    bit_error_rate: float
    recovered: float
    # Lower bounds: exactly two errors are always detected, exactly three are
    # always miscorrected.
    detected: float
    miscorrected: float
    # Four or more errors, which can land in either bucket
    undecided: float


def random_error_patterns(rng: np.random.Generator, count: int, p: float) -> np.ndarray:
    flips = rng.random((count, WORD_BITS)) < p
    return flips.astype(np.int64) @ POSITION_WEIGHTS


def measure(rng: np.random.Generator, trials: int, p: float) -> ReliabilityPoint:
    messages = rng.integers(0, MESSAGE_MASK + 1, size=trials)
    words = encode_array(messages).astype(np.int64)
    received = words ^ random_error_patterns(rng, trials, p)

    decoded, status = decode_array(received)
    detected = status == UNCORRECTABLE
    recovered = ~detected & (decoded == messages)
    miscorrected = ~detected & ~recovered

    return ReliabilityPoint(
        bit_error_rate=p,
        trials=trials,
        recovered=float(np.mean(recovered)),
        detected=float(np.mean(detected)),
        miscorrected=float(np.mean(miscorrected)),
    )


def simulate(config: Optional[SimulationConfig] = None) -> List[ReliabilityPoint]:
    if config is None:
        config = SimulationConfig()

    rng = np.random.default_rng(config.seed)

    points = []
    for p in config.bit_error_rates:
        point = measure(rng, config.trials, p)
        logger.info(
            'p=%g: recovered %.6f, detected %.6f, miscorrected %.6f',
            p, point.recovered, point.detected, point.miscorrected,
        )
        points.append(point)
    return points


def predict(p: float) -> Prediction:
    errors = stats.binom(WORD_BITS, p)
    return Prediction(
        bit_error_rate=p,
        recovered=float(errors.cdf(1)),
        detected=float(errors.pmf(2)),
        miscorrected=float(errors.pmf(3)),
        undecided=float(errors.sf(3)),
    )


def plot(points: List[ReliabilityPoint], path: Optional[str] = None):
    """Plot measured failure rates against the binomial predictions."""
    rates = np.array([pt.bit_error_rate for pt in points])
    predicted = [predict(p) for p in rates]

    fig, ax = plt.subplots()
    ax.set_xscale('log')
    ax.set_yscale('log')

    ax.plot(rates, [1.0 - pt.recovered for pt in points], 'o-', label='Not recovered')
    ax.plot(rates, [pt.detected for pt in points], 's-', label='Detected')
    ax.plot(rates, [pt.miscorrected for pt in points], '^-', label='Miscorrected')

    ax.plot(rates, [1.0 - pr.recovered for pr in predicted], 'k--', label='P(>1 error)')
    ax.plot(rates, [pr.detected for pr in predicted], 'k:', label='P(2 errors)')

    ax.set_xlabel('Bit error rate')
    ax.set_ylabel('Fraction of codewords')
    ax.grid(visible=True, which='major')
    ax.legend()

    if path is not None:
        fig.savefig(path)
    return fig
