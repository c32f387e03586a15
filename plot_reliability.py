import logging
import sys

import matplotlib.pyplot as plt

from secded.config import SimulationConfig
from secded.reliability import plot, simulate

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

config = SimulationConfig.load(sys.argv[1] if len(sys.argv) > 1 else 'simulation.json')
print(f'{config.trials} codewords per rate, rates {config.bit_error_rates}')

points = simulate(config)
for pt in points:
    print(f'{pt.bit_error_rate:8g}  recovered {pt.recovered:.6f}  '
          f'detected {pt.detected:.6f}  miscorrected {pt.miscorrected:.6f}')

plot(points, 'reliability.png')
plt.show()
