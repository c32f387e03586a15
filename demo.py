import numpy as np

from secded import encode_all, find
from secded.bits import flip_random_bits, to_bit_string

rng = np.random.default_rng()


def corrupt(arr, count):
    for i in range(len(arr)):
        arr[i], positions = flip_random_bits(arr[i], count, rng)
        print(f'{to_bit_string(arr[i])}: flipped {positions}')


# Encode a small array without errors and search for some keys
print('\nRunning test 1\n')
a = [31, 140, 56]
encode_all(a)
print(a)                # [24735, 43276, 18616]
print(find(a, 31))      # Found(index=0)
print(find(a, 100))     # NotFound()

# One error per entry is corrected, so search still works
print('\nRunning test 2\n')
a = [1010, 0, 620]
encode_all(a)
print(a)                # [10098, 0, 27756]
corrupt(a, 1)
print(a)
print(find(a, 620))     # Found(index=2)
print(find(a, 1))       # NotFound()

# Two errors per entry can only be detected, so the search gives up
print('\nRunning test 3\n')
a = [63, 390, 312]
encode_all(a)
print(a)                # [49215, 41734, 58040]
corrupt(a, 2)
print(a)
print(find(a, 390))     # Corrupted(index=0)
