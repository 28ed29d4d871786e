# Bit Reverse Benchmark - Tests big integer arithmetic
# Reverses the low 8 bits of every number below 100000 using only
# division, multiplication and subtraction

import time

WIDTH = 8
ITERATIONS = 100000


def bit_reverse8(x):
    res = 0
    for i in range(WIDTH):
        last_bit = x - x // 2 * 2
        res = res * 2 + last_bit
        x = x // 2
    return res


def reverse_range(n):
    for i in range(n):
        b = bit_reverse8(i)


if __name__ == "__main__":
    start = time.time()
    reverse_range(ITERATIONS)
    end = time.time()

    print(f"Bit reverse of {ITERATIONS} numbers ({WIDTH} bits each)")
    print(f"Time: {end - start} seconds")
