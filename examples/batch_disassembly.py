import time

import jax

from lc3dis import decode_program, disassemble_program, hex_string

if __name__ == "__main__":
    # Every possible instruction word
    words = list(range(0x10000))

    # Measure compilation time
    start_compile = time.time()
    jax.block_until_ready(decode_program(words[:1]))
    end_compile = time.time()

    print("Compilation time (s):", end_compile - start_compile)

    # Measure batch decode time
    start_exec = time.time()
    jax.block_until_ready(decode_program(words))
    end_exec = time.time()

    print("Decode time (s):", end_exec - start_exec)

    listing = disassemble_program(words[0xF020:0xF026])
    for offset, line in enumerate(listing):
        print(hex_string(0xF020 + offset), line)
