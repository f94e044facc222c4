"""Vectorised decoding of whole LC-3 programs.

Each word decodes independently of its neighbours, so a program is decoded in
a single ``jax.vmap``'d call and only brought back to the host for rendering.
"""

from typing import List, Sequence

import jax
import jax.numpy as jnp

from lc3dis.constants import WORD_MASK
from lc3dis.decode import DecodedInstruction, decode
from lc3dis.disassembler import render


@jax.jit
def _decode_words(words: jnp.ndarray) -> DecodedInstruction:
    return jax.vmap(decode)(words)


def decode_program(words: Sequence[int]) -> DecodedInstruction:
    """Decode a sequence of words.

    Args:
        words: Instruction words; anything above bit 15 is discarded.

    Returns:
        A DecodedInstruction whose fields are arrays with one entry per word.
    """
    words = jnp.asarray([int(word) & WORD_MASK for word in words], dtype=jnp.int32)
    return _decode_words(words)


def unstack(program: DecodedInstruction) -> List[DecodedInstruction]:
    """Split a batched decode into per-word records holding Python scalars."""
    host = jax.device_get(program)
    return [
        jax.tree_util.tree_map(lambda leaf: leaf[i].item(), host)
        for i in range(len(host.raw))
    ]


def disassemble_program(words: Sequence[int]) -> List[str]:
    """Assembly line for every word, in input order."""
    if len(words) == 0:
        return []
    return [render(instruction) for instruction in unstack(decode_program(words))]
