"""Line-oriented listing of LC-3 machine code.

Turns lines of hexadecimal or binary text into listing lines of the form::

    x3000 | x1042 | 0001000001000010 | ADD    R0 R1 R2
"""

from typing import Iterable, Iterator, List, Optional, Tuple, Union

from chex import dataclass

from lc3dis.constants import DEFAULT_ORIGIN, WORD_MASK
from lc3dis.decode import DecodedInstruction, decode
from lc3dis.disassembler import render, binary_string, hex_string
from lc3dis.logging import ConsoleLogger, progress
from lc3dis.program import decode_program, unstack

HEX = 16
BINARY = 2

UINT64_MAX = (1 << 64) - 1

_DIGITS = {
    HEX: frozenset("0123456789abcdefABCDEF"),
    BINARY: frozenset("01"),
}


class InvalidWordError(ValueError):
    """Raised when a line is not a number in the expected radix."""

    def __init__(self, text: str, remainder: str):
        super().__init__(f"invalid instruction word {text!r}")
        self.text = text
        self.remainder = remainder


@dataclass(frozen=True)
class ListingConfig:
    """Options controlling how input lines are read and rendered."""
    radix: int = HEX
    origin: int = DEFAULT_ORIGIN
    assembly_only: bool = False
    stop_on_blank: bool = False


def parse_word(text: str, radix: int = HEX) -> int:
    """Parse one instruction word, truncated to 16 bits.

    Leading whitespace is skipped and hexadecimal input may carry a ``0x``
    prefix. Values too large for 64 bits saturate to all ones before
    truncation, so they read as ``0xFFFF``. Anything left after the digits
    raises InvalidWordError with the unparsed remainder; a line without any
    digit reports the whole line.
    """
    digits = _DIGITS[radix]
    body = text.lstrip()
    if radix == HEX and body[:2] in ("0x", "0X") and body[2:3] in digits:
        body = body[2:]

    end = 0
    while end < len(body) and body[end] in digits:
        end += 1

    if end == 0:
        raise InvalidWordError(text, text)
    if end < len(body):
        raise InvalidWordError(text, body[end:])
    return min(int(body, radix), UINT64_MAX) & WORD_MASK


def format_line(address: int, instruction: DecodedInstruction, assembly_only: bool = False) -> str:
    """Render one listing line for a decoded instruction at ``address``."""
    assembly = render(instruction)
    if assembly_only:
        return assembly
    return " | ".join(
        (hex_string(address), hex_string(instruction.raw), binary_string(instruction.raw), assembly)
    )


def format_error(error: InvalidWordError) -> str:
    return f"Invalid opcode: {error.remainder}"


def _parse_lines(
    lines: Iterable[str],
    config: ListingConfig,
    logger: Optional[ConsoleLogger] = None,
) -> Iterator[Tuple[int, Union[int, InvalidWordError]]]:
    """Yield ``(address, word or error)`` for every non-blank line."""
    address = config.origin & WORD_MASK
    for line in lines:
        line = line.rstrip("\r\n")
        if not line:
            if config.stop_on_blank:
                return
            continue

        try:
            entry = parse_word(line, config.radix)
        except InvalidWordError as error:
            if logger is not None:
                logger.debug(f"{hex_string(address)}: {error}")
            entry = error

        yield address, entry
        address = (address + 1) & WORD_MASK


def disassemble_lines(
    lines: Iterable[str],
    config: ListingConfig = ListingConfig(),
    logger: Optional[ConsoleLogger] = None,
) -> Iterator[str]:
    """Stream listing lines, decoding each word as soon as it is read."""
    for address, entry in _parse_lines(lines, config, logger):
        if isinstance(entry, InvalidWordError):
            yield format_error(entry)
        else:
            yield format_line(address, decode(entry), config.assembly_only)


def disassemble_text(
    lines: Iterable[str],
    config: ListingConfig = ListingConfig(),
    logger: Optional[ConsoleLogger] = None,
    show_progress: bool = False,
) -> List[str]:
    """Read every line first, then decode all valid words in one batch.

    Produces the same output as ``disassemble_lines``.
    """
    entries = list(_parse_lines(progress(lines, enabled=show_progress), config, logger))
    words = [entry for _, entry in entries if not isinstance(entry, InvalidWordError)]
    invalid = len(entries) - len(words)
    if logger is not None:
        logger.info(f"Decoding {len(words)} words")
        if invalid:
            logger.warning(f"{invalid} line(s) are not valid instruction words")

    decoded = iter(unstack(decode_program(words)) if words else [])
    output = []
    for address, entry in entries:
        if isinstance(entry, InvalidWordError):
            output.append(format_error(entry))
        else:
            output.append(format_line(address, next(decoded), config.assembly_only))
    return output
