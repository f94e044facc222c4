"""Per-opcode renderers for LC-3 instructions."""
