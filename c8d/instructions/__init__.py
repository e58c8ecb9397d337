"""CHIP-8 instruction families, one renderer per top nibble."""
