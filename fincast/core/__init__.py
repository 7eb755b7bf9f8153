"""Pure calculation routines: no I/O, no clock reads, no shared state."""
