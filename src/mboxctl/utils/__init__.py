"""Host helpers: console logging, MTD discovery, scalar access."""
