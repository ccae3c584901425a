"""Feature modules of neo-batch."""
