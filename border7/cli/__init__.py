"""Command line and terminal UI front-ends for Border 7."""
