"""npmctl — drive npm, yarn and pnpm from one command line."""

__version__ = "0.1.0"
