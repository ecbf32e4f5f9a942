"""Sort integers on two stacks with a restricted instruction set."""

__version__ = "1.0.0"