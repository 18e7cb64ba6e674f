"""Small, self-contained programming idioms: type lists, comparisons, string
switches, fixed strings, self-registering factories, ASCII strings, parallel
task graphs, error codes, weakly held workers and URL reading."""

__version__ = "0.1.0"