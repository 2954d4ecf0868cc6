"""Terminal tic-tac-toe for two players sharing one keyboard."""

__version__ = "1.0.0"
