"""Priority, FIFO and FILO queues of tagged task items."""

__version__ = "0.1.0"
__all__ = ["datatypes", "internal", "queue"]